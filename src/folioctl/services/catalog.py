"""CatalogService — read-only access to case studies, legal pages and share links."""

from __future__ import annotations

from folioctl.components.modal import ModalController
from folioctl.domain.catalog import ALL_CATEGORIES, PROJECTS, filter_projects
from folioctl.domain.navigation import share_url
from folioctl.domain.types import ModalKind, ProjectCategory, SharePlatform
from folioctl.services.base import BaseService
from folioctl.services.result import ServiceResult

_CATEGORY_NAMES = [ALL_CATEGORIES, *(c.value.lower() for c in ProjectCategory)]


class CatalogService(BaseService):
    """Serves the data behind the project and legal modals."""

    def list_projects(self, category: str | None = None) -> ServiceResult:
        op = "list_projects"
        if category and category.lower() not in _CATEGORY_NAMES:
            return ServiceResult.failure(
                op,
                "unknown_category",
                f"Unknown category '{category}'",
                detail={"choices": _CATEGORY_NAMES},
            )
        items = [
            {
                "id": p.key,
                "title": p.title,
                "category": p.category.value,
                "meta": p.meta,
            }
            for p in filter_projects(PROJECTS, category)
        ]
        return ServiceResult(
            ok=True,
            op=op,
            data={"items": items, "count": len(items), "category": category or ALL_CATEGORIES},
        )

    def show_project(self, key: str) -> ServiceResult:
        return self._open_modal(ModalKind.PROJECT, key, op="show_project", label="project")

    def show_legal(self, key: str) -> ServiceResult:
        return self._open_modal(ModalKind.LEGAL, key, op="show_legal", label="legal document")

    def share(self, platform: str, url: str, title: str = "") -> ServiceResult:
        """Build the link a share button opens (or copies, for ``copy``)."""
        target = share_url(platform, url, title)
        if target is None:
            return ServiceResult.failure(
                "share",
                "unknown_platform",
                f"Unknown share platform '{platform}'",
                detail={"choices": [p.value for p in SharePlatform]},
            )
        return ServiceResult(
            ok=True,
            op="share",
            data={"platform": platform, "url": target},
        )

    def _open_modal(self, kind: ModalKind, key: str, *, op: str, label: str) -> ServiceResult:
        """Look *key* up the way the page's modal does and return its content."""
        modal = ModalController()
        if not modal.open(kind, key) or modal.content is None:
            return ServiceResult.failure(op, "not_found", f"No {label} '{key}'")
        return ServiceResult(ok=True, op=op, data=modal.content.model_dump(mode="json"))
