"""Site-wide classification enums."""

from __future__ import annotations

from enum import StrEnum


class Theme(StrEnum):
    """Colour scheme stored in the preference store."""

    LIGHT = "light"
    DARK = "dark"


class ProjectCategory(StrEnum):
    """Work categories used by the project filter buttons."""

    DESIGN = "Design"
    WEB = "Web"
    BRANDING = "Branding"


class SharePlatform(StrEnum):
    """Targets for the blog share buttons."""

    TWITTER = "twitter"
    LINKEDIN = "linkedin"
    COPY = "copy"


class ModalKind(StrEnum):
    """The two modal overlays on the page."""

    PROJECT = "project"
    LEGAL = "legal"
