"""Scroll-driven navigation rules and share-link construction."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from urllib.parse import quote

from folioctl.domain.types import SharePlatform

HEADER_SCROLL_THRESHOLD = 50
SECTION_OFFSET = 100
SCROLL_FRACTION = 0.75


@dataclass(frozen=True)
class Section:
    """A page section's vertical extent in pixels."""

    id: str
    top: float
    height: float


def header_scrolled(scroll_y: float) -> bool:
    """Whether the sticky header should switch to its compact style."""
    return scroll_y > HEADER_SCROLL_THRESHOLD


def active_section(scroll_y: float, sections: Iterable[Section]) -> str | None:
    """Scroll-position fallback: the last section whose band contains *scroll_y*.

    A section's band is ``[top - 100, top + height - 100)``.
    """
    current: str | None = None
    for section in sections:
        if section.top - SECTION_OFFSET <= scroll_y < section.top + section.height - SECTION_OFFSET:
            current = section.id
    return current


def most_visible(ratios: Sequence[tuple[str, float]]) -> str | None:
    """Intersection-style pick: the section with the highest visible ratio.

    Entries with a ratio of zero are not intersecting. Ties keep the first.
    """
    best: str | None = None
    best_ratio = 0.0
    for section_id, ratio in ratios:
        if ratio > best_ratio:
            best, best_ratio = section_id, ratio
    return best


def scroll_delta(direction: str, viewport_width: float) -> int:
    """Horizontal scroll step for the project scroller arrows."""
    amount = round(viewport_width * SCROLL_FRACTION)
    return -amount if direction == "left" else amount


def share_url(platform: str, page_url: str, title: str = "") -> str | None:
    """Build the share target for a blog post.

    ``copy`` returns the raw page URL for the clipboard; unknown platforms None.
    """
    try:
        target = SharePlatform(platform)
    except ValueError:
        return None
    url = quote(page_url, safe="")
    if target is SharePlatform.TWITTER:
        return f"https://twitter.com/intent/tweet?url={url}&text={quote(title, safe='')}"
    if target is SharePlatform.LINKEDIN:
        return f"https://www.linkedin.com/sharing/share-offsite/?url={url}"
    return page_url
