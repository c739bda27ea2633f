"""Tests for scroll tracking, scroller steps, and share links."""

from __future__ import annotations

import pytest

from folioctl.domain.navigation import (
    Section,
    active_section,
    header_scrolled,
    most_visible,
    scroll_delta,
    share_url,
)

SECTIONS = [
    Section("home", 0, 800),
    Section("about", 800, 600),
    Section("work", 1400, 1000),
]


class TestHeaderScrolled:
    @pytest.mark.parametrize(("y", "expected"), [(0, False), (50, False), (51, True)])
    def test_threshold(self, y: float, expected: bool) -> None:
        assert header_scrolled(y) is expected


class TestActiveSection:
    def test_top_of_page(self) -> None:
        assert active_section(0, SECTIONS) == "home"

    def test_offset_switches_early(self) -> None:
        # about's band starts 100px before its top
        assert active_section(699, SECTIONS) == "home"
        assert active_section(700, SECTIONS) == "about"

    def test_band_end_is_exclusive(self) -> None:
        assert active_section(1300, SECTIONS) == "work"

    def test_past_last_section(self) -> None:
        assert active_section(5000, SECTIONS) is None

    def test_no_sections(self) -> None:
        assert active_section(10, []) is None


class TestMostVisible:
    def test_highest_ratio(self) -> None:
        assert most_visible([("home", 0.2), ("about", 0.7), ("work", 0.1)]) == "about"

    def test_tie_keeps_first(self) -> None:
        assert most_visible([("home", 0.5), ("about", 0.5)]) == "home"

    def test_nothing_intersecting(self) -> None:
        assert most_visible([("home", 0.0)]) is None


class TestScrollDelta:
    def test_right(self) -> None:
        assert scroll_delta("right", 1000) == 750

    def test_left(self) -> None:
        assert scroll_delta("left", 1000) == -750

    def test_rounds(self) -> None:
        assert scroll_delta("right", 333) == 250


class TestShareUrl:
    def test_twitter(self) -> None:
        url = share_url("twitter", "https://ex.com/post?a=1", "Hello world")
        assert url == (
            "https://twitter.com/intent/tweet?url=https%3A%2F%2Fex.com%2Fpost%3Fa%3D1"
            "&text=Hello%20world"
        )

    def test_linkedin(self) -> None:
        assert share_url("linkedin", "https://ex.com/") == (
            "https://www.linkedin.com/sharing/share-offsite/?url=https%3A%2F%2Fex.com%2F"
        )

    def test_copy_returns_raw_url(self) -> None:
        assert share_url("copy", "https://ex.com/a b") == "https://ex.com/a b"

    def test_unknown_platform(self) -> None:
        assert share_url("myspace", "https://ex.com/") is None
