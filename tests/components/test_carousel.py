"""Tests for Carousel change notifications."""

from __future__ import annotations

from folioctl.components.carousel import Carousel
from folioctl.components.slots import RecordingSlot


class TestCarousel:
    def test_one_notification_per_change(self) -> None:
        seen: list[int] = []
        carousel = Carousel(3)
        carousel.subscribe(seen.append)
        carousel.next()
        carousel.next()
        carousel.next()
        carousel.prev()
        assert seen == [1, 2, 0, 2]

    def test_no_notification_when_unchanged(self) -> None:
        seen: list[int] = []
        carousel = Carousel(3, index=1)
        carousel.subscribe(seen.append)
        assert carousel.set_to(4) == 1
        assert seen == []

    def test_single_item_never_notifies(self) -> None:
        seen: list[int] = []
        carousel = Carousel(1)
        carousel.subscribe(seen.append)
        carousel.next()
        carousel.prev()
        assert seen == []
        assert carousel.index == 0

    def test_empty_is_inert(self) -> None:
        seen: list[int] = []
        carousel = Carousel(0)
        carousel.subscribe(seen.append)
        assert carousel.next() is None
        assert carousel.prev() is None
        assert carousel.set_to(3) is None
        assert carousel.index is None
        assert not carousel.is_active(0)
        assert seen == []

    def test_slot_receives_index(self) -> None:
        slot = RecordingSlot("testimonial")
        carousel = Carousel(4, slot=slot)
        carousel.set_to(-1)
        assert slot.history == [3]
        assert carousel.is_active(3)

    def test_unsubscribe(self) -> None:
        seen: list[int] = []
        carousel = Carousel(3)
        unsubscribe = carousel.subscribe(seen.append)
        carousel.next()
        unsubscribe()
        unsubscribe()
        carousel.next()
        assert seen == [1]

    def test_resize_notifies_on_change(self) -> None:
        seen: list[int] = []
        carousel = Carousel(5, index=4)
        carousel.subscribe(seen.append)
        assert carousel.resize(3) == 1
        assert carousel.resize(10) == 1
        assert seen == [1]
        assert carousel.count == 10

    def test_resize_from_empty(self) -> None:
        seen: list[int] = []
        carousel = Carousel(0)
        carousel.subscribe(seen.append)
        assert carousel.resize(2) == 0
        assert seen == [0]
