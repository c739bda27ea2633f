"""Tests for the Typewriter component on a virtual clock."""

from __future__ import annotations

from folioctl.components.slots import RecordingSlot
from folioctl.components.typewriter import Typewriter
from folioctl.domain.lifecycle import TypingPhase
from folioctl.domain.typewriter import TypingTiming
from folioctl.infrastructure.scheduler import ManualScheduler


def _writer(phrases: list[str], sched: ManualScheduler) -> tuple[Typewriter, RecordingSlot]:
    slot = RecordingSlot("typed-text")
    return Typewriter(phrases, sched, slot, TypingTiming()), slot


class TestTypewriter:
    def test_start_renders_first_character_synchronously(self, scheduler: ManualScheduler) -> None:
        writer, slot = _writer(["hello"], scheduler)
        writer.start()
        assert slot.history == ["h"]
        assert writer.running

    def test_types_then_pauses_then_deletes(self, scheduler: ManualScheduler) -> None:
        writer, slot = _writer(["abc"], scheduler)
        writer.start()
        scheduler.advance(200)
        assert slot.value == "abc"
        assert writer.state.phase is TypingPhase.PAUSING
        scheduler.advance(1999)
        assert slot.value == "abc"
        scheduler.advance(1)
        assert slot.value == "ab"
        scheduler.advance(100)
        assert slot.history[-2:] == ["a", ""]

    def test_moves_on_after_word_pause(self, scheduler: ManualScheduler) -> None:
        writer, slot = _writer(["ab", "xy"], scheduler)
        writer.start()
        # a(0) ab(100) pause 2000 -> a(2100) ""(2150) word pause 500 -> x(2650)
        scheduler.advance(2649)
        assert slot.value == ""
        scheduler.advance(1)
        assert slot.value == "x"
        assert writer.state.index == 1

    def test_every_render_is_a_prefix(self, scheduler: ManualScheduler) -> None:
        phrases = ["designer", "engineer", "coder"]
        writer, slot = _writer(phrases, scheduler)
        writer.start()
        scheduler.advance(60_000)
        assert slot.history
        assert all(any(p.startswith(text) for p in phrases) for text in slot.history)
        completed = [text for text in slot.history if text in phrases]
        assert completed[:3] == phrases

    def test_at_most_one_pending_timer(self, scheduler: ManualScheduler) -> None:
        writer, _ = _writer(["abc"], scheduler)
        writer.start()
        for _ in range(50):
            assert scheduler.pending == 1
            scheduler.advance(50)

    def test_start_while_running_is_noop(self, scheduler: ManualScheduler) -> None:
        writer, slot = _writer(["abc"], scheduler)
        writer.start()
        writer.start()
        assert slot.history == ["a"]
        assert scheduler.pending == 1

    def test_stop_prevents_further_renders(self, scheduler: ManualScheduler) -> None:
        writer, slot = _writer(["abc"], scheduler)
        writer.start()
        scheduler.advance(100)
        writer.stop()
        before = list(slot.history)
        scheduler.advance(10_000)
        assert slot.history == before
        assert not writer.running
        assert scheduler.pending == 0

    def test_restart_after_stop_continues(self, scheduler: ManualScheduler) -> None:
        writer, slot = _writer(["abc"], scheduler)
        writer.start()
        writer.stop()
        writer.start()
        assert slot.history == ["a", "ab"]

    def test_empty_phrases_stay_idle(self, scheduler: ManualScheduler) -> None:
        writer, slot = _writer([], scheduler)
        writer.start()
        assert not writer.running
        assert slot.history == []
        assert scheduler.pending == 0
        assert writer.text == ""

    def test_single_phrase_loops(self, scheduler: ManualScheduler) -> None:
        writer, slot = _writer(["ok"], scheduler)
        writer.start()
        scheduler.advance(20_000)
        assert slot.history.count("ok") >= 3
        assert writer.running
