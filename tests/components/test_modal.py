"""Tests for ModalController."""

from __future__ import annotations

from folioctl.components.modal import ModalController
from folioctl.components.slots import RecordingSlot
from folioctl.domain.catalog import Project
from folioctl.domain.types import ModalKind


class TestModalController:
    def test_open_project(self) -> None:
        slot = RecordingSlot("modal", initial=False)
        modal = ModalController(slot=slot)
        assert modal.open("project", "teal-dashboard")
        assert modal.is_open
        assert modal.kind is ModalKind.PROJECT
        assert modal.key == "teal-dashboard"
        assert isinstance(modal.content, Project)
        assert slot.history == [True]

    def test_open_legal(self) -> None:
        modal = ModalController()
        assert modal.open(ModalKind.LEGAL, "privacy")
        assert modal.kind is ModalKind.LEGAL

    def test_unknown_key_is_noop(self) -> None:
        modal = ModalController()
        modal.open("project", "logo-refresh")
        assert not modal.open("project", "missing")
        assert modal.key == "logo-refresh"

    def test_unknown_kind(self) -> None:
        assert not ModalController().open("gallery", "x")

    def test_close(self) -> None:
        slot = RecordingSlot("modal")
        modal = ModalController(slot=slot)
        modal.open("legal", "terms")
        modal.close()
        modal.close()
        assert not modal.is_open
        assert modal.content is None
        assert slot.history == [True, False]

    def test_escape_closes(self) -> None:
        modal = ModalController()
        modal.open("legal", "terms")
        assert not modal.handle_key("Enter")
        assert modal.handle_key("Escape")
        assert not modal.is_open
        assert not modal.handle_key("Escape")
