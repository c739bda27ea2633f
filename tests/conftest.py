"""Shared pytest fixtures for folioctl tests."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from email.message import EmailMessage
from pathlib import Path

import pytest
from click.testing import CliRunner

from folioctl.config.settings import FolioSettings
from folioctl.domain.contact import ContactSubmission
from folioctl.infrastructure.mailer import LogMailer, MailDeliveryError
from folioctl.infrastructure.scheduler import ManualScheduler
from folioctl.infrastructure.site import Site


class FailingMailer:
    """Mailer whose relay always refuses the message."""

    def __init__(self, reason: str = "relay refused") -> None:
        self.reason = reason
        self.attempts: list[EmailMessage] = []

    def send(self, message: EmailMessage) -> None:
        self.attempts.append(message)
        raise MailDeliveryError(self.reason)


@pytest.fixture(autouse=True)
def _no_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's FOLIO_* environment out of every test."""
    monkeypatch.delenv("FOLIO_CONFIG", raising=False)
    monkeypatch.delenv("FOLIO_SITE_ROOT", raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def settings(tmp_path: Path) -> FolioSettings:
    return FolioSettings.from_cli(site_root=tmp_path)


@pytest.fixture
def log_mailer() -> LogMailer:
    return LogMailer()


@pytest.fixture
def site(settings: FolioSettings, log_mailer: LogMailer) -> Iterator[Site]:
    """Site on a temp root with the logging mailer and no plugins."""
    s = Site(settings, mailer=log_mailer)
    try:
        yield s
    finally:
        s.close()


@pytest.fixture
def failing_mailer() -> FailingMailer:
    return FailingMailer()


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def make_submission() -> Callable[..., ContactSubmission]:
    """Factory for a submission that passes validation unless overridden."""

    def _make(**overrides: str) -> ContactSubmission:
        values = {
            "name": "Ada Lovelace",
            "email": "ada@example.com",
            "subject": "Collaboration",
            "message": "Hello, I would like to talk about a project.",
            "website": "",
        }
        values.update(overrides)
        return ContactSubmission(**values)

    return _make


@pytest.fixture
def _isolated_site(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run CLI tests from an empty temp directory acting as the site root."""
    monkeypatch.chdir(tmp_path)
