"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, folio.toml only contains overrides.
A fresh site needs nothing; a real deployment sets [mail] and [server].
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from folioctl.domain.typewriter import DEFAULT_ROLES

# --- folio.toml sections ---


class SiteConfig(BaseModel):
    """[site] section."""

    model_config = {"frozen": True}

    title: str = "Portfolio"
    owner: str = "Your Name"
    url: str = "http://localhost:3000/"


class TypewriterConfig(BaseModel):
    """[typewriter] section."""

    model_config = {"frozen": True}

    roles: list[str] = Field(default_factory=lambda: list(DEFAULT_ROLES))
    typing_speed_ms: int = 100
    deleting_speed_ms: int = 50
    pause_ms: int = 2000
    word_pause_ms: int = 500


class ContactConfig(BaseModel):
    """[contact] section."""

    model_config = {"frozen": True}

    min_message_length: int = 10
    display_ms: int = 5000
    simulated_delay_ms: int = 2000
    toast_ms: int = 2400
    endpoint: str = "/contact"
    record_messages: bool = True


class MailConfig(BaseModel):
    """[mail] section. SMTP delivery is disabled until ``host`` is set."""

    model_config = {"frozen": True}

    host: str = ""
    port: int = 587
    username: str = ""
    password: str = ""
    use_tls: bool = True
    timeout: float = 10.0
    sender: str = "Portfolio Contact <noreply@localhost>"
    recipient: str = "owner@localhost"
    subject_prefix: str = "[Portfolio Contact]"


class ServerConfig(BaseModel):
    """[server] section."""

    model_config = {"frozen": True}

    host: str = "127.0.0.1"
    port: int = 3000
    static_dir: Path | None = None
    cors: bool = True


class ThemeConfig(BaseModel):
    """[theme] section."""

    model_config = {"frozen": True}

    default: str = "light"
    follow_system: bool = True
