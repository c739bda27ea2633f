"""Outgoing mail for contact submissions.

Delivery goes through ``aiosmtplib`` when ``[mail] host`` is set. With no
host configured the :class:`LogMailer` records the message in the log and
reports success, so a development server accepts submissions end to end.
"""

from __future__ import annotations

import asyncio
from collections import deque
from datetime import UTC, datetime
from email.message import EmailMessage
from email.utils import formataddr, make_msgid
from typing import TYPE_CHECKING, Protocol

import aiosmtplib
import structlog

from folioctl.domain.contact import single_line

if TYPE_CHECKING:
    from folioctl.config.models import MailConfig

log = structlog.get_logger(__name__)

LOG_MAILER_KEEP = 50


class MailDeliveryError(Exception):
    """The mail backend could not accept the message."""


class Mailer(Protocol):
    def send(self, message: EmailMessage) -> None: ...


def compose_contact_mail(
    *,
    name: str,
    email: str,
    subject: str,
    message: str,
    sender: str,
    recipient: str,
    subject_prefix: str = "[Portfolio Contact]",
    remote_addr: str | None = None,
    sent_at: datetime | None = None,
) -> EmailMessage:
    """Build the plain-text notification sent to the site owner.

    Replies go straight to the visitor via ``Reply-To``.
    """
    sent_at = sent_at or datetime.now(UTC)
    lines = [
        "You have a new message from your portfolio contact form.",
        "",
        f"Name: {name}",
        f"Email: {email}",
        f"Subject: {subject}",
        "",
        "Message:",
        message,
        "",
        f"Sent at: {sent_at.strftime('%Y-%m-%d %H:%M:%S %Z').strip()}",
    ]
    if remote_addr:
        lines.append(f"IP Address: {remote_addr}")

    mail = EmailMessage()
    mail["From"] = sender
    mail["To"] = recipient
    mail["Reply-To"] = formataddr((single_line(name), single_line(email)))
    mail["Subject"] = single_line(f"{subject_prefix} {subject}")
    mail["Message-ID"] = make_msgid(domain="folioctl.local")
    mail.set_content("\n".join(lines))
    return mail


class SmtpMailer:
    """Deliver through an SMTP relay, optionally with STARTTLS and login.

    ``aiosmtplib`` does the protocol work; :meth:`send` runs it to completion
    so Flask views and CLI commands can call it synchronously.
    """

    def __init__(
        self,
        host: str,
        port: int = 587,
        *,
        username: str = "",
        password: str = "",
        use_tls: bool = True,
        timeout: float = 10.0,
    ) -> None:
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.use_tls = use_tls
        self.timeout = timeout

    def send(self, message: EmailMessage) -> None:
        try:
            asyncio.run(self._send(message))
        except (aiosmtplib.SMTPException, OSError) as exc:
            log.warning("mail.failed", host=self.host, port=self.port, error=str(exc))
            msg = f"SMTP delivery to {self.host}:{self.port} failed: {exc}"
            raise MailDeliveryError(msg) from exc
        log.info("mail.sent", host=self.host, to=message["To"])

    async def _send(self, message: EmailMessage) -> None:
        await aiosmtplib.send(
            message,
            hostname=self.host,
            port=self.port,
            username=self.username or None,
            password=self.password or None,
            start_tls=self.use_tls,
            timeout=self.timeout,
        )


class LogMailer:
    """Development mailer: logs each message instead of sending it.

    Only the last *keep* messages stay in ``sent``.
    """

    def __init__(self, keep: int = LOG_MAILER_KEEP) -> None:
        self.sent: deque[EmailMessage] = deque(maxlen=keep)

    def send(self, message: EmailMessage) -> None:
        self.sent.append(message)
        log.info(
            "mail.logged",
            to=message["To"],
            subject=message["Subject"],
            reply_to=message["Reply-To"],
        )


def create_mailer(config: MailConfig) -> Mailer:
    """SMTP when a host is configured, otherwise the logging mailer."""
    if not config.host:
        return LogMailer()
    return SmtpMailer(
        config.host,
        config.port,
        username=config.username,
        password=config.password,
        use_tls=config.use_tls,
        timeout=config.timeout,
    )
