"""ContactService — server side of the contact form.

Pipeline: VALIDATE -> COMPOSE -> DELIVER -> RECORD -> EVENT -> RESPOND

Validation is the same ordered check the page runs, so a submission the
page accepts is never rejected here for a different reason.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

import structlog

from folioctl.components.contact_form import ContactForm, SubmissionState
from folioctl.components.transports import HttpTransport
from folioctl.domain.contact import (
    GENERIC_FAILURE,
    ContactSubmission,
    SubmissionErrorCode,
    validate_submission,
)
from folioctl.domain.lifecycle import SubmissionPhase
from folioctl.infrastructure.mailer import LogMailer, MailDeliveryError, compose_contact_mail
from folioctl.infrastructure.scheduler import AsyncioScheduler
from folioctl.services.base import BaseService
from folioctl.services.result import ServiceResult

if TYPE_CHECKING:
    from email.message import EmailMessage

    import httpx

log = structlog.get_logger(__name__)

DELIVERED_MESSAGE = "Message sent successfully."


class ContactService(BaseService):
    """Validates and delivers contact messages."""

    def submit(
        self,
        submission: ContactSubmission,
        *,
        remote_addr: str | None = None,
    ) -> ServiceResult:
        """Validate *submission* and mail it to the site owner.

        Error codes are the :class:`SubmissionErrorCode` values; everything
        except ``transport_failure`` means the visitor has to fix the input.
        """
        op = "submit_contact"
        failure = validate_submission(
            submission,
            min_message_length=self.settings.contact.min_message_length,
        )
        if failure is not None:
            log.info("contact.rejected", code=str(failure.code), fields=failure.fields)
            return ServiceResult.failure(
                op,
                failure.code,
                failure.message,
                detail={"fields": failure.fields},
            )

        clean = submission.trimmed()
        mail = self._compose(clean, remote_addr)
        warnings: list[str] = []

        try:
            self._site.mailer.send(mail)
        except MailDeliveryError as exc:
            log.warning("contact.delivery_failed", error=str(exc))
            self._record(clean, "failed", remote_addr, warnings, error=str(exc))
            self._notify(clean, "failed", warnings)
            return ServiceResult.failure(
                op,
                SubmissionErrorCode.TRANSPORT_FAILURE,
                GENERIC_FAILURE,
                warnings=warnings,
            )

        status = "logged" if isinstance(self._site.mailer, LogMailer) else "sent"
        record_id = self._record(clean, status, remote_addr, warnings)
        self._notify(clean, status, warnings)
        log.info("contact.accepted", status=status, record_id=record_id)

        data: dict[str, object] = {"status": status, "message": DELIVERED_MESSAGE}
        if record_id is not None:
            data["id"] = record_id
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

    def send_remote(
        self,
        submission: ContactSubmission,
        endpoint: str,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> ServiceResult:
        """Submit through the page's contact form to a running backend at *endpoint*.

        Same path a visitor takes: form validation first, then an HTTP POST.
        """
        state = asyncio.run(self._run_form(submission, endpoint, client))
        op = "submit_contact"
        if state.phase is not SubmissionPhase.SUCCESS:
            code = state.error_code or SubmissionErrorCode.TRANSPORT_FAILURE
            return ServiceResult.failure(
                op,
                code,
                state.last_error or GENERIC_FAILURE,
                detail={"endpoint": endpoint},
            )
        return ServiceResult(
            ok=True,
            op=op,
            data={"status": "sent", "message": state.message, "endpoint": endpoint},
        )

    def recent(self, limit: int = 20) -> ServiceResult:
        """List recently received messages, newest first."""
        items = self._site.contacts.recent(limit)
        return ServiceResult(
            ok=True,
            op="list_contacts",
            data={"items": items, "count": len(items)},
        )

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    async def _run_form(
        self,
        submission: ContactSubmission,
        endpoint: str,
        client: httpx.AsyncClient | None,
    ) -> SubmissionState:
        cfg = self.settings.contact
        transport = HttpTransport(endpoint, client=client)
        form = ContactForm(
            transport,
            AsyncioScheduler(),
            display_ms=cfg.display_ms,
            min_message_length=cfg.min_message_length,
        )
        form.fill(**submission.model_dump())
        if form.submit():
            await transport.drain()
        state = form.state
        form.dispose()
        return state

    def _compose(self, clean: ContactSubmission, remote_addr: str | None) -> EmailMessage:
        cfg = self.settings.mail
        return compose_contact_mail(
            name=clean.name,
            email=clean.email,
            subject=clean.subject,
            message=clean.message,
            sender=cfg.sender,
            recipient=cfg.recipient,
            subject_prefix=cfg.subject_prefix,
            remote_addr=remote_addr,
        )

    def _record(
        self,
        clean: ContactSubmission,
        status: str,
        remote_addr: str | None,
        warnings: list[str],
        *,
        error: str | None = None,
    ) -> int | None:
        """Append to the contact log. A storage failure never hides a sent mail."""
        if not self.settings.contact.record_messages:
            return None
        try:
            return self._site.contacts.record(
                name=clean.name,
                email=clean.email,
                subject=clean.subject,
                message=clean.message,
                status=status,
                error=error,
                remote_addr=remote_addr,
            )
        except Exception as exc:
            log.warning("contact.record_failed", error=str(exc))
            warnings.append("Message could not be recorded in the contact log")
            return None

    def _notify(self, clean: ContactSubmission, status: str, warnings: list[str]) -> None:
        self._dispatch_event(
            "post_contact",
            {
                "name": clean.name,
                "email": clean.email,
                "subject": clean.subject,
                "status": status,
            },
            warnings,
        )
