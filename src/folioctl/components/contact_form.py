"""Contact form component.

Lifecycle: idle -> validating -> pending -> success | error -> idle

Only one submission is in flight at a time. A result (or a validation
rejection) stays on screen for ``display_ms`` before the form returns
to idle.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

import structlog

from folioctl.components.slots import ValueSlot
from folioctl.domain.contact import (
    GENERIC_FAILURE,
    REQUIRED_FIELDS,
    SUCCESS_MESSAGE,
    ContactSubmission,
    SubmissionErrorCode,
    validate_submission,
)
from folioctl.domain.lifecycle import SUBMISSION_TRANSITIONS, SubmissionPhase, is_valid_transition

if TYPE_CHECKING:
    from folioctl.components.slots import Slot
    from folioctl.components.transports import Transport, TransportResult
    from folioctl.infrastructure.scheduler import Scheduler, TimerHandle

log = structlog.get_logger(__name__)

FORM_FIELDS: tuple[str, ...] = (*REQUIRED_FIELDS, "website")


@dataclass(frozen=True)
class SubmissionState:
    phase: SubmissionPhase = SubmissionPhase.IDLE
    message: str = ""
    last_error: str | None = None
    error_code: SubmissionErrorCode | None = None


class ContactForm:
    """Validates input, hands it to a transport, and shows the outcome.

    Args:
        transport: Delivers the submission; see :mod:`folioctl.components.transports`.
        scheduler: Runs the auto-reset timer.
        message_slot: Receives the status text (empty string when cleared).
        busy_slot: Receives True while a submission is pending.
    """

    def __init__(
        self,
        transport: Transport,
        scheduler: Scheduler,
        *,
        message_slot: Slot | None = None,
        busy_slot: Slot | None = None,
        display_ms: float = 5000,
        min_message_length: int = 10,
    ) -> None:
        self._transport = transport
        self._scheduler = scheduler
        self.message_slot = message_slot or ValueSlot("form-message")
        self.busy_slot = busy_slot or ValueSlot("submit-busy", initial=False)
        self.display_ms = display_ms
        self.min_message_length = min_message_length
        self._fields: dict[str, str] = dict.fromkeys(FORM_FIELDS, "")
        self._state = SubmissionState()
        self._reset_handle: TimerHandle | None = None
        self._disposed = False

    @property
    def state(self) -> SubmissionState:
        return self._state

    @property
    def phase(self) -> SubmissionPhase:
        return self._state.phase

    @property
    def fields(self) -> dict[str, str]:
        return dict(self._fields)

    def set_field(self, name: str, value: str) -> None:
        if name not in self._fields:
            msg = f"Unknown form field {name!r}"
            raise KeyError(msg)
        self._fields[name] = value

    def fill(self, **values: str) -> None:
        for name, value in values.items():
            self.set_field(name, value)

    def submit(self) -> bool:
        """Validate and send. Returns True when the transport accepted the submission.

        Ignored (False, transport untouched) while a submission is pending.
        A transport that raises from ``send`` leaves the form in ERROR,
        retryable after the usual reset.
        """
        if self._disposed or self._state.phase is SubmissionPhase.PENDING:
            return False

        self._transition(SubmissionPhase.VALIDATING)
        submission = ContactSubmission.from_mapping(self._fields)
        failure = validate_submission(submission, min_message_length=self.min_message_length)
        if failure is not None:
            log.debug("contact_form.rejected", code=str(failure.code))
            self._show_error(failure.message, failure.code)
            return False

        self._transition(SubmissionPhase.PENDING)
        self._cancel_reset()
        self.message_slot.update("")
        self.busy_slot.update(True)
        try:
            self._transport.send(submission.trimmed(), self._on_complete)
        except Exception as exc:
            log.warning("contact_form.send_failed", error=str(exc))
            if self._state.phase is SubmissionPhase.PENDING:
                self.busy_slot.update(False)
                self._show_error(GENERIC_FAILURE, SubmissionErrorCode.TRANSPORT_FAILURE)
            return False
        return True

    def dispose(self) -> None:
        """Cancel the reset timer and ignore any completion still in flight."""
        self._disposed = True
        self._cancel_reset()

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _on_complete(self, result: TransportResult) -> None:
        if self._disposed or self._state.phase is not SubmissionPhase.PENDING:
            return
        self.busy_slot.update(False)
        if result.success:
            self._fields = dict.fromkeys(FORM_FIELDS, "")
            message = result.message or SUCCESS_MESSAGE
            self._transition(SubmissionPhase.SUCCESS, message=message)
            self.message_slot.update(message)
            self._schedule_reset()
        else:
            self._show_error(result.error or GENERIC_FAILURE, SubmissionErrorCode.TRANSPORT_FAILURE)

    def _show_error(self, message: str, code: SubmissionErrorCode) -> None:
        self._transition(
            SubmissionPhase.ERROR,
            message=message,
            last_error=message,
            error_code=code,
        )
        self.message_slot.update(message)
        self._schedule_reset()

    def _schedule_reset(self) -> None:
        self._cancel_reset()
        self._reset_handle = self._scheduler.schedule_after(self.display_ms, self._reset)

    def _cancel_reset(self) -> None:
        if self._reset_handle is not None:
            self._reset_handle.cancel()
            self._reset_handle = None

    def _reset(self) -> None:
        self._reset_handle = None
        self._transition(SubmissionPhase.IDLE, message="", last_error=None, error_code=None)
        self.message_slot.update("")

    def _transition(self, target: SubmissionPhase, **changes: object) -> None:
        current = self._state.phase
        if current is not target and not is_valid_transition(
            current, target, SUBMISSION_TRANSITIONS
        ):
            msg = f"Invalid submission transition {current} -> {target}"
            raise RuntimeError(msg)
        self._state = replace(self._state, phase=target, **changes)  # type: ignore[arg-type]
