"""Contact submission model and the validation pipeline.

Both the page component and the HTTP backend run the same ordered checks:
HONEYPOT -> REQUIRED -> EMAIL -> LENGTH. The first failing step wins.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

REQUIRED_FIELDS: tuple[str, ...] = ("name", "email", "subject", "message")
SINGLE_LINE_FIELDS: tuple[str, ...] = ("name", "email", "subject", "website")

MIN_MESSAGE_LENGTH = 10

SUCCESS_MESSAGE = "Message sent successfully! I'll get back to you soon."
GENERIC_FAILURE = "Failed to send message. Please try again later."


class SubmissionErrorCode(StrEnum):
    """Why a submission did not go through."""

    SPAM_DETECTED = "spam_detected"
    MISSING_FIELDS = "missing_fields"
    INVALID_EMAIL = "invalid_email"
    MESSAGE_TOO_SHORT = "message_too_short"
    TRANSPORT_FAILURE = "transport_failure"


class ContactSubmission(BaseModel):
    """The four visible fields plus the hidden ``website`` honeypot."""

    model_config = {"frozen": True}

    name: str = ""
    email: str = ""
    subject: str = ""
    message: str = ""
    website: str = ""

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> ContactSubmission:
        """Build from a request body, treating missing or non-string values as empty."""
        values = {}
        for key in (*REQUIRED_FIELDS, "website"):
            raw = data.get(key)
            values[key] = raw if isinstance(raw, str) else ""
        return cls(**values)

    def trimmed(self) -> ContactSubmission:
        """Strip every field and fold line breaks out of the single-line ones."""
        update = {}
        for key in (*REQUIRED_FIELDS, "website"):
            value = getattr(self, key)
            if key in SINGLE_LINE_FIELDS:
                value = single_line(value)
            update[key] = value.strip()
        return self.model_copy(update=update)

    def payload(self) -> dict[str, str]:
        """Wire body for the transport."""
        return self.model_dump()


class ValidationFailure(BaseModel):
    """A rejected submission: machine code, user-visible message, offending fields."""

    model_config = {"frozen": True}

    code: SubmissionErrorCode
    message: str
    fields: list[str] = Field(default_factory=list)


def single_line(value: str) -> str:
    """Join the lines of *value* with spaces. Mail headers may not contain line breaks."""
    return " ".join(line.strip() for line in value.splitlines() if line.strip())


def is_valid_email(email: str) -> bool:
    """``local@domain.tld`` shape: no whitespace, exactly one ``@`` run, a dot after it."""
    return EMAIL_PATTERN.match(email) is not None


def missing_fields(submission: ContactSubmission) -> list[str]:
    return [key for key in REQUIRED_FIELDS if not getattr(submission, key).strip()]


def validate_submission(
    submission: ContactSubmission,
    *,
    min_message_length: int = MIN_MESSAGE_LENGTH,
) -> ValidationFailure | None:
    """Run the ordered checks. Returns None when the submission may be sent."""
    if submission.website:
        return ValidationFailure(code=SubmissionErrorCode.SPAM_DETECTED, message="Spam detected")

    missing = missing_fields(submission)
    if missing:
        return ValidationFailure(
            code=SubmissionErrorCode.MISSING_FIELDS,
            message=f"Please fill in all required fields: {', '.join(missing)}.",
            fields=missing,
        )

    if not is_valid_email(submission.email.strip()):
        return ValidationFailure(
            code=SubmissionErrorCode.INVALID_EMAIL,
            message="Please enter a valid email address.",
            fields=["email"],
        )

    if len(submission.message.strip()) < min_message_length:
        return ValidationFailure(
            code=SubmissionErrorCode.MESSAGE_TOO_SHORT,
            message=f"Message must be at least {min_message_length} characters.",
            fields=["message"],
        )

    return None
