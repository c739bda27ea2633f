"""How a contact submission leaves the page.

Contract: ``send(submission, on_complete)`` returns immediately and calls
``on_complete(TransportResult)`` exactly once, later.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol

import httpx
import structlog

if TYPE_CHECKING:
    from folioctl.domain.contact import ContactSubmission
    from folioctl.infrastructure.scheduler import Scheduler

log = structlog.get_logger(__name__)


@dataclass(frozen=True)
class TransportResult:
    """Outcome reported back to the form."""

    success: bool
    message: str | None = None
    error: str | None = None


CompletionCallback = Callable[[TransportResult], None]


class Transport(Protocol):
    def send(self, submission: ContactSubmission, on_complete: CompletionCallback) -> None: ...


class SimulatedTransport:
    """Pretends to deliver after *delay_ms*; the page's offline behaviour."""

    def __init__(
        self,
        scheduler: Scheduler,
        *,
        delay_ms: float = 2000,
        outcome: TransportResult | None = None,
    ) -> None:
        self._scheduler = scheduler
        self.delay_ms = delay_ms
        self.outcome = outcome or TransportResult(success=True)
        self.sent: list[ContactSubmission] = []

    def send(self, submission: ContactSubmission, on_complete: CompletionCallback) -> None:
        self.sent.append(submission)
        outcome = self.outcome
        self._scheduler.schedule_after(self.delay_ms, lambda: on_complete(outcome))


class HttpTransport:
    """POST the submission as JSON to the contact endpoint.

    ``send`` needs a running event loop. Pass *client* to share a
    connection pool (or a ``httpx.MockTransport`` in tests); otherwise a
    client is opened per request.
    """

    def __init__(
        self,
        endpoint: str,
        *,
        client: httpx.AsyncClient | None = None,
        timeout: float = 10.0,
    ) -> None:
        self.endpoint = endpoint
        self._client = client
        self._timeout = timeout
        self._tasks: set[asyncio.Task[None]] = set()

    def send(self, submission: ContactSubmission, on_complete: CompletionCallback) -> None:
        task = asyncio.get_running_loop().create_task(self._send(submission, on_complete))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def deliver(self, submission: ContactSubmission) -> TransportResult:
        """Perform one POST and translate the response."""
        try:
            if self._client is not None:
                response = await self._client.post(self.endpoint, json=submission.payload())
            else:
                async with httpx.AsyncClient(timeout=self._timeout) as client:
                    response = await client.post(self.endpoint, json=submission.payload())
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            log.warning("contact.transport_error", endpoint=self.endpoint, error=str(exc))
            return TransportResult(success=False)

        body = _json_body(response)
        if response.is_success and body.get("success", True):
            return TransportResult(success=True, message=_text(body.get("message")))
        log.info("contact.transport_rejected", status=response.status_code)
        return TransportResult(success=False, error=_text(body.get("error")))

    async def drain(self) -> None:
        """Wait for every in-flight send to complete."""
        if self._tasks:
            await asyncio.gather(*self._tasks)

    async def _send(self, submission: ContactSubmission, on_complete: CompletionCallback) -> None:
        try:
            result = await self.deliver(submission)
        except Exception as exc:
            log.warning("contact.transport_crashed", endpoint=self.endpoint, error=str(exc))
            result = TransportResult(success=False)
        on_complete(result)


def _json_body(response: httpx.Response) -> dict[str, Any]:
    try:
        body = response.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


def _text(value: Any) -> str | None:
    return value if isinstance(value, str) and value else None
