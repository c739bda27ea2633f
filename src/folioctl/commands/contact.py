"""Command group: send and review contact messages."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from folioctl.commands._base import FolioGroup
from folioctl.domain.contact import ContactSubmission
from folioctl.services.contact import ContactService

if TYPE_CHECKING:
    from folioctl.commands._context import AppContext

_CONTACT_EXAMPLES = """\
  folioctl contact send --name Ada --email ada@example.com --subject Hi --message "Hello there!"
  folioctl contact send ... --endpoint http://127.0.0.1:3000/contact
  folioctl contact list --limit 5"""


@click.group(cls=FolioGroup, examples=_CONTACT_EXAMPLES)
@click.pass_obj
def contact(app: AppContext) -> None:
    """Send and list contact-form messages."""


@contact.command(
    examples="""\
  # Deliver with the configured mailer (logs only when [mail] host is unset)
  folioctl contact send --name Ada --email ada@example.com --subject Hi --message "Hello there!"

  # Go through a running server, exactly as the page does
  folioctl contact send --name Ada --email ada@example.com --subject Hi \\
      --message "Hello there!" --endpoint http://127.0.0.1:3000/contact"""
)
@click.option("--name", default="", help="Sender name.")
@click.option("--email", default="", help="Sender email address.")
@click.option("--subject", default="", help="Message subject.")
@click.option("--message", default="", help="Message body (at least 10 characters).")
@click.option("--website", default="", hidden=True, help="Honeypot field; leave empty.")
@click.option("--endpoint", default=None, help="POST to this URL instead of mailing directly.")
@click.pass_obj
def send(
    app: AppContext,
    name: str,
    email: str,
    subject: str,
    message: str,
    website: str,
    endpoint: str | None,
) -> None:
    """Validate and send one contact message."""
    submission = ContactSubmission(
        name=name, email=email, subject=subject, message=message, website=website
    )
    svc = ContactService(app.site)
    if endpoint:
        app.emit(svc.send_remote(submission, endpoint))
    else:
        app.emit(svc.submit(submission))


@contact.command("list", examples="  folioctl contact list\n  folioctl --json contact list --limit 5")
@click.option("--limit", default=20, type=int, help="Max messages.")
@click.pass_obj
def list_messages(app: AppContext, limit: int) -> None:
    """Show recently received messages, newest first."""
    app.emit(ContactService(app.site).recent(limit))
