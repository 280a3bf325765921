"""Inline HTML templates for ticket notification emails."""

from __future__ import annotations

import re
from datetime import datetime
from html import escape, unescape

from releasetrack.utils import format_timestamp

PRODUCT_NAME = "ReleaseTrack Pro"
SUBJECT_PREFIX = f"[{PRODUCT_NAME}]"
FOOTER_TEXT = (
    f"This is an automated notification from {PRODUCT_NAME}. "
    "Please do not reply to this email."
)

DEFAULT_ACTOR_NAME = "A user"
DEFAULT_TICKET_TITLE = "Untitled Ticket"
DEFAULT_VALUE = "Unknown"
DEFAULT_ASSIGNEE = "Unassigned"

_STYLES = """
      body { font-family: Arial, sans-serif; line-height: 1.6; color: #333; max-width: 600px; margin: 0 auto; }
      .header { background-color: #4a86e8; color: white; padding: 20px; text-align: center; }
      .content { padding: 20px; }
      .change { margin: 20px 0; padding: 15px; background-color: #f9f9f9; border-left: 4px solid #4a86e8; }
      .old { color: #777; text-decoration: line-through; }
      .new { color: #4a86e8; font-weight: bold; }
      .comment { margin: 20px 0; padding: 15px; background-color: #f8f9fa; border-radius: 4px; }
      .footer { background-color: #f5f5f5; padding: 10px 20px; font-size: 12px; color: #777; }
"""


def _text(value: object | None, default: str) -> str:
    if value is None:
        return escape(default)
    rendered = str(value).strip()
    return escape(rendered or default)


def _document(heading: str, body: str, *, generated_at: datetime | None, extra_footer: str = "") -> str:
    return (
        "<!DOCTYPE html>\n"
        "<html>\n"
        "<head>\n"
        '  <meta charset="utf-8">\n'
        f"  <style>{_STYLES}  </style>\n"
        "</head>\n"
        "<body>\n"
        f'  <div class="header"><h2>{heading}</h2></div>\n'
        f'  <div class="content">\n{body}\n'
        f"    <p>Thank you,<br>{PRODUCT_NAME} Team</p>\n"
        "  </div>\n"
        '  <div class="footer">\n'
        f"    <p>{FOOTER_TEXT}</p>\n"
        f"{extra_footer}"
        f"    <p>Sent {escape(format_timestamp(generated_at))}</p>\n"
        "  </div>\n"
        "</body>\n"
        "</html>\n"
    )


def status_change_subject(ticket_id: str | None, old_status: str | None, new_status: str | None) -> str:
    return (
        f"{SUBJECT_PREFIX} Ticket {ticket_id or DEFAULT_VALUE} Status Changed: "
        f"{old_status or DEFAULT_VALUE} → {new_status or DEFAULT_VALUE}"
    )


def assignee_change_subject(ticket_id: str | None) -> str:
    return f"{SUBJECT_PREFIX} Ticket {ticket_id or DEFAULT_VALUE} Assignee Changed"


def mention_subject(ticket_id: str | None) -> str:
    return f"You've been mentioned in {ticket_id or DEFAULT_VALUE}"


def render_status_change_html(
    *,
    ticket_id: str | None,
    ticket_title: str | None,
    old_status: str | None,
    new_status: str | None,
    actor_name: str | None,
    generated_at: datetime | None = None,
) -> str:
    """Return the HTML body announcing a ticket status change."""

    body = (
        "    <p>Hello,</p>\n"
        f"    <p>{_text(actor_name, DEFAULT_ACTOR_NAME)} has updated the status of ticket "
        f"<strong>{_text(ticket_id, DEFAULT_VALUE)}: {_text(ticket_title, DEFAULT_TICKET_TITLE)}</strong>.</p>\n"
        '    <div class="change">Status changed from '
        f'<span class="old">{_text(old_status, DEFAULT_VALUE)}</span> to '
        f'<span class="new">{_text(new_status, DEFAULT_VALUE)}</span></div>\n'
        f"    <p>You can view the ticket details by logging into {PRODUCT_NAME}.</p>"
    )
    return _document("Ticket Status Update", body, generated_at=generated_at)


def render_assignee_change_html(
    *,
    ticket_id: str | None,
    ticket_title: str | None,
    old_assignee: str | None,
    new_assignee: str | None,
    actor_name: str | None,
    generated_at: datetime | None = None,
) -> str:
    """Return the HTML body announcing a ticket assignee change."""

    body = (
        "    <p>Hello,</p>\n"
        f"    <p>{_text(actor_name, DEFAULT_ACTOR_NAME)} has updated the assignee of ticket "
        f"<strong>{_text(ticket_id, DEFAULT_VALUE)}: {_text(ticket_title, DEFAULT_TICKET_TITLE)}</strong>.</p>\n"
        '    <div class="change">Assignee changed from '
        f'<span class="old">{_text(old_assignee, DEFAULT_ASSIGNEE)}</span> to '
        f'<span class="new">{_text(new_assignee, DEFAULT_ASSIGNEE)}</span></div>\n'
        f"    <p>You can view the ticket details by logging into {PRODUCT_NAME}.</p>"
    )
    return _document("Ticket Assignee Update", body, generated_at=generated_at)


def render_mention_html(
    *,
    mentioned_name: str | None,
    commenter_name: str | None,
    ticket_id: str | None,
    ticket_title: str | None,
    comment_content: str | None,
    ticket_url: str | None = None,
    generated_at: datetime | None = None,
) -> str:
    """Return the HTML body telling a user they were mentioned in a comment."""

    commenter = _text(commenter_name, DEFAULT_ACTOR_NAME)
    link = ""
    if ticket_url:
        link = f'    <p><a href="{escape(ticket_url, quote=True)}">View Ticket &amp; Comment</a></p>\n'
    body = (
        f"    <p>Hello {_text(mentioned_name, 'there')},</p>\n"
        f"    <p><strong>{commenter}</strong> mentioned you in a comment on ticket "
        f"<strong>{_text(ticket_id, DEFAULT_VALUE)}: {_text(ticket_title, DEFAULT_TICKET_TITLE)}</strong>.</p>\n"
        f'    <div class="comment"><p>{commenter} commented:</p>'
        f"<p>{_text(comment_content, '')}</p></div>\n"
        f"{link}"
        f"    <p>You can manage your notification preferences in the Settings section of {PRODUCT_NAME}.</p>"
    )
    return _document(
        "You've been mentioned!",
        body,
        generated_at=generated_at,
        extra_footer=(
            "    <p>If you no longer wish to receive mention notifications, "
            "you can disable them in your notification settings.</p>\n"
        ),
    )


def render_plain_text(html_body: str) -> str:
    """Return a crude plain-text alternative used by clients without HTML."""

    text = re.sub(r"<(style|head)[^>]*>.*?</\1>", "", html_body, flags=re.DOTALL)
    text = re.sub(r"<br\s*/?>", "\n", text)
    text = re.sub(r"</(p|div|h2)>", "\n", text)
    text = re.sub(r"<[^>]+>", "", text)
    lines = [line.strip() for line in text.splitlines()]
    return unescape("\n".join(line for line in lines if line))


__all__ = [
    "FOOTER_TEXT",
    "assignee_change_subject",
    "mention_subject",
    "render_assignee_change_html",
    "render_mention_html",
    "render_plain_text",
    "render_status_change_html",
    "status_change_subject",
]
