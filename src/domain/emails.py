"""
Email content - Subjects and HTML bodies for transactional notifications.

Two messages exist:
- Welcome email: sent to every accepted participant with event logistics
- Roster export email: sent once to the administrator when the roster is full

All participant-supplied values are HTML-escaped before interpolation.
"""

from dataclasses import dataclass
from html import escape

from .models import ParticipantRecord

WELCOME_SUBJECT_TEMPLATE = "Welcome to the {event_name}! - Important Details Inside"
EXPORT_SUBJECT_TEMPLATE = "{event_name} registrations are full"


@dataclass(frozen=True)
class EventDetails:
    """Event logistics included in the welcome email."""

    name: str
    date: str
    time: str
    venue: str
    website: str
    contact_phone: str
    telegram_url: str | None = None
    whatsapp_url: str | None = None


def welcome_subject(event: EventDetails) -> str:
    return WELCOME_SUBJECT_TEMPLATE.format(event_name=event.name)


def render_welcome_email(record: ParticipantRecord, event: EventDetails) -> str:
    """Render the welcome email HTML for a newly accepted participant."""
    name = escape(record.name)
    usn = escape(record.usn)
    website = escape(event.website, quote=True)

    community_links = ""
    for label, url in (("Telegram", event.telegram_url), ("WhatsApp", event.whatsapp_url)):
        if url:
            community_links += (
                f'<a href="{escape(url, quote=True)}" style="display:inline-block; margin:10px;">'
                f"Join {label} Group</a>"
            )

    return f"""
<html>
<body style="background-color:#f5f5f5; font-family: Arial, sans-serif; margin:0; padding:0;">
<div style="max-width:600px; margin:0 auto; padding:20px; background:#ffffff; border-radius:10px;">
  <h1 style="color:#2c3e50;">Welcome to the {escape(event.name)}!</h1>

  <div style="background-color:#f8f9fa; padding:15px; border-radius:5px; margin:15px 0;">
    <p style="color:#2c3e50;">Dear <strong>{name}</strong> (USN: <strong>{usn}</strong>),</p>
    <p>Your registration has been confirmed! Here are the important details:</p>
  </div>

  <div style="background-color:#e8f4f8; padding:15px; border-radius:5px; margin:15px 0;">
    <h3 style="color:#2c3e50;">Event Details</h3>
    <ul style="color:#34495e;">
      <li>Date: {escape(event.date)}</li>
      <li>Time: {escape(event.time)}</li>
      <li>Venue: {escape(event.venue)}</li>
      <li>Website: <a href="{website}" style="color:#3498db;">{escape(event.website)}</a></li>
    </ul>
  </div>

  <div style="background-color:#f0f7f4; padding:15px; border-radius:5px; margin:15px 0;">
    <h3 style="color:#2c3e50;">Prerequisites</h3>
    <ul style="color:#34495e;">
      <li>Laptop with charger (mandatory)</li>
      <li>Python 3.8 or higher installed</li>
      <li>Basic Python knowledge</li>
      <li>Mobile phone (if 2FA enabled for email)</li>
    </ul>
  </div>

  <div style="text-align:center; margin:20px 0;">{community_links}</div>

  <div style="background-color:#fff3cd; padding:15px; border-radius:5px; margin:15px 0;">
    <h3 style="color:#2c3e50;">Important Notes</h3>
    <ul style="color:#34495e;">
      <li>Your attendance will be tracked using your USN: {usn}</li>
      <li>For any queries, contact: {escape(event.contact_phone)}</li>
      <li>Please arrive 15 minutes early</li>
    </ul>
  </div>

  <p style="color:#7f8c8d; text-align:center; margin-top:20px;">
    Looking forward to an exciting learning experience!
  </p>
</div>
</body>
</html>
"""


def export_subject(event_name: str) -> str:
    return EXPORT_SUBJECT_TEMPLATE.format(event_name=event_name)


def render_export_email(participant_count: int, event_name: str) -> str:
    """Render the administrator email that carries the roster spreadsheet."""
    return f"""
<html>
<body style="font-family: Arial, sans-serif;">
  <h2>{escape(event_name)}: registrations are full</h2>
  <p>The roster has reached {participant_count} participants.</p>
  <p>The complete participant list is attached.</p>
</body>
</html>
"""
