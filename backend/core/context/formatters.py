"""
HTML section formatters for the assistant context.

One pure function per collection turns a list of records into dark-theme
HTML cards. Missing fields render as a placeholder, never as "None".

Dependencies: None (pure functions)
System role: Record-to-HTML projection for prompt context
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any

PLACEHOLDER = "-"
NUMERIC_PLACEHOLDER = "0"

NO_EVENTS = "<p>No upcoming events.</p>"
NO_FUNDRAISING = "<p>No fundraising campaigns.</p>"
NO_INTERNSHIPS = "<p>No internships available.</p>"
NO_NOTIFICATIONS = "<p>No notifications.</p>"
NO_MENTORSHIP = "<p>No mentorship programs.</p>"
NO_DIRECTORY = "<p>No alumni directory data.</p>"


@dataclass(frozen=True)
class CardStyle:
    """Colors and icon for one section's cards."""

    icon: str
    border: str
    background: str
    heading: str


EVENT_STYLE = CardStyle("📅", border="#2e86de", background="#1b2a41", heading="#54a0ff")
FUNDRAISING_STYLE = CardStyle("💰", border="#00b894", background="#1e2d24", heading="#00cec9")
INTERNSHIP_STYLE = CardStyle("💼", border="#fdcb6e", background="#3e2d1f", heading="#ffeaa7")
NOTIFICATION_STYLE = CardStyle("🔔", border="#636e72", background="#2d3436", heading="#b2bec3")
MENTORSHIP_STYLE = CardStyle("🧑‍🏫", border="#6c5ce7", background="#2b1e4a", heading="#a29bfe")
DIRECTORY_STYLE = CardStyle("🎓", border="#00cec9", background="#1e3c3c", heading="#81ecec")


def field_text(record: Any, key: str, placeholder: str = PLACEHOLDER) -> str:
    """
    Render one record field for display.

    None, absent keys and blank strings count as missing. Zero and False
    are real values and are rendered as-is.

    Args:
        record: Record mapping (anything else is treated as empty)
        key: Field name
        placeholder: Text used when the field is missing

    Returns:
        str: Display text
    """
    value = record.get(key) if isinstance(record, Mapping) else None
    if value is None:
        return placeholder
    if isinstance(value, str):
        return value if value.strip() else placeholder
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return str(value)


def _card(style: CardStyle, title: str, lines: list[str]) -> str:
    body = "<br>\n".join(f"    {line}" for line in lines)
    return (
        f'\n<div style="border:1px solid {style.border}; border-radius:10px; padding:10px; '
        f'margin-bottom:10px; background-color:{style.background};">\n'
        f'  <h4 style="margin:0; color:{style.heading};">{style.icon} {title}</h4>\n'
        f'  <p style="margin:5px 0; color:#dfe6e9;">\n'
        f"{body}\n"
        f"  </p>\n"
        f"</div>"
    )


def _labeled(label: str, record: Any, key: str, placeholder: str = PLACEHOLDER) -> str:
    return f"<strong>{label}:</strong> {field_text(record, key, placeholder)}"


def _render(records: Iterable[Any] | None, empty_message: str, render_one) -> str:
    items = list(records or [])
    if not items:
        return empty_message
    return "".join(render_one(record) for record in items)


def format_events(events: Iterable[Any] | None) -> str:
    """Render event cards (title, type, date, organizer, description)."""

    def render(e: Any) -> str:
        return _card(EVENT_STYLE, field_text(e, "title"), [
            _labeled("Type", e, "type"),
            _labeled("Date", e, "date"),
            _labeled("Organizer", e, "organizer"),
            field_text(e, "description"),
        ])

    return _render(events, NO_EVENTS, render)


def format_fundraising(fundraising: Iterable[Any] | None) -> str:
    """Render campaign cards; raised and goal fall back to ``0``."""

    def render(f: Any) -> str:
        raised = field_text(f, "raised", NUMERIC_PLACEHOLDER)
        goal = field_text(f, "goal", NUMERIC_PLACEHOLDER)
        return _card(FUNDRAISING_STYLE, field_text(f, "title"), [
            f"<strong>Raised:</strong> {raised} / {goal}",
            _labeled("Purpose", f, "purpose"),
            _labeled("Deadline", f, "deadline"),
        ])

    return _render(fundraising, NO_FUNDRAISING, render)


def format_internships(internships: Iterable[Any] | None) -> str:
    """Render internship cards (title, company, duration, description)."""

    def render(i: Any) -> str:
        return _card(INTERNSHIP_STYLE, field_text(i, "title"), [
            _labeled("Company", i, "company"),
            _labeled("Duration", i, "duration"),
            field_text(i, "description"),
        ])

    return _render(internships, NO_INTERNSHIPS, render)


def format_notifications(notifications: Iterable[Any] | None) -> str:
    """Render notification cards (title, message, date)."""

    def render(n: Any) -> str:
        return _card(NOTIFICATION_STYLE, field_text(n, "title"), [
            field_text(n, "message"),
            _labeled("Date", n, "date"),
        ])

    return _render(notifications, NO_NOTIFICATIONS, render)


def format_mentorship(mentorships: Iterable[Any] | None) -> str:
    """Render mentorship cards (mentorName, expertise, contact)."""

    def render(m: Any) -> str:
        return _card(MENTORSHIP_STYLE, field_text(m, "mentorName"), [
            _labeled("Expertise", m, "expertise"),
            _labeled("Contact", m, "contact"),
        ])

    return _render(mentorships, NO_MENTORSHIP, render)


def format_directory(users: Iterable[Any] | None) -> str:
    """Render alumni directory cards, the richest projection."""

    def render(u: Any) -> str:
        return _card(DIRECTORY_STYLE, field_text(u, "name"), [
            _labeled("Role", u, "role"),
            _labeled("College", u, "college"),
            _labeled("Profession", u, "profession"),
            _labeled("Batch", u, "batch"),
            _labeled("Grad Year", u, "gradYear"),
            _labeled("Company", u, "company"),
            _labeled("City", u, "city"),
            _labeled("Email", u, "email"),
        ])

    return _render(users, NO_DIRECTORY, render)
