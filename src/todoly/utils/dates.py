"""Due date parsing helpers."""

from __future__ import annotations

from datetime import date, datetime

from todoly.models.exceptions import BadDateError


def parse_due_date(value: str | date) -> date:
    """Parse user input into a calendar date.

    Accepts ``YYYY-MM-DD`` and full ISO 8601 timestamps (the time part is
    dropped). ``date`` objects pass through; ``datetime`` objects are
    truncated to their date.

    Raises:
        BadDateError: If the value is blank or not a valid date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        raise BadDateError(value)

    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError as e:
        raise BadDateError(value) from e


def try_parse_due_date(value: str | date | None) -> date | None:
    """Like parse_due_date, but returns None instead of raising."""
    if value is None:
        return None
    try:
        return parse_due_date(value)
    except BadDateError:
        return None
