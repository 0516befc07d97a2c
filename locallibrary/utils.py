"""Shared helpers for identifiers, sanitizing and date parsing."""

import re
import uuid
from datetime import date, datetime
from typing import Optional

from markupsafe import escape

_ALNUM_RE = re.compile(r'^[A-Za-z0-9]+$')


def new_id() -> str:
    """Return a fresh 32-character hex identifier for a catalog document."""
    return uuid.uuid4().hex


def escape_markup(value: str) -> str:
    """Replace HTML-significant characters in *value* with entities."""
    return str(escape(value))


def is_alphanumeric(value: str) -> bool:
    """Return True if *value* is non-empty and made only of ASCII letters and digits."""
    return bool(value and _ALNUM_RE.match(value))


def parse_iso_date(value: str) -> Optional[date]:
    """Parse an ISO-8601 date (or date-time) string.

    Returns None when *value* is not a valid calendar date. A date-time keeps
    only its date part.
    """
    if not value:
        return None

    value = value.strip()
    try:
        return date.fromisoformat(value)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(value).date()
    except ValueError:
        return None


def format_date(value: Optional[date]) -> str:
    """Format a date for display, e.g. ``Oct 19, 2026``."""
    if value is None:
        return ""
    return f"{value:%b} {value.day}, {value.year}"
