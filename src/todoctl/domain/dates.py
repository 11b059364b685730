"""Calendar-date parsing and the ``MMM d yyyy`` display label."""

from __future__ import annotations

import re
from datetime import date

_ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}")

# Fixed English abbreviations; %b would follow the process locale.
MONTH_ABBREVIATIONS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)


def parse_iso_date(text: str) -> date | None:
    """Parse strict ``YYYY-MM-DD`` text, returning None when it is not a date."""
    if not _ISO_DATE.fullmatch(text):
        return None
    try:
        return date.fromisoformat(text)
    except ValueError:
        return None


def format_label(value: date) -> str:
    """Render *value* as ``MMM d yyyy``, e.g. ``Dec 25 2023``."""
    return f"{MONTH_ABBREVIATIONS[value.month - 1]} {value.day} {value.year}"


def label_or_text(text: str) -> str:
    """Normalise *text* to a date label if it is an ISO date, else keep it verbatim."""
    parsed = parse_iso_date(text)
    return format_label(parsed) if parsed is not None else text
