from __future__ import annotations

from datetime import date, datetime

from billed.constants import MONTHS_FR, STATUS_LABELS, UNKNOWN_STATUS_LABEL
from billed.exceptions import DataFormatError


def parse_date(raw: object) -> date:
    """Parse an ISO calendar date (or ISO datetime) string.

    Raises ``DataFormatError`` for anything else.
    """
    if not isinstance(raw, str) or not raw.strip():
        raise DataFormatError(raw)
    value = raw.strip()
    try:
        return date.fromisoformat(value)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(value).date()
    except ValueError as exc:
        raise DataFormatError(raw) from exc


def format_date(raw: object) -> str:
    """Format a stored date for display: '2024-01-15' -> '15 Jan. 24'"""
    parsed = parse_date(raw)
    return f"{parsed.day} {MONTHS_FR[parsed.month]}. {parsed.year % 100:02d}"


def format_status(raw: object) -> str:
    """Map a raw status code to its label: 'pending' -> 'En attente'"""
    for status, label in STATUS_LABELS.items():
        if raw == status.value:
            return label
    return UNKNOWN_STATUS_LABEL
