"""
Utility helpers for formatting counts and record attributes for display.
"""

from __future__ import annotations

from typing import Any, Optional

from tourism_atlas.data.records import NOT_SPECIFIED, status_text


def format_number(value: Optional[float], decimals: int = 0) -> str:
    if value is None:
        return "–"
    try:
        return f"{value:,.{decimals}f}"
    except (TypeError, ValueError):
        return "–"


def or_not_specified(value: Any) -> str:
    if value is None or (isinstance(value, str) and not value.strip()):
        return NOT_SPECIFIED
    return str(value)


def format_status(status: Any) -> str:
    return status_text(status)
