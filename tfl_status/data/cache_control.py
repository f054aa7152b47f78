"""Cache-Control parsing for the TfL refresh hint."""

from __future__ import annotations

import re

MAX_AGE_PATTERN = re.compile(r"max-age\s*=\s*([\d.]+)")


def extract_max_age(header: str | None) -> int | None:
    """Return the max-age directive in seconds, or None if absent or not an integer."""
    if not header:
        return None

    match = MAX_AGE_PATTERN.search(header)
    if not match:
        return None

    value = match.group(1)
    if value.isdigit():
        return int(value)
    try:
        parsed = float(value)
    except ValueError:
        return None
    if not parsed.is_integer():
        return None
    return int(parsed)


__all__ = ["MAX_AGE_PATTERN", "extract_max_age"]
