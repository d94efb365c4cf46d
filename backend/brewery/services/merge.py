"""Helpers shared by the PATCH merge rules."""

from typing import Optional


def has_text(value: Optional[str]) -> bool:
    """True when `value` contains at least one non-whitespace character."""
    return value is not None and bool(value.strip())
