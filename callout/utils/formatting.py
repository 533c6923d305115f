"""Formatting helpers used by command descriptions and console output."""

from __future__ import annotations

from typing import Optional


def format_number(value: float) -> str:
    """Format whole numbers without a decimal, others with one decimal."""
    if float(value).is_integer():
        return f"{value:.0f}"
    return f"{value:.1f}"


def format_integer(value: float) -> str:
    """Truncate a spoken number to its integer text."""
    return str(int(value))


def format_confidence(confidence: Optional[float]) -> str:
    """Format a confidence score as a percentage."""
    if confidence is None:
        return "N/A"
    return f"{float(confidence) * 100:.0f}%"


def confidence_action(confidence: float, confirm_below: float) -> str:
    """Return ``auto`` when a command is confident enough to apply directly."""
    return "auto" if confidence >= confirm_below else "confirm"
