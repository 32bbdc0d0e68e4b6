"""Temperature component reading a sysfs thermal sensor."""

from __future__ import annotations

from barstatus.util import read_int

__all__ = ["temp"]


def temp(file: str) -> str:
    """Return the temperature in whole degrees Celsius from a millidegree sensor file."""
    return str(read_int(file) // 1000)