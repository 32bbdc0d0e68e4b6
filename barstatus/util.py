"""Shared helpers for status components: errors, warnings, formatting and file reading."""

from __future__ import annotations

import re
import sys

__all__ = [
    "ComponentError",
    "warn",
    "fmt_human",
    "read_first_line",
    "read_int",
    "meminfo_field",
]

# Longest line a component reads from a file or command output.
MAX_LINE = 1022

_PREFIXES = {
    1000: ("", "k", "M", "G", "T", "P", "E", "Z", "Y"),
    1024: ("", "Ki", "Mi", "Gi", "Ti", "Pi", "Ei", "Zi", "Yi"),
}

_LEADING_UINT = re.compile(r"\s*(\d+)")


class ComponentError(Exception):
    """Raised when a component cannot produce a value."""


def warn(message: str) -> None:
    """Print a warning to stderr.

    A message ending in ':' is followed by the exception currently being
    handled, if there is one.
    """
    if message.endswith(":"):
        current = sys.exc_info()[1]
        if current is not None:
            message = f"{message} {current}"
    print(message, file=sys.stderr)


def fmt_human(num: int | float, base: int) -> str:
    """Scale ``num`` by ``base`` and return it with one decimal and a unit prefix."""
    try:
        prefixes = _PREFIXES[base]
    except KeyError:
        raise ValueError(f"fmt_human: Invalid base {base!r}") from None

    scaled = float(num)
    prefix = prefixes[0]
    for prefix in prefixes:
        if scaled < base or prefix == prefixes[-1]:
            break
        scaled /= base
    return f"{scaled:.1f} {prefix}"


def read_first_line(path: str) -> str:
    """Return the first line of a text file without its trailing newline."""
    try:
        with open(path, encoding="utf-8", errors="replace", newline="") as handle:
            line = handle.readline(MAX_LINE)
    except OSError as exc:
        raise ComponentError(f"fopen '{path}': {exc.strerror or exc}") from exc
    return line.rstrip("\n") if line.endswith("\n") else line


def read_int(path: str) -> int:
    """Return the unsigned integer a file starts with."""
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            text = handle.read(4096)
    except OSError as exc:
        raise ComponentError(f"fopen '{path}': {exc.strerror or exc}") from exc
    match = _LEADING_UINT.match(text)
    if match is None:
        raise ComponentError(f"'{path}': no integer found")
    return int(match.group(1))


def meminfo_field(text: str, key: str) -> int:
    """Return the number after ``key`` on the first line that starts with it."""
    for line in text.splitlines():
        if line.startswith(key):
            match = _LEADING_UINT.match(line[len(key):])
            if match is None:
                raise ComponentError(f"malformed value for {key!r}")
            return int(match.group(1))
    raise ComponentError(f"{key!r} not found")