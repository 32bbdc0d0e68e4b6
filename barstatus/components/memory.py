"""RAM and swap components backed by /proc/meminfo."""

from __future__ import annotations

from typing import NamedTuple

from barstatus.util import ComponentError, fmt_human, meminfo_field

__all__ = [
    "SwapInfo",
    "read_swap_info",
    "ram_free",
    "ram_perc",
    "ram_total",
    "ram_used",
    "swap_free",
    "swap_perc",
    "swap_total",
    "swap_used",
]

MEMINFO = "/proc/meminfo"


class SwapInfo(NamedTuple):
    """Swap figures in kB."""

    total: int
    free: int
    cached: int

    @property
    def used(self) -> int:
        return self.total - self.free - self.cached


def _read(path: str) -> str:
    try:
        with open(path, encoding="utf-8") as handle:
            return handle.read()
    except OSError as exc:
        raise ComponentError(f"fopen '{path}': {exc.strerror or exc}") from exc


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


def _ram_used_kb(text: str) -> tuple[int, int]:
    total = meminfo_field(text, "MemTotal:")
    free = meminfo_field(text, "MemFree:")
    buffers = meminfo_field(text, "Buffers:")
    cached = meminfo_field(text, "Cached:")
    shmem = meminfo_field(text, "Shmem:")
    sreclaimable = meminfo_field(text, "SReclaimable:")
    return total, total - free - buffers - cached - sreclaimable + shmem


def ram_free(arg: str | None = None) -> str:
    """Return free memory."""
    free = meminfo_field(_read(MEMINFO), "MemFree:")
    return fmt_human(free * 1024, 1024)


def ram_perc(arg: str | None = None) -> str:
    """Return memory in use, in percent."""
    total, used = _ram_used_kb(_read(MEMINFO))
    if total == 0:
        raise ComponentError("MemTotal is zero")
    return str(_trunc_div(100 * used, total))


def ram_total(arg: str | None = None) -> str:
    """Return total memory; MemTotal must be the file's first line."""
    first = _read(MEMINFO).split("\n", 1)[0]
    total = meminfo_field(first, "MemTotal:")
    return fmt_human(total * 1024, 1024)


def ram_used(arg: str | None = None) -> str:
    """Return memory in use, not counting buffers and reclaimable caches."""
    _, used = _ram_used_kb(_read(MEMINFO))
    return fmt_human(used * 1024, 1024)


def read_swap_info(path: str) -> SwapInfo:
    """Read SwapTotal, SwapFree and SwapCached from a meminfo file."""
    text = _read(path)
    return SwapInfo(
        total=meminfo_field(text, "SwapTotal:"),
        free=meminfo_field(text, "SwapFree:"),
        cached=meminfo_field(text, "SwapCached:"),
    )


def swap_free(arg: str | None = None) -> str:
    """Return free swap."""
    return fmt_human(read_swap_info(MEMINFO).free * 1024, 1024)


def swap_perc(arg: str | None = None) -> str:
    """Return swap in use, in percent."""
    info = read_swap_info(MEMINFO)
    if info.total == 0:
        raise ComponentError("SwapTotal is zero")
    return str(_trunc_div(100 * info.used, info.total))


def swap_total(arg: str | None = None) -> str:
    """Return total swap."""
    return fmt_human(read_swap_info(MEMINFO).total * 1024, 1024)


def swap_used(arg: str | None = None) -> str:
    """Return swap in use."""
    return fmt_human(read_swap_info(MEMINFO).used * 1024, 1024)