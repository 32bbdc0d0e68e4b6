"""Components reporting file-system usage for a mount point."""

from __future__ import annotations

import os

from barstatus.util import ComponentError, fmt_human

__all__ = ["disk_free", "disk_perc", "disk_total", "disk_used"]


def _statvfs(path: str) -> os.statvfs_result:
    try:
        return os.statvfs(path)
    except OSError as exc:
        raise ComponentError(f"statvfs '{path}': {exc.strerror or exc}") from exc


def disk_free(path: str) -> str:
    """Return the space available to unprivileged users."""
    fs = _statvfs(path)
    return fmt_human(fs.f_frsize * fs.f_bavail, 1024)


def disk_perc(path: str) -> str:
    """Return the share of the file system in use, in percent."""
    fs = _statvfs(path)
    if not fs.f_blocks:
        raise ComponentError(f"'{path}' reports no blocks")
    return str(int(100 * (1 - fs.f_bavail / fs.f_blocks)))


def disk_total(path: str) -> str:
    """Return the total size of the file system."""
    fs = _statvfs(path)
    return fmt_human(fs.f_frsize * fs.f_blocks, 1024)


def disk_used(path: str) -> str:
    """Return the space in use on the file system."""
    fs = _statvfs(path)
    return fmt_human(fs.f_frsize * (fs.f_blocks - fs.f_bfree), 1024)