"""Components describing the host and the current user."""

from __future__ import annotations

import os
import pwd
import socket
import sys
import time

from barstatus.util import ComponentError, read_int

__all__ = [
    "hostname",
    "kernel_release",
    "load_avg",
    "uptime",
    "gid",
    "uid",
    "username",
    "entropy",
    "datetime",
]

ENTROPY_AVAIL = "/proc/sys/kernel/random/entropy_avail"
INFINITY = "\u221e"
_MAX_OUTPUT = 1024

_UPTIME_CLOCK = next(
    clock
    for clock in (
        getattr(time, "CLOCK_BOOTTIME", None),
        getattr(time, "CLOCK_UPTIME", None),
        getattr(time, "CLOCK_MONOTONIC", None),
    )
    if clock is not None
)


def hostname(arg: str | None = None) -> str:
    """Return the host name."""
    try:
        return socket.gethostname()
    except OSError as exc:
        raise ComponentError(f"gethostname: {exc}") from exc


def kernel_release(arg: str | None = None) -> str:
    """Return the kernel release, as ``uname -r`` prints it."""
    try:
        return os.uname().release
    except OSError as exc:
        raise ComponentError(f"uname: {exc}") from exc


def load_avg(arg: str | None = None) -> str:
    """Return the 1, 5 and 15 minute load averages."""
    try:
        one, five, fifteen = os.getloadavg()
    except OSError as exc:
        raise ComponentError("getloadavg: Failed to obtain load average") from exc
    return f"{one:.2f} {five:.2f} {fifteen:.2f}"


def uptime(arg: str | None = None) -> str:
    """Return the system uptime as hours and minutes."""
    try:
        seconds = int(time.clock_gettime(_UPTIME_CLOCK))
    except OSError as exc:
        raise ComponentError(f"clock_gettime {_UPTIME_CLOCK}: {exc}") from exc
    hours, rest = divmod(seconds, 3600)
    return f"{hours}h {rest // 60}m"


def gid(arg: str | None = None) -> str:
    """Return the real group id of the current process."""
    return str(os.getgid())


def uid(arg: str | None = None) -> str:
    """Return the effective user id of the current process."""
    return str(os.geteuid())


def username(arg: str | None = None) -> str:
    """Return the name of the effective user."""
    euid = os.geteuid()
    try:
        return pwd.getpwuid(euid).pw_name
    except KeyError as exc:
        raise ComponentError(f"getpwuid '{euid}': no such user") from exc


def entropy(arg: str | None = None) -> str:
    """Return the available kernel entropy; BSD systems report infinity."""
    if sys.platform.startswith(("openbsd", "freebsd")):
        return INFINITY
    return str(read_int(ENTROPY_AVAIL))


def datetime(fmt: str) -> str:
    """Return the local time formatted with ``fmt`` (strftime syntax)."""
    result = time.strftime(fmt, time.localtime())
    if not result or len(result) >= _MAX_OUTPUT:
        raise ComponentError("strftime: Result string exceeds buffer size")
    return result