"""Volume component reading the master level of an OSS mixer device."""

from __future__ import annotations

import fcntl
import os
import struct

from barstatus.util import ComponentError

__all__ = ["vol_perc"]

SOUND_DEVICE_NAMES = (
    "vol", "bass", "treble", "synth", "pcm", "speaker", "line", "mic",
    "cd", "mix", "pcm2", "rec", "igain", "ogain", "line1", "line2",
    "line3", "dig1", "dig2", "dig3", "phin", "phout", "video", "radio",
    "monitor",
)

_INT = struct.Struct("=i")


def _mixer_read(number: int) -> int:
    """Request code that reads one int from mixer control ``number``."""
    return (2 << 30) | (_INT.size << 16) | (ord("M") << 8) | number


SOUND_MIXER_READ_DEVMASK = _mixer_read(254)


def _ioctl_int(fd: int, request: int, label: str) -> int:
    try:
        reply = fcntl.ioctl(fd, request, bytes(_INT.size))
    except OSError as exc:
        raise ComponentError(f"ioctl '{label}': {exc.strerror or exc}") from exc
    return _INT.unpack(reply[: _INT.size])[0]


def vol_perc(card: str) -> str:
    """Return the master volume of the mixer device ``card``, in percent."""
    try:
        fd = os.open(card, os.O_RDONLY | os.O_NONBLOCK)
    except OSError as exc:
        raise ComponentError(f"open '{card}': {exc.strerror or exc}") from exc

    level = None
    try:
        devmask = _ioctl_int(fd, SOUND_MIXER_READ_DEVMASK, "SOUND_MIXER_READ_DEVMASK")
        for number, name in enumerate(SOUND_DEVICE_NAMES):
            if devmask & (1 << number) and name == "vol":
                level = _ioctl_int(fd, _mixer_read(number), f"MIXER_READ({number})")
    finally:
        os.close(fd)

    if level is None:
        raise ComponentError(f"'{card}': mixer has no 'vol' control")
    return str(level & 0xFF)