"""Battery components backed by the kernel's power-supply class in sysfs."""

from __future__ import annotations

import os
import re

from barstatus.util import ComponentError, read_first_line, read_int

__all__ = ["battery_perc", "battery_state", "battery_remaining"]

POWER_SUPPLY_DIR = "/sys/class/power_supply"

_STATE_SYMBOLS = {
    "Charging": "+",
    "Discharging": "-",
    "Full": "o",
    "Not charging": "o",
}

_STATE_WORD = re.compile(r"[a-zA-Z ]{1,12}")


def _supply_path(bat: str, name: str) -> str:
    return os.path.join(POWER_SUPPLY_DIR, bat, name)


def _pick(bat: str, *names: str) -> str:
    """Return the path of the first readable file among ``names``."""
    for name in names:
        path = _supply_path(bat, name)
        if os.access(path, os.R_OK):
            return path
    raise ComponentError(f"battery '{bat}': none of {', '.join(names)} is readable")


def _read_state(bat: str) -> str:
    path = _supply_path(bat, "status")
    match = _STATE_WORD.match(read_first_line(path))
    if match is None:
        raise ComponentError(f"'{path}': no charging state found")
    return match.group(0)


def battery_perc(bat: str) -> str:
    """Return the battery's remaining capacity in percent."""
    return str(read_int(_supply_path(bat, "capacity")))


def battery_state(bat: str) -> str:
    """Return '+' while charging, '-' while discharging, 'o' when full, else '?'."""
    return _STATE_SYMBOLS.get(_read_state(bat), "?")


def battery_remaining(bat: str) -> str:
    """Return the time left while discharging as 'Hh Mm', or '' otherwise."""
    state = _read_state(bat)
    charge_now = read_int(_pick(bat, "charge_now", "energy_now"))

    if state != "Discharging":
        return ""

    current_now = read_int(_pick(bat, "current_now", "power_now"))
    if current_now == 0:
        raise ComponentError(f"battery '{bat}': discharge rate is zero")

    timeleft = charge_now / current_now
    hours = int(timeleft)
    minutes = int((timeleft - hours) * 60)
    return f"{hours}h {minutes}m"