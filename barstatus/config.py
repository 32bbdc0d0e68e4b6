"""Status bar configuration: which components to show, how, and how often."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Optional

from barstatus.components import battery, cpu, disk, files, memory, network
from barstatus.components import system, temperature, volume, wifi
from barstatus.themes import get_theme

__all__ = [
    "Arg",
    "Config",
    "COMPONENTS",
    "component",
    "default_config",
    "personal_config",
]

ComponentFunc = Callable[[Optional[str]], str]

COMPONENTS: dict[str, ComponentFunc] = {
    "battery_perc": battery.battery_perc,
    "battery_remaining": battery.battery_remaining,
    "battery_state": battery.battery_state,
    "cat": files.cat,
    "cpu_freq": cpu.cpu_freq,
    "cpu_perc": cpu.cpu_perc,
    "datetime": system.datetime,
    "disk_free": disk.disk_free,
    "disk_perc": disk.disk_perc,
    "disk_total": disk.disk_total,
    "disk_used": disk.disk_used,
    "entropy": system.entropy,
    "gid": system.gid,
    "hostname": system.hostname,
    "ipv4": network.ipv4,
    "ipv6": network.ipv6,
    "kernel_release": system.kernel_release,
    "load_avg": system.load_avg,
    "netspeed_rx": network.netspeed_rx,
    "netspeed_tx": network.netspeed_tx,
    "num_files": files.num_files,
    "ram_free": memory.ram_free,
    "ram_perc": memory.ram_perc,
    "ram_total": memory.ram_total,
    "ram_used": memory.ram_used,
    "run_command": files.run_command,
    "swap_free": memory.swap_free,
    "swap_perc": memory.swap_perc,
    "swap_total": memory.swap_total,
    "swap_used": memory.swap_used,
    "temp": temperature.temp,
    "uid": system.uid,
    "up": network.up,
    "uptime": system.uptime,
    "username": system.username,
    "vol_perc": volume.vol_perc,
    "wifi_essid": wifi.wifi_essid,
    "wifi_perc": wifi.wifi_perc,
}

_CONVERSION = re.compile(r"%(.?)", re.DOTALL)


def component(name: str) -> ComponentFunc:
    """Return the component function called ``name``."""
    try:
        return COMPONENTS[name]
    except KeyError:
        raise ValueError(f"unknown component {name!r}") from None


@dataclass(frozen=True)
class Arg:
    """One status entry: a component, the format its value goes into, and its argument.

    The format understands ``%s`` for the value and ``%%`` for a literal percent sign.
    """

    func: ComponentFunc
    fmt: str
    arg: Optional[str] = None

    def __post_init__(self) -> None:
        if not callable(self.func):
            raise TypeError("func must be callable")
        self.format("")

    def format(self, value: str) -> str:
        """Return the format with ``value`` put in place of each ``%s``."""

        def replace(match: re.Match[str]) -> str:
            spec = match.group(1)
            if spec == "s":
                return value
            if spec == "%":
                return "%"
            raise ValueError(f"unsupported conversion '%{spec}' in {self.fmt!r}")

        return _CONVERSION.sub(replace, self.fmt)


@dataclass(frozen=True)
class Config:
    """Everything the status loop needs to know."""

    args: tuple[Arg, ...]
    interval: int = 1000
    unknown_str: str = "n/a"
    maxlen: int = 2048
    colors: Optional[tuple[str, str]] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "args", tuple(self.args))
        if self.interval <= 0:
            raise ValueError("interval must be positive")
        if self.maxlen <= 0:
            raise ValueError("maxlen must be positive")


def default_config() -> Config:
    """Return the stock configuration: just the date and time."""
    return Config(
        args=(Arg(system.datetime, "%s", "%F %T"),),
        interval=1000,
        unknown_str="n/a",
        maxlen=2048,
    )


VOLUME_COMMAND = (
    "pactl list sinks | grep 'Volume:' | head -n1 | awk '{print $5}' | tr -d '%'"
)


def personal_config() -> Config:
    """Return the themed configuration with battery, wifi, disk, cpu, ram and volume."""
    return Config(
        args=(
            Arg(battery.battery_perc, " BAT %s%% | ", "BAT0"),
            Arg(wifi.wifi_perc, " WIFi %s%% | ", "wlp58s0"),
            Arg(disk.disk_perc, " SDD %s%% | ", "/"),
            Arg(cpu.cpu_perc, " CPU %s%% | ", None),
            Arg(memory.ram_perc, " RAM %s%% | ", None),
            Arg(files.run_command, " VOL %s%% | ", VOLUME_COMMAND),
            Arg(system.datetime, " %s ", "%Y-%m-%d %H:%M"),
        ),
        interval=1000,
        unknown_str="--",
        maxlen=2048,
        colors=get_theme().status_colors,
    )