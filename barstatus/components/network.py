"""Network interface components: addresses, link state and throughput."""

from __future__ import annotations

import socket

import psutil

from barstatus.util import ComponentError, fmt_human, read_int

__all__ = ["NetSpeed", "ipv4", "ipv6", "up", "netspeed_rx", "netspeed_tx"]

# Byte counters kept by the kernel for each interface and direction.
NET_BYTES = "/sys/class/net/{interface}/statistics/{direction}_bytes"

# Update interval the throughput is averaged over.
DEFAULT_INTERVAL_MS = 1000

_DIRECTIONS = ("rx", "tx")


def _address(interface: str, family: socket.AddressFamily) -> str:
    try:
        table = psutil.net_if_addrs()
    except OSError as exc:
        raise ComponentError(f"getifaddrs: {exc}") from exc
    for entry in table.get(interface, ()):
        if entry.family == family:
            return entry.address
    raise ComponentError(f"interface '{interface}' has no {family.name} address")


def ipv4(interface: str) -> str:
    """Return the first IPv4 address of ``interface``."""
    return _address(interface, socket.AF_INET)


def ipv6(interface: str) -> str:
    """Return the first IPv6 address of ``interface``."""
    return _address(interface, socket.AF_INET6)


def up(interface: str) -> str:
    """Return 'up' or 'down' depending on the state of ``interface``."""
    try:
        stats = psutil.net_if_stats()
    except OSError as exc:
        raise ComponentError(f"getifaddrs: {exc}") from exc
    try:
        entry = stats[interface]
    except KeyError:
        raise ComponentError(f"interface '{interface}' not found") from None
    return "up" if entry.isup else "down"


class NetSpeed:
    """Turns successive readings of an interface byte counter into a rate."""

    def __init__(self, direction: str, interval_ms: int = DEFAULT_INTERVAL_MS) -> None:
        if direction not in _DIRECTIONS:
            raise ValueError(f"direction must be one of {_DIRECTIONS}, not {direction!r}")
        if interval_ms <= 0:
            raise ValueError("interval_ms must be positive")
        self.direction = direction
        self.interval_ms = interval_ms
        self._bytes = 0

    def sample(self, interface: str) -> str:
        """Read the counter and return bytes per second since the last reading.

        The first reading only records the counter and raises ComponentError.
        """
        path = NET_BYTES.format(interface=interface, direction=self.direction)
        current = read_int(path)
        previous, self._bytes = self._bytes, current

        if previous == 0:
            raise ComponentError(f"{self.direction} speed: no previous sample")
        if current < previous:
            raise ComponentError(f"{self.direction} speed: counter went backwards")
        return fmt_human((current - previous) * 1000 // self.interval_ms, 1024)


_rx = NetSpeed("rx")
_tx = NetSpeed("tx")


def netspeed_rx(interface: str) -> str:
    """Return the receive rate of ``interface``."""
    return _rx.sample(interface)


def netspeed_tx(interface: str) -> str:
    """Return the transmit rate of ``interface``."""
    return _tx.sample(interface)