"""CPU frequency and usage components."""

from __future__ import annotations

from barstatus.util import ComponentError, fmt_human, read_int

__all__ = ["CpuUsage", "cpu_freq", "cpu_perc"]

CPU_FREQ = "/sys/devices/system/cpu/cpu0/cpufreq/scaling_cur_freq"
PROC_STAT = "/proc/stat"

# user nice system idle iowait irq softirq
_FIELDS = 7
_BUSY = (0, 1, 2, 5, 6)


class CpuUsage:
    """Tracks the aggregate CPU counters between two readings of a stat file."""

    def __init__(self, stat_path: str = PROC_STAT) -> None:
        self.stat_path = stat_path
        self._previous: tuple[float, ...] | None = None

    def _read(self) -> tuple[float, ...]:
        try:
            with open(self.stat_path, encoding="utf-8") as handle:
                tokens = handle.read(4096).split()
        except OSError as exc:
            raise ComponentError(
                f"fopen '{self.stat_path}': {exc.strerror or exc}"
            ) from exc
        try:
            values = tuple(float(token) for token in tokens[1 : 1 + _FIELDS])
        except ValueError as exc:
            raise ComponentError(f"'{self.stat_path}': malformed counters") from exc
        if len(values) != _FIELDS:
            raise ComponentError(f"'{self.stat_path}': too few counters")
        return values

    def perc(self) -> str:
        """Return the busy share since the previous call, in percent.

        The first call only records a sample and raises ComponentError.
        """
        current = self._read()
        previous, self._previous = self._previous, current

        if previous is None or previous[0] == 0:
            raise ComponentError("cpu usage: no previous sample")

        total = sum(current) - sum(previous)
        if total == 0:
            raise ComponentError("cpu usage: counters did not change")

        busy = sum(current[i] for i in _BUSY) - sum(previous[i] for i in _BUSY)
        return str(int(100 * busy / total))


_usages: dict[str, CpuUsage] = {}


def cpu_freq(arg: str | None = None) -> str:
    """Return the current frequency of the first CPU."""
    khz = read_int(CPU_FREQ)
    return fmt_human(khz * 1000, 1000)


def cpu_perc(arg: str | None = None) -> str:
    """Return CPU usage in percent since the previous call."""
    usage = _usages.setdefault(PROC_STAT, CpuUsage(PROC_STAT))
    return usage.perc()