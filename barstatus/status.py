"""The status loop: build the status line and show it on stdout or the X root window."""

from __future__ import annotations

import os
import select
import signal
import subprocess
import sys
import time
from dataclasses import dataclass
from typing import Optional, Sequence

from barstatus.config import Config, personal_config
from barstatus.util import ComponentError, warn

__all__ = ["Options", "UsageError", "parse_args", "build_status", "main"]

PROG = "barstatus"
VERSION = "1.1"
USAGE = f"usage: {PROG} [-v] [-s] [-1]"


class UsageError(Exception):
    """Raised when the command line cannot be understood."""


class _Fatal(Exception):
    """An error that ends the program."""


@dataclass(frozen=True)
class Options:
    """What the command line asked for."""

    stdout: bool = False
    once: bool = False
    version: bool = False


def parse_args(argv: Sequence[str]) -> Options:
    """Parse the flags -v, -s and -1; clustered flags and '--' are understood."""
    stdout = once = False
    args = list(argv)
    while args and args[0].startswith("-") and len(args[0]) > 1:
        flag_arg = args.pop(0)
        if flag_arg == "--":
            break
        for flag in flag_arg[1:]:
            if flag == "v":
                return Options(stdout=stdout, once=once, version=True)
            if flag == "1":
                once = stdout = True
            elif flag == "s":
                stdout = True
            else:
                raise UsageError(USAGE)
    if args:
        raise UsageError(USAGE)
    return Options(stdout=stdout, once=once)


def build_status(config: Config) -> str:
    """Run every configured component and join the formatted results."""
    parts: list[str] = []
    length = 0
    for entry in config.args:
        try:
            value = entry.func(entry.arg)
        except (ComponentError, OSError, ValueError) as exc:
            warn(str(exc))
            value = None
        piece = entry.format(config.unknown_str if value is None else value)
        size = len(piece.encode("utf-8"))
        if size >= config.maxlen - length:
            warn("vsnprintf: Output truncated")
            break
        parts.append(piece)
        length += size
    return "".join(parts)


class _Signals:
    """Stops the loop on SIGINT/SIGTERM and cuts the sleep short on SIGUSR1."""

    def __init__(self) -> None:
        self.done = False
        self._read_fd = self._write_fd = -1
        self._saved: dict[int, object] = {}
        self._saved_wakeup = -1

    def _stop(self, signum: int, frame: object) -> None:
        self.done = True

    def _wake(self, signum: int, frame: object) -> None:
        pass

    def __enter__(self) -> "_Signals":
        self._read_fd, self._write_fd = os.pipe()
        os.set_blocking(self._read_fd, False)
        os.set_blocking(self._write_fd, False)
        for signum, handler in (
            (signal.SIGINT, self._stop),
            (signal.SIGTERM, self._stop),
            (signal.SIGUSR1, self._wake),
        ):
            self._saved[signum] = signal.signal(signum, handler)
        self._saved_wakeup = signal.set_wakeup_fd(self._write_fd)
        return self

    def wait(self, seconds: float) -> None:
        """Sleep up to ``seconds``, returning early when a signal arrives."""
        try:
            ready, _, _ = select.select([self._read_fd], [], [], seconds)
        except InterruptedError:
            return
        if ready:
            try:
                while os.read(self._read_fd, 512):
                    pass
            except BlockingIOError:
                pass

    def __exit__(self, *exc_info: object) -> None:
        signal.set_wakeup_fd(self._saved_wakeup)
        for signum, handler in self._saved.items():
            signal.signal(signum, handler)
        os.close(self._read_fd)
        os.close(self._write_fd)


class _RootWindow:
    """Sets the name of the X root window, which bars display as status text."""

    @classmethod
    def open(cls) -> "_RootWindow":
        if not os.environ.get("DISPLAY"):
            raise _Fatal("XOpenDisplay: Failed to open display")
        return cls()

    def store_name(self, name: str, *, strict: bool = True) -> None:
        try:
            result = subprocess.run(["xsetroot", "-name", name], check=False)
        except OSError as exc:
            if strict:
                raise _Fatal(f"XStoreName: {exc}") from exc
            return
        if strict and result.returncode != 0:
            raise _Fatal("XStoreName: Failed to set the root window name")


def _emit(status: str) -> None:
    try:
        print(status, flush=True)
    except OSError as exc:
        raise _Fatal(f"puts: {exc}") from exc


def _run(options: Options, config: Config) -> int:
    display: Optional[_RootWindow] = None if options.stdout else _RootWindow.open()
    with _Signals() as signals:
        while True:
            start = time.monotonic()
            status = build_status(config)
            if display is None:
                _emit(status)
            else:
                display.store_name(status)

            if options.once or signals.done:
                break
            remaining = config.interval / 1000 - (time.monotonic() - start)
            if remaining >= 0:
                signals.wait(remaining)
            if signals.done:
                break
    if display is not None:
        display.store_name("", strict=False)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the status loop; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        options = parse_args(args)
    except UsageError as exc:
        print(exc, file=sys.stderr)
        return 1
    if options.version:
        print(f"{PROG}-{VERSION}", file=sys.stderr)
        return 1
    try:
        return _run(options, personal_config())
    except _Fatal as exc:
        print(exc, file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())