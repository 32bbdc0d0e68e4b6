"""Components that read files, count directory entries or run commands."""

from __future__ import annotations

import os
import subprocess

from barstatus.util import MAX_LINE, ComponentError, read_first_line

__all__ = ["cat", "num_files", "run_command"]


def cat(path: str) -> str:
    """Return the first line of the file at ``path``."""
    line = read_first_line(path)
    if not line:
        raise ComponentError(f"'{path}' is empty")
    return line


def num_files(path: str) -> str:
    """Return how many entries the directory ``path`` holds."""
    try:
        with os.scandir(path) as entries:
            count = sum(1 for _ in entries)
    except OSError as exc:
        raise ComponentError(f"opendir '{path}': {exc.strerror or exc}") from exc
    return str(count)


def run_command(cmd: str) -> str:
    """Run ``cmd`` through the shell and return the first line it prints."""
    try:
        process = subprocess.Popen(cmd, shell=True, stdout=subprocess.PIPE)
    except OSError as exc:
        raise ComponentError(f"popen '{cmd}': {exc}") from exc

    assert process.stdout is not None
    try:
        raw = process.stdout.readline(MAX_LINE)
    finally:
        process.stdout.close()
        process.wait()

    line = raw.decode("utf-8", errors="replace")
    if line.endswith("\n"):
        line = line[:-1]
    if not line:
        raise ComponentError(f"'{cmd}' printed nothing")
    return line