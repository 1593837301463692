#!/usr/bin/env python3
from __future__ import annotations

import sys

from rich.console import Console
from rich.theme import Theme


def isatty(stream, fallback) -> bool:
    if stream is not None:
        try:
            return bool(stream.isatty())
        except (OSError, ValueError, AttributeError):
            return False
    return bool(getattr(fallback, "isatty", lambda: False)())


THEME = Theme(
    {
        "accent": "cyan",
        "success": "green",
        "warning": "yellow",
        "error": "red",
        "muted": "dim",
    }
)


def _build_console(*, stderr: bool) -> Console:
    raw = sys.__stderr__ if stderr else sys.__stdout__
    fallback = sys.stderr if stderr else sys.stdout
    return Console(stderr=stderr, theme=THEME, force_terminal=isatty(raw, fallback))


console = _build_console(stderr=False)
console_err = _build_console(stderr=True)


def _warn(message: str, *, quiet: bool) -> None:
    if quiet:
        return
    console_err.print(f"[warning]Warning:[/warning] {message}")
