"""
Structured console logging with timing support.

Every line carries a UTC timestamp, a level symbol, the logger's
context prefix and optional ``key=value`` data.  Only counts and
persona ids belong in that data: account strings and notes are
private persona attributes and are never logged.

The minimum level comes from ``LOG_LEVEL`` and is read straight
from the environment; an unknown value means ``info``.  Logging
never raises on bad configuration.

Timers and the recent-line buffer live in ``contextvars`` so
concurrent requests do not share them.  The buffer keeps only the
last ``BUFFER_LIMIT`` lines.
"""

from __future__ import annotations

import collections
import contextvars
import os
import re
import sys
import time
from datetime import UTC, datetime
from typing import NamedTuple

BUFFER_LIMIT = 500

_timers_var: contextvars.ContextVar[dict[str, float]] = contextvars.ContextVar("_timers_var")
_buffer_var: contextvars.ContextVar[collections.deque[str]] = contextvars.ContextVar("_buffer_var")

_ANSI_RE = re.compile(r"\033\[[0-9;]*m")
_RESET = "\033[0m"
_DIM = "\033[2m"
_BOLD = "\033[1m"


class _Level(NamedTuple):
    rank: int
    colour: str
    symbol: str


_LEVELS = {
    "debug": _Level(10, "\033[90m", "•"),
    "info": _Level(20, "\033[36m", "ℹ"),
    "success": _Level(20, "\033[32m", "✓"),
    "timing": _Level(20, "\033[35m", "⏱"),
    "warn": _Level(30, "\033[33m", "⚠"),
    "error": _Level(40, "\033[31m", "✗"),
}

# Names accepted in LOG_LEVEL besides the level keys themselves.
_LEVEL_ALIASES = {"warning": "warn", "critical": "error"}


def _timers() -> dict[str, float]:
    try:
        return _timers_var.get()
    except LookupError:
        timers: dict[str, float] = {}
        _timers_var.set(timers)
        return timers


def _buffer() -> collections.deque[str]:
    try:
        return _buffer_var.get()
    except LookupError:
        buf: collections.deque[str] = collections.deque(maxlen=BUFFER_LIMIT)
        _buffer_var.set(buf)
        return buf


def get_log_buffer() -> list[str]:
    """Return the most recent lines logged in this context, ANSI-stripped."""
    return list(_buffer())


def clear_log_buffer() -> None:
    """Forget buffered lines and running timers for this context."""
    _buffer().clear()
    _timers().clear()


def configured_level() -> str:
    """Return the level named by ``LOG_LEVEL``, or ``"info"`` if unrecognised."""
    name = os.environ.get("LOG_LEVEL", "info").strip().lower()
    name = _LEVEL_ALIASES.get(name, name)
    return name if name in _LEVELS and name not in ("success", "timing") else "info"


def _render(value: object) -> str:
    if isinstance(value, (list, tuple, set, dict)):
        return f"[{len(value)} items]"
    if isinstance(value, str):
        return f'"{value}"'
    return str(value)


class Logger:
    """Structured logger bound to one context name."""

    def __init__(self, context: str) -> None:
        self._context = context

    def _emit(self, level: str, message: str, data: dict[str, object] | None = None) -> None:
        spec = _LEVELS[level]
        if spec.rank < _LEVELS[configured_level()].rank:
            return

        now = datetime.now(UTC)
        stamp = now.strftime("%H:%M:%S.") + f"{now.microsecond // 1000:03d}"
        line = f"{_DIM}[{stamp}]{_RESET} {spec.colour}{spec.symbol}{_RESET} {_BOLD}[{self._context}]{_RESET} {message}"
        if data:
            line += " " + " ".join(f"{_DIM}{key}={_RESET}{_render(value)}" for key, value in data.items())

        print(line, file=sys.stderr)
        _buffer().append(_ANSI_RE.sub("", line))

    def debug(self, message: str, data: dict[str, object] | None = None) -> None:
        self._emit("debug", message, data)

    def info(self, message: str, data: dict[str, object] | None = None) -> None:
        self._emit("info", message, data)

    def success(self, message: str, data: dict[str, object] | None = None) -> None:
        self._emit("success", message, data)

    def warn(self, message: str, data: dict[str, object] | None = None) -> None:
        self._emit("warn", message, data)

    def error(self, message: str, data: dict[str, object] | None = None) -> None:
        self._emit("error", message, data)

    def start_timer(self, label: str) -> None:
        """Start a named timer scoped to this logger's context."""
        _timers()[f"{self._context}:{label}"] = time.monotonic()

    def end_timer(self, label: str, message: str | None = None) -> float:
        """Stop a named timer, log it, and return the elapsed milliseconds."""
        started = _timers().pop(f"{self._context}:{label}", None)
        if started is None:
            self.warn(f'Timer "{label}" was not started')
            return 0.0
        elapsed_ms = (time.monotonic() - started) * 1000
        self._emit("timing", message or f"Completed: {label}", {"ms": round(elapsed_ms, 1)})
        return elapsed_ms

    def section(self, title: str) -> None:
        """Log a banner line, e.g. at server start."""
        self._emit("info", f"{'─' * 8} {title} {'─' * 8}")


def create_logger(context: str) -> Logger:
    """Create a logger for a specific module."""
    return Logger(context)
