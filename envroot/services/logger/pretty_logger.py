from __future__ import annotations

import sys
from datetime import datetime, timezone
from typing import Any, TextIO

from envroot.services.logger.interface import LoggingInterface
from envroot.services.secrets.interface import SecretsInterface

LEVELS = ("DEBUG", "INFO", "WARN", "ERROR")

_COLORS = {
    "DEBUG": "\033[36m",  # cyan
    "INFO": "\033[32m",   # green
    "WARN": "\033[33m",   # yellow
    "ERROR": "\033[31m",  # red
}
_RESET = "\033[0m"


class PrettyLogger(LoggingInterface):
    """Colorized one-line-per-entry logger for terminals.

    Entries below ``LOG_LEVEL`` (default ``INFO``) are dropped, so a CLI run
    only shows the parse summary when asked for ``DEBUG``.
    """

    def __init__(self, secrets: SecretsInterface | None = None, stream: TextIO | None = None) -> None:
        level = secrets.get_or_default("LOG_LEVEL", "INFO").upper() if secrets else "INFO"
        if level not in LEVELS:
            raise ValueError(f"Unknown LOG_LEVEL: '{level}' (available: {', '.join(LEVELS)})")
        self._threshold = LEVELS.index(level)
        self._stream = stream

    def info(self, msg: str, **ctx: Any) -> None:
        self._emit("INFO", msg, ctx)

    def warn(self, msg: str, **ctx: Any) -> None:
        self._emit("WARN", msg, ctx)

    def error(self, msg: str, **ctx: Any) -> None:
        self._emit("ERROR", msg, ctx)

    def debug(self, msg: str, **ctx: Any) -> None:
        self._emit("DEBUG", msg, ctx)

    def _emit(self, level: str, msg: str, ctx: dict[str, Any]) -> None:
        if LEVELS.index(level) < self._threshold:
            return
        ts = datetime.now(timezone.utc).strftime("%H:%M:%S")
        fields = " ".join(f"{key}={value}" for key, value in ctx.items())
        line = f"{_COLORS[level]}{ts} [{level}]{_RESET} {msg}"
        if fields:
            line = f"{line}  {fields}"
        print(line, file=self._stream or sys.stderr)
