"""Loki logger: sends structured JSON logs to Grafana Loki's HTTP push API.

Entries are buffered and flushed by a background thread, or as soon as the
buffer reaches ``_FLUSH_THRESHOLD`` entries.
"""

from __future__ import annotations

import atexit
import json
import threading
import time
from typing import Any

import requests

from envroot.services.logger.interface import LoggingInterface
from envroot.services.secrets.env_secrets import EnvSecrets
from envroot.services.secrets.interface import SecretsInterface

_DEFAULT_LOKI_URL = "http://localhost:3100"
_FLUSH_INTERVAL = 1.0  # seconds
_FLUSH_THRESHOLD = 100  # entries


class LokiLogger(LoggingInterface):
    """Structured logger that pushes to Grafana Loki via HTTP."""

    def __init__(self, secrets: SecretsInterface | None = None, start_thread: bool = True) -> None:
        secrets = secrets or EnvSecrets()
        self._base_url = secrets.get_or_default("LOKI_URL", _DEFAULT_LOKI_URL).rstrip("/")
        self._push_url = f"{self._base_url}/loki/api/v1/push"
        self._service = secrets.get_or_default("LOKI_SERVICE", "envroot")
        self._environment = secrets.get_or_default("LOKI_ENVIRONMENT", "development")

        self._buffer: list[tuple[str, int, dict[str, Any]]] = []
        self._lock = threading.Lock()
        self._closed = False

        self._thread: threading.Thread | None = None
        if start_thread:
            self._thread = threading.Thread(target=self._flush_loop, daemon=True)
            self._thread.start()
        atexit.register(self.close)

    def info(self, msg: str, **ctx: Any) -> None:
        self._append("INFO", msg, ctx)

    def warn(self, msg: str, **ctx: Any) -> None:
        self._append("WARN", msg, ctx)

    def error(self, msg: str, **ctx: Any) -> None:
        self._append("ERROR", msg, ctx)

    def debug(self, msg: str, **ctx: Any) -> None:
        self._append("DEBUG", msg, ctx)

    def close(self) -> None:
        """Flush remaining entries and stop the background thread."""
        self._closed = True
        self.flush()

    def flush(self) -> None:
        with self._lock:
            self._flush_locked()

    # ── Internal ──────────────────────────────────────────────────────────

    def _append(self, level: str, msg: str, ctx: dict[str, Any]) -> None:
        with self._lock:
            self._buffer.append((level, time.time_ns(), {"msg": msg, **ctx}))
            if len(self._buffer) >= _FLUSH_THRESHOLD:
                self._flush_locked()

    def _flush_loop(self) -> None:
        while not self._closed:
            time.sleep(_FLUSH_INTERVAL)
            self.flush()

    def _flush_locked(self) -> None:
        """Flush buffer while already holding the lock."""
        if not self._buffer:
            return

        entries = self._buffer[:]
        self._buffer.clear()

        # One Loki stream per level
        streams: dict[str, list[list[str]]] = {}
        for level, ts_ns, payload in entries:
            streams.setdefault(level, []).append([str(ts_ns), json.dumps(payload, default=str)])

        body = {
            "streams": [
                {
                    "stream": {
                        "service": self._service,
                        "environment": self._environment,
                        "level": level,
                    },
                    "values": values,
                }
                for level, values in streams.items()
            ]
        }

        try:
            requests.post(
                self._push_url,
                json=body,
                headers={"Content-Type": "application/json"},
                timeout=5,
            )
        except requests.RequestException:
            # Dropped: an unreachable Loki must not fail the caller
            pass
