from __future__ import annotations

import importlib

from envroot.services.logger.interface import LoggingInterface
from envroot.services.secrets.env_secrets import EnvSecrets
from envroot.services.secrets.interface import SecretsInterface

# Dotted paths so that requests is only imported when Loki is selected
_REGISTRY: dict[str, str] = {
    "pretty": "envroot.services.logger.pretty_logger.PrettyLogger",
    "memory": "envroot.services.logger.memory_logger.MemoryLogger",
    "loki": "envroot.services.logger.loki_logger.LokiLogger",
}

# Implementations configured from LOG_LEVEL / LOKI_* settings
_CONFIGURED = {"pretty", "loki"}


def _resolve_class(dotted_path: str) -> type[LoggingInterface]:
    module_path, class_name = dotted_path.rsplit(".", 1)
    return getattr(importlib.import_module(module_path), class_name)


class LoggerFactory:
    """Creates and caches one logger per implementation name.

    Settings for the configurable loggers come from *secrets*, so ``--env``
    overrides on the command line reach them.
    """

    def __init__(self, default_impl: str = "pretty", secrets: SecretsInterface | None = None) -> None:
        self._check(default_impl)
        self._default_impl = default_impl
        self._secrets = secrets or EnvSecrets()
        self._instances: dict[str, LoggingInterface] = {}

    @staticmethod
    def _check(name: str) -> None:
        if name not in _REGISTRY:
            raise ValueError(
                f"Unknown logger implementation: '{name}' "
                f"(available: {', '.join(_REGISTRY)})"
            )

    def create(self, impl_name: str | None = None) -> LoggingInterface:
        """Return a logger instance, creating one if not yet cached."""
        name = impl_name or self._default_impl
        if name not in self._instances:
            self._check(name)
            cls = _resolve_class(_REGISTRY[name])
            self._instances[name] = cls(self._secrets) if name in _CONFIGURED else cls()
        return self._instances[name]

    def close(self) -> None:
        """Flush and close every created logger that buffers output."""
        for instance in self._instances.values():
            close = getattr(instance, "close", None)
            if close is not None:
                close()
