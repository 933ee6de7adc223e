from abc import ABC, abstractmethod


class SecretsInterface(ABC):
    """Read access to runtime settings (LOG_IMPL, LOG_LEVEL, LOKI_*)."""

    @abstractmethod
    def get_or_default(self, key: str, default: str) -> str: ...
