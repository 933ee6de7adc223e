from __future__ import annotations

import os

from envroot.services.secrets.interface import SecretsInterface


class EnvSecrets(SecretsInterface):
    """Settings snapshot of the process environment; ``overrides`` win.

    The snapshot is taken at construction, so later changes to
    ``os.environ`` are not seen.
    """

    def __init__(self, overrides: dict[str, str] | None = None) -> None:
        self._values = {**os.environ, **(overrides or {})}

    def get_or_default(self, key: str, default: str) -> str:
        return self._values.get(key, default)
