"""Error types raised by the .env parser.

Callers only ever see two failure kinds: ``InvalidRootDirectory`` when the
parser is constructed and ``CannotParseEnvFile`` when ``parse()`` runs.
Whatever went wrong underneath is attached as ``__cause__``.
"""

from __future__ import annotations

from enum import Enum


class ParseFailure(str, Enum):
    NOT_FOUND = "not_found"
    PERMISSION_DENIED = "permission_denied"
    READ_ERROR = "read_error"
    UNEXPECTED = "unexpected"


class EnvRootError(Exception):
    """Base class for every error raised by envroot."""


class InvalidRootDirectory(EnvRootError, ValueError):
    """The root path does not resolve to an existing directory."""

    def __init__(self, root: str) -> None:
        self.root = root
        super().__init__(f'The provided root directory "{root}" is not a valid directory.')


class CannotParseEnvFile(EnvRootError):
    """The .env file is missing, unreadable or could not be parsed."""

    def __init__(self, message: str, kind: ParseFailure, path: str | None = None) -> None:
        self.kind = kind
        self.path = path
        super().__init__(message)
