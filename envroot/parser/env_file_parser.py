"""Reads ``<root>/.env`` and returns its entries plus ``ROOT_PATH``."""

from __future__ import annotations

import os
from typing import NoReturn

from envroot.parser.errors import CannotParseEnvFile, InvalidRootDirectory, ParseFailure
from envroot.parser.lines import parse_contents
from envroot.services.filesystem.interface import RootFileSystemInterface
from envroot.services.filesystem.local_filesystem import LocalFileSystem
from envroot.services.logger.interface import LoggingInterface
from envroot.services.logger.memory_logger import MemoryLogger

ENV_FILENAME = ".env"
ROOT_PATH_KEY = "ROOT_PATH"


class EnvFileParser:
    """Parses the .env file of a single, validated root directory.

    The root is canonicalized once at construction; every ``parse()`` call
    re-reads the file and returns a new dict.
    """

    def __init__(
        self,
        root: str,
        fs: RootFileSystemInterface | None = None,
        logger: LoggingInterface | None = None,
    ) -> None:
        self._fs = fs or LocalFileSystem()
        self._log = logger or MemoryLogger()

        try:
            resolved = self._fs.resolve(root)
            is_dir = self._fs.is_dir(resolved)
        except (OSError, RuntimeError, ValueError) as exc:
            raise InvalidRootDirectory(root) from exc
        if not is_dir:
            raise InvalidRootDirectory(root)

        # Filesystem root stays "/" instead of collapsing to ""
        self._root = resolved.rstrip(os.sep + "/") or resolved[:1]

    @property
    def root(self) -> str:
        return self._root

    @property
    def env_path(self) -> str:
        return self._fs.join(self._root, ENV_FILENAME)

    def parse(self) -> dict[str, str]:
        """Return the entries of the .env file with ``ROOT_PATH`` set last.

        Raises CannotParseEnvFile for a missing or unreadable file, a failed
        read, or any other error while parsing (chained as ``__cause__``).
        """
        path = self.env_path

        try:
            found = self._fs.exists(path)
            readable = found and self._fs.is_readable(path)
        except OSError as exc:
            kind = (
                ParseFailure.PERMISSION_DENIED
                if isinstance(exc, PermissionError)
                else ParseFailure.UNEXPECTED
            )
            self._fail(
                f"Unable to access .env file: {exc}",
                kind,
                path,
                exc,
            )

        if not found:
            self._fail(
                "No .env file found in the specified root directory.",
                ParseFailure.NOT_FOUND,
                path,
            )
        if not readable:
            self._fail(
                "Unable to read .env file: insufficient permissions.",
                ParseFailure.PERMISSION_DENIED,
                path,
            )

        try:
            try:
                contents = self._fs.read_text(path)
            except OSError as exc:
                self._fail("Unable to read .env file.", ParseFailure.READ_ERROR, path, exc)

            parsed = parse_contents(contents)
            for line in parsed.malformed:
                self._log.warn("Skipping malformed .env line", path=path, lineno=line.lineno)

            env = dict(parsed.values)
            env[ROOT_PATH_KEY] = self._root
        except CannotParseEnvFile:
            raise
        except Exception as exc:
            self._fail(f"Error parsing .env file: {exc}", ParseFailure.UNEXPECTED, path, exc)

        self._log.debug("Parsed .env file", path=path, entries=len(env))
        return env

    def _fail(
        self,
        message: str,
        kind: ParseFailure,
        path: str,
        cause: BaseException | None = None,
    ) -> NoReturn:
        self._log.error(message, path=path, kind=kind.value)
        raise CannotParseEnvFile(message, kind, path) from cause
