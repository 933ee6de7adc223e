import os
from pathlib import Path

from envroot.services.filesystem.interface import RootFileSystemInterface


class LocalFileSystem(RootFileSystemInterface):
    """File system implementation backed by local disk.

    Files are decoded as UTF-8 with ``surrogateescape``: bytes that are not
    valid UTF-8 survive as lone surrogates and encode back to the original
    bytes, so no file fails to parse because of its encoding.
    """

    def __init__(self, encoding: str = "utf-8", errors: str = "surrogateescape") -> None:
        self._encoding = encoding
        self._errors = errors

    def resolve(self, path: str) -> str:
        # strict: missing paths and broken symlinks raise instead of resolving
        return str(Path(path).resolve(strict=True))

    def is_dir(self, path: str) -> bool:
        return Path(path).is_dir()

    def exists(self, path: str) -> bool:
        return Path(path).exists()

    def is_readable(self, path: str) -> bool:
        return os.access(path, os.R_OK)

    def read_text(self, path: str) -> str:
        # newline="" keeps \r\n and bare \r so the line parser sees them
        with open(path, encoding=self._encoding, errors=self._errors, newline="") as f:
            return f.read()

    def join(self, root: str, name: str) -> str:
        return os.path.join(root, name)
