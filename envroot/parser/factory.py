from __future__ import annotations

from envroot.parser.env_file_parser import EnvFileParser
from envroot.services.filesystem.interface import RootFileSystemInterface
from envroot.services.logger.factory import LoggerFactory


class EnvFileParserFactory:
    """Builds EnvFileParser instances sharing one filesystem and logger."""

    def __init__(self, fs: RootFileSystemInterface, logger: LoggerFactory) -> None:
        self._fs = fs
        self._logger = logger

    def create(self, root: str) -> EnvFileParser:
        return EnvFileParser(root, fs=self._fs, logger=self._logger.create())
