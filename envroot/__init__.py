"""Parse a root directory's .env file into a mapping that includes ROOT_PATH."""

from envroot.parser.env_file_parser import ROOT_PATH_KEY, EnvFileParser
from envroot.parser.errors import CannotParseEnvFile, EnvRootError, InvalidRootDirectory, ParseFailure
from envroot.parser.factory import EnvFileParserFactory
from envroot.parser.lines import parse_env_contents

__all__ = [
    "ROOT_PATH_KEY",
    "CannotParseEnvFile",
    "EnvFileParser",
    "EnvFileParserFactory",
    "EnvRootError",
    "InvalidRootDirectory",
    "ParseFailure",
    "parse_env_contents",
]
