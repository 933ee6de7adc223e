from __future__ import annotations

import json
import sys
from typing import Any

from envroot.config.container import Container
from envroot.parser.errors import CannotParseEnvFile, InvalidRootDirectory
from envroot.parser.factory import EnvFileParserFactory
from envroot.services.filesystem.interface import RootFileSystemInterface
from envroot.services.filesystem.local_filesystem import LocalFileSystem
from envroot.services.logger.factory import LoggerFactory
from envroot.services.secrets.env_secrets import EnvSecrets

USAGE = "Usage: python -m envroot parse <root> [--log IMPL] [--format json|env] [--env JSON]"

_FORMATS = ("json", "env")

# Flag name -> default value
_GLOBAL_FLAGS: dict[str, str | None] = {
    "log": None,
    "format": "json",
    "env": None,
}


def _parse_env_overrides(raw: str) -> dict[str, str]:
    """Parse a JSON string into env overrides. Validates types."""
    data = json.loads(raw)
    if not isinstance(data, dict):
        raise ValueError("--env value must be a JSON object")
    for k, v in data.items():
        if not isinstance(k, str) or not isinstance(v, str):
            raise ValueError("--env JSON must have string keys and string values")
    return data


def _extract_flags(remaining: list[str]) -> tuple[dict[str, str], dict[str, str], list[str]]:
    """Split args into (flags, env_overrides, positional)."""
    flags: dict[str, str] = {k: v for k, v in _GLOBAL_FLAGS.items() if v is not None}
    env_overrides: dict[str, str] = {}
    positional: list[str] = []

    i = 0
    while i < len(remaining):
        arg = remaining[i]
        if arg.startswith("--") and arg[2:] in _GLOBAL_FLAGS:
            if i + 1 >= len(remaining):
                raise ValueError(f"Missing value for {arg}")
            name, value = arg[2:], remaining[i + 1]
            if name == "env":
                env_overrides.update(_parse_env_overrides(value))
            else:
                flags[name] = value
            i += 2
        elif arg.startswith("--"):
            raise ValueError(f"Unknown flag: {arg}")
        else:
            positional.append(arg)
            i += 1

    if flags["format"] not in _FORMATS:
        raise ValueError(
            f"Invalid value for --format: '{flags['format']}' (choices: {', '.join(_FORMATS)})"
        )
    return flags, env_overrides, positional


def _build_container(flags: dict[str, str], env_overrides: dict[str, str]) -> Container:
    container = Container()

    secrets = EnvSecrets(overrides=env_overrides)

    # --log wins over LOG_IMPL
    log_impl = flags.get("log") or secrets.get_or_default("LOG_IMPL", "pretty")
    logger_factory = LoggerFactory(default_impl=log_impl, secrets=secrets)
    # Bad LOG_LEVEL / LOKI_* settings fail here as usage errors
    logger_factory.create()
    container.register_instance(LoggerFactory, logger_factory)

    container.register_instance(RootFileSystemInterface, LocalFileSystem())
    container.register_instance(EnvFileParserFactory, container.resolve(EnvFileParserFactory))
    return container


def format_env(env: dict[str, str], fmt: str) -> str:
    if fmt == "env":
        return "\n".join(f"{key}={value}" for key, value in env.items())
    return json.dumps(env, indent=2)


def _write_stdout(text: str) -> None:
    # Undecodable .env bytes come back as surrogates; emit the original bytes
    data = (text + "\n").encode("utf-8", "surrogateescape")
    sys.stdout.flush()
    sys.stdout.buffer.write(data)
    sys.stdout.flush()


def run(argv: list[str]) -> tuple[int, dict[str, Any] | None]:
    """Testable entry point: returns (exit_code, parsed mapping or None)."""
    if not argv or argv[0] != "parse":
        print(USAGE, file=sys.stderr)
        return 2, None

    try:
        flags, env_overrides, positional = _extract_flags(argv[1:])
        if len(positional) != 1:
            raise ValueError(USAGE)
        container = _build_container(flags, env_overrides)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2, None

    factory = container.get(EnvFileParserFactory)
    try:
        env = factory.create(positional[0]).parse()
    except InvalidRootDirectory as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2, None
    except CannotParseEnvFile as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1, None
    finally:
        container.get(LoggerFactory).close()

    _write_stdout(format_env(env, flags["format"]))
    return 0, env


def run_cli(argv: list[str] | None = None) -> None:
    args = argv if argv is not None else sys.argv[1:]
    exit_code, _ = run(args)
    sys.exit(exit_code)
