import io

import pytest

from envroot.services.logger.memory_logger import LogEntry, MemoryLogger
from envroot.services.logger.pretty_logger import PrettyLogger
from envroot.services.secrets.env_secrets import EnvSecrets


def test_memory_logger_records_levels_and_context():
    log = MemoryLogger()
    log.info("one", a=1)
    log.warn("two")
    log.error("three")
    log.debug("four", path="/x")
    assert log.messages == ["one", "two", "three", "four"]
    assert log.entries[0] == LogEntry("INFO", "one", {"a": 1})
    assert log.at_level("DEBUG") == [LogEntry("DEBUG", "four", {"path": "/x"})]


def test_pretty_logger_writes_to_stderr_by_default(capsys):
    PrettyLogger().warn("careful", lineno=3)
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "[WARN]" in captured.err
    assert "careful  lineno=3" in captured.err


def test_pretty_logger_drops_debug_by_default():
    stream = io.StringIO()
    log = PrettyLogger(stream=stream)
    log.debug("hidden")
    log.info("shown")
    assert "hidden" not in stream.getvalue()
    assert "shown" in stream.getvalue()


def test_pretty_logger_level_from_settings():
    stream = io.StringIO()
    log = PrettyLogger(EnvSecrets(overrides={"LOG_LEVEL": "error"}), stream=stream)
    log.warn("quiet")
    log.error("loud", path="/srv/.env")
    lines = stream.getvalue().splitlines()
    assert len(lines) == 1
    assert "loud  path=/srv/.env" in lines[0]


def test_pretty_logger_rejects_unknown_level():
    with pytest.raises(ValueError, match="Unknown LOG_LEVEL: 'TRACE'"):
        PrettyLogger(EnvSecrets(overrides={"LOG_LEVEL": "trace"}))
