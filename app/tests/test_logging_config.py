"""
Tests for logging setup.
"""

import io
import json
import logging
import sys

import pytest
from rich.logging import RichHandler

from mathcli.logging_config import (
    JSONFormatter,
    get_logger,
    get_run_id,
    new_run_id,
    set_run_id,
    setup_logging,
    verbosity_to_level,
)


def make_record(message: str, **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="mathcli.reducer",
        level=logging.WARNING,
        pathname=__file__,
        lineno=10,
        msg=message,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TerminalStream(io.StringIO):
    """In-memory stream that claims to be a terminal."""

    def isatty(self):
        return True


@pytest.fixture
def terminal_stderr(monkeypatch):
    stream = TerminalStream()
    monkeypatch.setattr(sys, "stderr", stream)
    return stream


@pytest.fixture
def piped_stderr(monkeypatch):
    stream = io.StringIO()
    monkeypatch.setattr(sys, "stderr", stream)
    return stream


class TestVerbosity:
    """Tests for mapping -v counts to levels."""

    def test_levels(self):
        assert verbosity_to_level(0) == logging.ERROR
        assert verbosity_to_level(1) == logging.WARNING
        assert verbosity_to_level(2) == logging.INFO
        assert verbosity_to_level(3) == logging.DEBUG
        assert verbosity_to_level(7) == logging.DEBUG


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_text_format_uses_rich_on_terminal(self, terminal_stderr):
        """Should render with rich when stderr is a terminal."""
        logger = setup_logging(verbosity=1)
        assert logger.name == "mathcli"
        assert logger.level == logging.WARNING
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], RichHandler)

    def test_piped_text_keeps_messages_on_one_line(self, piped_stderr):
        """Should not wrap long messages when stderr is not a terminal."""
        logger = setup_logging(verbosity=0)
        assert not isinstance(logger.handlers[0], RichHandler)

        token = "9" * 150 + "x" * 50
        get_logger("reducer").error(f"Failed to parse {token} at line 2")

        lines = piped_stderr.getvalue().splitlines()
        assert len(lines) == 1
        assert lines[0].endswith(f"Failed to parse {token} at line 2")

    def test_json_format(self):
        logger = setup_logging(verbosity=3, json_format=True)
        assert logger.level == logging.DEBUG
        assert isinstance(logger.handlers[0].formatter, JSONFormatter)

    def test_repeated_setup_replaces_handlers(self):
        setup_logging(verbosity=0)
        logger = setup_logging(verbosity=2)
        assert len(logger.handlers) == 1
        assert logger.level == logging.INFO

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "mathcli.log"
        setup_logging(verbosity=1, log_file=str(log_file), json_format=True)
        get_logger("reducer").warning("Ignoring parse error")
        for handler in logging.getLogger("mathcli").handlers:
            handler.flush()
        entry = json.loads(log_file.read_text().strip())
        assert entry["message"] == "Ignoring parse error"
        assert entry["level"] == "WARNING"
        assert entry["logger"] == "mathcli.reducer"

    def test_get_logger_namespace(self):
        assert get_logger("cli").name == "mathcli.cli"


class TestJSONFormatter:
    """Tests for JSON log output."""

    def test_standard_fields(self):
        data = json.loads(JSONFormatter().format(make_record("Folding...")))
        assert data["message"] == "Folding..."
        assert data["level"] == "WARNING"
        assert data["logger"] == "mathcli.reducer"
        assert data["line"] == 10
        assert "timestamp" in data

    def test_includes_run_id(self):
        run_id = new_run_id()
        data = json.loads(JSONFormatter().format(make_record("Starting...")))
        assert data["run_id"] == run_id

    def test_no_run_id_when_unset(self):
        set_run_id(None)
        data = json.loads(JSONFormatter().format(make_record("Starting...")))
        assert "run_id" not in data

    def test_extra_fields(self):
        data = json.loads(JSONFormatter().format(make_record("Starting...", operation="add")))
        assert data["operation"] == "add"


class TestRunId:
    """Tests for run IDs."""

    def test_new_run_id_is_set(self):
        run_id = new_run_id()
        assert get_run_id() == run_id
        assert len(run_id) == 12

    def test_run_ids_differ(self):
        assert new_run_id() != new_run_id()
