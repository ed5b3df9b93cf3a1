"""
Shared fixtures for mathcli tests.
"""

import logging

import pytest

from mathcli.logging_config import ROOT_LOGGER_NAME, set_run_id

MATHCLI_ENV_VARS = [
    "MATHCLI_ENV_FILE",
    "MATHCLI_IGNORE",
    "MATHCLI_SILENT",
    "MATHCLI_IDENTITY_STARTING_POINT",
    "MATHCLI_VERBOSE",
    "MATHCLI_LOG_FORMAT",
    "MATHCLI_LOG_FILE",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Run every test without MATHCLI_* variables and outside any .env file."""
    for name in MATHCLI_ENV_VARS:
        # setenv first so teardown also removes values load_dotenv() sets
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers installed by setup_logging() after each test."""
    yield
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()
    root_logger.setLevel(logging.NOTSET)
    set_run_id(None)
