"""Fixtures for end-to-end tests of the ``enlist`` CLI."""

import logging
from logging.handlers import MemoryHandler

import pytest
from click.testing import CliRunner
from rich.logging import RichHandler

# pylint: disable=redefined-outer-name


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo the root-logger configuration the CLI applies on each run."""
    root = logging.getLogger()
    touched = [logging.getLogger(name) for name in ("", "asyncio", "enlist.events")]
    levels = [logger.level for logger in touched]
    yield
    for handler in root.handlers[:]:
        if isinstance(handler, (RichHandler, MemoryHandler)):
            root.removeHandler(handler)
            handler.close()
    for logger, previous in zip(touched, levels):
        logger.setLevel(previous)


@pytest.fixture
def runner():
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()


@pytest.fixture
def fs(runner, monkeypatch):
    """Run inside an isolated filesystem with the log file kept local."""
    with runner.isolated_filesystem():
        monkeypatch.setenv("ENLIST_LOG_PATH", "latest.log")
        yield
