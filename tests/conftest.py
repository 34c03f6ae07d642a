"""Global pytest configuration and fixtures."""

from __future__ import annotations

import logging

import pytest

from transcoder.observability.logging import ConsoleFormatter, JsonFormatter


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "cli: test drives the command-line interface")


@pytest.fixture(autouse=True)
def _reset_logging():
    """Drop handlers installed by configure_logging once a test finishes.

    CLI tests configure logging against streams that are closed afterwards.
    """
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if isinstance(handler.formatter, (JsonFormatter, ConsoleFormatter)):
            root.removeHandler(handler)
    root.setLevel(level)
