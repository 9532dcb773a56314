# topmark:header:start
#
#   project      : Undent
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the Undent test suite.

Sets up TRACE-level logging for test runs and makes sure a developer's
exported ``UNDENT_LOG_LEVEL`` does not leak into the tests.
"""

from __future__ import annotations

import pytest

from undent.config import logging
from undent.constants import UNDENT_LOG_LEVEL_ENV


@pytest.fixture(autouse=True)
def silence_undent_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure Undent's runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture.
    """
    monkeypatch.delenv(UNDENT_LOG_LEVEL_ENV, raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log at TRACE level so pipeline detail is captured in failing test reports.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)
