"""Shared pytest fixtures and configuration for the password-encoder test suite.

Guidelines
----------
* Core tests must be pure — no side effects.
* questionary is mocked at the CLI boundary; no test reads a terminal.
* Tests must not depend on OS state.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest


@pytest.fixture(autouse=True)
def _reset_root_logger() -> Iterator[None]:
    """Drop handlers installed by ``configure_logging`` during a test."""
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in before:
            root.removeHandler(handler)
    root.setLevel(level)
