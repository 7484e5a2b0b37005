"""Pytest configuration.

Marker registration and logging setup shared by every test module.
"""

from __future__ import annotations

import logging

import pytest


@pytest.fixture(autouse=True)
def railway_debug_logs(caplog: pytest.LogCaptureFixture) -> None:
    """Capture railway's debug records so tests can assert on them."""
    caplog.set_level(logging.DEBUG, logger="railway")


def pytest_configure(config: pytest.Config) -> None:
    """Configure custom markers for test organization."""
    markers = [
        "unit: Fast, isolated unit tests",
        "laws: Property-based checks of Eq / Ord / Semigroup laws",
    ]
    for marker in markers:
        config.addinivalue_line("markers", marker)
