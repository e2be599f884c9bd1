"""Pytest configuration to ensure the `src` package layout is importable.

This adds the `src/` directory to `sys.path` so tests can import the
`warband` package (e.g., `from warband.domain.army import Army`) without
requiring an editable install in CI.
"""

import sys
from datetime import UTC, datetime
from pathlib import Path

import pytest

SRC_PATH = Path(__file__).resolve().parents[1] / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

FIXED_WHEN = datetime(2025, 8, 10, 12, 0, tzinfo=UTC)


@pytest.fixture
def fixed_clock():
    """Clock returning the same timestamp on every call."""

    return lambda: FIXED_WHEN
