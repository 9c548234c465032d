"""Pytest configuration and fixtures for gregorian tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so gregorian can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from gregorian import Date  # noqa: E402


@pytest.fixture
def leap_day() -> Date:
    """February 29 of a year divisible by 400."""
    return Date(2000, 2, 29)
