"""Pytest configuration for fieldcheck tests."""

import sys
from pathlib import Path

import pytest

# Add the package source to path for testing
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from fieldcheck import int_field, string_field  # noqa: E402


@pytest.fixture
def first_name():
    """Required first name that is empty and too short."""
    return string_field("first_name", "").required().min_length(3)


@pytest.fixture
def last_name():
    """Last name that is too long."""
    return string_field("last_name", "Smith").max_length(3)


@pytest.fixture
def valid_age():
    """Age that satisfies all of its rules."""
    return int_field("age", 19).required().to_float().min_size(18.0).max_size(21.0)


@pytest.fixture
def underage():
    """Age below the minimum."""
    return int_field("age", 16).required().to_float().min_size(18.0).max_size(21.0)
