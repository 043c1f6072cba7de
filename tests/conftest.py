"""Shared fixtures for annotationdb tests."""

from typing import Any

import pytest


@pytest.fixture
def scalar_record() -> dict[str, Any]:
    """Flat record mixing every scalar type."""
    return {
        "name": "Example Item",
        "age": 42,
        "ratio": 0.5,
        "isActive": True,
        "endDate": None,
        "metadata": {"version": 2},
    }


@pytest.fixture
def list_record() -> dict[str, list[Any]]:
    """Record of lists with string, numeric and boolean fields."""
    return {
        "people": ["Zoe", "Adam", "Charlie"],
        "scores": [100, 1, 50],
        "active": [True, False],
    }


@pytest.fixture
def user_record() -> dict[str, Any]:
    """Nested record used for payload packing."""
    return {
        "id": 10,
        "username": "fred",
        "phones": [
            {"type": "cell", "number": "123-456-7890"},
            {"type": "home", "number": "321-555-1212"},
        ],
        "department": "accounting",
        "isCurrent": True,
    }
