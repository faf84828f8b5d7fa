"""Shared BDD fixtures for ordering scenarios."""

import pytest


@pytest.fixture()
def outcome():
    """Container for the last order placed or error raised."""
    return {"orders": [], "error": None}
