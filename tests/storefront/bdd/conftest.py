"""Shared BDD fixtures for the storefront."""

import pytest


@pytest.fixture()
def shop(empty_shop):
    """Scenarios describe their own catalogue in the background."""
    return empty_shop


@pytest.fixture()
def outcome():
    """Container for the result of the last submit."""
    return {"order_id": None, "exc": None}
