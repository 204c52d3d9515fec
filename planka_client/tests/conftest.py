"""Shared fixtures for planka_client tests."""

from unittest.mock import MagicMock

import pytest


@pytest.fixture
def mock_client():
    """Create a mock PlankaClient."""
    return MagicMock()
