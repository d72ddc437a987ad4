"""
Pytest configuration for EnvQuality tests.

Registers custom markers and provides shared fixtures.
"""

import pytest

from envquality.environment_classifier import EnvironmentClassifier


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


@pytest.fixture
def classifier():
    """Fixture providing an EnvironmentClassifier with default components."""
    return EnvironmentClassifier()
