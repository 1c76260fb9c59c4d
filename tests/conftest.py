# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Provides common fixtures for testing
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing arraykit.config which loads settings
# immediately. A fixed seed makes the ambient shuffle generator repeatable.

os.environ.setdefault("ARRAYKIT_ENVIRONMENT", "development")
os.environ.setdefault("ARRAYKIT_DEBUG", "true")
os.environ.setdefault("ARRAYKIT_RANDOM_SEED", "20131029")

import pytest

from arraykit import Engine


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def engine():
    """Engine that stops on the first failed step."""
    return Engine()


@pytest.fixture
def nested_list():
    """Nested list with numeric text mixed in."""
    return [1, [2, ["3", 4]], [[5]], "2"]


@pytest.fixture
def scores():
    """Mapping of player -> score, in insertion order."""
    return {"ada": 31, "grace": 47, "linus": 12, "barbara": 47}


@pytest.fixture
def call_log():
    """List that callbacks append their arguments to."""
    return []
