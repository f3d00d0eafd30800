"""Pytest configuration and shared fixtures for the mathml2ast test suite.

This module provides shared fixtures, test configuration, and helpers that
are used across the entire test suite.
"""

import os
from pathlib import Path

import pytest

from mathml2ast.constants import MATHML_NAMESPACE

# Configure Hypothesis for property-based testing
try:
    from hypothesis import Phase, Verbosity, settings

    # Register custom Hypothesis profiles
    settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
    settings.register_profile("dev", max_examples=20)
    settings.register_profile(
        "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
    )

    # Load profile from environment or use default
    profile = os.getenv("HYPOTHESIS_PROFILE", "dev")
    settings.load_profile(profile)
except ImportError:
    # Hypothesis not installed, skip configuration
    pass

FIXTURES_DIR = Path(__file__).parent / "fixtures" / "mathml"


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - full pipeline tests on fixture files")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "fuzzing: Property-based tests using Hypothesis")


def wrap_math(body: str) -> str:
    """Wrap Content Markup in a ``<math>`` element in the MathML namespace."""
    return f'<math xmlns="{MATHML_NAMESPACE}">{body}</math>'


@pytest.fixture
def math_doc():
    """Provide the wrap_math helper to tests."""
    return wrap_math


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory holding the MathML fixture documents."""
    return FIXTURES_DIR
