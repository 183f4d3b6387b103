# tests/conftest.py
# This file is part of Quincy - A Boolean Consensus Minimizer
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for Quincy minimizer tests.

Puts the project root on the import path, checks that the packages can be
imported and provides the formulas used across test modules.
"""

import sys
import pytest
from pathlib import Path

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Skip the session if the project packages cannot be imported."""
    try:
        import logic
        import model
        import parser
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    yield


@pytest.fixture
def sample_variables():
    """Provide a standard variable order.

    Returns:
        List[str]: Variable names in canonical order
    """
    return ["x", "y", "z"]


@pytest.fixture
def basic_formula():
    """Provide a single-product formula.

    Returns:
        str: Formula whose DNF equals its input
    """
    return "x and y"


@pytest.fixture
def complex_formula():
    """Provide the three-variable mixed formula.

    Returns:
        str: Formula with four satisfying assignments and a two-cube cover
    """
    return "x and y or not y and z"
