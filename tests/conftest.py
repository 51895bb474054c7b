"""
Pytest configuration and shared fixtures for elastic constant tests.
"""

import pytest
import sys
from pathlib import Path

# Add the parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))


@pytest.fixture
def tolerance():
    """Default relative tolerance for resolved constants."""
    return 1e-6


@pytest.fixture
def loose_tolerance():
    """Looser tolerance for values quoted to a few significant digits."""
    return 1e-4


@pytest.fixture
def steel():
    """Reference steel-like constants (μ = 80 GPa, ν = 0.3), all five set."""
    return {
        "lambda": 120e9,
        "mu": 80e9,
        "E": 208e9,
        "K": 520e9 / 3,
        "nu": 0.3,
    }
