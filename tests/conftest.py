"""Pytest configuration and shared fixtures."""

import os
from decimal import Decimal

import pytest
from hypothesis import Verbosity, settings

# Configure Hypothesis profiles
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, verbosity=Verbosity.verbose)

# Load profile from environment or default to "dev"
profile = os.environ.get("HYPOTHESIS_PROFILE", "dev")
settings.load_profile(profile)


@pytest.fixture
def calculator():
    """Provide a fresh Calculator instance."""
    from decicalc import Calculator

    return Calculator()


@pytest.fixture
def keypad():
    """Provide a Keypad over a fresh Calculator."""
    from decicalc import Keypad

    return Keypad()


@pytest.fixture
def press(keypad):
    """Press a key sequence and return the final display text."""

    def _press(*labels: str) -> str:
        return keypad.feed(labels).display

    return _press


@pytest.fixture
def sample_numbers():
    """Provide a set of interesting display values."""
    return [
        Decimal("0"),
        Decimal("1"),
        Decimal("-1"),
        Decimal("0.5"),
        Decimal("-0.5"),
        Decimal("0.000001"),
        Decimal("100"),
        Decimal("123456789012345678901234567890"),
        Decimal("-999999999999999999999999999999"),
    ]
