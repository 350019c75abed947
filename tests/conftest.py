"""Shared fixtures for the maidenhead test suite."""

from pathlib import Path

import pytest

from maidenhead import Position, from_locator

REFERENCE_CONFIG = Path(__file__).resolve().parent.parent / "config" / "reference_locators.yaml"


@pytest.fixture
def reference_config_path() -> Path:
    """Path to the bundled reference locator fixtures."""
    return REFERENCE_CONFIG


@pytest.fixture
def newington() -> Position:
    """Newington, Connecticut (FN31pr)."""
    return from_locator("FN31pr")


@pytest.fixture
def wellington() -> Position:
    """Wellington, New Zealand (RE78ir)."""
    return from_locator("RE78ir")
