"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from smolsym import BaseSymbol, custom_alphabet

DIGITS = "012345678"


@pytest.fixture
def sample_names() -> list[str]:
    """Valid built-in alphabet names of assorted lengths."""
    return ["", "a", "_", "hello", "hello_world", "z" * 25, "symbols_are_really_cool_o"]


@pytest.fixture(scope="session")
def digit_symbol() -> type[BaseSymbol]:
    """Symbol type over the nine digits 0-8."""
    return custom_alphabet("DigitSymbol", DIGITS)
