"""Symbol types for smolsym.

This module provides the BaseSymbol class, the built-in Symbol type and the
custom alphabet factory.
"""

from __future__ import annotations

from .base import BaseSymbol
from .symbol import Symbol, custom_alphabet

__all__ = [
    "BaseSymbol",
    "Symbol",
    "custom_alphabet",
]
