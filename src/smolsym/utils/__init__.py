"""Utility functions for smolsym.

This module provides size calculation helpers for symbol alphabets.
"""

from __future__ import annotations

from .sizing import SYMBOL_BITS, SYMBOL_BYTES, digit_bits, max_symbol_len, symbol_bits

__all__ = [
    "SYMBOL_BITS",
    "SYMBOL_BYTES",
    "digit_bits",
    "max_symbol_len",
    "symbol_bits",
]
