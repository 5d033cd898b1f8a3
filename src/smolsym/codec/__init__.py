"""Fixed-width symbol codec for smolsym.

This module provides the validate/encode/decode functions that pack strings
into 128-bit integers, parameterized over an alphabet.
"""

from __future__ import annotations

from .decoder import decode, is_canonical
from .digitpack import DigitPacker, DigitUnpacker
from .encoder import encode, validate

__all__ = [
    "validate",
    "encode",
    "decode",
    "is_canonical",
    "DigitPacker",
    "DigitUnpacker",
]
