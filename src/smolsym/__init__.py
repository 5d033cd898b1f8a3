"""smolsym: Compact Fixed-Width Symbols

A Python library that packs short strings from a restricted alphabet into a
single 128-bit integer and unpacks them again losslessly. Symbols are cheap
to compare, hash and copy, and make good identifiers and map keys.

Key Features:
- Built-in alphabet (a-z and _) with up to 25 characters per symbol
- Custom alphabets, each with its own symbol type and derived max length
- Import-time constants and run-time parsing share one codec
- Pydantic field support

Quick Start:
    >>> from smolsym import S, Symbol, custom_alphabet, s
    >>>
    >>> HELLO = s("hello")           # constant, checked at import time
    >>> Symbol.parse("hello") == HELLO
    True
    >>> str(S.hello_world)
    'hello_world'
    >>>
    >>> Digits = custom_alphabet("Digits", "012345678")
    >>> Digits("0815").raw
    ...
"""

from __future__ import annotations

import logging

from .alphabet import DEFAULT_ALPHABET, DEFAULT_MAX_LEN, Alphabet
from .codec import decode, encode, validate
from .exceptions import (
    AlphabetError,
    DecodeError,
    InvalidCharacterError,
    SmolsymError,
    SymbolParsingError,
    TooLongError,
)
from .literals import S, SymbolLiterals, s
from .models import BaseSymbol, Symbol, custom_alphabet
from .utils import SYMBOL_BITS, SYMBOL_BYTES, max_symbol_len

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Core API
    "Symbol",
    "BaseSymbol",
    "custom_alphabet",
    "s",
    "S",
    "SymbolLiterals",
    # Codec
    "validate",
    "encode",
    "decode",
    # Alphabets
    "Alphabet",
    "DEFAULT_ALPHABET",
    "DEFAULT_MAX_LEN",
    "max_symbol_len",
    "SYMBOL_BITS",
    "SYMBOL_BYTES",
    # Exceptions
    "SmolsymError",
    "AlphabetError",
    "SymbolParsingError",
    "InvalidCharacterError",
    "TooLongError",
    "DecodeError",
    # Version
    "__version__",
]
