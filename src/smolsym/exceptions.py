"""Exception hierarchy for smolsym.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from SmolsymError for easy catching of any smolsym-specific error.
"""

from __future__ import annotations


class SmolsymError(Exception):
    """Base exception for all smolsym errors."""

    pass


class AlphabetError(SmolsymError):
    """Raised when an alphabet definition is invalid.

    Alphabets are checked when they are defined, so this surfaces at import
    time for module-level symbol types.

    Examples:
        - Empty alphabet
        - Duplicate characters
        - Entries that are not exactly one character
        - Fixed max length above what 128 bits can hold
    """

    pass


class SymbolParsingError(SmolsymError, ValueError):
    """Raised when a string cannot be turned into a symbol.

    Attributes:
        text: The string that failed validation
    """

    def __init__(self, text: str, message: str) -> None:
        super().__init__(message)
        self.text = text


class InvalidCharacterError(SymbolParsingError):
    """Raised when a string contains a character outside the alphabet.

    Attributes:
        char: The offending character
        position: Zero-based index of the offending character
    """

    def __init__(self, text: str, char: str, position: int) -> None:
        super().__init__(
            text,
            f"Invalid character {char!r} at position {position} in {text!r}",
        )
        self.char = char
        self.position = position


class TooLongError(SymbolParsingError):
    """Raised when a string exceeds the alphabet's maximum symbol length.

    Attributes:
        length: Length of the rejected string
        max_len: Maximum length allowed by the alphabet
    """

    def __init__(self, text: str, length: int, max_len: int) -> None:
        super().__init__(
            text,
            f"Symbol {text!r} is {length} characters long (max: {max_len})",
        )
        self.length = length
        self.max_len = max_len


class DecodeError(SmolsymError):
    """Raised when a raw integer is not a packed value for the alphabet.

    Examples:
        - Negative integer
        - Integer wider than the alphabet's packed range
    """

    pass
