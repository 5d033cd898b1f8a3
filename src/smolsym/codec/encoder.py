"""Symbol encoder.

This module provides validate() and encode(), which check a string against an
alphabet and pack it into a single fixed-width integer.
"""

from __future__ import annotations

from ..alphabet import Alphabet
from ..exceptions import InvalidCharacterError, TooLongError
from .digitpack import DigitPacker


def validate(text: str, alphabet: Alphabet) -> None:
    """Check that ``text`` can be packed with ``alphabet``.

    The length is checked before the characters, so an over-long string is
    always reported as too long even if it also has invalid characters.

    Args:
        text: String to check
        alphabet: Alphabet to check against

    Raises:
        TypeError: If text is not a str
        TooLongError: If text is longer than alphabet.max_len
        InvalidCharacterError: For the first character not in the alphabet
    """
    if not isinstance(text, str):
        raise TypeError(f"Symbols are built from str, got {type(text).__name__}")

    if len(text) > alphabet.max_len:
        raise TooLongError(text, len(text), alphabet.max_len)

    for position, char in enumerate(text):
        if char not in alphabet:
            raise InvalidCharacterError(text, char, position)


def encode(text: str, alphabet: Alphabet) -> int:
    """Encode a string as a packed symbol integer.

    Characters become base-(N+1) digits (their ranks), most significant
    first; positions after the end of the string are zero. The empty string
    encodes to 0.

    Args:
        text: String to encode
        alphabet: Alphabet to encode with

    Returns:
        Packed integer in ``[0, alphabet.base ** alphabet.max_len)``

    Raises:
        TypeError: If text is not a str
        TooLongError: If text is longer than alphabet.max_len
        InvalidCharacterError: If text contains a character outside the alphabet

    Examples:
        ```python
        from smolsym.alphabet import DEFAULT_ALPHABET
        from smolsym.codec import decode, encode

        value = encode("hello_world", DEFAULT_ALPHABET)
        assert decode(value, DEFAULT_ALPHABET) == "hello_world"
        ```
    """
    validate(text, alphabet)

    packer = DigitPacker(base=alphabet.base, width=alphabet.max_len)
    for char in text:
        packer.write_digit(alphabet.rank_of(char))

    return packer.to_int()
