"""Symbol decoder.

This module provides decode(), which unpacks a symbol integer back into the
string it was encoded from.
"""

from __future__ import annotations

from ..alphabet import Alphabet
from ..exceptions import DecodeError
from .digitpack import DigitUnpacker


def decode(value: int, alphabet: Alphabet) -> str:
    """Decode a packed symbol integer to its string.

    Digits are read from the most significant position. Decoding stops at the
    first zero digit, which marks the end of the string; anything after it is
    ignored.

    Args:
        value: Packed integer, as returned by encode()
        alphabet: Alphabet the value was encoded with

    Returns:
        Decoded string (empty for 0)

    Raises:
        DecodeError: If value is not an integer in
            ``[0, alphabet.base ** alphabet.max_len)``
    """
    if not isinstance(value, int) or isinstance(value, bool):
        raise DecodeError(f"Symbol values are integers, got {type(value).__name__}")

    try:
        unpacker = DigitUnpacker(value, base=alphabet.base, width=alphabet.max_len)
    except ValueError as e:
        raise DecodeError(f"Value out of range for alphabet: {e}") from e

    chars: list[str] = []
    while unpacker.digits_remaining():
        digit = unpacker.read_digit()
        if digit == 0:
            break
        chars.append(alphabet.char(digit))

    return "".join(chars)


def is_canonical(value: int, alphabet: Alphabet) -> bool:
    """Return True if ``value`` has no non-zero digit after a zero digit.

    Every value produced by encode() is canonical. from_raw() uses this to
    reject integers that decode() would silently shorten.
    """
    try:
        unpacker = DigitUnpacker(value, base=alphabet.base, width=alphabet.max_len)
    except ValueError:
        return False

    ended = False
    while unpacker.digits_remaining():
        digit = unpacker.read_digit()
        if digit == 0:
            ended = True
        elif ended:
            return False
    return True
