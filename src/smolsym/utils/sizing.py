"""Symbol size calculation utilities.

This module provides functions to work out how many characters fit into the
fixed-width symbol integer for a given alphabet, without encoding anything.
"""

from __future__ import annotations

SYMBOL_BITS = 128
SYMBOL_BYTES = SYMBOL_BITS // 8


def max_symbol_len(alphabet_size: int, bits: int = SYMBOL_BITS) -> int:
    """Calculate the longest string an alphabet can pack into ``bits`` bits.

    Each character takes one base-(N+1) digit, where N is the alphabet size
    (digit 0 is reserved for padding). The result is the largest L with
    ``(N + 1) ** L <= 2 ** bits``, computed with exact integer arithmetic.

    Args:
        alphabet_size: Number of characters in the alphabet (>= 1)
        bits: Width of the backing integer

    Returns:
        Maximum symbol length

    Raises:
        ValueError: If alphabet_size or bits is not positive

    Example:
        >>> max_symbol_len(27)
        26
        >>> max_symbol_len(9)
        38
    """
    if alphabet_size < 1:
        raise ValueError(f"alphabet_size must be >= 1, got {alphabet_size}")
    if bits < 1:
        raise ValueError(f"bits must be >= 1, got {bits}")

    base = alphabet_size + 1
    limit = 1 << bits
    length = 0
    capacity = base
    while capacity <= limit:
        length += 1
        capacity *= base
    return length


def digit_bits(alphabet_size: int) -> int:
    """Return the bits needed to store one base-(N+1) digit on its own.

    Example:
        >>> digit_bits(27)  # 28 digit values
        5
    """
    if alphabet_size < 1:
        raise ValueError(f"alphabet_size must be >= 1, got {alphabet_size}")
    return alphabet_size.bit_length()


def symbol_bits(alphabet_size: int, max_len: int) -> int:
    """Return the bits actually occupied by the largest packed value.

    Args:
        alphabet_size: Number of characters in the alphabet
        max_len: Number of digit positions packed

    Returns:
        Bit length of ``(N + 1) ** max_len - 1``

    Example:
        >>> symbol_bits(27, 25)
        121
    """
    if alphabet_size < 1:
        raise ValueError(f"alphabet_size must be >= 1, got {alphabet_size}")
    return ((alphabet_size + 1) ** max_len - 1).bit_length()
