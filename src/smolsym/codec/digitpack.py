"""Fixed-width radix packing and unpacking utilities.

This module provides low-level digit manipulation for symbol encoding.
Digits are packed most significant first into a single integer with a fixed
number of positions, so unused trailing positions are always zero.
"""

from __future__ import annotations

from ..utils.sizing import SYMBOL_BITS


class DigitPacker:
    """Packs base-``base`` digits into a fixed-width integer.

    Digits are written most significant first. :meth:`to_int` shifts the
    accumulator left by one position for every position not written, so a
    short sequence occupies the high digits and the rest are zero.

    Example:
        >>> packer = DigitPacker(base=28, width=3)
        >>> packer.write_digit(1)
        >>> packer.write_digit(2)
        >>> packer.to_int()  # digits 1, 2, 0
        840
    """

    def __init__(self, base: int, width: int) -> None:
        """Initialize an empty digit packer.

        Args:
            base: Numeral base (>= 2)
            width: Number of digit positions in the packed value

        Raises:
            ValueError: If base or width is out of range, or base**width
                does not fit in the symbol integer
        """
        if base < 2:
            raise ValueError(f"base must be >= 2, got {base}")
        if width < 0:
            raise ValueError(f"width must be >= 0, got {width}")
        if base**width > 1 << SYMBOL_BITS:
            raise ValueError(f"{width} base-{base} digits do not fit in {SYMBOL_BITS} bits")

        self._base = base
        self._width = width
        self._value = 0
        self._count = 0

    def write_digit(self, digit: int) -> None:
        """Append one digit at the next (less significant) position.

        Args:
            digit: Digit value in 0..base-1

        Raises:
            ValueError: If the digit is out of range or all positions are used
        """
        if digit < 0 or digit >= self._base:
            raise ValueError(f"Digit {digit} out of range for base {self._base}")
        if self._count >= self._width:
            raise ValueError(f"All {self._width} digit positions are already written")

        self._value = self._value * self._base + digit
        self._count += 1

    def digits_written(self) -> int:
        """Return the number of digits written so far."""
        return self._count

    def to_int(self) -> int:
        """Return the packed value with unused positions filled with zero."""
        return self._value * self._base ** (self._width - self._count)


class DigitUnpacker:
    """Unpacks base-``base`` digits from a fixed-width integer.

    Digits are read back most significant first from the same positions
    :class:`DigitPacker` wrote them to.

    Example:
        >>> unpacker = DigitUnpacker(840, base=28, width=3)
        >>> [unpacker.read_digit() for _ in range(3)]
        [1, 2, 0]
    """

    def __init__(self, value: int, base: int, width: int) -> None:
        """Initialize a digit unpacker.

        Args:
            value: Packed value, 0 <= value < base**width
            base: Numeral base (>= 2)
            width: Number of digit positions in the packed value

        Raises:
            ValueError: If base or width is out of range, or value does not
                fit in ``width`` digits
        """
        if base < 2:
            raise ValueError(f"base must be >= 2, got {base}")
        if width < 0:
            raise ValueError(f"width must be >= 0, got {width}")
        if value < 0 or value >= base**width:
            raise ValueError(f"Value {value} does not fit in {width} base-{base} digits")

        self._value = value
        self._base = base
        self._width = width
        self._position = 0

    def read_digit(self) -> int:
        """Read the digit at the next (less significant) position.

        Returns:
            Digit value in 0..base-1

        Raises:
            IndexError: If every position has been read
        """
        if self._position >= self._width:
            raise IndexError("Attempted to read past the last digit position")

        place = self._base ** (self._width - self._position - 1)
        digit = (self._value // place) % self._base
        self._position += 1
        return digit

    def digits_remaining(self) -> int:
        """Return the number of positions not yet read."""
        return self._width - self._position

    def position(self) -> int:
        """Return the current digit position."""
        return self._position
