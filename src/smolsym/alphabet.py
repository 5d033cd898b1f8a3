"""Alphabet definitions for symbol packing.

An alphabet is an ordered set of allowed characters. Each character gets a
rank from 1 to N in declaration order; rank 0 is reserved as the padding /
end-of-string digit, so packed symbols are base-(N+1) numerals.
"""

from __future__ import annotations

import logging
import string
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional

from .exceptions import AlphabetError
from .utils.sizing import max_symbol_len, symbol_bits

logger = logging.getLogger(__name__)

DEFAULT_CHARS = string.ascii_lowercase + "_"
DEFAULT_MAX_LEN = 25


@dataclass(frozen=True)
class Alphabet:
    """Ordered set of characters used to pack symbols.

    Every construction path checks the definition. :meth:`Alphabet.define`
    also accepts any iterable of characters and derives max_len.

    Attributes:
        chars: Characters in rank order (rank = index + 1)
        max_len: Maximum symbol length for this alphabet
    """

    chars: tuple[str, ...]
    max_len: int
    _ranks: dict[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Check the definition and build the rank table.

        Raises:
            AlphabetError: If the alphabet is empty, has duplicates, contains
                entries that are not single characters, or max_len is out of
                range
        """
        if isinstance(self.chars, (bytes, bytearray)):
            raise AlphabetError("Alphabet must be given as text, not bytes")

        entries = tuple(self.chars)
        if not entries:
            raise AlphabetError("Alphabet must contain at least one character")

        ranks: dict[str, int] = {}
        for position, char in enumerate(entries):
            if not isinstance(char, str) or len(char) != 1:
                raise AlphabetError(
                    f"Alphabet entries must be single characters, got {char!r} at position {position}"
                )
            if char in ranks:
                raise AlphabetError(f"Duplicate character {char!r} at position {position}")
            ranks[char] = position + 1

        limit = max_symbol_len(len(entries))
        if not isinstance(self.max_len, int) or isinstance(self.max_len, bool):
            raise AlphabetError(f"max_len must be an integer, got {self.max_len!r}")
        if self.max_len < 0 or self.max_len > limit:
            raise AlphabetError(
                f"max_len must be 0-{limit} for an alphabet of {len(entries)} characters, "
                f"got {self.max_len}"
            )

        object.__setattr__(self, "chars", entries)
        object.__setattr__(self, "_ranks", ranks)

    @classmethod
    def define(cls, chars: Iterable[str], max_len: Optional[int] = None) -> Alphabet:
        """Create and check an alphabet.

        Args:
            chars: Allowed characters in rank order; a string or any iterable
                of one-character strings
            max_len: Fixed maximum symbol length. Defaults to the largest
                length that fits in 128 bits.

        Returns:
            The new alphabet

        Raises:
            AlphabetError: If the alphabet is empty, has duplicates, contains
                entries that are not single characters, or max_len is out of
                range
        """
        if isinstance(chars, (bytes, bytearray)):
            raise AlphabetError("Alphabet must be given as text, not bytes")

        entries = tuple(chars)
        if max_len is None:
            max_len = max_symbol_len(len(entries)) if entries else 0

        alphabet = cls(chars=entries, max_len=max_len)
        logger.debug(
            "Defined alphabet of %d characters (base %d, max_len %d, %d bits)",
            alphabet.size,
            alphabet.base,
            alphabet.max_len,
            symbol_bits(alphabet.size, alphabet.max_len),
        )
        return alphabet

    @property
    def size(self) -> int:
        """Number of characters (N)."""
        return len(self.chars)

    @property
    def base(self) -> int:
        """Numeral base used for packing (N + 1)."""
        return len(self.chars) + 1

    def rank(self, char: str) -> Optional[int]:
        """Return the 1-based rank of ``char``, or None if it is not allowed."""
        return self._ranks.get(char)

    def rank_of(self, char: str) -> int:
        """Return the 1-based rank of a character known to be in the alphabet.

        Raises:
            KeyError: If char is not in the alphabet
        """
        return self._ranks[char]

    def char(self, rank: int) -> str:
        """Return the character with the given rank.

        Raises:
            ValueError: If rank is not in 1..N
        """
        if rank < 1 or rank > len(self.chars):
            raise ValueError(f"rank must be 1-{len(self.chars)}, got {rank}")
        return self.chars[rank - 1]

    def __contains__(self, char: object) -> bool:
        return char in self._ranks

    def __len__(self) -> int:
        return len(self.chars)

    def __iter__(self) -> Iterator[str]:
        return iter(self.chars)

    def __str__(self) -> str:
        return "".join(self.chars)


# The theoretical limit for base 28 is 26; 25 keeps a margin.
DEFAULT_ALPHABET = Alphabet.define(DEFAULT_CHARS, max_len=DEFAULT_MAX_LEN)
