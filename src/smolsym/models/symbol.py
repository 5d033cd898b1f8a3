"""Built-in Symbol type and the custom alphabet factory."""

from __future__ import annotations

import sys
import types
from typing import Iterable, Optional

from ..alphabet import DEFAULT_ALPHABET
from .base import BaseSymbol


class Symbol(BaseSymbol, alphabet=DEFAULT_ALPHABET):
    """Symbol over the built-in alphabet: ``a``-``z`` and ``_``, up to 25 characters.

    Example:
        >>> sym = Symbol("hello_world")
        >>> str(sym)
        'hello_world'
        >>> Symbol("hello") == Symbol.const("hello")
        True
    """

    __slots__ = ()


def custom_alphabet(
    name: str,
    chars: Iterable[str],
    max_len: Optional[int] = None,
    module: Optional[str] = None,
) -> type[BaseSymbol]:
    """Create a new symbol type bound to a custom alphabet.

    This is the functional form of subclassing :class:`BaseSymbol` with
    ``alphabet=``. The maximum length defaults to the longest string that fits
    in 128 bits for the alphabet's size.

    Args:
        name: Class name of the new symbol type
        chars: Allowed characters in rank order
        max_len: Optional fixed maximum length (at most the derived one)
        module: ``__module__`` for the new class; defaults to the caller's

    Returns:
        New BaseSymbol subclass

    Raises:
        AlphabetError: If the alphabet is empty, has duplicates or max_len is
            out of range

    Example:
        >>> Digits = custom_alphabet("Digits", "012345678")
        >>> Digits.MAX_SYMBOL_LEN
        38
    """
    if module is None:
        module = sys._getframe(1).f_globals.get("__name__", __name__)

    if not isinstance(chars, (str, bytes, bytearray)):
        chars = tuple(chars)

    def fill(namespace: dict) -> None:
        namespace["__slots__"] = ()
        namespace["__module__"] = module
        namespace["__doc__"] = f"Symbol over the alphabet {''.join(map(str, chars))!r}."

    return types.new_class(
        name, (BaseSymbol,), {"alphabet": chars, "max_len": max_len}, fill
    )
