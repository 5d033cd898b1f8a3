"""Constant symbol construction from literals.

Symbols written as literals in source are built once, when the defining
module is imported, and reused afterwards. An invalid literal raises at import
time, before any code can use it:

    >>> from smolsym import S, s
    >>> GREETING = s("hello_world")
    >>> GREETING == S.hello_world
    True
"""

from __future__ import annotations

from typing import Generic, TypeVar

from .exceptions import SymbolParsingError
from .models.base import BaseSymbol
from .models.symbol import Symbol

T = TypeVar("T", bound=BaseSymbol)


def s(text: str, symbol_type: type[BaseSymbol] = Symbol) -> BaseSymbol:
    """Build a constant symbol from a literal.

    Args:
        text: Literal symbol text
        symbol_type: Symbol type to build (default: Symbol)

    Returns:
        The symbol; repeated calls with the same literal return the same object

    Raises:
        TooLongError: If text is longer than the type's MAX_SYMBOL_LEN
        InvalidCharacterError: If text has a character outside the alphabet
    """
    return symbol_type.const(text)


class SymbolLiterals(Generic[T]):
    """Attribute namespace turning identifiers into symbols.

    ``literals.hello_world`` is ``symbol_type.const("hello_world")``; the
    attribute name is the literal. Invalid names raise AttributeError (chained
    from the parsing error), so ``hasattr`` and ``getattr`` with a default
    behave normally. Names starting with ``_`` are never looked up as
    literals; use ``literals["_name"]`` for those.

    Like :meth:`BaseSymbol.const`, every distinct literal is cached for the
    life of the process. Use ``symbol_type.parse()`` for run-time input.

    Example:
        >>> Digits = custom_alphabet("Digits", "012345678")
        >>> D = SymbolLiterals(Digits)
        >>> D["0815"] == Digits("0815")
        True
    """

    __slots__ = ("_symbol_type",)

    def __init__(self, symbol_type: type[T]) -> None:
        object.__setattr__(self, "_symbol_type", symbol_type)

    def __getattr__(self, name: str) -> T:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._symbol_type.const(name)
        except SymbolParsingError as e:
            raise AttributeError(
                f"{name!r} is not a {self._symbol_type.__name__} literal: {e}"
            ) from e

    def __getitem__(self, text: str) -> T:
        """Return the constant symbol for ``text``.

        Raises:
            TooLongError: If text is longer than the type's MAX_SYMBOL_LEN
            InvalidCharacterError: If text has a character outside the alphabet
        """
        return self._symbol_type.const(text)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is read-only")

    def __repr__(self) -> str:
        return f"SymbolLiterals({self._symbol_type.__name__})"


S: SymbolLiterals[Symbol] = SymbolLiterals(Symbol)
