"""Base symbol class and per-alphabet symbol types.

This module provides the BaseSymbol class that every symbol type inherits
from. A subclass binds an alphabet when it is defined; every alphabet gives a
distinct family of symbols that never compare equal to another family.
"""

from __future__ import annotations

import functools
import logging
from typing import Any, ClassVar, Iterable, Optional, TypeVar, Union

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from ..alphabet import Alphabet
from ..codec import decode, encode, is_canonical
from ..exceptions import AlphabetError, DecodeError, SmolsymError, SymbolParsingError
from ..utils.sizing import SYMBOL_BYTES

logger = logging.getLogger(__name__)

SymbolT = TypeVar("SymbolT", bound="BaseSymbol")


class BaseSymbol:
    """Base class for all symbol types.

    A symbol is an immutable 128-bit integer holding a string packed with the
    type's alphabet. Equality, ordering and hashing use only the integer.

    Symbol types are configured with class keywords:

    Example:
        >>> class Digits(BaseSymbol, alphabet="012345678"):
        ...     pass
        >>> Digits("0815")
        Digits('0815', raw=...)

    Attributes:
        smolsym_alphabet: Alphabet bound to this symbol type
        smolsym_family: Class that bound the alphabet; symbols compare only
            within one family
        MAX_SYMBOL_LEN: Longest string this type accepts
    """

    __slots__ = ("_value",)

    smolsym_alphabet: ClassVar[Optional[Alphabet]] = None
    smolsym_family: ClassVar[Optional[type[BaseSymbol]]] = None
    MAX_SYMBOL_LEN: ClassVar[int] = 0

    _value: int

    def __init_subclass__(
        cls,
        alphabet: Union[Alphabet, Iterable[str], None] = None,
        max_len: Optional[int] = None,
        **kwargs: Any,
    ) -> None:
        """Hook called when a subclass is created.

        Binds ``alphabet`` (and an optional fixed ``max_len``) to the new
        class. Without an alphabet the subclass inherits its parent's.

        Raises:
            AlphabetError: If the alphabet definition is invalid
        """
        super().__init_subclass__(**kwargs)

        if alphabet is None:
            if max_len is not None:
                raise AlphabetError(f"{cls.__name__}: max_len requires an alphabet")
            return

        if isinstance(alphabet, Alphabet):
            if max_len is not None and max_len != alphabet.max_len:
                alphabet = Alphabet.define(alphabet.chars, max_len=max_len)
        else:
            alphabet = Alphabet.define(alphabet, max_len=max_len)

        cls.smolsym_alphabet = alphabet
        cls.smolsym_family = cls
        cls.MAX_SYMBOL_LEN = alphabet.max_len
        logger.debug(
            "Bound %s to alphabet %r (max_len %d)", cls.__qualname__, str(alphabet), alphabet.max_len
        )

    def __new__(cls: type[SymbolT], text: str) -> SymbolT:
        """Validate and encode ``text``.

        The value is fixed here; there is no __init__ that could overwrite it.

        Raises:
            TooLongError: If text is longer than MAX_SYMBOL_LEN
            InvalidCharacterError: If text has a character outside the alphabet
            SmolsymError: If the class has no alphabet
        """
        value = encode(text, cls._alphabet())
        symbol = object.__new__(cls)
        object.__setattr__(symbol, "_value", value)
        return symbol

    @classmethod
    def _alphabet(cls) -> Alphabet:
        if cls.smolsym_alphabet is None:
            raise SmolsymError(
                f"{cls.__name__} has no alphabet. "
                f"Define a subclass with alphabet=... or use custom_alphabet()"
            )
        return cls.smolsym_alphabet

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def parse(cls: type[SymbolT], text: str) -> SymbolT:
        """Build a symbol from a string known only at run time.

        Raises:
            TooLongError: If text is longer than MAX_SYMBOL_LEN
            InvalidCharacterError: If text has a character outside the alphabet
        """
        return cls(text)

    @classmethod
    def try_parse(cls: type[SymbolT], text: str) -> Optional[SymbolT]:
        """Build a symbol, returning None instead of raising on invalid text."""
        try:
            return cls(text)
        except SymbolParsingError:
            return None

    @classmethod
    def const(cls: type[SymbolT], text: str) -> SymbolT:
        """Build a symbol from a literal, once per distinct literal.

        Meant for module-level constants: an invalid literal raises when the
        defining module is imported.

        For literals only. Each distinct ``(type, text)`` pair stays cached
        for the life of the process, together with a reference to the symbol
        type; use :meth:`parse` for text that arrives at run time.
        """
        return _const(cls, text)

    @classmethod
    def from_raw(cls: type[SymbolT], value: int) -> SymbolT:
        """Wrap a raw packed integer, e.g. one read back from storage.

        Raises:
            DecodeError: If value is not an integer that encode() can produce
                for this alphabet
        """
        alphabet = cls._alphabet()
        if not isinstance(value, int) or isinstance(value, bool):
            raise DecodeError(f"Symbol values are integers, got {type(value).__name__}")
        if not is_canonical(value, alphabet):
            raise DecodeError(f"{value} is not a packed {cls.__name__} value")

        symbol = object.__new__(cls)
        object.__setattr__(symbol, "_value", value)
        return symbol

    @classmethod
    def from_bytes(cls: type[SymbolT], data: bytes) -> SymbolT:
        """Read a symbol from its fixed 16-byte big-endian form.

        Raises:
            DecodeError: If data is not exactly 16 bytes or not a packed value
        """
        if len(data) != SYMBOL_BYTES:
            raise DecodeError(f"Symbols are {SYMBOL_BYTES} bytes, got {len(data)}")
        return cls.from_raw(int.from_bytes(data, "big"))

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    @property
    def raw(self) -> int:
        """The packed 128-bit integer."""
        return self._value

    def to_bytes(self) -> bytes:
        """Return the packed integer as 16 big-endian bytes."""
        return self._value.to_bytes(SYMBOL_BYTES, "big")

    def __int__(self) -> int:
        return self._value

    def __str__(self) -> str:
        return decode(self._value, self._alphabet())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r}, raw={self._value})"

    def __len__(self) -> int:
        return len(str(self))

    def __hash__(self) -> int:
        return hash(self._value)

    def _same_family(self, other: object) -> bool:
        return isinstance(other, BaseSymbol) and other.smolsym_family is self.smolsym_family

    def __eq__(self, other: object) -> bool:
        if not self._same_family(other):
            return NotImplemented
        return self._value == other._value  # type: ignore[attr-defined]

    def __ne__(self, other: object) -> bool:
        if not self._same_family(other):
            return NotImplemented
        return self._value != other._value  # type: ignore[attr-defined]

    def __lt__(self, other: object) -> bool:
        if not self._same_family(other):
            return NotImplemented
        return self._value < other._value  # type: ignore[attr-defined]

    def __le__(self, other: object) -> bool:
        if not self._same_family(other):
            return NotImplemented
        return self._value <= other._value  # type: ignore[attr-defined]

    def __gt__(self, other: object) -> bool:
        if not self._same_family(other):
            return NotImplemented
        return self._value > other._value  # type: ignore[attr-defined]

    def __ge__(self, other: object) -> bool:
        if not self._same_family(other):
            return NotImplemented
        return self._value >= other._value  # type: ignore[attr-defined]

    # ------------------------------------------------------------------
    # Immutability
    # ------------------------------------------------------------------

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self).from_raw, (self._value,))

    def __copy__(self: SymbolT) -> SymbolT:
        return self

    def __deepcopy__(self: SymbolT, memo: dict[int, Any]) -> SymbolT:
        return self

    # ------------------------------------------------------------------
    # Pydantic integration
    # ------------------------------------------------------------------

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Let symbol types be used as pydantic model field annotations.

        Strings are parsed with the field's alphabet; symbols of the same type
        pass through unchanged. Symbols serialize to their string form.
        """
        from_str = core_schema.chain_schema(
            [
                core_schema.str_schema(),
                core_schema.no_info_plain_validator_function(cls.parse),
            ]
        )
        return core_schema.json_or_python_schema(
            json_schema=from_str,
            python_schema=core_schema.union_schema(
                [core_schema.is_instance_schema(cls), from_str]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(str),
        )


@functools.lru_cache(maxsize=None)
def _const(symbol_type: type[SymbolT], text: str) -> SymbolT:
    return symbol_type.parse(text)
