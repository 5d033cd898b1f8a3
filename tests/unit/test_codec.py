"""Unit tests for validate/encode/decode."""

from __future__ import annotations

import pytest

from smolsym import (
    DEFAULT_ALPHABET,
    Alphabet,
    DecodeError,
    InvalidCharacterError,
    SymbolParsingError,
    TooLongError,
    decode,
    encode,
    validate,
)
from smolsym.codec import is_canonical

BASE = 28
WIDTH = 25


class TestEncodeDecode:
    """Test basic encode/decode functionality."""

    def test_hello_world(self) -> None:
        """Test the canonical example round-trips."""
        value = encode("hello_world", DEFAULT_ALPHABET)
        assert decode(value, DEFAULT_ALPHABET) == "hello_world"

    def test_empty_string(self) -> None:
        """Test the empty string encodes to zero."""
        assert encode("", DEFAULT_ALPHABET) == 0
        assert decode(0, DEFAULT_ALPHABET) == ""

    def test_digit_layout(self) -> None:
        """Test characters occupy the most significant digits."""
        assert encode("a", DEFAULT_ALPHABET) == 1 * BASE ** (WIDTH - 1)
        assert encode("ab", DEFAULT_ALPHABET) == 1 * BASE ** (WIDTH - 1) + 2 * BASE ** (WIDTH - 2)
        assert encode("_", DEFAULT_ALPHABET) == 27 * BASE ** (WIDTH - 1)

    def test_max_length_value(self) -> None:
        """Test the largest packable value."""
        value = encode("_" * 25, DEFAULT_ALPHABET)
        assert value == BASE**WIDTH - 1
        assert value < 2**128
        assert decode(value, DEFAULT_ALPHABET) == "_" * 25

    def test_distinct_strings(self) -> None:
        """Test different strings give different integers."""
        assert encode("hello", DEFAULT_ALPHABET) != encode("goodbye", DEFAULT_ALPHABET)
        assert encode("a", DEFAULT_ALPHABET) != encode("aa", DEFAULT_ALPHABET)

    def test_sample_names(self, sample_names: list[str]) -> None:
        """Test a spread of names round-trip."""
        for name in sample_names:
            assert decode(encode(name, DEFAULT_ALPHABET), DEFAULT_ALPHABET) == name

    def test_prefix_orders_first(self) -> None:
        """Test integer order follows rank order with prefixes first."""
        assert encode("ab", DEFAULT_ALPHABET) < encode("abc", DEFAULT_ALPHABET)
        assert encode("abc", DEFAULT_ALPHABET) < encode("abd", DEFAULT_ALPHABET)
        assert encode("z", DEFAULT_ALPHABET) < encode("_", DEFAULT_ALPHABET)


class TestValidate:
    """Test validation error handling."""

    def test_valid(self) -> None:
        """Test valid strings pass."""
        validate("", DEFAULT_ALPHABET)
        validate("hello_world", DEFAULT_ALPHABET)
        validate("a" * 25, DEFAULT_ALPHABET)

    def test_too_long(self) -> None:
        """Test a 26-character string is rejected."""
        with pytest.raises(TooLongError) as exc_info:
            validate("a" * 26, DEFAULT_ALPHABET)

        assert exc_info.value.length == 26
        assert exc_info.value.max_len == 25
        assert exc_info.value.text == "a" * 26

    def test_length_checked_first(self) -> None:
        """Test over-long strings with bad characters report the length."""
        with pytest.raises(TooLongError):
            validate("A" * 26, DEFAULT_ALPHABET)

    def test_uppercase(self) -> None:
        """Test uppercase input fails at position 0."""
        with pytest.raises(InvalidCharacterError) as exc_info:
            validate("HELLO", DEFAULT_ALPHABET)

        assert exc_info.value.char == "H"
        assert exc_info.value.position == 0
        assert "'H'" in str(exc_info.value)
        assert "position 0" in str(exc_info.value)

    def test_first_invalid_character_reported(self) -> None:
        """Test the first offending character is reported."""
        with pytest.raises(InvalidCharacterError) as exc_info:
            validate("hello world!", DEFAULT_ALPHABET)

        assert exc_info.value.char == " "
        assert exc_info.value.position == 5

    def test_errors_are_value_errors(self) -> None:
        """Test parsing errors share a base class."""
        for text in ("x" * 30, "Nope"):
            with pytest.raises(SymbolParsingError):
                encode(text, DEFAULT_ALPHABET)
            with pytest.raises(ValueError):
                encode(text, DEFAULT_ALPHABET)

    def test_non_string(self) -> None:
        """Test bytes are not accepted."""
        with pytest.raises(TypeError, match="str"):
            validate(b"hello", DEFAULT_ALPHABET)  # type: ignore[arg-type]


class TestDecodeErrors:
    """Test decoding error handling."""

    def test_out_of_range(self) -> None:
        """Test values beyond the packed range."""
        with pytest.raises(DecodeError):
            decode(BASE**WIDTH, DEFAULT_ALPHABET)

        with pytest.raises(DecodeError):
            decode(-1, DEFAULT_ALPHABET)

    def test_non_integer(self) -> None:
        """Test non-integer values."""
        with pytest.raises(DecodeError):
            decode("hello", DEFAULT_ALPHABET)  # type: ignore[arg-type]

        with pytest.raises(DecodeError):
            decode(True, DEFAULT_ALPHABET)

    def test_stops_at_first_zero(self) -> None:
        """Test digits after the first zero are ignored."""
        # digits: a, 0, a, 0, ...
        value = BASE ** (WIDTH - 1) + BASE ** (WIDTH - 3)
        assert decode(value, DEFAULT_ALPHABET) == "a"

    def test_is_canonical(self) -> None:
        """Test canonical detection."""
        assert is_canonical(0, DEFAULT_ALPHABET)
        assert is_canonical(encode("hello", DEFAULT_ALPHABET), DEFAULT_ALPHABET)
        assert not is_canonical(BASE ** (WIDTH - 2), DEFAULT_ALPHABET)
        assert not is_canonical(BASE**WIDTH, DEFAULT_ALPHABET)


class TestCustomAlphabetCodec:
    """Test the codec with other alphabets."""

    def test_digit_alphabet(self) -> None:
        """Test a nine-digit alphabet round-trips its longest string."""
        digits = Alphabet.define("012345678")
        text = "0123456781" * 3 + "87654321"
        assert len(text) == digits.max_len == 38

        assert decode(encode(text, digits), digits) == text

        with pytest.raises(TooLongError):
            encode(text + "0", digits)

        with pytest.raises(InvalidCharacterError) as exc_info:
            encode("1239", digits)
        assert exc_info.value.position == 3

    def test_single_character_alphabet(self) -> None:
        """Test a one-character alphabet behaves like a bounded counter."""
        ones = Alphabet.define("x")
        assert ones.max_len == 128
        assert decode(encode("x" * 128, ones), ones) == "x" * 128
        assert encode("x" * 128, ones) == 2**128 - 1
