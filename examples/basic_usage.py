#!/usr/bin/env python3
"""Basic usage example for smolsym.

This example demonstrates:
1. Defining constant symbols at import time
2. Parsing symbols from run-time strings
3. Raw integer and byte forms
4. Defining a custom alphabet
"""

from __future__ import annotations

from smolsym import S, InvalidCharacterError, Symbol, TooLongError, custom_alphabet, s

# Constants: an invalid literal here would stop this module from importing
ENGINE_START = s("engine_start")
ENGINE_STOP = S.engine_stop

Hex = custom_alphabet("Hex", "0123456789abcdef")


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("smolsym Basic Usage Example")
    print("=" * 60)
    print()

    print("1. Constant symbols...")
    for sym in (ENGINE_START, ENGINE_STOP):
        print(f"   {str(sym):<15} raw={sym.raw}")
    print()

    print("2. Parsing run-time input...")
    for text in ("engine_start", "Engine_Start", "x" * 30):
        try:
            sym = Symbol.parse(text)
        except InvalidCharacterError as e:
            print(f"   {text!r}: invalid character {e.char!r} at position {e.position}")
        except TooLongError as e:
            print(f"   {text!r}: too long ({e.length} > {e.max_len})")
        else:
            print(f"   {text!r}: matches ENGINE_START = {sym == ENGINE_START}")
    print()

    print("3. Raw forms...")
    data = ENGINE_START.to_bytes()
    print(f"   bytes: {data.hex()} ({len(data)} bytes)")
    print(f"   restored: {Symbol.from_bytes(data)!r}")
    print()

    print("4. Custom alphabet...")
    digest = Hex("deadbeef")
    print(f"   {digest!r}")
    print(f"   Hex.MAX_SYMBOL_LEN = {Hex.MAX_SYMBOL_LEN}")
    print()


if __name__ == "__main__":
    main()
