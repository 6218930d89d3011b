# passgen/core/charsets.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""Ready-made symbol sets. Every function returns a new SymbolSet."""

import string

from passgen.core.symbols import SymbolSet

DEFAULT_PUNCTUATION = "!@#$%^&*()-_=+[]{};:,.<>/?"


def from_string(text: str) -> SymbolSet:
    return SymbolSet().add_string(text)


def uppercase() -> SymbolSet:
    return from_string(string.ascii_uppercase)


def lowercase() -> SymbolSet:
    return from_string(string.ascii_lowercase)


def digits() -> SymbolSet:
    return from_string(string.digits)


def punctuation(symbols: str = DEFAULT_PUNCTUATION) -> SymbolSet:
    return from_string(symbols)
