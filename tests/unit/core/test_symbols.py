# tests/unit/core/test_symbols.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import re
import sys

import pytest

from passgen.core.errors import InvalidArgumentError
from passgen.core.symbols import Symbol, SymbolSet

# -----------------------------------------------------------------------------
# SYMBOL
# -----------------------------------------------------------------------------


def test_symbol_equality_by_code_point():
    assert Symbol(97) == Symbol.from_char("a")
    assert hash(Symbol(97)) == hash(Symbol.from_char("a"))
    assert Symbol(97) != Symbol(98)


def test_symbol_str():
    assert str(Symbol.from_char("x")) == "x"
    assert str(Symbol(0x1F600)) == "\U0001F600"


def test_symbol_ordering():
    assert sorted([Symbol(99), Symbol(97), Symbol(98)]) == [Symbol(97), Symbol(98), Symbol(99)]


def test_symbol_is_immutable():
    symbol = Symbol(97)
    with pytest.raises(AttributeError):
        symbol.code_point = 98


@pytest.mark.parametrize("code_point", [-1, sys.maxunicode + 1])
def test_symbol_rejects_out_of_range(code_point):
    with pytest.raises(InvalidArgumentError, match="outside the Unicode range"):
        Symbol(code_point)


@pytest.mark.parametrize("value", ["a", 1.0, None, True])
def test_symbol_rejects_non_int(value):
    with pytest.raises(InvalidArgumentError):
        Symbol(value)


@pytest.mark.parametrize("value", ["", "ab", 5])
def test_from_char_rejects_non_single_character(value):
    with pytest.raises(InvalidArgumentError, match="single character"):
        Symbol.from_char(value)


# -----------------------------------------------------------------------------
# SYMBOL SET
# -----------------------------------------------------------------------------


def test_add_symbols_varargs():
    expected = {Symbol.from_char(c) for c in "abc"}
    assert SymbolSet().add_symbols(*expected).symbols() == expected


def test_add_all_collection():
    expected = [Symbol.from_char(c) for c in "abc"]
    assert SymbolSet().add_all(expected).symbols() == frozenset(expected)


def test_add_all_rejects_non_symbols():
    with pytest.raises(InvalidArgumentError, match="Expected a Symbol"):
        SymbolSet().add_all(["a"])


def test_add_string_deduplicates():
    symbol_set = SymbolSet().add_string("aabbc")
    assert symbol_set.size() == 3
    assert len(symbol_set) == 3


def test_add_pattern_string():
    symbol_set = SymbolSet().add_pattern("[abc]")
    assert symbol_set.symbols() == {Symbol.from_char(c) for c in "abc"}


def test_add_pattern_compiled():
    symbol_set = SymbolSet().add_pattern(re.compile("[0-9]"))
    assert symbol_set.size() == 10


def test_add_matching():
    symbol_set = SymbolSet().add_matching(lambda cp: chr(cp) in ("a", "b", "c"))
    assert symbol_set.symbols() == {Symbol.from_char(c) for c in "abc"}


def test_population_helpers_chain():
    symbol_set = SymbolSet().add_string("ab").add_symbols(Symbol.from_char("c")).add_pattern("[d]")
    assert symbol_set.size() == 4


def test_membership_and_iteration():
    symbol_set = SymbolSet().add_string("xy")
    assert Symbol.from_char("x") in symbol_set
    assert Symbol.from_char("z") not in symbol_set
    assert sorted(str(s) for s in symbol_set) == ["x", "y"]


def test_symbols_returns_copy():
    symbol_set = SymbolSet().add_string("a")
    snapshot = symbol_set.symbols()
    symbol_set.add_string("b")
    assert snapshot == {Symbol.from_char("a")}


def test_equality_by_content():
    common = Symbol.from_char("a")
    group = SymbolSet().add_symbols(common)
    same = SymbolSet().add_symbols(common)
    other = SymbolSet().add_symbols(Symbol.from_char("b"))
    assert group == same
    assert group != other
    assert group is not same


def test_hash_by_content():
    assert hash(SymbolSet().add_string("ab")) == hash(SymbolSet().add_string("ba"))
    assert hash(SymbolSet().add_string("a")) != hash(SymbolSet().add_string("b"))


def test_copy_is_independent():
    original = SymbolSet().add_string("a")
    duplicate = original.copy()
    duplicate.add_string("b")
    assert original.size() == 1
    assert duplicate.size() == 2


def test_repr_is_sorted():
    assert repr(SymbolSet().add_string("cab")) == "SymbolSet[{a,b,c}]"


def test_equality_with_other_types():
    assert SymbolSet() != set()
