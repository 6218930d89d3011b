# tests/unit/core/test_password.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import pytest

from passgen.core.password import Password
from passgen.core.symbols import Symbol


def _password(text):
    return Password(Symbol.from_char(c) for c in text)


def test_length_and_len():
    password = _password("abc")
    assert password.length() == 3
    assert len(password) == 3
    assert Password().length() == 0


def test_index_access():
    password = _password("abc")
    assert password[0] == Symbol.from_char("a")
    assert password[-1] == Symbol.from_char("c")
    with pytest.raises(IndexError):
        password[3]


def test_slice_returns_password():
    assert _password("abcd")[1:3] == _password("bc")


def test_iteration_and_symbols():
    password = _password("ab")
    assert list(password) == [Symbol.from_char("a"), Symbol.from_char("b")]
    assert password.symbols() == (Symbol.from_char("a"), Symbol.from_char("b"))


def test_count_and_contains():
    password = _password("abca")
    assert password.count(Symbol.from_char("a")) == 2
    assert Symbol.from_char("c") in password
    assert Symbol.from_char("z") not in password


def test_str_concatenates_symbols():
    assert str(_password("a\U0001F600b")) == "a\U0001F600b"


def test_equality_respects_order():
    assert _password("ab") == _password("ab")
    assert hash(_password("ab")) == hash(_password("ab"))
    assert _password("ab") != _password("ba")


def test_immutable_against_source_list():
    symbols = [Symbol.from_char("a")]
    password = Password(symbols)
    symbols.append(Symbol.from_char("b"))
    assert len(password) == 1


def test_repr_hides_symbols():
    assert "secret" not in repr(_password("secret"))
