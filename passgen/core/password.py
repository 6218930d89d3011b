# passgen/core/password.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from typing import Iterable, Iterator, Tuple, Union, overload

from passgen.core.symbols import Symbol


class Password:
    """
    An immutable, ordered sequence of Symbols produced by a PasswordGenerator.
    The repr never shows the symbols so passwords do not leak into logs.
    """

    __slots__ = ("_symbols",)

    def __init__(self, symbols: Iterable[Symbol] = ()) -> None:
        """
        :param symbols: The symbols in password order.
        """
        self._symbols: Tuple[Symbol, ...] = tuple(symbols)

    def length(self) -> int:
        """Return the symbol count of this password."""
        return len(self._symbols)

    def symbols(self) -> Tuple[Symbol, ...]:
        """Return the symbols in order."""
        return self._symbols

    def count(self, symbol: Symbol) -> int:
        """Return how often ``symbol`` occurs in the password."""
        return self._symbols.count(symbol)

    @overload
    def __getitem__(self, index: int) -> Symbol: ...

    @overload
    def __getitem__(self, index: slice) -> "Password": ...

    def __getitem__(self, index: Union[int, slice]) -> Union[Symbol, "Password"]:
        if isinstance(index, slice):
            return Password(self._symbols[index])
        return self._symbols[index]

    def __len__(self) -> int:
        return len(self._symbols)

    def __iter__(self) -> Iterator[Symbol]:
        return iter(self._symbols)

    def __contains__(self, item: object) -> bool:
        return item in self._symbols

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Password):
            return NotImplemented
        return self._symbols == other._symbols

    def __hash__(self) -> int:
        return hash(self._symbols)

    def __str__(self) -> str:
        return "".join(str(s) for s in self._symbols)

    def __repr__(self) -> str:
        return f"Password(length={len(self._symbols)})"
