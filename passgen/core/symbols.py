# passgen/core/symbols.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from typing import FrozenSet, Iterable, Iterator, Set

from passgen.core.errors import InvalidArgumentError
from passgen.interfaces.types import CodePointMatcher, PatternLike

MIN_CODE_POINT = 0
MAX_CODE_POINT = sys.maxunicode


def _is_valid_code_point(code_point: int) -> bool:
    return MIN_CODE_POINT <= code_point <= MAX_CODE_POINT


@dataclass(frozen=True, order=True)
class Symbol:
    """
    A single character identified by its Unicode code point. Symbols are equal
    and hash alike when their code points are equal.
    """

    code_point: int

    def __post_init__(self) -> None:
        if isinstance(self.code_point, bool) or not isinstance(self.code_point, int):
            raise InvalidArgumentError(f"Code point must be an int, got {self.code_point!r}")
        if not _is_valid_code_point(self.code_point):
            raise InvalidArgumentError(f"Code point {self.code_point:#x} is outside the Unicode range")

    @classmethod
    def from_char(cls, character: str) -> "Symbol":
        """
        Create a Symbol from a one-character string.

        :param character: The character to wrap.
        :raises InvalidArgumentError: If ``character`` is not exactly one code point.
        """
        if not isinstance(character, str) or len(character) != 1:
            raise InvalidArgumentError(f"Expected a single character, got {character!r}")
        return cls(ord(character))

    def __str__(self) -> str:
        return chr(self.code_point)


class SymbolSet:
    """
    An unordered, deduplicated collection of Symbols. Two sets are equal when
    they contain the same symbols. All population helpers return the set so
    calls can be chained.
    """

    def __init__(self, symbols: Iterable[Symbol] = ()) -> None:
        self._symbols: Set[Symbol] = set()
        self.add_all(symbols)

    def add_symbols(self, *symbols: Symbol) -> "SymbolSet":
        """Add the given symbols. Already present symbols are ignored."""
        return self.add_all(symbols)

    def add_all(self, symbols: Iterable[Symbol]) -> "SymbolSet":
        """
        Add every symbol of an iterable.

        :param symbols: Symbols to add.
        :raises InvalidArgumentError: If an item is not a Symbol.
        """
        for symbol in symbols:
            if not isinstance(symbol, Symbol):
                raise InvalidArgumentError(f"Expected a Symbol, got {symbol!r}")
            self._symbols.add(symbol)
        return self

    def add_string(self, text: str) -> "SymbolSet":
        """Add every code point of ``text`` as a Symbol."""
        self._symbols.update(Symbol(ord(ch)) for ch in text)
        return self

    def add_pattern(self, pattern: PatternLike) -> "SymbolSet":
        """
        Add every code point whose one-character string fully matches ``pattern``.

        :param pattern: A regular expression string or compiled pattern.
        """
        compiled = re.compile(pattern) if isinstance(pattern, str) else pattern
        return self.add_matching(lambda cp: compiled.fullmatch(chr(cp)) is not None)

    def add_matching(self, matcher: CodePointMatcher) -> "SymbolSet":
        """
        Add every valid code point accepted by ``matcher``. Scans the whole
        Unicode range, so this is slow compared to the other helpers.

        :param matcher: Callable receiving a code point and returning a bool.
        """
        for code_point in range(MIN_CODE_POINT, MAX_CODE_POINT + 1):
            if matcher(code_point):
                self._symbols.add(Symbol(code_point))
        return self

    def size(self) -> int:
        """Return the number of symbols in the set."""
        return len(self._symbols)

    def symbols(self) -> FrozenSet[Symbol]:
        """Return a copy of the contained symbols."""
        return frozenset(self._symbols)

    def copy(self) -> "SymbolSet":
        return SymbolSet(self._symbols)

    def __len__(self) -> int:
        return len(self._symbols)

    def __contains__(self, item: object) -> bool:
        return item in self._symbols

    def __iter__(self) -> Iterator[Symbol]:
        return iter(self._symbols)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SymbolSet):
            return NotImplemented
        return self._symbols == other._symbols

    def __hash__(self) -> int:
        # Order independent, so equal memberships always hash alike.
        return sum(hash(s) for s in self._symbols)

    def __repr__(self) -> str:
        members = ",".join(str(s) for s in sorted(self._symbols))
        return f"SymbolSet[{{{members}}}]"
