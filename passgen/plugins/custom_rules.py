# passgen/plugins/custom_rules.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from typing import AbstractSet, Iterable, Optional

from passgen.core.password import Password
from passgen.core.symbols import Symbol, SymbolSet
from passgen.interfaces.types import RuleFunc


class NoAdjacentDuplicatesRule:
    """
    Rejects a candidate that would end up next to an equal symbol.
    """

    def evaluate(self, password: Password, symbol: Symbol, index: int) -> bool:
        if index > 0 and password[index - 1] == symbol:
            return False
        if index < len(password) and password[index] == symbol:
            return False
        return True


class ForbiddenSymbolsAtRule:
    """
    Rejects the given symbols at the given insertion indices, for example
    no digit as the first symbol.

    Insertion indices shift as later symbols are inserted in front, so this
    only constrains where a symbol is placed, not where it ends up.
    """

    def __init__(self, symbols: SymbolSet, positions: Iterable[int]) -> None:
        self.symbols = symbols.copy()
        self.positions: AbstractSet[int] = frozenset(positions)

    def evaluate(self, password: Password, symbol: Symbol, index: int) -> bool:
        return not (index in self.positions and symbol in self.symbols)


class PredicateRule:
    """
    A callable rule with a name, so it shows up readably in reprs and logs.
    """

    def __init__(self, predicate: RuleFunc, description: Optional[str] = None) -> None:
        self.predicate = predicate
        self.description = description or getattr(predicate, "__name__", "predicate")

    def evaluate(self, password: Password, symbol: Symbol, index: int) -> bool:
        return bool(self.predicate(password, symbol, index))

    def __repr__(self) -> str:
        return f"PredicateRule({self.description!r})"
