# passgen/core/rules.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from typing import List, Sequence, Tuple, Union

from passgen.core.errors import InvalidArgumentError
from passgen.core.password import Password
from passgen.core.symbols import Symbol
from passgen.interfaces.protocols import Rule
from passgen.interfaces.types import RuleFunc
from passgen.runtime.concurrency import get_lock, with_lock


class _RuleAdapter:
    """
    Internal class adapting a plain callable to the Rule protocol, so the chain
    only ever calls ``evaluate``.
    """

    def __init__(self, rule_fn: RuleFunc) -> None:
        self._rule_fn = rule_fn

    def evaluate(self, password: Password, symbol: Symbol, index: int) -> bool:
        return bool(self._rule_fn(password, symbol, index))

    def __repr__(self) -> str:
        return f"_RuleAdapter({getattr(self._rule_fn, '__name__', self._rule_fn)!r})"


def as_rule(rule: Union[Rule, RuleFunc]) -> Rule:
    """
    Normalize a rule object or callable into something with ``evaluate``.

    :param rule: An object implementing the Rule protocol, or a callable taking
        (password, symbol, index) and returning a bool.
    :raises InvalidArgumentError: If ``rule`` is neither.
    """
    if isinstance(rule, Rule):
        return rule
    if callable(rule):
        return _RuleAdapter(rule)
    raise InvalidArgumentError("Rules must be callable or implement evaluate(password, symbol, index)")


class RuleChain:
    """
    Ordered collection of acceptance rules. Rules are evaluated in the order
    they were added.
    """

    def __init__(self) -> None:
        self._rules: List[Rule] = []
        self._lock = get_lock()

    def add(self, rule: Union[Rule, RuleFunc]) -> None:
        """
        Append a rule to the chain.

        :param rule: Rule object or callable.
        :raises InvalidArgumentError: If ``rule`` is not usable as a rule.
        """
        adapted = as_rule(rule)
        with with_lock(self._lock):
            self._rules.append(adapted)

    def snapshot(self) -> Tuple[Rule, ...]:
        """Return the rules as they are right now."""
        with with_lock(self._lock):
            return tuple(self._rules)

    def __len__(self) -> int:
        with with_lock(self._lock):
            return len(self._rules)


def evaluate_rules(rules: Sequence[Rule], password: Password, symbol: Symbol, index: int) -> bool:
    """
    Check a candidate against every rule, in order.

    :param rules: A rule snapshot.
    :param password: The password built so far.
    :param symbol: The candidate symbol.
    :param index: The candidate insertion index.
    :return: True if all rules accept, False at the first rejection.
    """
    for rule in rules:
        if not rule.evaluate(password, symbol, index):
            return False
    return True
