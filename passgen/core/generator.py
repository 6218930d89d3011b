# passgen/core/generator.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from typing import Optional, Tuple, Union

from passgen.core.groups import GroupEntry, GroupRegistry
from passgen.core.password import Password
from passgen.core.rules import RuleChain
from passgen.core.symbols import SymbolSet
from passgen.core.validations import Validator
from passgen.interfaces.protocols import RandomSource, Rule
from passgen.interfaces.types import RuleFunc
from passgen.runtime.engine import GenerationEngine
from passgen.runtime.randomness import default_random


class PasswordGenerator:
    """
    Generates randomized passwords from registered symbol groups, subject to
    per-group required counts, group weights, an optional repetition cap and
    caller-supplied rules.

    Configuration methods may be called from other threads while passwords are
    generated; each ``generate()`` call works on a snapshot of the groups and
    rules taken when it starts.

    Example:
        generator = (
            PasswordGenerator()
            .add_group(charsets.uppercase())
            .add_group(charsets.digits(), weight=2, required=2)
            .add_rule(NoAdjacentDuplicatesRule())
        )
        password = generator.generate(16, max_repetitions=2)
    """

    def __init__(self, random_source: Optional[RandomSource] = None, validator: Optional[Validator] = None) -> None:
        """
        :param random_source: Source of randomness, defaults to ``random.SystemRandom``.
            Sources that are not thread safe must be wrapped in
            ``SerializedRandom`` when one generator is used from several threads.
        :param validator: Optional validator for the up-front feasibility checks.
        """
        self._random = random_source if random_source is not None else default_random()
        self._validator = validator or Validator()
        self._groups = GroupRegistry()
        self._rules = RuleChain()

    def add_group(self, symbol_set: SymbolSet, weight: int = 1, required: int = 1) -> "PasswordGenerator":
        """
        Register a group of symbols. Calls with an empty set, a set equal to one
        already registered, or ``weight <= 0`` are ignored.

        :param symbol_set: The symbols of the group.
        :param weight: Relative chance of the group being picked once required
            symbols are placed. A weight 2 group is picked twice as often as a
            weight 1 group.
        :param required: Symbols from this group every password must contain.
            Use 0 to make the group optional.
        :return: The generator, for chaining.
        """
        self._groups.add(symbol_set, weight=weight, required=required)
        return self

    add_symbols = add_group

    def add_rule(self, rule: Union[Rule, RuleFunc]) -> "PasswordGenerator":
        """
        Add a rule that may reject a candidate symbol before it is inserted.
        Rejected candidates are discarded and a new group, symbol and index are
        drawn.

        :param rule: Callable ``(password, symbol, index) -> bool`` or an object
            with an ``evaluate`` method of the same signature.
        :return: The generator, for chaining.
        """
        self._rules.add(rule)
        return self

    @property
    def groups(self) -> Tuple[GroupEntry, ...]:
        """Snapshot of the registered groups."""
        return self._groups.snapshot()

    @property
    def rules(self) -> Tuple[Rule, ...]:
        """Snapshot of the registered rules."""
        return self._rules.snapshot()

    def generate(self, length: int, max_repetitions: Optional[int] = None) -> Password:
        """
        Generate a password.

        :param length: Number of symbols in the password.
        :param max_repetitions: Maximum occurrences of any single symbol, or None
            for no limit.
        :return: The generated password.
        :raises InvalidArgumentError: If ``length <= 0``, ``max_repetitions <= 0``,
            required symbols do not fit into ``length``, too few distinct symbols
            exist for the repetition cap, or the cap makes a required group
            unreachable during generation.
        :raises NotConfiguredError: If no groups have been added.
        """
        groups = self._groups.snapshot()
        obligations = self._validator.validate(length, groups, max_repetitions)
        rules = self._rules.snapshot()
        return GenerationEngine(self._random).run(length, groups, rules, obligations, max_repetitions)
