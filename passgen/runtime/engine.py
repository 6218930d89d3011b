# passgen/runtime/engine.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import logging
from collections import Counter
from typing import Dict, FrozenSet, List, NamedTuple, Optional, Sequence, Tuple

from passgen.core.errors import InvalidArgumentError
from passgen.core.groups import GroupEntry
from passgen.core.password import Password
from passgen.core.rules import evaluate_rules
from passgen.core.symbols import Symbol
from passgen.interfaces.protocols import RandomSource, Rule

logger = logging.getLogger(__name__)


class _Candidate(NamedTuple):
    symbol: Symbol
    index: int
    obligation: Optional[int]  # position in the outstanding obligation list, if one was used


class GenerationEngine:
    """
    Builds one password symbol by symbol from a group snapshot, a rule snapshot
    and the required obligations computed by the Validator.

    Every iteration picks a group (outstanding obligations first, otherwise by
    weight among the groups that still have usable symbols), a symbol from that
    group, and an insertion index, then asks the rules. A rejected candidate is
    discarded and a new one drawn; the retry loop has no bound, so rules that
    never accept make ``run`` loop forever.
    """

    def __init__(self, random_source: RandomSource) -> None:
        """
        :param random_source: Source of all random draws for this engine.
        """
        self._random = random_source

    def run(
        self,
        length: int,
        groups: Sequence[GroupEntry],
        rules: Sequence[Rule],
        obligations: Sequence[int],
        max_repetitions: Optional[int] = None,
    ) -> Password:
        """
        Generate a password of ``length`` symbols. Arguments must already have
        passed validation.

        :param length: Number of symbols to produce.
        :param groups: Group snapshot.
        :param rules: Rule snapshot.
        :param obligations: Group indices still owed a symbol.
        :param max_repetitions: Optional cap on occurrences of any one symbol.
        :raises InvalidArgumentError: If the repetition cap leaves a group with
            outstanding obligations without usable symbols.
        """
        logger.debug(
            "Generating password: length=%d, max_repetitions=%s, groups=%d, obligations=%d, rules=%d",
            length,
            max_repetitions,
            len(groups),
            len(obligations),
            len(rules),
        )
        group_symbols = [entry.ordered_symbols for entry in groups]
        all_symbols = frozenset().union(*group_symbols)
        outstanding = list(obligations)
        symbols: List[Symbol] = []
        counts: Dict[Symbol, int] = Counter()
        password = Password()

        for _ in range(length):
            available_symbols = self._available_symbols(all_symbols, counts, max_repetitions)
            available_groups = self._available_groups(group_symbols, available_symbols, max_repetitions)
            if max_repetitions is not None:
                self._check_obligations(outstanding, available_groups, max_repetitions)

            candidate = self._next_candidate(
                rules, groups, group_symbols, available_groups, available_symbols, outstanding, password, max_repetitions
            )
            symbols.insert(candidate.index, candidate.symbol)
            counts[candidate.symbol] += 1
            password = Password(symbols)
            if candidate.obligation is not None:
                del outstanding[candidate.obligation]

        return password

    @staticmethod
    def _available_symbols(
        all_symbols: FrozenSet[Symbol], counts: Dict[Symbol, int], max_repetitions: Optional[int]
    ) -> FrozenSet[Symbol]:
        if max_repetitions is None:
            return all_symbols
        return frozenset(s for s in all_symbols if counts[s] < max_repetitions)

    @staticmethod
    def _available_groups(
        group_symbols: Sequence[Tuple[Symbol, ...]], available_symbols: FrozenSet[Symbol], max_repetitions: Optional[int]
    ) -> List[int]:
        if max_repetitions is None:
            return list(range(len(group_symbols)))
        return [i for i, members in enumerate(group_symbols) if not available_symbols.isdisjoint(members)]

    @staticmethod
    def _check_obligations(outstanding: Sequence[int], available_groups: Sequence[int], max_repetitions: int) -> None:
        available = set(available_groups)
        if any(index not in available for index in outstanding):
            raise InvalidArgumentError(f"Failed to apply all required groups due to max repetitions: {max_repetitions}")

    def _next_candidate(
        self,
        rules: Sequence[Rule],
        groups: Sequence[GroupEntry],
        group_symbols: Sequence[Tuple[Symbol, ...]],
        available_groups: Sequence[int],
        available_symbols: FrozenSet[Symbol],
        outstanding: Sequence[int],
        password: Password,
        max_repetitions: Optional[int],
    ) -> _Candidate:
        rejections = 0
        while True:
            obligation: Optional[int] = None
            if outstanding:
                obligation = self._random.randrange(len(outstanding))
                group_index = outstanding[obligation]
            else:
                weights = [groups[i].weight for i in available_groups]
                group_index = self._random.choices(available_groups, weights=weights)[0]

            members = group_symbols[group_index]
            if max_repetitions is not None:
                members = tuple(s for s in members if s in available_symbols)
            symbol = self._random.choice(members)
            index = self._random.randrange(len(password) + 1)

            if evaluate_rules(rules, password, symbol, index):
                if rejections:
                    logger.debug("Candidate accepted at length %d after %d rejections", len(password), rejections)
                return _Candidate(symbol, index, obligation)
            rejections += 1
