# passgen/core/validations.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import math
from typing import FrozenSet, List, Optional, Sequence

from passgen.core.errors import InvalidArgumentError, NotConfiguredError
from passgen.core.groups import GroupEntry
from passgen.core.symbols import Symbol


def distinct_symbols(groups: Sequence[GroupEntry]) -> FrozenSet[Symbol]:
    """Return the union of the symbols of all groups."""
    union = set()
    for entry in groups:
        union.update(entry.symbol_set)
    return frozenset(union)


class Validator:
    """
    Checks, once per ``generate()`` call and before any symbol is produced,
    that the requested password can be built from a group snapshot.
    """

    def validate(self, length: int, groups: Sequence[GroupEntry], max_repetitions: Optional[int] = None) -> List[int]:
        """
        Run all up-front checks in order.

        :param length: Requested symbol count.
        :param groups: Group snapshot.
        :param max_repetitions: Optional cap on occurrences of each symbol.
        :return: The required obligations, one group index per symbol that
            must be drawn from that group.
        :raises InvalidArgumentError: On bad length, bad repetition cap, too few
            distinct symbols, or more obligations than length.
        :raises NotConfiguredError: If ``groups`` is empty.
        """
        self.validate_length(length)
        self.validate_configured(groups)
        if max_repetitions is not None:
            self.validate_repetitions(length, groups, max_repetitions)
        return self.required_obligations(length, groups)

    @staticmethod
    def validate_length(length: int) -> None:
        if isinstance(length, bool) or not isinstance(length, int):
            raise InvalidArgumentError(f"Password length must be an int, got {length!r}")
        if length <= 0:
            raise InvalidArgumentError(f"Password length {length} is not > 0")

    @staticmethod
    def validate_configured(groups: Sequence[GroupEntry]) -> None:
        if not groups:
            raise NotConfiguredError("No symbols have been added yet")

    @staticmethod
    def validate_repetitions(length: int, groups: Sequence[GroupEntry], max_repetitions: int) -> None:
        """
        Check the repetition cap itself and that enough distinct symbols exist
        to fill ``length`` without exceeding it.
        """
        if isinstance(max_repetitions, bool) or not isinstance(max_repetitions, int):
            raise InvalidArgumentError(f"max_repetitions must be an int or None, got {max_repetitions!r}")
        if max_repetitions <= 0:
            raise InvalidArgumentError(
                f"max_repetitions set to {max_repetitions}. "
                "Set a positive value to enable or None to disable repetition constraints"
            )
        needed = math.ceil(length / max_repetitions)
        available = len(distinct_symbols(groups))
        if needed > available:
            raise InvalidArgumentError(
                f"Password with length {length} requires at least {needed} unique symbols "
                f"but only {available} are available"
            )

    @staticmethod
    def required_obligations(length: int, groups: Sequence[GroupEntry]) -> List[int]:
        """
        Build the obligation list: ``entry.required`` copies of each group's index.

        :raises InvalidArgumentError: If the obligations do not fit into ``length``.
        """
        obligations: List[int] = []
        for index, entry in enumerate(groups):
            obligations.extend([index] * entry.required)
        if len(obligations) > length:
            raise InvalidArgumentError(
                f"Can't fit {len(obligations)} required symbols into password with length {length}"
            )
        return obligations
