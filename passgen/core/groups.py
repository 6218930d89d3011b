# passgen/core/groups.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Tuple

from passgen.core.errors import InvalidArgumentError
from passgen.core.symbols import Symbol, SymbolSet
from passgen.runtime.concurrency import get_lock, with_lock

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GroupEntry:
    """
    One configured group: a private copy of the caller's SymbolSet, the number
    of its symbols every password must contain, and its relative weight.
    """

    symbol_set: SymbolSet
    required: int
    weight: int

    @property
    def ordered_symbols(self) -> Tuple[Symbol, ...]:
        """The group's symbols in code point order, for reproducible sampling."""
        return tuple(sorted(self.symbol_set))


class GroupRegistry:
    """
    Holds the generator's groups. Each distinct SymbolSet is registered at
    most once; its weight is stored on the entry rather than realized by
    duplicating it, so a group's required count is only ever counted once.
    """

    def __init__(self) -> None:
        self._entries: List[GroupEntry] = []
        self._lock = get_lock()

    def add(self, symbol_set: SymbolSet, weight: int = 1, required: int = 1) -> bool:
        """
        Register a group.

        :param symbol_set: Symbols of the group. A copy is stored.
        :param weight: Relative selection weight. Values <= 0 register nothing.
        :param required: Minimum symbols from this group per password. Values <= 0
            make the group optional.
        :return: True if the group was registered, False if the call was a no-op.
        :raises InvalidArgumentError: If the arguments have the wrong types.
        """
        if not isinstance(symbol_set, SymbolSet):
            raise InvalidArgumentError(f"Expected a SymbolSet, got {type(symbol_set).__name__}")
        for name, value in (("weight", weight), ("required", required)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidArgumentError(f"{name} must be an int, got {value!r}")

        if symbol_set.size() == 0:
            logger.debug("Ignoring empty symbol set")
            return False
        if weight <= 0:
            logger.debug("Ignoring symbol set with weight %d", weight)
            return False

        entry = GroupEntry(symbol_set=symbol_set.copy(), required=max(required, 0), weight=weight)
        with with_lock(self._lock):
            if any(e.symbol_set == entry.symbol_set for e in self._entries):
                logger.debug("Ignoring symbol set that is already registered")
                return False
            self._entries.append(entry)
        return True

    def snapshot(self) -> Tuple[GroupEntry, ...]:
        """
        Return the registered groups as they are right now. Later registrations
        do not affect a snapshot already taken.
        """
        with with_lock(self._lock):
            return tuple(self._entries)

    def clear(self) -> None:
        """Remove all registered groups."""
        with with_lock(self._lock):
            self._entries.clear()

    def __len__(self) -> int:
        with with_lock(self._lock):
            return len(self._entries)
