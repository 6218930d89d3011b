# passgen/interfaces/protocols.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from typing import TYPE_CHECKING, Any, Protocol, Sequence, runtime_checkable

if TYPE_CHECKING:
    from passgen.core.password import Password
    from passgen.core.symbols import Symbol


@runtime_checkable
class Rule(Protocol):
    """
    Rule protocol for acceptance checks during generation.

    Methods:
        evaluate(password, symbol, index): Returns True to accept the candidate.

    Runtime Invariants:
    - The password passed in is the immutable password built so far.
    - ``index`` lies in ``0 .. len(password)`` inclusive and is where the
      candidate would be inserted.

    Error Handling:
    - Exceptions raised by a rule are not caught by the generator; they abort
      the current ``generate()`` call.
    - A rule that never accepts any candidate makes generation loop forever.
      Rules must eventually accept some candidate for every reachable password.
    """

    def evaluate(self, password: "Password", symbol: "Symbol", index: int) -> bool:
        """Return True if ``symbol`` may be inserted into ``password`` at ``index``."""
        ...


@runtime_checkable
class RandomSource(Protocol):
    """
    The subset of the ``random.Random`` API used by the generation engine.
    ``random.Random`` and ``random.SystemRandom`` both satisfy it.
    """

    def randrange(self, start: int, stop: int = ..., step: int = ...) -> int:
        ...

    def choice(self, seq: Sequence[Any]) -> Any:
        ...

    def choices(self, population: Sequence[Any], weights: Any = ..., *, cum_weights: Any = ..., k: int = ...) -> list:
        ...
