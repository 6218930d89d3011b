# passgen/interfaces/types.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from re import Pattern
from typing import TYPE_CHECKING, Callable, Union

if TYPE_CHECKING:
    from passgen.core.password import Password
    from passgen.core.symbols import Symbol

CodePoint = int
Weight = int
RequiredCount = int

# Callback Types
RuleFunc = Callable[["Password", "Symbol", int], bool]
CodePointMatcher = Callable[[CodePoint], bool]
PatternLike = Union[str, Pattern[str]]
