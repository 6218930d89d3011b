# tests/conftest.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import random

import pytest

from passgen.core.generator import PasswordGenerator
from passgen.core.symbols import SymbolSet


@pytest.fixture
def seeded_random():
    """A deterministic random source."""
    return random.Random(1234)


@pytest.fixture
def letters():
    """SymbolSet {A, B, C}."""
    return SymbolSet().add_string("ABC")


@pytest.fixture
def numbers():
    """SymbolSet {1..9}."""
    return SymbolSet().add_string("123456789")


@pytest.fixture
def generator(seeded_random):
    """A generator without groups, using the seeded random source."""
    return PasswordGenerator(random_source=seeded_random)

