# tests/unit/core/test_errors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import pytest

from passgen.core.errors import InvalidArgumentError, NotConfiguredError, PassGenError


def test_error_hierarchy():
    assert issubclass(NotConfiguredError, PassGenError)
    assert issubclass(InvalidArgumentError, PassGenError)


def test_errors_match_builtin_categories():
    """Callers catching the builtin exceptions still see library errors."""
    assert issubclass(InvalidArgumentError, ValueError)
    assert issubclass(NotConfiguredError, RuntimeError)


@pytest.mark.parametrize("error_class", [PassGenError, NotConfiguredError, InvalidArgumentError])
def test_error_messages(error_class):
    assert str(error_class("Custom message")) == "Custom message"
    assert str(error_class()) == ""
