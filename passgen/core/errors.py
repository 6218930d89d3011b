# passgen/core/errors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details


class PassGenError(Exception):
    """
    Base exception class for errors raised by the password generation library.
    """


class NotConfiguredError(PassGenError, RuntimeError):
    """
    Raised when a password is requested from a generator that has no symbol
    groups registered.
    """


class InvalidArgumentError(PassGenError, ValueError):
    """
    Raised when generation arguments or configuration make the requested
    password impossible, either before generation starts or once symbols
    already placed exhaust a required group under the repetition cap.
    """
