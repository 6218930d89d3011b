# passgen/runtime/concurrency.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Iterator


def get_lock() -> threading.Lock:
    """
    Provide a new lock guarding one piece of generator configuration.
    """
    return threading.Lock()


@contextmanager
def with_lock(lock: threading.Lock) -> Iterator[None]:
    """
    Acquire ``lock`` for the duration of the with-block and release it on exit,
    also when the block raises.
    """
    lock.acquire()
    try:
        yield
    finally:
        lock.release()
