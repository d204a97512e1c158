"""Process-wide random source shared by all callers."""

from __future__ import annotations

import random
import threading

_generator = random.Random()
_lock = threading.Lock()


def seed(value):
    """Reseed the shared generator, making subsequent draws reproducible."""
    with _lock:
        _generator.seed(value)


def random_01():
    """Uniform real number in ``[0, 1)``."""
    with _lock:
        return _generator.random()


def random_sign():
    """``+1`` or ``-1`` with equal probability."""
    with _lock:
        return 1 if _generator.random() < 0.5 else -1