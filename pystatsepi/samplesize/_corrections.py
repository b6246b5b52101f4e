"""Finite population correction and non-response inflation."""

from __future__ import annotations

import math

# Expected proportion of recruited participants who respond (10% dropout)
_RESPONSE_RATE = 0.9


def apply_fpc(n: float, population: int | None) -> float:
    """Finite population correction: ``n / (1 + n / N)``.

    Must be applied to the unrounded sample size. A missing or non-positive
    population leaves ``n`` unchanged.
    """
    if population is None or population <= 0:
        return n
    return n / (1 + n / population)


def apply_dropout(n: float, enabled: bool) -> float:
    """Inflate ``n`` for 10% expected non-response when ``enabled``."""
    if not enabled:
        return n
    return n / _RESPONSE_RATE


def apply_dropout_count(n: int, enabled: bool) -> int:
    """Integer form of :func:`apply_dropout` for already rounded group sizes."""
    if not enabled:
        return n
    return math.ceil(apply_dropout(n, enabled))
