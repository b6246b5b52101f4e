"""Two-proportion sample size estimates (Kelsey, Fleiss, Fleiss with CC).

Shared by the case-control, cohort and randomized trial calculators. Group 1
is the reference group; group 2 is ``ratio`` times its size.
"""

from __future__ import annotations

import math

from pystatsepi.samplesize._common import (
    GroupEstimate,
    MethodTable,
    ZScorePair,
    _check_finite,
)
from pystatsepi.samplesize._corrections import apply_dropout_count


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _group_estimate(n1_raw: float, ratio: float, dropout: bool) -> GroupEstimate:
    """Round the reference group, inflate for dropout, then derive group 2."""
    n1 = math.ceil(_check_finite(n1_raw, "n1"))
    n1 = apply_dropout_count(n1, dropout)
    n2 = math.ceil(_check_finite(n1 * ratio, "n2"))
    return GroupEstimate(n1=n1, n2=n2, total=n1 + n2)


def _kelsey_n1(p1: float, p2: float, ratio: float, z: ZScorePair) -> float:
    """Kelsey et al. (1996), pooled variance under H0 only."""
    p_avg = (p1 + ratio * p2) / (1 + ratio)
    pq_avg = p_avg * (1 - p_avg)
    z_sum = z.z_alpha + z.z_beta
    return (z_sum ** 2) * pq_avg * (ratio + 1) / (ratio * (p1 - p2) ** 2)


def _fleiss_n1(p1: float, p2: float, ratio: float, z: ZScorePair) -> float:
    """Fleiss (1981) with Levin's unequal-allocation modification (unrounded)."""
    p_avg = (p1 + ratio * p2) / (1 + ratio)
    pq_avg = p_avg * (1 - p_avg)
    p1q1 = p1 * (1 - p1)
    p2q2 = p2 * (1 - p2)

    term1 = z.z_alpha * math.sqrt((ratio + 1) * pq_avg)
    term2 = z.z_beta * math.sqrt(ratio * p1q1 + p2q2)
    return (term1 + term2) ** 2 / (ratio * (p1 - p2) ** 2)


def _fleiss_cc_n1(n1_fleiss: float, p1: float, p2: float, ratio: float) -> float:
    """Closed-form continuity correction applied to the unrounded Fleiss n1."""
    correction = 2 * (ratio + 1) / (n1_fleiss * ratio * abs(p1 - p2))
    return (n1_fleiss / 4) * (1 + math.sqrt(1 + correction)) ** 2


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def comparative_estimates(
    p1: float,
    p2: float,
    ratio: float,
    z: ZScorePair,
    *,
    dropout: bool = False,
) -> MethodTable:
    """Sample sizes for comparing two independent proportions.

    Parameters
    ----------
    p1 : float
        Proportion in the reference group (group 1), in (0, 1).
    p2 : float
        Proportion in group 2, in (0, 1), different from ``p1``.
    ratio : float
        Allocation ratio ``n2 / n1`` (> 0).
    z : ZScorePair
        Quantiles for the confidence and power targets.
    dropout : bool
        Inflate each method's group 1 size for 10% non-response before
        deriving group 2.

    Returns
    -------
    MethodTable
        Kelsey, Fleiss and Fleiss-with-continuity-correction estimates.

    Raises
    ------
    ValueError
        If a proportion is outside (0, 1), ``p1 == p2``, ``ratio <= 0``, or
        an intermediate value is not finite.

    Examples
    --------
    >>> from pystatsepi.samplesize import z_scores
    >>> t = comparative_estimates(0.6 / 1.3, 0.3, 1.0, z_scores(95, 80))
    >>> t.kelsey.n1
    142
    """
    if not (0.0 < p1 < 1.0):
        raise ValueError(f"p1 must be in (0, 1), got {p1}")
    if not (0.0 < p2 < 1.0):
        raise ValueError(f"p2 must be in (0, 1), got {p2}")
    if p1 == p2:
        raise ValueError("p1 and p2 must differ (no effect to detect)")
    if not ratio > 0:
        raise ValueError(f"ratio must be > 0, got {ratio}")

    n1_kelsey = _kelsey_n1(p1, p2, ratio, z)
    n1_fleiss = _check_finite(_fleiss_n1(p1, p2, ratio, z), "n1 (Fleiss)")
    n1_fleiss_cc = _fleiss_cc_n1(n1_fleiss, p1, p2, ratio)

    return MethodTable(
        kelsey=_group_estimate(n1_kelsey, ratio, dropout),
        fleiss=_group_estimate(n1_fleiss, ratio, dropout),
        fleiss_cc=_group_estimate(n1_fleiss_cc, ratio, dropout),
    )
