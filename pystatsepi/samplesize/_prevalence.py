"""Sample size for estimating a prevalence in a cross-sectional survey.

Uses the conventional simplification N = 4PQ / D^2, where 4 stands in for
1.96^2 (95% confidence).
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

from pystatsepi._logging import get_logger
from pystatsepi.samplesize._common import (
    CalculationResult,
    PrevalenceParams,
    StudyDesign,
    _check_finite,
    _check_percent,
)
from pystatsepi.samplesize._corrections import apply_dropout, apply_fpc

logger = get_logger(__name__)

FORMULA_CONSTANT = 4


def _prevalence_n(p: float, d: float) -> float:
    """Unrounded N = 4PQ / D^2 (P and D as fractions)."""
    numerator = FORMULA_CONSTANT * p * (1 - p)
    denominator = d * d
    return numerator / denominator


def sample_size_prevalence(params: PrevalenceParams) -> CalculationResult:
    """Sample size to estimate a prevalence within +/- ``precision``.

    Parameters
    ----------
    params : PrevalenceParams
        Expected prevalence and absolute precision, both in percent.
        When ``fpc`` is enabled and ``population`` is positive, the finite
        population correction is applied to the unrounded size; dropout
        inflation follows, then the result is rounded up.

    Returns
    -------
    CalculationResult
        ``primary`` is the required number of participants.

    Examples
    --------
    >>> sample_size_prevalence(PrevalenceParams(prevalence=50, precision=5)).primary
    400
    """
    p = _check_percent(params.prevalence, "prevalence")
    d = _check_percent(params.precision, "precision")

    n = _prevalence_n(p, d)
    if params.fpc:
        n = apply_fpc(n, params.population)
    n = apply_dropout(n, params.dropout)
    n_final = math.ceil(_check_finite(n, "n"))

    logger.debug(
        "prevalence: P=%s D=%s fpc=%s dropout=%s -> n=%d",
        params.prevalence, params.precision, params.fpc, params.dropout, n_final,
    )
    return CalculationResult(design=StudyDesign.PREVALENCE, primary=n_final)


def prevalence_curve(
    precision: float,
    num: int = 101,
) -> tuple[NDArray[np.floating], NDArray[np.floating]]:
    """Unrounded sample size as a function of prevalence, for plotting.

    Parameters
    ----------
    precision : float
        Absolute precision in percent.
    num : int
        Number of prevalence points, evenly spaced on [0, 1].

    Returns
    -------
    p : array
        Prevalence as a fraction.
    n : array
        ``4 * p * (1 - p) / D^2``; zero at both ends, maximal at ``p = 0.5``.
    """
    d = _check_percent(precision, "precision")
    if num < 2:
        raise ValueError(f"num must be >= 2, got {num}")

    p = np.linspace(0.0, 1.0, num)
    n = FORMULA_CONSTANT * p * (1.0 - p) / (d * d)
    return p, n
