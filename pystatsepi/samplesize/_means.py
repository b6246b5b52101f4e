"""Sample size for comparing two independent means (normal approximation).

    n1 = (z_alpha + z_beta)^2 * (sd1^2 + sd2^2 / r) / (mean1 - mean2)^2
    n2 = r * n1
"""

from __future__ import annotations

import math

from pystatsepi._logging import get_logger
from pystatsepi.samplesize._common import (
    CalculationResult,
    ErrorKind,
    GroupCounts,
    StudyDesign,
    TwoMeansParams,
    _check_finite,
    _check_targets,
    error_result,
    invalid_ratio_result,
)
from pystatsepi.samplesize._corrections import apply_dropout_count
from pystatsepi.samplesize._zscores import z_scores

logger = get_logger(__name__)

_DESIGN = StudyDesign.TWO_MEANS


def sample_size_two_means(params: TwoMeansParams) -> CalculationResult:
    """Group sizes to detect the difference between two means.

    Parameters
    ----------
    params : TwoMeansParams
        Expected means and standard deviations of both groups; ``ratio`` is
        n2 / n1.

    Returns
    -------
    CalculationResult
        ``primary`` is n1 + n2. There is a single estimator, so
        ``method_table`` is ``None``. Equal means give ``EqualMeans``.

    Examples
    --------
    >>> r = sample_size_two_means(TwoMeansParams(mean1=10, sd1=2, mean2=11, sd2=2))
    >>> r.group_counts.n1
    63
    """
    _check_targets(params.power, params.confidence)
    for name in ("mean1", "mean2"):
        value = getattr(params, name)
        if not math.isfinite(value):
            raise ValueError(f"{name} must be finite, got {value}")
    for name in ("sd1", "sd2"):
        value = getattr(params, name)
        if not math.isfinite(value) or value <= 0:
            raise ValueError(f"{name} must be > 0, got {value}")

    if params.ratio <= 0:
        return invalid_ratio_result(_DESIGN, params.ratio)

    if params.mean1 == params.mean2:
        return error_result(
            _DESIGN,
            ErrorKind.EQUAL_MEANS,
            "The two means must differ",
            quantity="mean2",
        )

    z = z_scores(params.confidence, params.power)
    r = params.ratio
    variance = params.sd1 ** 2 + params.sd2 ** 2 / r
    n1_raw = (z.z_alpha + z.z_beta) ** 2 * variance / (params.mean1 - params.mean2) ** 2

    n1 = math.ceil(_check_finite(n1_raw, "n1"))
    n1 = apply_dropout_count(n1, params.dropout)
    n2 = math.ceil(_check_finite(n1 * r, "n2"))

    logger.debug(
        "two means: diff=%s r=%s -> n1=%d n2=%d",
        params.mean1 - params.mean2, r, n1, n2,
    )
    return CalculationResult(
        design=_DESIGN,
        primary=n1 + n2,
        group_counts=GroupCounts(n1=n1, n2=n2, label1="group1", label2="group2"),
        z_scores=z,
    )
