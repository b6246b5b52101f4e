"""Sample size for unmatched case-control studies.

The expected exposure among cases is derived from the exposure among
controls and the odds ratio to detect:

    p1 = OR * p0 / (1 + p0 * (OR - 1))
"""

from __future__ import annotations

import math

from pystatsepi._logging import get_logger
from pystatsepi.samplesize._common import (
    CalculationResult,
    CaseControlParams,
    ErrorKind,
    GroupCounts,
    StudyDesign,
    _check_percent,
    _check_targets,
    error_result,
    invalid_ratio_result,
)
from pystatsepi.samplesize._comparative import comparative_estimates
from pystatsepi.samplesize._zscores import z_scores

logger = get_logger(__name__)

_DESIGN = StudyDesign.CASE_CONTROL
_OR_NULL_TOLERANCE = 0.001
_MAX_CASE_EXPOSURE = 0.999


def exposure_in_cases(p0: float, odds_ratio: float) -> float:
    """Proportion exposed among cases implied by ``p0`` and the odds ratio."""
    return odds_ratio * p0 / (1 + p0 * (odds_ratio - 1))


def sample_size_case_control(params: CaseControlParams) -> CalculationResult:
    """Number of cases and controls needed to detect ``odds_ratio``.

    Parameters
    ----------
    params : CaseControlParams
        ``exposure_controls`` is the percentage of controls exposed;
        ``ratio`` is the number of controls per case.

    Returns
    -------
    CalculationResult
        Kelsey total as ``primary``; group counts are labelled
        ``controls`` and ``cases``. An odds ratio within 0.001 of 1 gives
        ``InfiniteSampleSize``; an implied case exposure above 99.9% gives
        ``ImpossibleInputs``.

    Examples
    --------
    >>> r = sample_size_case_control(CaseControlParams(exposure_controls=30, odds_ratio=2))
    >>> r.group_counts.n2  # cases
    142
    """
    p0 = _check_percent(params.exposure_controls, "exposure_controls")
    _check_targets(params.power, params.confidence)
    odds_ratio = params.odds_ratio
    if not math.isfinite(odds_ratio) or odds_ratio <= 0:
        raise ValueError(f"odds_ratio must be a finite number > 0, got {odds_ratio}")

    if params.ratio <= 0:
        return invalid_ratio_result(_DESIGN, params.ratio)

    if abs(odds_ratio - 1) < _OR_NULL_TOLERANCE:
        logger.debug("case-control: OR=%s is indistinguishable from 1", odds_ratio)
        return error_result(
            _DESIGN,
            ErrorKind.INFINITE_SAMPLE_SIZE,
            "An odds ratio of 1 means no association; no finite sample can detect it",
            quantity="odds_ratio",
        )

    p1 = exposure_in_cases(p0, odds_ratio)
    if p1 > _MAX_CASE_EXPOSURE:
        logger.debug("case-control: implied case exposure p1=%.6f", p1)
        return error_result(
            _DESIGN,
            ErrorKind.IMPOSSIBLE_INPUTS,
            f"Implied exposure among cases is {p1:.2%}; lower the odds ratio "
            f"or the exposure among controls",
            quantity="p1",
        )

    z = z_scores(params.confidence, params.power)
    table = comparative_estimates(p1, p0, params.ratio, z, dropout=params.dropout)
    kelsey = table.kelsey

    logger.debug(
        "case-control: p0=%s OR=%s r=%s -> cases=%d controls=%d",
        p0, odds_ratio, params.ratio, kelsey.n1, kelsey.n2,
    )
    return CalculationResult(
        design=_DESIGN,
        primary=kelsey.total,
        method_table=table,
        group_counts=GroupCounts(
            n1=kelsey.n2, n2=kelsey.n1, label1="controls", label2="cases",
        ),
        z_scores=z,
    )
