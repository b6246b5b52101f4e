"""Sample size for two-arm randomized trials with a binary outcome."""

from __future__ import annotations

from pystatsepi._logging import get_logger
from pystatsepi.samplesize._common import (
    CalculationResult,
    ErrorKind,
    GroupCounts,
    StudyDesign,
    TrialParams,
    _check_percent,
    _check_targets,
    error_result,
    invalid_ratio_result,
)
from pystatsepi.samplesize._comparative import comparative_estimates
from pystatsepi.samplesize._zscores import z_scores

logger = get_logger(__name__)

_DESIGN = StudyDesign.RANDOMIZED_TRIAL
_EQUAL_TOLERANCE = 0.0001


def sample_size_trial(params: TrialParams) -> CalculationResult:
    """Number of participants per arm of a randomized trial.

    ``ratio`` is group 1 (control) per group 2 (treatment), so group 2 is
    the reference group of the two-proportion estimate and group 1 is the
    one scaled by the ratio.

    Returns
    -------
    CalculationResult
        Kelsey total as ``primary``; group counts labelled ``group1`` and
        ``group2``. Equal proportions give ``EqualProportions``.

    Examples
    --------
    >>> r = sample_size_trial(TrialParams(proportion_group1=50, proportion_group2=50))
    >>> r.primary.kind.value
    'EqualProportions'
    """
    p1 = _check_percent(params.proportion_group1, "proportion_group1")
    p2 = _check_percent(params.proportion_group2, "proportion_group2")
    _check_targets(params.power, params.confidence)

    if params.ratio <= 0:
        return invalid_ratio_result(_DESIGN, params.ratio)

    if abs(p1 - p2) < _EQUAL_TOLERANCE:
        return error_result(
            _DESIGN,
            ErrorKind.EQUAL_PROPORTIONS,
            "Outcome proportions in the two groups must differ",
            quantity="proportion_group2",
        )

    z = z_scores(params.confidence, params.power)
    # Group 2 goes first: the ratio multiplies the second argument's count
    table = comparative_estimates(p2, p1, params.ratio, z, dropout=params.dropout)
    kelsey = table.kelsey

    logger.debug(
        "trial: p1=%s p2=%s r=%s -> group1=%d group2=%d",
        p1, p2, params.ratio, kelsey.n2, kelsey.n1,
    )
    return CalculationResult(
        design=_DESIGN,
        primary=kelsey.total,
        method_table=table,
        group_counts=GroupCounts(
            n1=kelsey.n2, n2=kelsey.n1, label1="group1", label2="group2",
        ),
        z_scores=z,
    )
