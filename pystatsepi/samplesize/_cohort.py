"""Sample size for cohort studies comparing incidence in exposed and unexposed."""

from __future__ import annotations

from pystatsepi._logging import get_logger
from pystatsepi.samplesize._common import (
    CalculationResult,
    CohortParams,
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

_DESIGN = StudyDesign.COHORT
_EQUAL_TOLERANCE = 0.0001


def sample_size_cohort(params: CohortParams) -> CalculationResult:
    """Number of exposed and unexposed participants to follow.

    Parameters
    ----------
    params : CohortParams
        Incidence (percent) among exposed and unexposed; ``ratio`` is the
        number of unexposed per exposed participant.

    Returns
    -------
    CalculationResult
        Kelsey total as ``primary``; group counts labelled ``unexposed``
        and ``exposed``. Incidences closer than 0.01 percentage points give
        ``EqualProportions``.
    """
    p1 = _check_percent(params.incidence_exposed, "incidence_exposed")
    p2 = _check_percent(params.incidence_unexposed, "incidence_unexposed")
    _check_targets(params.power, params.confidence)

    if params.ratio <= 0:
        return invalid_ratio_result(_DESIGN, params.ratio)

    if abs(p1 - p2) < _EQUAL_TOLERANCE:
        return error_result(
            _DESIGN,
            ErrorKind.EQUAL_PROPORTIONS,
            "Incidence in exposed and unexposed must differ",
            quantity="incidence_exposed",
        )

    z = z_scores(params.confidence, params.power)
    table = comparative_estimates(p1, p2, params.ratio, z, dropout=params.dropout)
    kelsey = table.kelsey

    logger.debug(
        "cohort: p1=%s p2=%s r=%s -> exposed=%d unexposed=%d",
        p1, p2, params.ratio, kelsey.n1, kelsey.n2,
    )
    return CalculationResult(
        design=_DESIGN,
        primary=kelsey.total,
        method_table=table,
        group_counts=GroupCounts(
            n1=kelsey.n2, n2=kelsey.n1, label1="unexposed", label2="exposed",
        ),
        z_scores=z,
    )
