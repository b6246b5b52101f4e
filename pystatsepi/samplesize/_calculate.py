"""Single entry point dispatching on the study design."""

from __future__ import annotations

from collections.abc import Callable

from pystatsepi.samplesize._casecontrol import sample_size_case_control
from pystatsepi.samplesize._cohort import sample_size_cohort
from pystatsepi.samplesize._common import (
    CalculationResult,
    CaseControlParams,
    CohortParams,
    PrevalenceParams,
    StudyDesign,
    TrialParams,
    TwoMeansParams,
)
from pystatsepi.samplesize._means import sample_size_two_means
from pystatsepi.samplesize._prevalence import sample_size_prevalence
from pystatsepi.samplesize._trial import sample_size_trial

_CALCULATORS: dict[StudyDesign, tuple[type, Callable[..., CalculationResult]]] = {
    StudyDesign.PREVALENCE: (PrevalenceParams, sample_size_prevalence),
    StudyDesign.CASE_CONTROL: (CaseControlParams, sample_size_case_control),
    StudyDesign.COHORT: (CohortParams, sample_size_cohort),
    StudyDesign.RANDOMIZED_TRIAL: (TrialParams, sample_size_trial),
    StudyDesign.TWO_MEANS: (TwoMeansParams, sample_size_two_means),
}


def calculate(design: StudyDesign | str, params: object) -> CalculationResult:
    """Compute the sample size for ``design``.

    Parameters
    ----------
    design : StudyDesign or str
        The study design, e.g. ``StudyDesign.COHORT`` or ``'cohort'``.
    params : dataclass
        The parameter record matching ``design`` (``PrevalenceParams``,
        ``CaseControlParams``, ``CohortParams``, ``TrialParams`` or
        ``TwoMeansParams``).

    Returns
    -------
    CalculationResult
        A fresh result; calling again with equal inputs gives an equal result.

    Raises
    ------
    ValueError
        Unknown design, or inputs outside their documented ranges.
    TypeError
        ``params`` is not the record type for ``design``.

    Examples
    --------
    >>> calculate("prevalence", PrevalenceParams(prevalence=50, precision=5)).primary
    400
    """
    try:
        design = StudyDesign(design)
    except ValueError:
        valid = tuple(d.value for d in StudyDesign)
        raise ValueError(f"design must be one of {valid}, got {design!r}") from None

    params_type, func = _CALCULATORS[design]
    if not isinstance(params, params_type):
        raise TypeError(
            f"{design.value} requires {params_type.__name__}, "
            f"got {type(params).__name__}"
        )
    return func(params)
