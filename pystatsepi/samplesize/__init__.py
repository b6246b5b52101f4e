"""
Sample size calculations for epidemiological study designs.

Closed-form formulas only: cross-sectional prevalence (4PQ/D^2), unmatched
case-control, cohort and randomized trials (Kelsey, Fleiss and Fleiss with
continuity correction), and two independent means.

Input conventions: proportions are percentages in (0, 100), power is 80-99,
confidence is 90-99, allocation ratios are > 0. Inputs for which no finite
sample size exists are reported in ``CalculationResult.primary`` as a
``CalculationError`` rather than raised.
"""

from pystatsepi.samplesize._common import (
    CalculationError,
    CalculationResult,
    CaseControlParams,
    CohortParams,
    ErrorKind,
    GroupCounts,
    GroupEstimate,
    MethodTable,
    PrevalenceParams,
    StudyDesign,
    TrialParams,
    TwoMeansParams,
    ZScorePair,
)
from pystatsepi.samplesize._zscores import z_alpha, z_beta, z_scores
from pystatsepi.samplesize._corrections import (
    apply_dropout,
    apply_dropout_count,
    apply_fpc,
)
from pystatsepi.samplesize._comparative import comparative_estimates
from pystatsepi.samplesize._prevalence import prevalence_curve, sample_size_prevalence
from pystatsepi.samplesize._casecontrol import exposure_in_cases, sample_size_case_control
from pystatsepi.samplesize._cohort import sample_size_cohort
from pystatsepi.samplesize._trial import sample_size_trial
from pystatsepi.samplesize._means import sample_size_two_means
from pystatsepi.samplesize._calculate import calculate

__all__ = [
    "CalculationError",
    "CalculationResult",
    "CaseControlParams",
    "CohortParams",
    "ErrorKind",
    "GroupCounts",
    "GroupEstimate",
    "MethodTable",
    "PrevalenceParams",
    "StudyDesign",
    "TrialParams",
    "TwoMeansParams",
    "ZScorePair",
    "z_alpha",
    "z_beta",
    "z_scores",
    "apply_dropout",
    "apply_dropout_count",
    "apply_fpc",
    "comparative_estimates",
    "prevalence_curve",
    "sample_size_prevalence",
    "exposure_in_cases",
    "sample_size_case_control",
    "sample_size_cohort",
    "sample_size_trial",
    "sample_size_two_means",
    "calculate",
]
