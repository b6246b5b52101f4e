"""Shared result types, parameter records and validation for sample size calculations."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from pystatsepi._config import (
    CONFIDENCE_RANGE,
    DEFAULT_CONFIDENCE,
    DEFAULT_POWER,
    DEFAULT_RATIO,
    POWER_RANGE,
)


class StudyDesign(str, Enum):
    """Study design; selects the calculator and its parameter record."""

    PREVALENCE = "prevalence"
    CASE_CONTROL = "case_control"
    COHORT = "cohort"
    RANDOMIZED_TRIAL = "randomized_trial"
    TWO_MEANS = "two_means"


class ErrorKind(str, Enum):
    """Inputs for which no finite sample size exists."""

    INFINITE_SAMPLE_SIZE = "InfiniteSampleSize"
    IMPOSSIBLE_INPUTS = "ImpossibleInputs"
    EQUAL_PROPORTIONS = "EqualProportions"
    EQUAL_MEANS = "EqualMeans"
    INVALID_RATIO = "InvalidRatio"


# ---------------------------------------------------------------------------
# Result types
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ZScorePair:
    """Standard-normal quantiles for confidence (two-sided) and power."""

    z_alpha: float
    z_beta: float


@dataclass(frozen=True)
class GroupEstimate:
    """Per-group and total sample size from one estimation method."""

    n1: int
    n2: int
    total: int


@dataclass(frozen=True)
class MethodTable:
    """The three two-proportion estimates, side by side.

    Kelsey is the headline estimate; Fleiss and Fleiss with continuity
    correction are reported for comparison.
    """

    kelsey: GroupEstimate
    fleiss: GroupEstimate
    fleiss_cc: GroupEstimate

    def rows(self) -> list[tuple[str, GroupEstimate]]:
        return [
            ("Kelsey", self.kelsey),
            ("Fleiss", self.fleiss),
            ("Fleiss with CC", self.fleiss_cc),
        ]


@dataclass(frozen=True)
class GroupCounts:
    """Headline group sizes with display labels (``n1`` belongs to ``label1``)."""

    n1: int
    n2: int
    label1: str
    label2: str

    @property
    def total(self) -> int:
        return self.n1 + self.n2


@dataclass(frozen=True)
class CalculationError:
    """Why no sample size could be produced.

    Attributes
    ----------
    kind : ErrorKind
        Error category.
    message : str
        Explanation suitable for display in place of a number.
    quantity : str
        Name of the offending input or derived quantity, or ``""``.
    """

    kind: ErrorKind
    message: str
    quantity: str = ""


@dataclass(frozen=True)
class CalculationResult:
    """Result of a sample size calculation.

    ``primary`` holds either the headline total sample size or a
    :class:`CalculationError`. When it is an error, ``method_table`` and
    ``group_counts`` are ``None``: no partial number is ever reported for
    inputs that have no finite answer.
    """

    design: StudyDesign
    primary: int | CalculationError
    method_table: MethodTable | None = None
    group_counts: GroupCounts | None = None
    z_scores: ZScorePair | None = None

    @property
    def ok(self) -> bool:
        return not isinstance(self.primary, CalculationError)

    def summary(self) -> str:
        """Human-readable summary."""
        title = _DESIGN_TITLES[self.design]
        lines = [title, "=" * 40]
        if isinstance(self.primary, CalculationError):
            lines.append(f"Error         : {self.primary.kind.value}")
            lines.append(f"                {self.primary.message}")
            return "\n".join(lines)

        lines.append(f"Sample size   : {self.primary}")
        if self.group_counts is not None:
            g = self.group_counts
            lines.append(f"  {g.label1:<12}: {g.n1}")
            lines.append(f"  {g.label2:<12}: {g.n2}")
        if self.z_scores is not None:
            lines.append(f"z alpha       : {self.z_scores.z_alpha}")
            lines.append(f"z beta        : {self.z_scores.z_beta}")
        if self.method_table is not None:
            lines.append("")
            lines.append(f"{'Method':<16}{'n1':>8}{'n2':>8}{'total':>8}")
            for name, est in self.method_table.rows():
                lines.append(f"{name:<16}{est.n1:>8}{est.n2:>8}{est.total:>8}")
        return "\n".join(lines)


_DESIGN_TITLES = {
    StudyDesign.PREVALENCE: "Cross-sectional prevalence survey",
    StudyDesign.CASE_CONTROL: "Unmatched case-control study",
    StudyDesign.COHORT: "Cohort study",
    StudyDesign.RANDOMIZED_TRIAL: "Randomized controlled trial",
    StudyDesign.TWO_MEANS: "Comparison of two independent means",
}


def error_result(
    design: StudyDesign,
    kind: ErrorKind,
    message: str,
    quantity: str = "",
) -> CalculationResult:
    """Result carrying only a :class:`CalculationError`."""
    return CalculationResult(
        design=design,
        primary=CalculationError(kind=kind, message=message, quantity=quantity),
    )


def invalid_ratio_result(design: StudyDesign, ratio: float) -> CalculationResult:
    """``InvalidRatio`` result for a non-positive allocation ratio."""
    return error_result(
        design,
        ErrorKind.INVALID_RATIO,
        f"Allocation ratio must be positive, got {ratio}",
        quantity="ratio",
    )


# ---------------------------------------------------------------------------
# Parameter records
# ---------------------------------------------------------------------------
# Proportions are given as percentages in (0, 100); power in [80, 99];
# confidence in [90, 99]. Ratios <= 0 are reported as InvalidRatio results.

@dataclass(frozen=True)
class PrevalenceParams:
    """Cross-sectional survey estimating a prevalence.

    ``population`` is only used when ``fpc`` is enabled.
    """

    prevalence: float
    precision: float
    population: int | None = None
    fpc: bool = False
    dropout: bool = False


@dataclass(frozen=True)
class CaseControlParams:
    """Unmatched case-control study; ``ratio`` is controls per case."""

    exposure_controls: float
    odds_ratio: float
    ratio: float = DEFAULT_RATIO
    power: float = DEFAULT_POWER
    confidence: float = DEFAULT_CONFIDENCE
    dropout: bool = False


@dataclass(frozen=True)
class CohortParams:
    """Cohort study; ``ratio`` is unexposed per exposed."""

    incidence_exposed: float
    incidence_unexposed: float
    ratio: float = DEFAULT_RATIO
    power: float = DEFAULT_POWER
    confidence: float = DEFAULT_CONFIDENCE
    dropout: bool = False


@dataclass(frozen=True)
class TrialParams:
    """Two-arm randomized trial; ``ratio`` is group 1 per group 2."""

    proportion_group1: float
    proportion_group2: float
    ratio: float = DEFAULT_RATIO
    power: float = DEFAULT_POWER
    confidence: float = DEFAULT_CONFIDENCE
    dropout: bool = False


@dataclass(frozen=True)
class TwoMeansParams:
    """Two independent means; ``ratio`` is n2 per n1."""

    mean1: float
    sd1: float
    mean2: float
    sd2: float
    ratio: float = DEFAULT_RATIO
    power: float = DEFAULT_POWER
    confidence: float = DEFAULT_CONFIDENCE
    dropout: bool = False


# ---------------------------------------------------------------------------
# Shared validation
# ---------------------------------------------------------------------------

def _check_percent(value: float, name: str) -> float:
    """Validate a percentage in (0, 100) and return it as a fraction."""
    if not math.isfinite(value) or not (0.0 < value < 100.0):
        raise ValueError(f"{name} must be in (0, 100) percent, got {value}")
    return value / 100


def _check_targets(power: float, confidence: float) -> None:
    """Validate power and confidence against the documented ranges."""
    lo, hi = POWER_RANGE
    if not (lo <= power <= hi):
        raise ValueError(f"power must be in [{lo}, {hi}] percent, got {power}")
    lo, hi = CONFIDENCE_RANGE
    if not (lo <= confidence <= hi):
        raise ValueError(
            f"confidence must be in [{lo}, {hi}] percent, got {confidence}"
        )


def _check_finite(value: float, name: str) -> float:
    """Reject NaN/inf intermediates instead of propagating them."""
    if not math.isfinite(value):
        raise ValueError(f"Non-finite intermediate {name} = {value}; check inputs")
    return value
