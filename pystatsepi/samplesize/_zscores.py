"""Standard-normal quantiles for confidence and power targets.

Values are fixed three-decimal table entries rather than computed quantiles,
so results are reproducible against published sample size tables.
"""

from __future__ import annotations

from pystatsepi.samplesize._common import ZScorePair

# One-sided quantiles z_{power} for integer power percentages
_Z_BETA = {
    80: 0.842, 81: 0.878, 82: 0.915, 83: 0.954, 84: 0.994,
    85: 1.036, 86: 1.080, 87: 1.126, 88: 1.175, 89: 1.227,
    90: 1.282, 91: 1.341, 92: 1.405, 93: 1.476, 94: 1.555,
    95: 1.645, 96: 1.751, 97: 1.881, 98: 2.054, 99: 2.326,
}
_Z_BETA_DEFAULT = _Z_BETA[80]

# Two-sided quantiles z_{1 - alpha/2} for common confidence levels
_Z_ALPHA = {90: 1.645, 95: 1.96, 98: 2.326, 99: 2.576}


def z_beta(power: float) -> float:
    """Quantile for statistical power given in percent (80-99).

    Powers outside the table fall back to the 80% value (0.842).
    """
    return _Z_BETA.get(power, _Z_BETA_DEFAULT)


def z_alpha(confidence: float) -> float:
    """Two-sided quantile for a confidence level given in percent.

    Confidence levels not in the table are banded down to the nearest
    tabulated level: below 95 -> 1.645, below 98 -> 1.96, below 99 -> 2.326,
    otherwise 2.576.
    """
    if confidence in _Z_ALPHA:
        return _Z_ALPHA[confidence]
    if confidence < 95:
        return 1.645
    if confidence < 98:
        return 1.96
    if confidence < 99:
        return 2.326
    return 2.576


def z_scores(confidence: float, power: float) -> ZScorePair:
    """Quantile pair for a calculation."""
    return ZScorePair(z_alpha=z_alpha(confidence), z_beta=z_beta(power))
