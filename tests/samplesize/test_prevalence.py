"""Tests for the prevalence survey calculator and curve."""

import numpy as np
import pytest

from pystatsepi.samplesize import (
    CalculationResult,
    PrevalenceParams,
    StudyDesign,
    prevalence_curve,
    sample_size_prevalence,
)


class TestSampleSizePrevalence:
    """N = 4PQ / D^2 with optional FPC and dropout."""

    def test_classic(self):
        """P=50%, D=5% -> 400."""
        r = sample_size_prevalence(PrevalenceParams(prevalence=50, precision=5))
        assert r.primary == 400
        assert r.design is StudyDesign.PREVALENCE

    def test_fpc(self):
        """Population 1000: 400 / 1.4 = 285.71 -> 286."""
        r = sample_size_prevalence(
            PrevalenceParams(prevalence=50, precision=5, population=1000, fpc=True)
        )
        assert r.primary == 286

    def test_population_ignored_without_fpc(self):
        r = sample_size_prevalence(
            PrevalenceParams(prevalence=50, precision=5, population=1000)
        )
        assert r.primary == 400

    def test_dropout(self):
        """400 / 0.9 = 444.4 -> 445."""
        r = sample_size_prevalence(
            PrevalenceParams(prevalence=50, precision=5, dropout=True)
        )
        assert r.primary == 445

    def test_fpc_then_dropout(self):
        """FPC is applied before dropout: 285.71 / 0.9 = 317.46 -> 318."""
        r = sample_size_prevalence(
            PrevalenceParams(
                prevalence=50, precision=5, population=1000, fpc=True, dropout=True,
            )
        )
        assert r.primary == 318

    def test_symmetric_in_prevalence(self):
        a = sample_size_prevalence(PrevalenceParams(prevalence=33, precision=5))
        b = sample_size_prevalence(PrevalenceParams(prevalence=67, precision=5))
        assert a.primary == b.primary == 354

    def test_finer_precision_more_n(self):
        a = sample_size_prevalence(PrevalenceParams(prevalence=30, precision=5))
        b = sample_size_prevalence(PrevalenceParams(prevalence=30, precision=3))
        assert b.primary > a.primary

    def test_no_group_breakdown(self):
        r = sample_size_prevalence(PrevalenceParams(prevalence=50, precision=5))
        assert r.ok
        assert r.method_table is None
        assert r.group_counts is None

    @pytest.mark.parametrize("prevalence", [0, 100, -5, 150])
    def test_invalid_prevalence(self, prevalence):
        with pytest.raises(ValueError, match="prevalence"):
            sample_size_prevalence(PrevalenceParams(prevalence=prevalence, precision=5))

    def test_invalid_precision(self):
        with pytest.raises(ValueError, match="precision"):
            sample_size_prevalence(PrevalenceParams(prevalence=50, precision=0))

    def test_summary(self):
        r = sample_size_prevalence(PrevalenceParams(prevalence=50, precision=5))
        text = r.summary()
        assert "prevalence" in text.lower()
        assert "400" in text

    def test_deterministic(self):
        params = PrevalenceParams(prevalence=37, precision=4, population=5000, fpc=True)
        assert sample_size_prevalence(params) == sample_size_prevalence(params)
        assert isinstance(sample_size_prevalence(params), CalculationResult)


class TestPrevalenceCurve:
    """Unrounded N(P) for plotting."""

    def test_shape_and_endpoints(self):
        p, n = prevalence_curve(5, num=11)
        assert p.shape == n.shape == (11,)
        assert p[0] == 0.0 and p[-1] == 1.0
        assert n[0] == 0.0 and n[-1] == 0.0

    def test_peak_at_half(self):
        p, n = prevalence_curve(5, num=101)
        assert p[np.argmax(n)] == pytest.approx(0.5)
        assert n.max() == pytest.approx(400.0)

    def test_interior_point(self):
        p, n = prevalence_curve(5, num=11)
        assert p[3] == pytest.approx(0.3)
        assert n[3] == pytest.approx(336.0)

    def test_invalid_num(self):
        with pytest.raises(ValueError, match="num"):
            prevalence_curve(5, num=1)
