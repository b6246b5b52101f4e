"""Tests for the cohort calculator."""

import pytest

from pystatsepi.samplesize import (
    CohortParams,
    ErrorKind,
    comparative_estimates,
    sample_size_cohort,
    z_scores,
)


class TestSampleSizeCohort:

    def test_matches_estimator(self):
        r = sample_size_cohort(CohortParams(incidence_exposed=20, incidence_unexposed=10))
        expected = comparative_estimates(0.2, 0.1, 1.0, z_scores(95, 80))
        assert r.method_table == expected
        assert r.primary == expected.kelsey.total

    def test_group_labels(self):
        """Ratio is unexposed per exposed."""
        r = sample_size_cohort(
            CohortParams(incidence_exposed=20, incidence_unexposed=10, ratio=2.0)
        )
        g = r.group_counts
        assert (g.label1, g.label2) == ("unexposed", "exposed")
        assert g.n1 == r.method_table.kelsey.n2
        assert g.n2 == r.method_table.kelsey.n1
        assert g.n1 >= 2 * g.n2

    def test_positive_counts(self):
        r = sample_size_cohort(
            CohortParams(incidence_exposed=60, incidence_unexposed=5, ratio=0.25)
        )
        for _, est in r.method_table.rows():
            assert est.n1 > 0 and est.n2 > 0
            assert est.total == est.n1 + est.n2

    def test_equal_proportions(self):
        r = sample_size_cohort(CohortParams(incidence_exposed=15, incidence_unexposed=15))
        assert r.primary.kind is ErrorKind.EQUAL_PROPORTIONS
        assert r.method_table is None

    def test_nearly_equal_proportions(self):
        """Differences below 0.01 percentage points count as equal."""
        r = sample_size_cohort(
            CohortParams(incidence_exposed=15.005, incidence_unexposed=15)
        )
        assert r.primary.kind is ErrorKind.EQUAL_PROPORTIONS

    def test_invalid_ratio(self):
        r = sample_size_cohort(
            CohortParams(incidence_exposed=20, incidence_unexposed=10, ratio=-1)
        )
        assert r.primary.kind is ErrorKind.INVALID_RATIO
        assert r.primary.quantity == "ratio"

    def test_invalid_incidence(self):
        with pytest.raises(ValueError, match="incidence_exposed"):
            sample_size_cohort(CohortParams(incidence_exposed=0, incidence_unexposed=10))
