"""Tests for the randomized trial calculator."""

import math

from pystatsepi.samplesize import (
    ErrorKind,
    TrialParams,
    comparative_estimates,
    sample_size_trial,
    z_scores,
)


class TestSampleSizeTrial:

    def test_group2_is_reference(self):
        """The estimator is called with group 2 first; the ratio scales group 1."""
        r = sample_size_trial(
            TrialParams(proportion_group1=40, proportion_group2=25, ratio=2.0)
        )
        expected = comparative_estimates(0.25, 0.4, 2.0, z_scores(95, 80))
        assert r.method_table == expected
        g = r.group_counts
        assert (g.label1, g.label2) == ("group1", "group2")
        assert g.n2 == expected.kelsey.n1
        assert g.n1 == math.ceil(g.n2 * 2.0)
        assert r.primary == g.total

    def test_equal_allocation_symmetric(self):
        a = sample_size_trial(TrialParams(proportion_group1=40, proportion_group2=25))
        b = sample_size_trial(TrialParams(proportion_group1=25, proportion_group2=40))
        assert a.primary == b.primary

    def test_equal_proportions(self):
        r = sample_size_trial(TrialParams(proportion_group1=50, proportion_group2=50))
        assert not r.ok
        assert r.primary.kind is ErrorKind.EQUAL_PROPORTIONS
        assert r.group_counts is None

    def test_higher_confidence_more_n(self):
        a = sample_size_trial(
            TrialParams(proportion_group1=40, proportion_group2=25, confidence=95)
        )
        b = sample_size_trial(
            TrialParams(proportion_group1=40, proportion_group2=25, confidence=99)
        )
        assert b.primary > a.primary

    def test_invalid_ratio(self):
        r = sample_size_trial(
            TrialParams(proportion_group1=40, proportion_group2=25, ratio=0)
        )
        assert r.primary.kind is ErrorKind.INVALID_RATIO
