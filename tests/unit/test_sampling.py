"""
Unit tests for the sampling ratio
"""
import math

import numpy as np
import pytest
from profbuilder.task.builder.sampling import calculateSamplingRatio, calculateSamplingRatios


class TestCalculateSamplingRatio:
    """Test the scalar ratio"""

    @pytest.mark.parametrize("rate", [0, 1, -5])
    @pytest.mark.parametrize("count,metric", [(0, 0), (1, 10), (100, 3), (5, 1 << 40)])
    def test_disabled_rate(self, rate, count, metric):
        """Test rates of 1 or below never correct"""
        assert calculateSamplingRatio(rate, count, metric) == 1.0

    def test_no_events(self):
        """Test a count below 1 never corrects"""
        assert calculateSamplingRatio(10, 0, 100) == 1.0
        assert calculateSamplingRatio(10, -1, 100) == 1.0

    def test_non_positive_metric(self):
        """Test a zero metric does not divide by zero"""
        assert calculateSamplingRatio(10, 3, 0) == 1.0

    def test_half_probability(self):
        """Test an average size of rate * ln 2 doubles the values"""
        ratio = calculateSamplingRatio(10, 1, 10 * math.log(2))
        assert ratio == pytest.approx(2.0)

    def test_small_events(self):
        """Test small events get a large ratio"""
        ratio = calculateSamplingRatio(10, 10, 10)
        assert ratio == pytest.approx(1.0 / (1.0 - math.exp(-0.1)))

    def test_large_events(self):
        """Test events much larger than the rate are barely corrected"""
        assert calculateSamplingRatio(10, 1, 10000) == pytest.approx(1.0)


class TestCalculateSamplingRatios:
    """Test the vectorized ratio"""

    def test_matches_scalar(self):
        """Test the vectorized form agrees with the scalar one"""
        counts = [1, 10, 0, 4, 3]
        metrics = [7, 10, 50, 4000, 0]
        ratios = calculateSamplingRatios(10, counts, metrics)
        expected = [calculateSamplingRatio(10, c, m) for c, m in zip(counts, metrics)]
        assert isinstance(ratios, np.ndarray)
        assert ratios.tolist() == pytest.approx(expected)

    def test_disabled(self):
        """Test a disabled rate yields ones"""
        assert calculateSamplingRatios(1, [1, 2], [3, 4]).tolist() == [1.0, 1.0]

    def test_empty(self):
        """Test an empty column"""
        assert calculateSamplingRatios(10, [], []).size == 0
