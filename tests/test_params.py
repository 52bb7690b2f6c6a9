"""Test del dimensionamento."""

import math

import pytest

from bloom_filter import BloomFilter
from bloom_params import (
    BloomParams,
    optimal_num_hashes,
    optimal_params,
    theoretical_false_positive_rate,
)


class TestTheoreticalRate:

    def test_reference_configuration(self):
        p = theoretical_false_positive_rate(10_000, 7, 1_000)
        assert p == pytest.approx((1 - math.exp(-0.7)) ** 7)
        assert 0.008 < p < 0.0085

    def test_empty_filter(self):
        assert theoretical_false_positive_rate(100, 3, 0) == 0.0

    def test_grows_with_items(self):
        rates = [theoretical_false_positive_rate(1000, 3, n) for n in (10, 100, 500)]
        assert rates == sorted(rates)


class TestOptimalParams:

    def test_one_percent(self):
        params = optimal_params(1_000, 0.01)
        assert params == BloomParams(size=9586, num_hashes=7)

    def test_num_hashes_at_least_one(self):
        assert optimal_num_hashes(10, 1_000) == 1
        assert optimal_num_hashes(10_000, 1_000) == 7

    @pytest.mark.parametrize("n, p", [(0, 0.01), (-5, 0.01), (100, 0.0), (100, 1.0), (100, 1.5)])
    def test_invalid_arguments(self, n, p):
        with pytest.raises(ValueError):
            optimal_params(n, p)

    def test_build(self):
        bf = optimal_params(500, 0.05).build()
        assert isinstance(bf, BloomFilter)
        assert bf.hash_name == "rolling"
        assert bf.bit_count == 0

    def test_frozen(self):
        params = BloomParams(size=10, num_hashes=2)
        with pytest.raises(AttributeError):
            params.size = 20
