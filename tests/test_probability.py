"""Tests for the Monte Carlo probability estimator."""

import random

import pytest

from conpave_adviser import probability
from conpave_adviser.config import load_config
from conpave_adviser.engine import run_monte_carlo_estimate
from conpave_adviser.exceptions import SampleSizeLimitError, ZeroSampleSizeError
from conpave_adviser.probability import ProbabilityEstimator, random_parameter_set
from conpave_adviser.schema import PavementType


@pytest.fixture
def small_chunks(monkeypatch):
    """Split trials into many chunks so the thread pool is exercised."""
    monkeypatch.setattr(probability, "CHUNK_SIZE", 50)


class TestEstimate:
    """Counts and probabilities."""

    def test_counts_add_up(self):
        report = ProbabilityEstimator().estimate(200, seed=7)

        assert report.sample_size == 200
        assert sum(report.counts.values()) == 200
        assert set(report.counts) == set(PavementType)
        assert sum(report.raw_probabilities.values()) == pytest.approx(1.0)

    def test_formatted_probabilities(self):
        report = ProbabilityEstimator().estimate(200, seed=7)
        for t in PavementType:
            assert report.formatted_probabilities[t] == f"{report.raw_probabilities[t] * 100:.1f}%"
            assert report.formatted_probabilities[t].endswith("%")

    def test_single_trial(self):
        report = ProbabilityEstimator().estimate(1, seed=3)
        assert sorted(report.raw_probabilities.values()) == [0.0, 0.0, 0.0, 1.0]

    def test_same_seed_same_counts(self):
        first = ProbabilityEstimator().estimate(150, seed=42)
        second = ProbabilityEstimator().estimate(150, seed=42)
        assert first.counts == second.counts

    def test_injected_generator(self):
        first = ProbabilityEstimator().estimate(100, rng=random.Random(5))
        second = ProbabilityEstimator().estimate(100, rng=random.Random(5))
        assert first.counts == second.counts

    def test_worker_count_does_not_change_counts(self, small_chunks):
        serial = ProbabilityEstimator().estimate(200, seed=11, workers=1)
        pooled = ProbabilityEstimator().estimate(200, seed=11, workers=3)
        assert serial.counts == pooled.counts

    def test_engine_wrapper(self):
        report = run_monte_carlo_estimate(50, seed=1)
        assert report.sample_size == 50


class TestSampleSizeLimits:
    """Rejected sample sizes."""

    @pytest.mark.parametrize("size", [0, -5])
    def test_non_positive_sample_size(self, size):
        with pytest.raises(ZeroSampleSizeError):
            ProbabilityEstimator().estimate(size)

    def test_sample_size_above_cap(self, tmp_path):
        config_file = tmp_path / "adviser-config.yaml"
        config_file.write_text("simulation:\n  max_sample_size: 10\n")
        load_config(config_file)

        ProbabilityEstimator().estimate(10, seed=1)
        with pytest.raises(SampleSizeLimitError):
            ProbabilityEstimator().estimate(11, seed=1)


class TestRandomParameterSet:
    def test_draws_complete_sets(self):
        rng = random.Random(0)
        for _ in range(20):
            params = random_parameter_set(rng)
            assert params.has_complete_primary_input()
            assert params.marine_environment is not None


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
