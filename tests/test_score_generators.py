"""Unit tests for score generators.

Run with: pytest tests/test_score_generators.py -v
"""

from unittest.mock import MagicMock

import numpy as np
import pytest
from scipy.stats import poisson

from matchsim.simulation.score_generators import (
    PoissonScoreGenerator,
    ScoreGenerator,
    create_rng,
)


class TestPoissonScoreGenerator:
    """Test cases for the Knuth Poisson sampler."""

    @pytest.fixture
    def generator(self) -> PoissonScoreGenerator:
        """Create a seeded generator."""
        return PoissonScoreGenerator(create_rng(42))

    def test_satisfies_protocol(self, generator: PoissonScoreGenerator):
        """Test the generator exposes the ScoreGenerator capability."""
        assert isinstance(generator, ScoreGenerator)

    def test_requires_rng(self):
        """Test a missing randomness source is rejected."""
        with pytest.raises(TypeError):
            PoissonScoreGenerator(None)  # type: ignore[arg-type]

    def test_zero_rate_returns_zero(self, generator: PoissonScoreGenerator):
        """Test lambda = 0 always produces 0."""
        assert all(generator.generate(0.0) == 0 for _ in range(100))

    def test_zero_rate_consumes_no_randomness(self):
        """Test lambda = 0 never touches the random source."""
        rng = MagicMock()
        generator = PoissonScoreGenerator(rng)

        for _ in range(10):
            assert generator.generate(0.0) == 0

        rng.random.assert_not_called()

    def test_knuth_iteration(self):
        """Test k - 1 is returned once the product drops to exp(-lambda)."""
        rng = MagicMock()
        # exp(-1) ~ 0.368: 0.9 -> 0.9, 0.8 -> 0.72, 0.5 -> 0.36 (stop at k=3)
        rng.random.side_effect = [0.9, 0.8, 0.5]
        generator = PoissonScoreGenerator(rng)

        assert generator.generate(1.0) == 2
        assert rng.random.call_count == 3

    @pytest.mark.parametrize("rate", [0.0, 0.01, 0.5, 1.5, 2.5, 5.0, 10.0, 20.0])
    def test_non_negative(self, generator: PoissonScoreGenerator, rate: float):
        """Test samples are never negative across the accepted range."""
        samples = [generator.generate(rate) for _ in range(500)]
        assert min(samples) >= 0
        assert all(isinstance(s, int) for s in samples)

    def test_mean_converges(self, generator: PoissonScoreGenerator):
        """Test the sample mean approaches lambda."""
        samples = [generator.generate(2.5) for _ in range(10_000)]
        assert abs(np.mean(samples) - 2.5) < 0.15

    def test_small_rate_skews_to_zero(self, generator: PoissonScoreGenerator):
        """Test a tiny lambda produces mostly zeros."""
        samples = [generator.generate(0.01) for _ in range(1000)]
        assert samples.count(0) >= 900

    def test_frequencies_match_poisson_pmf(self, generator: PoissonScoreGenerator):
        """Test empirical frequencies track the Poisson pmf."""
        n = 20_000
        samples = np.array([generator.generate(1.5) for _ in range(n)])

        for goals in range(5):
            observed = np.mean(samples == goals)
            assert abs(observed - poisson.pmf(goals, 1.5)) < 0.02

    def test_reproducible_with_seed(self):
        """Test identical seeds give identical sequences."""
        first = PoissonScoreGenerator(create_rng(7))
        second = PoissonScoreGenerator(create_rng(7))
        rates = [0.5, 1.5, 0.0, 3.2, 20.0] * 20

        assert [first.generate(r) for r in rates] == [second.generate(r) for r in rates]
