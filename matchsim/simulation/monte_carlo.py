"""Monte Carlo simulator for football matches.

Each simulated match draws team A's and team B's goals independently from
a score generator. Small batches run sequentially on one shared generator,
which makes seeded runs exactly reproducible. Large batches are split into
contiguous chunks run by joblib workers, each owning a private generator
seeded from a child of the simulator's ``SeedSequence``.
"""

import logging
from collections.abc import Callable

import numpy as np
from joblib import Parallel, delayed, effective_n_jobs

from matchsim.core.constants import PARALLEL_THRESHOLD
from matchsim.simulation.models import MatchResult, SimulationParameters
from matchsim.simulation.score_generators import (
    PoissonScoreGenerator,
    ScoreGenerator,
    create_rng,
)

logger = logging.getLogger(__name__)

GeneratorFactory = Callable[[np.random.Generator], ScoreGenerator]


def _play_match(generator: ScoreGenerator, rate_a: float, rate_b: float) -> MatchResult:
    goals_a = generator.generate(rate_a)
    goals_b = generator.generate(rate_b)
    return MatchResult(goals_a, goals_b)


def _simulate_chunk(
    generator_factory: GeneratorFactory,
    seed_sequence: np.random.SeedSequence,
    rate_a: float,
    rate_b: float,
    size: int,
) -> list[MatchResult]:
    """Worker task: simulate ``size`` matches on a private generator."""
    generator = generator_factory(create_rng(seed_sequence))
    return [_play_match(generator, rate_a, rate_b) for _ in range(size)]


def _chunk_bounds(count: int, n_chunks: int) -> list[tuple[int, int]]:
    """Split [0, count) into at most n_chunks contiguous, non-empty slices."""
    edges = np.linspace(0, count, n_chunks + 1, dtype=int)
    return [
        (int(start), int(stop))
        for start, stop in zip(edges[:-1], edges[1:])
        if stop > start
    ]


class MonteCarloSimulator:
    """
    Runs batches of simulated matches.

    The sequential path threads one generator through every draw, so two
    simulators built with the same seed produce identical batches. The
    parallel path uses independent per-worker streams and does not match
    the sequential output for the same seed.
    """

    def __init__(
        self,
        seed: int | None = None,
        generator_factory: GeneratorFactory = PoissonScoreGenerator,
        parallel_threshold: int = PARALLEL_THRESHOLD,
        n_jobs: int = -1,
        backend: str = "loky",
    ):
        """
        Initialize the simulator.

        Args:
            seed: Seed for reproducible runs (None = OS entropy)
            generator_factory: Builds a score generator from a numpy Generator
            parallel_threshold: Counts at or above this run in parallel
            n_jobs: joblib worker count (-1 = all cores)
            backend: joblib backend ("loky", "threading", ...)
        """
        if generator_factory is None:
            raise TypeError("generator_factory must not be None")

        self.seed = seed
        self.generator_factory = generator_factory
        self.parallel_threshold = parallel_threshold
        self.n_jobs = n_jobs
        self.backend = backend

        self._seed_sequence = np.random.SeedSequence(seed)
        self._score_generator = generator_factory(create_rng(self._seed_sequence))

    def run_simulations(self, rate_a: float, rate_b: float, count: int) -> list[MatchResult]:
        """
        Simulate ``count`` matches.

        Args:
            rate_a: Expected goals for team A, finite in [0, 20]
            rate_b: Expected goals for team B, finite in [0, 20]
            count: Number of matches, in [1, 1_000_000]

        Returns:
            Results in simulation order (index 0 is simulation #1)

        Raises:
            SimulationRangeError: On any invalid argument, before sampling
        """
        params = SimulationParameters.validated(rate_a, rate_b, count)

        if params.count >= self.parallel_threshold:
            return self._run_parallel(params)

        logger.debug(
            "Running %d simulations sequentially (rate_a=%.2f, rate_b=%.2f)",
            params.count,
            params.rate_a,
            params.rate_b,
        )
        return [self.simulate_match(params.rate_a, params.rate_b) for _ in range(params.count)]

    def simulate_match(self, rate_a: float, rate_b: float) -> MatchResult:
        """Simulate one match on the shared generator (no validation)."""
        return _play_match(self._score_generator, rate_a, rate_b)

    def _run_parallel(self, params: SimulationParameters) -> list[MatchResult]:
        bounds = _chunk_bounds(params.count, effective_n_jobs(self.n_jobs))
        seeds = self._seed_sequence.spawn(len(bounds))

        logger.debug(
            "Running %d simulations in %d parallel chunks (backend=%s)",
            params.count,
            len(bounds),
            self.backend,
        )

        chunks = Parallel(n_jobs=self.n_jobs, backend=self.backend)(
            delayed(_simulate_chunk)(
                self.generator_factory,
                seed,
                params.rate_a,
                params.rate_b,
                stop - start,
            )
            for (start, stop), seed in zip(bounds, seeds)
        )

        results: list[MatchResult] = [None] * params.count  # type: ignore[list-item]
        for (start, stop), chunk in zip(bounds, chunks):
            results[start:stop] = chunk

        return results


def simulate(
    rate_a: float,
    rate_b: float,
    count: int,
    seed: int | None = None,
) -> list[MatchResult]:
    """Simulate ``count`` matches with a default Poisson simulator."""
    return MonteCarloSimulator(seed=seed).run_simulations(rate_a, rate_b, count)
