"""Monte Carlo match simulation: sampling, simulation loop, aggregation."""

from matchsim.simulation.models import MatchResult, SimulationParameters
from matchsim.simulation.monte_carlo import MonteCarloSimulator, simulate
from matchsim.simulation.score_generators import PoissonScoreGenerator, ScoreGenerator
from matchsim.simulation.statistics import (
    SimulationStatistics,
    calculate_statistics,
    summarize,
)

__all__ = [
    "MatchResult",
    "MonteCarloSimulator",
    "PoissonScoreGenerator",
    "ScoreGenerator",
    "SimulationParameters",
    "SimulationStatistics",
    "calculate_statistics",
    "simulate",
    "summarize",
]
