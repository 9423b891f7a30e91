"""Aggregate statistics over a batch of simulated matches."""

from collections.abc import Sequence
from dataclasses import asdict, dataclass
from typing import Any

import numpy as np

from matchsim.core.exceptions import EmptyResultsError, MissingResultsError
from matchsim.simulation.models import MatchResult


@dataclass(frozen=True)
class SimulationStatistics:
    """Win/draw/loss counts and goal averages for a batch."""

    total_simulations: int
    team_a_wins: int
    draws: int
    team_b_wins: int
    avg_goals_team_a: float
    avg_goals_team_b: float
    avg_spread: float
    avg_total_goals: float

    def _percentage(self, count: int) -> float:
        if self.total_simulations <= 0:
            return 0.0
        return 100.0 * count / self.total_simulations

    @property
    def team_a_win_percentage(self) -> float:
        return self._percentage(self.team_a_wins)

    @property
    def draw_percentage(self) -> float:
        return self._percentage(self.draws)

    @property
    def team_b_win_percentage(self) -> float:
        return self._percentage(self.team_b_wins)

    def to_dict(self) -> dict[str, Any]:
        """Counts, percentages and averages as a plain dict."""
        data = asdict(self)
        data["team_a_win_percentage"] = self.team_a_win_percentage
        data["draw_percentage"] = self.draw_percentage
        data["team_b_win_percentage"] = self.team_b_win_percentage
        return data


def calculate_statistics(results: Sequence[MatchResult] | None) -> SimulationStatistics:
    """
    Calculate statistics from a batch of match results.

    Percentages are not rounded here; rounding is a display concern.

    Args:
        results: Non-empty sequence of simulated matches

    Returns:
        SimulationStatistics for the batch

    Raises:
        MissingResultsError: If results is None
        EmptyResultsError: If results has no elements
    """
    if results is None:
        raise MissingResultsError("Results must not be None.", details={"argument": "results"})

    if len(results) == 0:
        raise EmptyResultsError("Results cannot be empty.", details={"argument": "results"})

    goals = np.array([(r.goals_team_a, r.goals_team_b) for r in results], dtype=np.int64)
    goals_a = goals[:, 0]
    goals_b = goals[:, 1]
    spread = goals_a - goals_b

    return SimulationStatistics(
        total_simulations=len(results),
        team_a_wins=int(np.count_nonzero(spread > 0)),
        draws=int(np.count_nonzero(spread == 0)),
        team_b_wins=int(np.count_nonzero(spread < 0)),
        avg_goals_team_a=float(goals_a.mean()),
        avg_goals_team_b=float(goals_b.mean()),
        avg_spread=float(spread.mean()),
        avg_total_goals=float((goals_a + goals_b).mean()),
    )


# Name used by callers that think in terms of "simulate, then summarize"
summarize = calculate_statistics
