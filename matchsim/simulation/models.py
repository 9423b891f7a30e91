"""Value types for simulated matches and simulation inputs."""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from matchsim.core.constants import (
    MAX_GOAL_RATE,
    MAX_SIMULATIONS,
    MIN_GOAL_RATE,
    MIN_SIMULATIONS,
)
from matchsim.core.exceptions import SimulationRangeError


@dataclass(frozen=True)
class MatchResult:
    """Result of a single simulated 90-minute match."""

    goals_team_a: int
    goals_team_b: int

    @property
    def spread(self) -> int:
        """Team A goals minus team B goals."""
        return self.goals_team_a - self.goals_team_b

    @property
    def total_goals(self) -> int:
        return self.goals_team_a + self.goals_team_b

    @property
    def is_team_a_win(self) -> bool:
        return self.spread > 0

    @property
    def is_draw(self) -> bool:
        return self.spread == 0

    @property
    def is_team_b_win(self) -> bool:
        return self.spread < 0


# Bounds reported for each validated field, in validation order
_FIELD_BOUNDS: dict[str, tuple[float | int, float | int]] = {
    "rate_a": (MIN_GOAL_RATE, MAX_GOAL_RATE),
    "rate_b": (MIN_GOAL_RATE, MAX_GOAL_RATE),
    "count": (MIN_SIMULATIONS, MAX_SIMULATIONS),
}


class SimulationParameters(BaseModel):
    """Validated inputs for one simulation batch."""

    # strict: no coercion of bools, strings or whole-number floats
    model_config = ConfigDict(frozen=True, strict=True)

    rate_a: float = Field(
        ge=MIN_GOAL_RATE,
        le=MAX_GOAL_RATE,
        allow_inf_nan=False,
        description="Expected goals for team A (lambda)",
    )
    rate_b: float = Field(
        ge=MIN_GOAL_RATE,
        le=MAX_GOAL_RATE,
        allow_inf_nan=False,
        description="Expected goals for team B (lambda)",
    )
    count: int = Field(
        ge=MIN_SIMULATIONS,
        le=MAX_SIMULATIONS,
        description="Number of matches to simulate",
    )

    @classmethod
    def validated(cls, rate_a: float, rate_b: float, count: int) -> "SimulationParameters":
        """
        Build parameters, reporting the first violation as a range error.

        Raises:
            SimulationRangeError: If a rate is non-finite or outside
                [0, 20], the count is outside [1, 1_000_000], or a
                value has the wrong type (bools and strings are not coerced).
        """
        try:
            return cls(rate_a=rate_a, rate_b=rate_b, count=count)
        except PydanticValidationError as e:
            raise _to_range_error(e, {"rate_a": rate_a, "rate_b": rate_b, "count": count}) from e


_BOUND_ERRORS = {"greater_than_equal", "less_than_equal"}


def _to_range_error(
    error: PydanticValidationError, inputs: dict[str, object]
) -> SimulationRangeError:
    """Convert a pydantic failure into a range error for the first bad field."""
    failed = {str(err["loc"][0]): err for err in error.errors() if err.get("loc")}
    field_name = next((name for name in _FIELD_BOUNDS if name in failed), "rate_a")
    minimum, maximum = _FIELD_BOUNDS[field_name]
    error_type = failed[field_name]["type"] if field_name in failed else ""

    if error_type == "finite_number":
        message = f"{field_name} must be a finite number."
    elif error_type in _BOUND_ERRORS and field_name == "count":
        message = f"Simulation count must be between {minimum} and {maximum:,}."
    elif error_type in _BOUND_ERRORS:
        message = f"Goal rate must be between {minimum} and {maximum}."
    elif field_name == "count":
        message = "count must be an integer."
    else:
        message = f"{field_name} must be a real number."

    return SimulationRangeError(field_name, inputs.get(field_name), minimum, maximum, message)
