"""Custom exceptions for the simulator."""

from typing import Any


class MatchSimError(Exception):
    """Base exception for the simulator."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class SimulationRangeError(MatchSimError, ValueError):
    """A goal rate or simulation count is outside its accepted domain."""

    def __init__(
        self,
        param_name: str,
        value: Any,
        minimum: float | int,
        maximum: float | int,
        message: str | None = None,
    ):
        self.param_name = param_name
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
        if message is None:
            message = f"{param_name} must be between {minimum} and {maximum}."
        super().__init__(
            f"{message} (parameter '{param_name}', got {value!r})",
            details={
                "param_name": param_name,
                "value": value,
                "minimum": minimum,
                "maximum": maximum,
            },
        )


class MissingResultsError(MatchSimError, TypeError):
    """No result collection was given to the aggregator."""

    pass


class EmptyResultsError(MatchSimError, ValueError):
    """The result collection given to the aggregator has no elements."""

    pass


class ReportWriteError(MatchSimError):
    """Error writing a report file."""

    pass
