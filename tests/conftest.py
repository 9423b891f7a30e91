"""Pytest configuration and shared fixtures."""

import logging
from collections.abc import Generator

import pytest

from matchsim.core.config import get_settings
from matchsim.simulation.models import MatchResult
from matchsim.simulation.monte_carlo import MonteCarloSimulator


@pytest.fixture
def seeded_simulator() -> MonteCarloSimulator:
    """Seeded simulator; the parallel path runs on threads to keep tests fast."""
    return MonteCarloSimulator(seed=42, n_jobs=2, backend="threading")


@pytest.fixture
def sample_results() -> list[MatchResult]:
    """Two team A wins, one draw, two team B wins."""
    return [
        MatchResult(2, 1),
        MatchResult(1, 1),
        MatchResult(0, 2),
        MatchResult(3, 0),
        MatchResult(1, 2),
    ]


@pytest.fixture
def clean_settings(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Generator[None, None, None]:
    """Isolate settings from the developer's environment and write into tmp_path."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("MATCHSIM_RESULTS_DIR", str(tmp_path / "results"))
    monkeypatch.setenv("MATCHSIM_PARALLEL_BACKEND", "threading")
    monkeypatch.setenv("MATCHSIM_LOG_LEVEL", "WARNING")
    get_settings.cache_clear()

    yield

    get_settings.cache_clear()
    # setup_logging binds handlers to the captured stderr of the test
    logging.getLogger().handlers.clear()
