"""Application configuration using Pydantic Settings."""

import logging
from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from matchsim.core.constants import (
    DEFAULT_OUTPUT_PREFIX,
    DEFAULT_SIMULATION_COUNT,
    MAX_SIMULATIONS,
    MIN_SIMULATIONS,
    RESULTS_FOLDER,
)

_config_logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="MATCHSIM_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra env vars not defined in the model
    )

    # App
    app_name: str = "Soccer Match Simulator"
    app_version: str = "0.1.0"
    log_level: str = "WARNING"
    log_json: bool = False

    # Output
    results_dir: str = RESULTS_FOLDER
    default_output_prefix: str = DEFAULT_OUTPUT_PREFIX

    # Simulation
    default_simulation_count: int = Field(
        default=DEFAULT_SIMULATION_COUNT, ge=MIN_SIMULATIONS, le=MAX_SIMULATIONS
    )
    parallel_backend: str = "loky"  # joblib backend
    parallel_jobs: int = -1  # joblib n_jobs, -1 = all cores

    @model_validator(mode="after")
    def _validate_output(self) -> "Settings":
        """Validate that output locations are usable."""
        if not self.results_dir.strip():
            raise ValueError("MATCHSIM_RESULTS_DIR must not be blank")
        if not self.default_output_prefix.strip():
            raise ValueError("MATCHSIM_DEFAULT_OUTPUT_PREFIX must not be blank")
        if self.parallel_jobs == 0:
            _config_logger.warning("MATCHSIM_PARALLEL_JOBS=0 is invalid for joblib, using 1")
            self.parallel_jobs = 1
        return self


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
