"""Configuration — working-time budget and logging settings."""

import logging
import os
from typing import Literal

from pydantic import BaseModel, Field, field_validator
from rich.logging import RichHandler

# Length of a working day in minutes (7 hours).
WORKING_TIME_BUDGET = 7 * 60

BUDGET_ENV = "TASKDIST_BUDGET"
LOG_LEVEL_ENV = "TASKDIST_LOG_LEVEL"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class DistributionConfig(BaseModel):
    """Settings for a distribution run."""

    budget: int = Field(default=WORKING_TIME_BUDGET, ge=0, description="Max committed minutes per worker")
    log_level: LogLevel = Field(default="INFO", description="Logging level name for the CLI")

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "DistributionConfig":
        """Build a config from TASKDIST_* environment variables, falling back to defaults."""
        env = os.environ if environ is None else environ
        values: dict[str, str] = {}
        if env.get(BUDGET_ENV):
            values["budget"] = env[BUDGET_ENV]
        if env.get(LOG_LEVEL_ENV):
            values["log_level"] = env[LOG_LEVEL_ENV]
        return cls(**values)


def configure_logging(level: str = "INFO") -> None:
    """Route log records through rich. Meant for scripts, not library code."""
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )
