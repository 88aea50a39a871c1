"""Pydantic models for run configuration."""

from enum import IntEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class VerbosityLevel(IntEnum):
    """How much diagnostic detail a failure report includes."""

    QUIET = 0
    VERBOSE = 1  # Adds the list of every failing value
    VERY_VERBOSE = 2  # Adds the full execution tree


class Parameters(BaseModel):
    """Parameters of a property run."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    seed: int | None = None
    num_runs: int = Field(default=100, ge=1)
    max_skips_per_run: int = Field(default=100, ge=0)
    max_shrinks: int = Field(default=1000, ge=0)
    verbose: VerbosityLevel = VerbosityLevel.QUIET
    end_on_failure: bool = False
    path: str | None = None
    interrupt_after_time_limit: int | None = Field(default=None, ge=0)
    mark_interrupt_as_failure: bool = False

    @field_validator("verbose", mode="before")
    @classmethod
    def parse_verbosity_name(cls, value: object) -> object:
        """Accept level names such as "verbose" or "VERY_VERBOSE"."""
        if isinstance(value, str):
            name = value.strip().upper().replace("-", "_")
            if name in VerbosityLevel.__members__:
                return VerbosityLevel[name]
        return value

    @property
    def max_skips(self) -> int:
        """Total number of skipped trials tolerated before giving up."""
        return self.max_skips_per_run * self.num_runs
