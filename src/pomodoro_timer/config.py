"""Configuration management for pomodoro-timer."""

import logging
import tomllib
from datetime import timedelta
from pathlib import Path
from typing import Self

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, PositiveInt, ValidationError, model_validator

from .constants import (
    DEFAULT_LONG_REST_MINUTES,
    DEFAULT_RESTS_BEFORE_LONG_REST,
    DEFAULT_SHORT_REST_MINUTES,
    DEFAULT_WORK_MINUTES,
)
from .errors import ConfigError
from .models.phase import PhaseKind, cycle_length, start_index

logger = logging.getLogger(__name__)


class DurationsConfig(BaseModel):
    """Phase durations in minutes."""

    work: PositiveInt = DEFAULT_WORK_MINUTES
    short_rest: PositiveInt = DEFAULT_SHORT_REST_MINUTES
    long_rest: PositiveInt = DEFAULT_LONG_REST_MINUTES


class CycleConfig(BaseModel):
    """Shape of the work/rest cycle."""

    rests_before_long_rest: PositiveInt = DEFAULT_RESTS_BEFORE_LONG_REST


class FileConfig(BaseModel):
    """Root of the TOML configuration file."""

    durations: DurationsConfig = Field(default_factory=DurationsConfig)
    cycle: CycleConfig = Field(default_factory=CycleConfig)

    def to_timer_config(self) -> "TimerConfig":
        """Build the runtime timer configuration from file values."""
        return TimerConfig(
            work_minutes=self.durations.work,
            short_rest_minutes=self.durations.short_rest,
            long_rest_minutes=self.durations.long_rest,
            rests_before_long_rest=self.cycle.rests_before_long_rest,
        )


class TimerConfig(BaseModel):
    """Runtime configuration shared by the argument processor and the engine.

    Built once at startup, updated by command-line commands, then handed
    to the engine which reads durations at the start of every phase.

    Attributes:
        work_minutes: Length of a work phase
        short_rest_minutes: Length of a short rest
        long_rest_minutes: Length of a long rest
        rests_before_long_rest: Work phases per cycle; the last one is
            followed by a long rest instead of a short one
        cycle_index: Position in the cycle, ``0 <= cycle_index < cycle_length``
    """

    model_config = ConfigDict(validate_assignment=True)

    work_minutes: PositiveInt = DEFAULT_WORK_MINUTES
    short_rest_minutes: PositiveInt = DEFAULT_SHORT_REST_MINUTES
    long_rest_minutes: PositiveInt = DEFAULT_LONG_REST_MINUTES
    rests_before_long_rest: PositiveInt = DEFAULT_RESTS_BEFORE_LONG_REST
    cycle_index: int = 0

    @model_validator(mode="after")
    def validate_cycle_index_in_range(self) -> Self:
        """Ensure cycle_index points inside the cycle."""
        if not 0 <= self.cycle_index < self.cycle_length:
            raise ValueError(
                f"cycle_index must be in [0, {self.cycle_length}), got {self.cycle_index}"
            )
        return self

    @property
    def cycle_length(self) -> int:
        """Number of phases in one full cycle."""
        return cycle_length(self.rests_before_long_rest)

    def minutes_for(self, phase: PhaseKind) -> int:
        """Get the duration of a phase in whole minutes."""
        if phase == PhaseKind.WORK:
            return self.work_minutes
        elif phase == PhaseKind.SHORT_REST:
            return self.short_rest_minutes
        else:
            return self.long_rest_minutes

    def duration_for(self, phase: PhaseKind) -> timedelta:
        """Get the duration of a phase."""
        return timedelta(minutes=self.minutes_for(phase))

    def set_start_interval(self, interval: int) -> None:
        """Start on the given work interval (1-based, wraps around the cycle)."""
        self.cycle_index = start_index(interval, self.rests_before_long_rest)

    def set_durations(self, work: int, short_rest: int, long_rest: int) -> None:
        """Replace all three durations.

        Raises:
            ValidationError: If any value is not a positive integer. No
                duration is changed in that case.
        """
        durations = DurationsConfig(work=work, short_rest=short_rest, long_rest=long_rest)
        self.work_minutes = durations.work
        self.short_rest_minutes = durations.short_rest
        self.long_rest_minutes = durations.long_rest


def load_config(config_path: Path | None = None) -> TimerConfig:
    """Load the timer configuration.

    Args:
        config_path: TOML file to read, or None for built-in defaults

    Returns:
        Timer configuration with file values applied

    Raises:
        ConfigError: If the file is missing, malformed or invalid
    """
    if config_path is None:
        return TimerConfig()
    if not config_path.exists():
        raise ConfigError(f"Config file not found: {config_path}")
    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
        file_config = FileConfig.model_validate(data)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {config_path}: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"Invalid config in {config_path}: {e}") from e
    logger.info(f"Loaded config from {config_path}")
    return file_config.to_timer_config()


def write_config_template(config_path: Path) -> Path:
    """Write a config.toml template holding the default values.

    Args:
        config_path: Destination file

    Returns:
        Path to the written config file
    """
    template = FileConfig().model_dump()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    with open(config_path, "wb") as f:
        tomli_w.dump(template, f)
    return config_path
