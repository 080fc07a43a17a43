"""Interval cycle engine: runs work and rest phases back to back."""

import logging
import time
from collections.abc import Callable

from ..config import TimerConfig
from ..constants import SECONDS_PER_MINUTE
from ..models.phase import PhaseKind, advance_index, phase_for_index
from ..output import OutputContext

logger = logging.getLogger(__name__)


class IntervalEngine:
    """Counts down phases minute by minute and rings the bell between them.

    The engine owns ``config`` once started. Durations are read when a
    phase begins, so a change only affects later phases.
    """

    def __init__(
        self,
        config: TimerConfig,
        ctx: OutputContext,
        sleep: Callable[[float], None] | None = None,
    ) -> None:
        """Initialize the engine.

        Args:
            config: Timer configuration, including the starting cycle index
            ctx: Output context frames and the bell go to
            sleep: Blocking sleep taking seconds (defaults to time.sleep)
        """
        self.config = config
        self.ctx = ctx
        self.sleep = sleep or time.sleep

    @property
    def current_phase(self) -> PhaseKind:
        """Phase selected by the current cycle index."""
        return phase_for_index(self.config.cycle_index, self.config.rests_before_long_rest)

    def render(self, phase: PhaseKind, minutes_left: int) -> None:
        """Redraw the countdown frame."""
        self.ctx.clear()
        self.ctx.print(phase.display_name)
        self.ctx.print(f"Minutes left: {minutes_left}")

    def run_phase(self) -> PhaseKind:
        """Run the current phase to completion, then advance the cycle.

        Returns:
            The phase that was completed
        """
        phase = self.current_phase
        minutes = self.config.minutes_for(phase)
        logger.info(
            f"{phase.display_name} started ({minutes} min, index {self.config.cycle_index})"
        )

        for minutes_left in range(minutes, 0, -1):
            self.render(phase, minutes_left)
            self.sleep(SECONDS_PER_MINUTE)

        self.config.cycle_index = advance_index(
            self.config.cycle_index, self.config.rests_before_long_rest
        )
        self.ctx.bell()
        logger.info(f"{phase.display_name} finished")
        return phase

    def run(self, max_phases: int | None = None) -> None:
        """Run phases forever, or stop after ``max_phases`` phases."""
        completed = 0
        while max_phases is None or completed < max_phases:
            self.run_phase()
            completed += 1


def run_timer(config: TimerConfig, ctx: OutputContext) -> None:
    """Run the timer until the process is stopped."""
    IntervalEngine(config, ctx).run()
