"""Phase model and cycle arithmetic.

A cycle holds ``2 * rests_before_long_rest`` phases. Even positions are
work phases, the last position is the long rest and every other odd
position is a short rest:

    W S W S ... W L

The cycle index is the only state; the phase is derived from it.
"""

from enum import Enum


class PhaseKind(str, Enum):
    """Kinds of timed intervals."""

    WORK = "work"
    SHORT_REST = "short_rest"
    LONG_REST = "long_rest"

    @property
    def display_name(self) -> str:
        """Human-readable name shown above the countdown."""
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES = {
    PhaseKind.WORK: "Pomodoro",
    PhaseKind.SHORT_REST: "Short Break",
    PhaseKind.LONG_REST: "Long Break",
}


def cycle_length(rests_before_long_rest: int) -> int:
    """Number of phases in one full cycle."""
    return 2 * rests_before_long_rest


def phase_for_index(cycle_index: int, rests_before_long_rest: int) -> PhaseKind:
    """Select the phase for a position in the cycle.

    Args:
        cycle_index: Position in the cycle, in ``[0, 2 * rests_before_long_rest)``
        rests_before_long_rest: Short-rest cycles before a long rest

    Returns:
        Phase kind for that position
    """
    if cycle_index % 2 == 0:
        return PhaseKind.WORK
    if cycle_index == cycle_length(rests_before_long_rest) - 1:
        return PhaseKind.LONG_REST
    return PhaseKind.SHORT_REST


def advance_index(cycle_index: int, rests_before_long_rest: int) -> int:
    """Return the cycle index following ``cycle_index``, wrapping at the cycle end."""
    return (cycle_index + 1) % cycle_length(rests_before_long_rest)


def start_index(interval: int, rests_before_long_rest: int) -> int:
    """Cycle index of the ``interval``-th work phase (1-based).

    Any integer is accepted. Zero and negative values wrap backwards
    through the cycle using floored modulo, so ``0`` is the last work
    phase before the long rest.
    """
    return (2 * (interval - 1)) % cycle_length(rests_before_long_rest)
