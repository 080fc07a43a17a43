"""Data models for pomodoro-timer.

- Phase kinds and cycle arithmetic (PhaseKind, phase_for_index)
- Command-line command table and parsed commands (CommandSpec, Command)
"""

from .command import (
    COMMAND_SPECS,
    Command,
    CommandKind,
    CommandSpec,
    SetDurations,
    ShowHelp,
    StartInterval,
    find_spec,
)
from .phase import PhaseKind, advance_index, cycle_length, phase_for_index, start_index

__all__ = [
    "COMMAND_SPECS",
    "Command",
    "CommandKind",
    "CommandSpec",
    "PhaseKind",
    "SetDurations",
    "ShowHelp",
    "StartInterval",
    "advance_index",
    "cycle_length",
    "find_spec",
    "phase_for_index",
    "start_index",
]
