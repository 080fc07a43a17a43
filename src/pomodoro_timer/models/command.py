"""Command models for command-line tokens.

Each command kind has a fixed set of aliases and a fixed parameter
count, described by a ``CommandSpec``. Parsed commands are one of
``StartInterval``, ``SetDurations`` or ``ShowHelp``.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, PositiveInt


class CommandKind(str, Enum):
    """Kinds of command-line commands."""

    START_INTERVAL = "start_interval"
    SET_DURATIONS = "set_durations"
    HELP = "help"


class CommandSpec(BaseModel):
    """Static description of one command kind.

    Attributes:
        kind: Command kind this entry describes
        aliases: Case-sensitive tokens that select the command
        param_count: Number of parameter tokens following the alias
        params_usage: Parameter placeholder shown in the help text
        description: One-line description shown in the help text
    """

    model_config = ConfigDict(frozen=True)

    kind: CommandKind
    aliases: tuple[str, ...]
    param_count: int = Field(ge=0)
    params_usage: str = ""
    description: str = ""


class StartInterval(BaseModel):
    """Start on the given work interval (1-based, not range checked)."""

    model_config = ConfigDict(frozen=True)

    interval: int


class SetDurations(BaseModel):
    """Replace the work, short rest and long rest durations (minutes)."""

    model_config = ConfigDict(frozen=True)

    work: PositiveInt
    short_rest: PositiveInt
    long_rest: PositiveInt


class ShowHelp(BaseModel):
    """Print usage and wait for a key press."""

    model_config = ConfigDict(frozen=True)


Command = StartInterval | SetDurations | ShowHelp

COMMAND_SPECS: tuple[CommandSpec, ...] = (
    CommandSpec(
        kind=CommandKind.START_INTERVAL,
        aliases=("/StartPomodoro", "/S"),
        param_count=1,
        params_usage="index",
        description="Decides which pomodoro you'll start on",
    ),
    CommandSpec(
        kind=CommandKind.SET_DURATIONS,
        aliases=("/TimeDurations", "/T"),
        param_count=3,
        params_usage="m m m",
        description=(
            "Decides durations of pomodoro, short break & long break, respectively. "
            "Time provided in minutes"
        ),
    ),
    CommandSpec(
        kind=CommandKind.HELP,
        aliases=("/H", "/?"),
        param_count=0,
        description="Brings up this screen.",
    ),
)

SPECS_BY_ALIAS: dict[str, CommandSpec] = {
    alias: spec for spec in COMMAND_SPECS for alias in spec.aliases
}


def find_spec(token: str) -> CommandSpec | None:
    """Look up the command spec for an alias token, or None if unknown."""
    return SPECS_BY_ALIAS.get(token)
