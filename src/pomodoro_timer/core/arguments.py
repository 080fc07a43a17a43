"""Command-line token processing.

Tokens are read left to right as a flat list of commands, each followed
by its fixed number of parameters, e.g. ``/T 50 10 30 /S 2``. A line
that fails to parse is reported and replaced by a line typed by the
user until a line parses (an empty line always does).
"""

import logging
from collections.abc import Sequence

from pydantic import ValidationError

from ..config import TimerConfig
from ..constants import COMMAND_PREFIX, PROGRAM_NAME
from ..errors import (
    ArgumentError,
    ParameterCountError,
    ParameterLooksLikeCommandError,
    ParameterValueError,
    UnknownCommandError,
)
from ..models.command import (
    COMMAND_SPECS,
    Command,
    CommandKind,
    CommandSpec,
    SetDurations,
    ShowHelp,
    StartInterval,
    find_spec,
)
from ..output import OutputContext

logger = logging.getLogger(__name__)

INCORRECT_ARGUMENTS_WARNING = (
    f'Argument syntax was incorrect, for help write: "{PROGRAM_NAME} {COMMAND_PREFIX}?"'
)
REENTER_PROMPT = "Please enter program arguments again:"

_USAGE_COLUMN = 24


def render_help_text() -> str:
    """Build the usage screen from the command table."""
    lines = [PROGRAM_NAME, ""]
    for spec in COMMAND_SPECS:
        usages = [
            f"[{alias} {spec.params_usage}]" if spec.params_usage else f"[{alias}]"
            for alias in spec.aliases
        ]
        lines.extend(usages[:-1])
        lines.append(f"{usages[-1]:<{_USAGE_COLUMN}}- {spec.description}")
        lines.append("")
    lines.append("Press any key to continue...")
    return "\n".join(lines) + "\n"


def split_line(line: str) -> list[str]:
    """Split a typed line on single spaces, keeping empty tokens."""
    return line.split(" ")


def _parse_int(token: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise ParameterValueError(f"Not an integer: {token!r}") from None


def _check_params(spec: CommandSpec, params: list[str]) -> None:
    """Validate parameter tokens before they are interpreted.

    Raises:
        ParameterCountError: If fewer tokens remain than the command needs,
            or the last one is empty
        ParameterLooksLikeCommandError: If a parameter starts with the prefix
    """
    if len(params) < spec.param_count or (params and params[-1] == ""):
        raise ParameterCountError(
            f"{spec.aliases[0]} expects {spec.param_count} parameter(s), got {params!r}"
        )
    for param in params:
        if param.startswith(COMMAND_PREFIX):
            raise ParameterLooksLikeCommandError(
                f"Parameter {param!r} of {spec.aliases[0]} looks like a command"
            )


def build_command(spec: CommandSpec, params: list[str]) -> Command:
    """Turn a command spec and its raw parameters into a command.

    Raises:
        ParameterValueError: If a parameter is not an integer, or a
            duration is not positive
    """
    if spec.kind == CommandKind.START_INTERVAL:
        return StartInterval(interval=_parse_int(params[0]))
    elif spec.kind == CommandKind.SET_DURATIONS:
        work, short_rest, long_rest = (_parse_int(p) for p in params)
        try:
            return SetDurations(work=work, short_rest=short_rest, long_rest=long_rest)
        except ValidationError:
            raise ParameterValueError(
                f"Durations must be positive, got {work}, {short_rest}, {long_rest}"
            ) from None
    else:
        return ShowHelp()


def parse_next(tokens: Sequence[str], position: int) -> tuple[Command, int]:
    """Parse the command starting at ``position``.

    Returns:
        Tuple of (command, position after its parameters)

    Raises:
        ArgumentError: If the command or its parameters are malformed
    """
    spec = find_spec(tokens[position])
    if spec is None:
        raise UnknownCommandError(f"Unknown command: {tokens[position]!r}")
    position += 1
    params = list(tokens[position : position + spec.param_count])
    _check_params(spec, params)
    return build_command(spec, params), position + spec.param_count


def run_command(command: Command, config: TimerConfig, ctx: OutputContext) -> None:
    """Apply one command to ``config``."""
    if isinstance(command, StartInterval):
        config.set_start_interval(command.interval)
        logger.info(f"Starting on interval {command.interval} (cycle index {config.cycle_index})")
    elif isinstance(command, SetDurations):
        config.set_durations(command.work, command.short_rest, command.long_rest)
        logger.info(
            f"Durations set to {command.work}/{command.short_rest}/{command.long_rest} minutes"
        )
    elif isinstance(command, ShowHelp):
        ctx.write(render_help_text())
        ctx.wait_for_key()


def apply_tokens(
    tokens: Sequence[str], config: TimerConfig, ctx: OutputContext
) -> TimerConfig:
    """Apply every command in one token line.

    Commands run in order against a copy of ``config``; the copy is only
    returned when the whole line succeeds, so a failed line changes nothing.

    Args:
        tokens: Token line, e.g. ``["/T", "25", "5", "15", "/S", "1"]``
        config: Configuration to start from (not modified)
        ctx: Output context used by the help command

    Returns:
        Updated configuration

    Raises:
        ArgumentError: If any command in the line is malformed
    """
    tokens = list(tokens)
    if not tokens:
        return config
    if tokens[-1] == "":
        tokens.pop()

    updated = config.model_copy()
    position = 0
    while position < len(tokens):
        command, position = parse_next(tokens, position)
        run_command(command, updated, ctx)
    return updated


def process_arguments(
    tokens: Sequence[str], config: TimerConfig, ctx: OutputContext
) -> TimerConfig:
    """Apply command-line tokens, asking for a new line until one succeeds.

    Args:
        tokens: Command-line tokens
        config: Starting configuration
        ctx: Output context for warnings, prompts and help

    Returns:
        Configuration from the first line that applied cleanly
    """
    while True:
        try:
            return apply_tokens(tokens, config, ctx)
        except ArgumentError as e:
            logger.debug(f"Rejected arguments {list(tokens)!r}: {e}")
            ctx.warning(INCORRECT_ARGUMENTS_WARNING)
            tokens = split_line(ctx.read_line(REENTER_PROMPT))
