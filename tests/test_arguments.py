"""Tests for command-line token processing."""

import io
from collections.abc import Callable

import pytest

from pomodoro_timer.config import TimerConfig
from pomodoro_timer.core.arguments import (
    INCORRECT_ARGUMENTS_WARNING,
    REENTER_PROMPT,
    apply_tokens,
    process_arguments,
    render_help_text,
    split_line,
)
from pomodoro_timer.errors import (
    ParameterCountError,
    ParameterLooksLikeCommandError,
    ParameterValueError,
    UnknownCommandError,
)
from pomodoro_timer.models import PhaseKind, phase_for_index
from pomodoro_timer.output import OutputContext

MakeCtx = Callable[[str], OutputContext]


def durations(config: TimerConfig) -> tuple[int, int, int]:
    """Return (work, short rest, long rest) minutes."""
    return config.work_minutes, config.short_rest_minutes, config.long_rest_minutes


class TestApplyTokens:
    """Tests for apply_tokens on well-formed lines."""

    def test_empty_tokens_keep_defaults(self, ctx: OutputContext) -> None:
        """No tokens leaves the configuration as it was."""
        config = TimerConfig()
        assert apply_tokens([], config, ctx) is config

    def test_set_durations(self, ctx: OutputContext) -> None:
        """/T 10 2 8 sets work, short rest and long rest."""
        config = apply_tokens(["/T", "10", "2", "8"], TimerConfig(), ctx)
        assert durations(config) == (10, 2, 8)

    def test_set_durations_long_alias(self, ctx: OutputContext) -> None:
        """/TimeDurations behaves like /T."""
        config = apply_tokens(["/TimeDurations", "50", "10", "30"], TimerConfig(), ctx)
        assert durations(config) == (50, 10, 30)

    def test_start_interval(self, ctx: OutputContext) -> None:
        """/S 3 moves to cycle index 4, a work phase."""
        config = apply_tokens(["/S", "3"], TimerConfig(), ctx)
        assert config.cycle_index == 4
        assert phase_for_index(config.cycle_index, config.rests_before_long_rest) == (
            PhaseKind.WORK
        )

    def test_start_interval_long_alias(self, ctx: OutputContext) -> None:
        """/StartPomodoro behaves like /S."""
        config = apply_tokens(["/StartPomodoro", "2"], TimerConfig(), ctx)
        assert config.cycle_index == 2

    def test_start_interval_accepts_large_and_negative(self, ctx: OutputContext) -> None:
        """Start interval has no range check and wraps into the cycle."""
        assert apply_tokens(["/S", "100"], TimerConfig(), ctx).cycle_index == 6
        assert apply_tokens(["/S", "-1"], TimerConfig(), ctx).cycle_index == 4

    def test_multiple_commands_apply_in_order(self, ctx: OutputContext) -> None:
        """Concatenated commands are all applied."""
        config = apply_tokens(["/T", "25", "5", "15", "/S", "1"], TimerConfig(), ctx)
        assert durations(config) == (25, 5, 15)
        assert config.cycle_index == 0

    def test_later_command_wins(self, ctx: OutputContext) -> None:
        """Repeating a command keeps the last value."""
        config = apply_tokens(["/S", "2", "/S", "4"], TimerConfig(), ctx)
        assert config.cycle_index == 6

    def test_trailing_empty_token_dropped(self, ctx: OutputContext) -> None:
        """A trailing empty token from a trailing space is ignored."""
        config = apply_tokens(["/S", "3", ""], TimerConfig(), ctx)
        assert config.cycle_index == 4

    def test_only_empty_token_is_valid(self, ctx: OutputContext) -> None:
        """A line that splits to a single empty token keeps defaults."""
        assert apply_tokens([""], TimerConfig(), ctx) == TimerConfig()

    def test_does_not_modify_input_config(self, ctx: OutputContext) -> None:
        """The caller's configuration is left untouched."""
        original = TimerConfig()
        apply_tokens(["/T", "10", "2", "8", "/S", "2"], original, ctx)
        assert original == TimerConfig()


class TestApplyTokensErrors:
    """Tests for apply_tokens on malformed lines."""

    @pytest.mark.parametrize("tokens", [["/X"], ["S", "3"], ["/s", "3"], ["/t", "1", "2", "3"]])
    def test_unknown_command(self, ctx: OutputContext, tokens: list[str]) -> None:
        """Tokens that are not exact aliases are rejected."""
        with pytest.raises(UnknownCommandError):
            apply_tokens(tokens, TimerConfig(), ctx)

    def test_parameter_where_command_expected(self, ctx: OutputContext) -> None:
        """An extra parameter is read as an unknown command."""
        with pytest.raises(UnknownCommandError):
            apply_tokens(["/S", "2", "3"], TimerConfig(), ctx)

    @pytest.mark.parametrize(
        "tokens",
        [["/S"], ["/S", ""], ["/T", "10", "2"], ["/T", "10", "2", "", ""], ["/S", "", "/H"]],
    )
    def test_missing_parameters(self, ctx: OutputContext, tokens: list[str]) -> None:
        """Too few parameters, or an empty last parameter, is a count error."""
        with pytest.raises(ParameterCountError):
            apply_tokens(tokens, TimerConfig(), ctx)

    @pytest.mark.parametrize("tokens", [["/S", "/5"], ["/T", "10", "/5", "8"], ["/S", "/T"]])
    def test_parameter_looks_like_command(self, ctx: OutputContext, tokens: list[str]) -> None:
        """Parameters starting with / are rejected before integer parsing."""
        with pytest.raises(ParameterLooksLikeCommandError):
            apply_tokens(tokens, TimerConfig(), ctx)

    @pytest.mark.parametrize(
        "tokens",
        [
            ["/T", "0", "2", "8"],
            ["/T", "a", "2", "8"],
            ["/T", "10", "2", "-8"],
            ["/T", "10", "", "8"],
            ["/T", "1.5", "2", "8"],
            ["/S", "x"],
        ],
    )
    def test_bad_parameter_values(self, ctx: OutputContext, tokens: list[str]) -> None:
        """Non-integers and non-positive durations are value errors."""
        with pytest.raises(ParameterValueError):
            apply_tokens(tokens, TimerConfig(), ctx)

    def test_failed_line_applies_nothing(self, ctx: OutputContext) -> None:
        """A failure later in the line discards earlier commands."""
        config = TimerConfig()
        with pytest.raises(ParameterCountError):
            apply_tokens(["/T", "10", "2", "8", "/S"], config, ctx)
        assert durations(config) == (25, 5, 15)


class TestHelpCommand:
    """Tests for the /H and /? commands."""

    @pytest.mark.parametrize("alias", ["/H", "/?"])
    def test_help_prints_usage_and_waits(
        self, make_ctx: MakeCtx, console_output: io.StringIO, alias: str
    ) -> None:
        """Help prints the usage screen and consumes one key press."""
        ctx = make_ctx("xy")
        config = apply_tokens([alias], TimerConfig(), ctx)

        assert config == TimerConfig()
        output = console_output.getvalue()
        assert "Press any key to continue..." in output
        assert ctx.input_stream is not None
        assert ctx.input_stream.read() == "y"

    def test_help_then_other_command(self, make_ctx: MakeCtx) -> None:
        """Help is not a failure; following commands still apply."""
        config = apply_tokens(["/?", "/S", "2"], TimerConfig(), make_ctx("k"))
        assert config.cycle_index == 2

    def test_help_text_lists_every_alias(self) -> None:
        """The usage screen names all commands and their parameters."""
        text = render_help_text()
        assert text.startswith("PomodoroTimer\n")
        for alias in ["/StartPomodoro index", "/S index", "/TimeDurations m m m", "/T m m m"]:
            assert f"[{alias}]" in text
        assert "[/H]" in text
        assert "[/?]" in text
        assert "Time provided in minutes" in text


class TestProcessArguments:
    """Tests for process_arguments and interactive re-entry."""

    def test_valid_tokens_do_not_prompt(
        self, make_ctx: MakeCtx, console_output: io.StringIO
    ) -> None:
        """Valid tokens apply without a warning or prompt."""
        config = process_arguments(["/T", "25", "5", "15", "/S", "1"], TimerConfig(), make_ctx(""))
        assert durations(config) == (25, 5, 15)
        assert INCORRECT_ARGUMENTS_WARNING not in console_output.getvalue()
        assert REENTER_PROMPT not in console_output.getvalue()

    def test_missing_parameter_prompts_once(
        self, make_ctx: MakeCtx, console_output: io.StringIO
    ) -> None:
        """/S alone warns once; an empty reply proceeds with defaults."""
        config = process_arguments(["/S"], TimerConfig(), make_ctx("\n"))

        assert config == TimerConfig()
        output = console_output.getvalue()
        assert output.count(INCORRECT_ARGUMENTS_WARNING) == 1
        assert output.count(REENTER_PROMPT) == 1

    def test_warning_names_help_command(
        self, make_ctx: MakeCtx, console_output: io.StringIO
    ) -> None:
        """The warning tells the user how to get help."""
        process_arguments(["/X"], TimerConfig(), make_ctx("\n"))
        assert 'for help write: "PomodoroTimer /?"' in console_output.getvalue()

    def test_reentered_line_replaces_failed_one(self, make_ctx: MakeCtx) -> None:
        """The typed line is processed on its own."""
        config = process_arguments(["/T", "0", "2", "8"], TimerConfig(), make_ctx("/T 10 2 8\n"))
        assert durations(config) == (10, 2, 8)

    def test_invalid_durations_leave_config_unchanged(self, make_ctx: MakeCtx) -> None:
        """/T with a zero or non-numeric value keeps previous durations."""
        for tokens in (["/T", "0", "2", "8"], ["/T", "a", "2", "8"]):
            config = process_arguments(tokens, TimerConfig(), make_ctx("\n"))
            assert durations(config) == (25, 5, 15)

    def test_keeps_prompting_until_valid(
        self, make_ctx: MakeCtx, console_output: io.StringIO
    ) -> None:
        """Every malformed line gets its own warning and prompt."""
        ctx = make_ctx("/X\n/S  3\n/S 3 \n")
        config = process_arguments(["/S"], TimerConfig(), ctx)

        assert config.cycle_index == 4
        assert console_output.getvalue().count(INCORRECT_ARGUMENTS_WARNING) == 3

    def test_end_of_input_counts_as_empty_line(self, make_ctx: MakeCtx) -> None:
        """Closed input ends re-entry with the starting configuration."""
        start = TimerConfig(work_minutes=40)
        config = process_arguments(["/S", "/5"], start, make_ctx(""))
        assert config == start


def test_split_line_keeps_empty_tokens():
    """Lines split on single spaces only."""
    assert split_line("") == [""]
    assert split_line("/S 3") == ["/S", "3"]
    assert split_line("/S  3") == ["/S", "", "3"]
    assert split_line("/S 3 ") == ["/S", "3", ""]
