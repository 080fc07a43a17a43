"""Shared test fixtures for pomodoro-timer tests."""

import io
from collections.abc import Callable

import pytest
from rich.console import Console
from typer.testing import CliRunner

from pomodoro_timer.output import OutputContext


@pytest.fixture
def runner() -> CliRunner:
    """Create CLI test runner."""
    return CliRunner()


@pytest.fixture
def console_output() -> io.StringIO:
    """Buffer capturing everything written to the test console."""
    return io.StringIO()


@pytest.fixture
def make_ctx(console_output: io.StringIO) -> Callable[[str], OutputContext]:
    """Build an OutputContext that writes to ``console_output``.

    The returned factory takes the text the user will type.
    """

    def _make(user_input: str = "") -> OutputContext:
        console = Console(file=console_output, force_terminal=False, width=200)
        return OutputContext(console=console, input_stream=io.StringIO(user_input))

    return _make


@pytest.fixture
def ctx(make_ctx: Callable[[str], OutputContext]) -> OutputContext:
    """OutputContext with no pending user input."""
    return make_ctx("")
