"""Terminal output and input for pomodoro-timer."""

import logging
from dataclasses import dataclass
from typing import TextIO

import typer
from rich.console import Console

logger = logging.getLogger(__name__)


@dataclass
class OutputContext:
    """Console collaborator used by the argument processor and the engine.

    Attributes:
        console: Rich console all frames and prompts are written to
        input_stream: Read prompted lines from this stream instead of stdin
    """

    console: Console
    input_stream: TextIO | None = None

    def print(self, message: str, style: str | None = None) -> None:
        """Print a single line."""
        self.console.print(message, style=style, markup=False, highlight=False)

    def write(self, text: str) -> None:
        """Print text verbatim, without a trailing newline."""
        self.console.print(text, end="", markup=False, highlight=False)

    def warning(self, message: str) -> None:
        """Print a warning line in yellow."""
        self.print(message, style="yellow")

    def clear(self) -> None:
        """Clear the terminal."""
        self.console.clear()

    def bell(self) -> None:
        """Ring the terminal bell."""
        self.console.bell()

    def read_line(self, prompt: str) -> str:
        """Prompt on its own line and read one line of input.

        End of input counts as an empty line.
        """
        self.print(prompt)
        try:
            line = self.console.input(stream=self.input_stream)
        except EOFError:
            logger.debug("End of input while reading a line")
            return ""
        return line.rstrip("\r\n")

    def wait_for_key(self) -> None:
        """Block until a single key is pressed."""
        if self.input_stream is not None:
            self.input_stream.read(1)
            return
        typer.getchar()

