"""Core timer logic.

- arguments: Command-line token processing and interactive re-entry
- engine: Interval cycle engine
"""

from .arguments import apply_tokens, process_arguments, render_help_text
from .engine import IntervalEngine, run_timer

__all__ = [
    "IntervalEngine",
    "apply_tokens",
    "process_arguments",
    "render_help_text",
    "run_timer",
]
