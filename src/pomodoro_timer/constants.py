"""Constants for pomodoro-timer."""

PROGRAM_NAME = "PomodoroTimer"

# Every command token starts with this character
COMMAND_PREFIX = "/"

# Real seconds slept per countdown step
SECONDS_PER_MINUTE = 60

# Defaults (minutes)
DEFAULT_WORK_MINUTES = 25
DEFAULT_SHORT_REST_MINUTES = 5
DEFAULT_LONG_REST_MINUTES = 15
DEFAULT_RESTS_BEFORE_LONG_REST = 4

# Exit code for Ctrl-C (128 + SIGINT)
INTERRUPTED_EXIT_CODE = 130
