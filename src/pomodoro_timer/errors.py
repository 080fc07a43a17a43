"""Errors raised by pomodoro-timer."""


class PomodoroError(Exception):
    """Base exception for pomodoro-timer errors."""


class ConfigError(PomodoroError):
    """Raised when a configuration file cannot be loaded."""


class ArgumentError(PomodoroError):
    """Base exception for malformed command-line tokens."""


class UnknownCommandError(ArgumentError):
    """Raised when a token is not a known command alias."""


class ParameterCountError(ArgumentError):
    """Raised when a command gets fewer parameters than it needs."""


class ParameterLooksLikeCommandError(ArgumentError):
    """Raised when a parameter token starts with the command prefix."""


class ParameterValueError(ArgumentError):
    """Raised when a parameter is not an integer or is out of range."""
