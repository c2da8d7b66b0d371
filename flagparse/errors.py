USAGE_EXIT_CODE = 2


class FlagParseError(Exception):
    """Base class of every error raised by flagparse."""


class ConfigurationError(FlagParseError):
    """The options container type itself is malformed.

    This is a programmer error and never the result of user input.
    """


class UsageError(FlagParseError):
    """The command line arguments do not satisfy the options container."""

    def __init__(self, message: str, exit_code: int = USAGE_EXIT_CODE) -> None:
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code


class InternalError(FlagParseError):
    """An internal invariant of the parser was violated."""
