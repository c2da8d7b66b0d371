from .dataclass import dataclass, option
from .descriptor import OptionDescriptor, resolve
from .errors import ConfigurationError, FlagParseError, InternalError, UsageError
from .parsable import Parsable
from .parse import exit_on_usage_error, get_help_message, parse, scan, verify
from .typecheck import OptionKind

__all__ = [
    "ConfigurationError",
    "FlagParseError",
    "InternalError",
    "OptionDescriptor",
    "OptionKind",
    "Parsable",
    "UsageError",
    "dataclass",
    "exit_on_usage_error",
    "get_help_message",
    "option",
    "parse",
    "resolve",
    "scan",
    "verify",
]
