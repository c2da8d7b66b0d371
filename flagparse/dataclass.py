"""
Declaring options on dataclass fields.

``option()`` marks a dataclass field as a command-line option by storing its
flags in the field metadata. The @dataclass decorator is a drop-in
replacement for stdlib @dataclass that:
- Converts a class into a dataclass
- Defaults boolean options declared without a default to False
- Lazily extracts inline comments via __field_help__ (only when accessed)

Usage:
    @dataclass
    class Options:
        name: str | None = option("--name", "-n", required=True)  # who to greet
        loud: bool = option("--loud", "-l")                        # shout
"""
from dataclasses import MISSING
from dataclasses import dataclass as stdlib_dataclass
from dataclasses import field
from typing import Any, NamedTuple

from .errors import ConfigurationError
from .help_extraction import LazyFieldHelp

OPTION_METADATA_KEY = "flagparse.option"


class OptionSpec(NamedTuple):
    """What the user declared for a single option field."""

    flags: tuple[str, ...]
    required: bool = False
    description: str | None = None


def option(
    *flags: str,
    required: bool = False,
    description: str | None = None,
    default: Any = MISSING,
):
    """
    Declare a dataclass field that is filled from the command line.

    Args:
        *flags (str): Accepted spellings of the option, e.g. ``"--name", "-n"``.
            The first one is used in error messages.
        required (bool, optional): Whether a text option must be given.
            Has no effect on boolean options. Defaults to False.
        description (str | None, optional): Help text. Defaults to the inline
            comment next to the field, if any.
        default (Any, optional): Field default. Defaults to None.

    Returns:
        dataclasses.Field: A field carrying the option metadata.
    """
    if not flags:
        raise ConfigurationError("option() requires at least one flag.")
    for flag in flags:
        if not isinstance(flag, str) or not flag.strip():
            raise ConfigurationError(f"Option flags must be non-empty strings, got {flag!r}.")

    spec = OptionSpec(tuple(flags), required, description)
    return field(
        default=None if default is MISSING else default,
        metadata={OPTION_METADATA_KEY: spec},
    )


def get_option_spec(fld) -> OptionSpec | None:
    return fld.metadata.get(OPTION_METADATA_KEY)


def _default_bool_options(cls) -> None:
    for name, annotation in getattr(cls, "__annotations__", {}).items():
        value = cls.__dict__.get(name, MISSING)
        if getattr(value, "metadata", {}).get(OPTION_METADATA_KEY) is None:
            continue
        if annotation in (bool, "bool") and value.default is None:
            value.default = False


def dataclass(cls=None, /, **kwargs):
    """
    Decorator that converts a class into an options dataclass.

    Accepts the keyword arguments of the stdlib decorator, e.g.
    ``@dataclass(frozen=True)``.
    """

    def wrap(cls):
        _default_bool_options(cls)
        dataclass_cls = stdlib_dataclass(cls, **kwargs)
        # Install lazy descriptor for field help (defers AST parsing until accessed)
        dataclass_cls.__field_help__ = LazyFieldHelp()
        return dataclass_cls

    if cls is None:
        return wrap
    return wrap(cls)
