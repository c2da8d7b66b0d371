import functools
import logging
import sys
from typing import Callable, Iterator, Sequence, Type, TypeVar

from rich.console import Console
from rich.text import Text

from .descriptor import OptionDescriptor, resolve
from .errors import InternalError, UsageError
from .typecheck import OptionKind

logger = logging.getLogger(__name__)

console = Console(stderr=True)

T = TypeVar("T")

EMPTY_TEXT = None
# Python type a value must have before it is written to a field of given kind.
VALUE_TYPES = {OptionKind.TEXT: str, OptionKind.BOOLEAN: bool}

_END = object()


def find_option(
    descriptors: Sequence[OptionDescriptor], token: str
) -> OptionDescriptor | None:
    """Return the first descriptor having ``token`` as an alias, ignoring case."""
    for descriptor in descriptors:
        if descriptor.matches(token):
            return descriptor
    return None


def scan(container, descriptors: Sequence[OptionDescriptor], args: Sequence[str]) -> None:
    """
    Fill ``container`` from ``args`` in a single pass.

    Tokens that match no option are ignored. A matched boolean option is set
    to True, a matched text option takes the next token as its value. Fields
    are written as soon as they are matched.

    Raises:
        UsageError: If a text option is the last token.
    """
    cursor = iter(args)
    for token in cursor:
        descriptor = find_option(descriptors, token)
        if descriptor is None:
            logger.debug("Ignoring unrecognized argument %r", token)
            continue

        logger.debug("Matched %r to option %s", token, descriptor.name)
        if descriptor.kind is OptionKind.BOOLEAN:
            set_value(descriptor, True)
        elif descriptor.kind is OptionKind.TEXT:
            set_value_from_args(descriptor, cursor)
        else:
            raise InternalError(f"Unhandled option kind {descriptor.kind!r}.")


def set_value_from_args(
    descriptor: OptionDescriptor,
    cursor: Iterator[str],
    transform: Callable[[str], object] = lambda raw: raw,
) -> None:
    """
    Consume the next token from ``cursor`` as the value of ``descriptor``.

    Args:
        descriptor (OptionDescriptor): The matched option.
        cursor (Iterator[str]): The arguments iterator, positioned right after
            the option's flag.
        transform (Callable[[str], object], optional): Converts the raw token
            before it is written. Defaults to identity.

    Raises:
        UsageError: If there is no token left.
    """
    raw = next(cursor, _END)
    if raw is _END:
        raise UsageError(f"Value expected for option {descriptor.flag}.")
    set_value(descriptor, transform(raw))


def set_value(descriptor: OptionDescriptor, value) -> None:
    expected = VALUE_TYPES[descriptor.kind]
    if not isinstance(value, expected):
        raise InternalError(
            f"Internal error when parsing option {descriptor.flag}: got value of "
            f"type {type(value).__name__}, but the field is of type {expected.__name__}."
        )
    descriptor.setter(value)


def verify(container, descriptors: Sequence[OptionDescriptor]) -> None:
    """
    Check that every required text option holds a value.

    Raises:
        UsageError: Listing the first flag of every missing option.
    """
    missing = [
        d
        for d in descriptors
        if d.kind is OptionKind.TEXT and d.required and d.getter() is EMPTY_TEXT
    ]
    if missing:
        logger.debug("Missing required options: %s", [d.name for d in missing])
        raise UsageError(
            "The following required options were not specified: "
            + ", ".join(d.flag for d in missing)
        )


def parse_into(container: T, args: Sequence[str]) -> T:
    descriptors = resolve(container)
    scan(container, descriptors, args)
    verify(container, descriptors)
    return container


def exit_on_usage_error(func):
    """
    Decorator reporting a UsageError on stderr and exiting the process.

    Other errors, ConfigurationError in particular, propagate unchanged.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except UsageError as e:
            console.print(Text(e.message, style="red"), soft_wrap=True)
            sys.exit(e.exit_code)

    return wrapper


def parse(
    cls: Type[T],
    args: Sequence[str] | None = None,
    handle_wrong_arguments: bool = False,
) -> T:
    """
    Build a default ``cls`` instance and fill it from the command line.

    Args:
        cls (Type[T]): The options dataclass. Must be constructible without
            arguments.
        args (Sequence[str] | None, optional): Arguments to parse. Defaults to
            ``sys.argv[1:]``.
        handle_wrong_arguments (bool, optional): Print usage errors to stderr
            and exit instead of raising them. Defaults to False.

    Returns:
        T: The populated instance.
    """
    args = sys.argv[1:] if args is None else list(args)

    def _parse():
        return parse_into(cls(), args)

    if handle_wrong_arguments:
        _parse = exit_on_usage_error(_parse)
    return _parse()


def _format_option(descriptor: OptionDescriptor, field_help: dict) -> str:
    description = descriptor.description or field_help.get(descriptor.name, "")
    return f"  {', '.join(descriptor.aliases)}: {description}".rstrip()


def get_help_message(container) -> str:
    """
    Describe the options of ``container``, required ones first.

    ``container`` may be an options instance or a dataclass type constructible
    without arguments.
    """
    if isinstance(container, type):
        container = container()
    descriptors = resolve(container)
    field_help = getattr(type(container), "__field_help__", {})

    lines = ["Required:"]
    lines += [_format_option(d, field_help) for d in descriptors if d.required]
    lines.append("Optional:")
    lines += [_format_option(d, field_help) for d in descriptors if not d.required]
    return "\n".join(lines)
