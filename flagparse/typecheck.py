from enum import Enum
from types import UnionType
from typing import Any, Type, Union, get_args

from .errors import ConfigurationError

SUPPORTED_TYPES = (str, bool)
SUPPORTED_TYPES_STR = ", ".join(t.__name__ for t in SUPPORTED_TYPES)


class OptionKind(Enum):
    TEXT = "text"
    BOOLEAN = "boolean"


def _is_basic_type(typ: Type, basic_typ, value: Any | None = None) -> bool:
    assert basic_typ in SUPPORTED_TYPES
    typ_ok = typ == basic_typ
    if value is None:
        return typ_ok
    else:
        return typ_ok and isinstance(value, basic_typ)


def is_bool_type(typ: Type, value: Any | None = None) -> bool:
    return _is_basic_type(typ, bool, value)


def is_str_type(typ: Type, value: Any | None = None) -> bool:
    return _is_basic_type(typ, str, value)


def is_union_type(typ: Type):
    """Check if typ is a Union type."""
    return isinstance(typ, UnionType) or getattr(typ, "__origin__", None) is Union


def get_union_args(typ: Type):
    """Get union arguments, separating None from other types."""
    if not is_union_type(typ):
        return [], False

    args = get_args(typ)
    non_none_args = [a for a in args if a is not type(None)]
    has_none = len(non_none_args) < len(args)
    return non_none_args, has_none


def is_optional_single_type(typ: Type):
    """
    Returns (True, T) if typ is exactly Optional[T], i.e., Union[T, None] with only one non-None type.
    Returns (False, typ) otherwise.
    """
    non_none_args, has_none = get_union_args(typ)
    if has_none and len(non_none_args) == 1:
        return True, non_none_args[0]
    return False, typ


def get_option_kind(typ: Type, name: str = "?") -> OptionKind:
    """Map a field annotation onto the kind of option it declares.

    ``str`` and ``str | None`` declare text options, ``bool`` declares a
    boolean toggle. ``bool | None`` is rejected because an unset toggle must
    read as ``False``.

    Args:
        typ (Type): The resolved field annotation.
        name (str, optional): Field name, used in the error message.

    Returns:
        OptionKind: The kind of the option.

    Raises:
        ConfigurationError: If the annotation is not one of the supported types.
    """
    _, inner = is_optional_single_type(typ)
    if is_str_type(inner):
        return OptionKind.TEXT
    if is_bool_type(typ):
        return OptionKind.BOOLEAN

    shown = typ if is_union_type(typ) else getattr(typ, "__name__", typ)
    raise ConfigurationError(
        f"Option field {name!r} must be of type {SUPPORTED_TYPES_STR}, not {shown}."
    )
