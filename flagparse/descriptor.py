import dataclasses
import logging
import sys
import typing
from dataclasses import dataclass
from typing import Any, Callable

from .dataclass import get_option_spec
from .errors import ConfigurationError
from .typecheck import OptionKind, get_option_kind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OptionDescriptor:
    """Resolved metadata of one option field, bound to a container instance."""

    name: str
    aliases: tuple[str, ...]
    required: bool
    description: str | None
    kind: OptionKind
    getter: Callable[[], Any] = dataclasses.field(repr=False, compare=False)
    setter: Callable[[Any], None] = dataclasses.field(repr=False, compare=False)

    @property
    def flag(self) -> str:
        """The first alias, used to refer to the option in messages."""
        return self.aliases[0]

    def matches(self, token: str) -> bool:
        token = token.lower()
        return any(alias.lower() == token for alias in self.aliases)


def _has_setter(cls) -> bool:
    params = getattr(cls, "__dataclass_params__", None)
    return params is not None and not params.frozen


def _field_type(cls, fld):
    if not isinstance(fld.type, str):
        return fld.type
    module = sys.modules.get(cls.__module__)
    try:
        return eval(fld.type, vars(module) if module else {}, dict(vars(cls)))
    except NameError as e:
        raise ConfigurationError(
            f"Cannot resolve annotation of {cls.__name__}.{fld.name}: {e}"
        ) from e


def resolve(container) -> list[OptionDescriptor]:
    """
    List the options declared on ``container`` in declaration order.

    Fields without option metadata are not options. Option fields of a frozen
    dataclass cannot be written and are skipped.

    Raises:
        ConfigurationError: If the container is not a dataclass instance or an
            option field has a type other than str or bool.
    """
    cls = type(container)
    if not dataclasses.is_dataclass(container) or isinstance(container, type):
        raise ConfigurationError(
            f"Options container must be a dataclass instance, got {cls.__name__}."
        )

    try:
        hints = typing.get_type_hints(cls)
    except NameError:
        # an unrelated field may hold a forward reference, resolve options one by one
        hints = {}

    writable = _has_setter(cls)
    descriptors = []
    for fld in dataclasses.fields(container):
        spec = get_option_spec(fld)
        if spec is None:
            continue
        if not writable:
            logger.debug("Skipping read-only option field %s.%s", cls.__name__, fld.name)
            continue

        typ = hints[fld.name] if fld.name in hints else _field_type(cls, fld)
        kind = get_option_kind(typ, fld.name)
        if kind is OptionKind.BOOLEAN and getattr(container, fld.name) is None:
            # option() defaults to None, a stdlib dataclass leaves it there
            setattr(container, fld.name, False)
        descriptors.append(
            OptionDescriptor(
                name=fld.name,
                aliases=spec.flags,
                required=spec.required,
                description=spec.description,
                kind=kind,
                getter=lambda name=fld.name: getattr(container, name),
                setter=lambda value, name=fld.name: setattr(container, name, value),
            )
        )
        logger.debug("Resolved option %s %s (%s)", fld.name, spec.flags, kind.value)

    return descriptors
