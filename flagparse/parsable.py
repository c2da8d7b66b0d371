from typing import Sequence, Type, TypeVar

from .parse import get_help_message, parse
from .serialization import save_options, to_dict

T = TypeVar("T")


class class_or_instance_method(object):
    def __init__(self, f):
        self.f = f

    def __get__(self, instance, owner):
        if instance is not None:
            class_or_instance = instance
        else:
            class_or_instance = owner

        def newfunc(*args, **kwargs):
            return self.f(class_or_instance, *args, **kwargs)

        return newfunc


class Parsable:
    """Mixin giving an options dataclass parsing and reporting methods.

    Usage:
        @dataclass
        class Options(Parsable):
            name: str | None = option("--name")

        opts = Options.parse_args()
    """

    @classmethod
    def parse_args(
        cls: Type[T],
        args: Sequence[str] | None = None,
        handle_wrong_arguments: bool = False,
    ) -> T:
        return parse(cls, args, handle_wrong_arguments=handle_wrong_arguments)

    @class_or_instance_method
    def help_message(cls_or_self) -> str:
        return get_help_message(cls_or_self)

    def to_dict(self) -> dict:
        return to_dict(self)

    def to_file(self, path) -> None:
        save_options(self, path)
