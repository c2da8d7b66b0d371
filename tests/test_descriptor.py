from __future__ import annotations

from dataclasses import dataclass as stdlib_dataclass
from dataclasses import field
from typing import Optional

import pytest

from flagparse import ConfigurationError, OptionKind, dataclass, option
from flagparse.descriptor import resolve


@dataclass
class Options:
    name: str | None = option("--name", "-n", required=True, description="the name")
    verbose: bool = option("--verbose", "-v")
    legacy: Optional[str] = option("--legacy")
    not_an_option: int = 3
    also_not: list = field(default_factory=list)


@dataclass(frozen=True)
class FrozenOptions:
    name: str | None = option("--name")


def test_resolve_declaration_order():
    descriptors = resolve(Options())
    assert [d.name for d in descriptors] == ["name", "verbose", "legacy"]
    assert [d.kind for d in descriptors] == [
        OptionKind.TEXT,
        OptionKind.BOOLEAN,
        OptionKind.TEXT,
    ]


def test_resolve_metadata():
    name, verbose, _ = resolve(Options())
    assert name.aliases == ("--name", "-n")
    assert name.flag == "--name"
    assert name.required is True
    assert name.description == "the name"
    assert verbose.required is False
    assert verbose.description is None


def test_resolve_is_idempotent():
    assert resolve(Options()) == resolve(Options())


def test_accessors_are_bound_to_instance():
    first, second = Options(), Options()
    name = resolve(first)[0]
    name.setter("x")
    assert name.getter() == "x"
    assert first.name == "x"
    assert second.name is None


def test_frozen_fields_are_skipped():
    assert resolve(FrozenOptions()) == []


@pytest.mark.parametrize("token", ["--name", "--NAME", "-N", "-n"])
def test_descriptor_matches(token):
    assert resolve(Options())[0].matches(token)


def test_descriptor_does_not_match_prefix():
    assert not resolve(Options())[0].matches("--nam")


def test_unsupported_type_raises():
    @dataclass
    class Bad:
        name: str | None = option("--name")
        count: int = option("--count", default=1)

    with pytest.raises(ConfigurationError, match="count"):
        resolve(Bad())


def test_optional_bool_is_unsupported():
    @dataclass
    class Bad:
        flag: bool | None = option("--flag")

    with pytest.raises(ConfigurationError):
        resolve(Bad())


def test_not_a_dataclass_raises():
    class Plain:
        name = None

    with pytest.raises(ConfigurationError):
        resolve(Plain())


def test_dataclass_type_instead_of_instance_raises():
    with pytest.raises(ConfigurationError):
        resolve(Options)


def test_stdlib_dataclass_is_accepted():
    @stdlib_dataclass
    class Stdlib:
        name: str | None = option("--name")
        flag: bool = option("--flag", default=False)

    assert [d.name for d in resolve(Stdlib())] == ["name", "flag"]


def test_stdlib_dataclass_bool_defaults_to_false():
    @stdlib_dataclass
    class Stdlib:
        flag: bool = option("--flag")
        name: str | None = option("--name")

    options = Stdlib()
    resolve(options)
    assert options.flag is False
    assert options.name is None


def test_unresolvable_non_option_annotation_is_ignored():
    @dataclass
    class WithForwardRef:
        name: str | None = option("--name")
        verbose: bool = option("--verbose")
        other: "Later | None" = None

    name, verbose = resolve(WithForwardRef())
    assert name.kind is OptionKind.TEXT
    assert verbose.kind is OptionKind.BOOLEAN


def test_unresolvable_option_annotation_raises():
    @dataclass
    class WithBadOption:
        name: "Later | None" = option("--name")

    with pytest.raises(ConfigurationError, match="Later"):
        resolve(WithBadOption())


def test_descriptor_matching_does_not_fold_special_cases():
    @dataclass
    class Street:
        street: bool = option("--straße")

    (street,) = resolve(Street())
    assert street.matches("--STRASSE") is False
    assert street.matches("--STRAßE") is True
