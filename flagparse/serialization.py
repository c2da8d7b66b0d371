"""Writing the effective options of a run to JSON or YAML."""
import importlib.util
import json
from pathlib import Path

import yaml

from .descriptor import resolve


def to_dict(container) -> dict:
    """Map each option field of ``container`` to its current value."""
    return {d.name: d.getter() for d in resolve(container)}


def save_options(container, path) -> None:
    dct = to_dict(container)
    if extension_contains((".json",), path):
        save_json(dct, path)
    elif extension_contains((".yaml", ".yml"), path):
        save_yaml(dct, path)
    else:
        raise ValueError(f"Unknown serialization format for: {path}")


def extension_contains(exts: tuple[str, ...], path) -> bool:
    return any(sfx in exts for sfx in Path(path).suffixes)


def save_yaml(dct, pth):
    with open_best(pth, "w") as f:
        yaml.safe_dump(dct, f, sort_keys=False)


def save_json(dct, pth):
    with open_best(pth, "w") as f:
        json.dump(dct, f, indent=4)


def open_best(pth, mode):
    if is_module_available("smart_open"):
        from smart_open import open as open_

        return open_(pth, mode)
    else:
        return open(pth, mode)


def is_module_available(*modules: str) -> bool:
    return all(importlib.util.find_spec(m) is not None for m in modules)
