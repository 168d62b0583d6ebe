"""Typed path parameters: ``{id}``, ``{id:int}``, ``{rest:path}``."""

from collections.abc import Callable
from typing import NamedTuple


class Converter(NamedTuple):
    pattern: str
    convert: Callable[[str], str | int]


CONVERTERS: dict[str, Converter] = {
    "str": Converter(r"[^/]+", str),
    "int": Converter(r"\d+", int),
    "path": Converter(r".+", str),
}


def convert_param(name: str, value: str, param_type: str) -> str | int:
    """Convert the decoded segment captured for *name*.

    Raises ``ValueError`` naming the parameter when *value* does not fit.
    """
    try:
        return CONVERTERS[param_type].convert(value)
    except ValueError:
        msg = f"Path parameter {name!r} is not a valid {param_type}: {value!r}"
        raise ValueError(msg) from None
