"""JSON helpers that restore a prototype's behaviour onto parsed data."""

from __future__ import annotations

import dataclasses
import json
import math
from typing import Any, TypeVar

__all__ = ["to_json_text", "from_json_text"]

T = TypeVar("T")


def _finite(value: Any) -> Any:
    """Replace NaN and infinities with None, recursing into containers."""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {key: _finite(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_finite(item) for item in value]
    return value


def _default(value: Any) -> Any:
    """Fallback encoder for dataclasses and prototype-restored objects."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return _finite(
            {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
        )
    if hasattr(value, "__dict__") and not callable(value):
        return _finite(dict(vars(value)))
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def to_json_text(value: Any, *, indent: int | None = None) -> str:
    """Serialize *value* to JSON text.

    Output is compact (no whitespace after separators) unless *indent* is
    given. Mapping keys keep their insertion order. NaN and infinite floats
    are written as ``null``.
    """
    separators = (",", ":") if indent is None else (",", ": ")
    return json.dumps(
        _finite(value),
        indent=indent,
        separators=separators,
        default=_default,
        allow_nan=False,
    )


def from_json_text(prototype: type[T], text: str) -> T:
    """Parse *text* and attach *prototype*'s behaviour to the result.

    The parsed fields become the instance attributes of a new *prototype*
    object. ``__init__`` is not called, so fields are neither copied through
    a constructor nor re-validated; methods defined on *prototype* then work
    against the parsed data.

    Raises:
        TypeError: If *prototype* is not a class, or the JSON root is not an
            object.
        json.JSONDecodeError: If *text* is not valid JSON.
    """
    if not isinstance(prototype, type):
        raise TypeError(f"prototype must be a class, got {type(prototype).__name__}")

    data = json.loads(text)
    if not isinstance(data, dict):
        raise TypeError(
            f"Cannot attach {prototype.__name__} to a JSON {type(data).__name__}"
        )

    obj = prototype.__new__(prototype)
    obj.__dict__.update(data)
    return obj
