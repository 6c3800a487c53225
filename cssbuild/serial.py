"""JSON helpers that work with plain objects.

    get_json(Rect(10, 20)) => '{"width":10,"height":20}'
    from_json(Rect, '{"width":10,"height":20}') => Rect(width=10, height=20)
"""
from __future__ import annotations
import json
from typing import Any, TypeVar

__all__ = ["get_json", "from_json"]

T = TypeVar("T")

def _fields(obj: Any) -> dict[str, Any]:
    """The attributes of an object, from `__dict__` or its slots."""
    if hasattr(obj, "__dict__"):
        return dict(vars(obj))

    slots: list[str] = []
    for cls in type(obj).__mro__:
        names = getattr(cls, "__slots__", ())
        if isinstance(names, str):
            names = (names,)
        slots.extend(name for name in names if name not in slots)
    if not slots:
        raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")
    return {name: getattr(obj, name) for name in slots if hasattr(obj, name)}

def get_json(obj: Any) -> str:
    """Compact JSON representation of `obj`."""
    return json.dumps(obj, default=_fields, separators=(",", ":"))

def from_json(cls: type[T], text: str | bytes) -> T:
    """Rebuild an instance of `cls` from a JSON object without calling `__init__`.

    Every key becomes an attribute. Classes with `__slots__` and no `__dict__`
    only accept keys named in their slots; any other key is rejected.

    Raises
        TypeError: The JSON value is not an object, or a key cannot be set on `cls`.
        json.JSONDecodeError: The text is not valid JSON.
    """
    data = json.loads(text)
    if not isinstance(data, dict):
        raise TypeError(
            f"Expected a JSON object to build {cls.__name__}, got {type(data).__name__}"
        )

    instance = cls.__new__(cls)
    for key, value in data.items():
        try:
            setattr(instance, key, value)
        except AttributeError as error:
            raise TypeError(f"{cls.__name__} has no field {key!r}") from error
    return instance
