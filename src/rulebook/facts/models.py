"""
Core data models for the fact store.

A Fact is a named, mutable value. Its name is fixed for the Fact's
lifetime; its value may be reassigned any number of times. Each
assignment records the value's kind so coercion can branch on a
closed set of variants instead of ad-hoc type tests.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

import numpy as np


class ValueKind(Enum):
    """Runtime representation of a fact value."""
    EMPTY = "empty"       # No value (None)
    INTEGER = "integer"   # int and numpy integer scalars (int32, int64, ...)
    REAL = "real"         # float and numpy floating scalars (float32, float64, ...)
    TEXT = "text"         # str
    OTHER = "other"       # Anything else, including booleans


def classify_value(value: Any) -> ValueKind:
    """Map a runtime value to its ValueKind."""
    if value is None:
        return ValueKind.EMPTY
    # bool is an int subclass; booleans never coerce to numbers
    if isinstance(value, (bool, np.bool_)):
        return ValueKind.OTHER
    if isinstance(value, (int, np.integer)):
        return ValueKind.INTEGER
    if isinstance(value, (float, np.floating)):
        return ValueKind.REAL
    if isinstance(value, str):
        return ValueKind.TEXT
    return ValueKind.OTHER


def _values_equal(left: Any, right: Any) -> bool:
    if left is right:
        return True
    if isinstance(left, np.ndarray) or isinstance(right, np.ndarray):
        return bool(np.array_equal(left, right))
    return bool(left == right)


@dataclass(eq=False)
class Fact:
    """A single named value in working memory.

    Facts compare by name and value; numpy array values compare by
    shape and elements. They are mutable and therefore unhashable.
    """
    name: str
    value: Any = None
    kind: ValueKind = field(init=False, repr=False)

    __hash__ = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Fact):
            return NotImplemented
        return self.name == other.name and _values_equal(self.value, other.value)

    def __setattr__(self, attr: str, val: Any) -> None:
        if attr == "name" and "name" in self.__dict__:
            raise AttributeError(f"Fact name '{self.name}' cannot be changed")
        if attr == "kind":
            raise AttributeError("Fact kind is derived from its value")
        object.__setattr__(self, attr, val)
        if attr == "value":
            object.__setattr__(self, "kind", classify_value(val))

    def __str__(self) -> str:
        return str(self.value)

    def to_dict(self) -> dict:
        return {"name": self.name, "value": self.value}

    @classmethod
    def from_dict(cls, data: dict) -> "Fact":
        return cls(name=data["name"], value=data.get("value"))
