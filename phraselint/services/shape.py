"""
Value shapes.

Every value found under a translation key is classified once into one of:
- Absent: the key is missing (or null) in that file
- Scalar: string, number or boolean
- Array
- EmptyObject
- ObjectWithProps: an object with at least one property

Only ObjectWithProps takes part in the missing-property check.
"""
from dataclasses import dataclass
from typing import Any, Dict, List, Tuple, Union

# Largest array index a key can spell; such keys are listed first
MAX_INDEX_KEY = 2 ** 32 - 2


@dataclass(frozen=True)
class Absent:
    pass


@dataclass(frozen=True)
class Scalar:
    value: Any


@dataclass(frozen=True)
class Array:
    length: int


@dataclass(frozen=True)
class EmptyObject:
    pass


@dataclass(frozen=True)
class ObjectWithProps:
    keys: Tuple[str, ...]

    @property
    def count(self) -> int:
        return len(self.keys)


Shape = Union[Absent, Scalar, Array, EmptyObject, ObjectWithProps]


def is_index_key(key: str) -> bool:
    """True for canonical non-negative integer keys such as "0" or "12" (not "01")."""
    if not key.isdigit() or not key.isascii():
        return False
    if len(key) > 1 and key[0] == "0":
        return False
    return int(key) <= MAX_INDEX_KEY


def object_keys(obj: Dict[str, Any]) -> List[str]:
    """
    Own keys of a parsed JSON object in enumeration order: integer-like keys
    first in ascending numeric order, then the rest in insertion order.
    """
    index_keys = sorted((k for k in obj if is_index_key(k)), key=int)
    return index_keys + [k for k in obj if not is_index_key(k)]


def classify(value: Any) -> Shape:
    """Classify a parsed JSON value."""
    if value is None:
        return Absent()
    if isinstance(value, list):
        return Array(len(value))
    if isinstance(value, dict):
        if not value:
            return EmptyObject()
        return ObjectWithProps(tuple(object_keys(value)))
    return Scalar(value)
