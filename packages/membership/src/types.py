"""Core types for membership checks.

Element-type variable, inferred element kinds, and named check cases.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, TypeVar

T = TypeVar("T")


class ElementKind(str, Enum):
    """Inferred kind of a sequence's elements (or of a single target)."""

    INTEGER = "integer"
    FLOATING = "floating"
    BOOLEAN = "boolean"
    STRING = "string"
    MIXED = "mixed"
    EMPTY = "empty"
    OTHER = "other"


@dataclass(frozen=True)
class CheckCase:
    """A named membership check.

    Parameters
    ----------
    name : str
        Case label (e.g. "int64_hit").
    values : tuple
        Sequence to search, in order.
    target : Any
        Value to look for.
    expected : bool | None, default None
        Expected result. None if the case is only run, not asserted.
    dtype : str | None, default None
        Element dtype the values were coerced to ("int64" / "float64").
    """

    name: str
    values: tuple[Any, ...]
    target: Any
    expected: bool | None = None
    dtype: str | None = None


# Element dtypes accepted in case files
SUPPORTED_DTYPES = {"int64", "float64"}
