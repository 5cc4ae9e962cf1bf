"""Sequence and target validation.

The membership functions never raise: a cross-type call such as a float
target against an int64 sequence is meant to be caught by a static type
checker. Values arriving at runtime (case files, DataFrame columns) have
no such guarantee, so this module reports kind mismatches and NaN
hazards instead.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable

import numpy as np
import pandas as pd

from .types import ElementKind

logger = logging.getLogger(__name__)

# pandas infer_dtype label -> ElementKind
_INFERRED_KINDS = {
    "integer": ElementKind.INTEGER,
    "floating": ElementKind.FLOATING,
    "boolean": ElementKind.BOOLEAN,
    "string": ElementKind.STRING,
    "empty": ElementKind.EMPTY,
    "mixed-integer-float": ElementKind.MIXED,
    "mixed-integer": ElementKind.MIXED,
    "mixed": ElementKind.MIXED,
}

_MISSING = object()


@dataclass
class ValidationResult:
    """Result of a validation check."""

    is_valid: bool
    errors: list[str]
    warnings: list[str]
    stats: dict[str, int | float]


def _is_nan(value: Any) -> bool:
    # float covers Python floats and np.float64; np.floating adds float16/32
    return isinstance(value, (float, np.floating)) and bool(pd.isna(value))


def element_kind(values: Iterable[Any]) -> ElementKind:
    """
    Infer the kind of a sequence's elements.

    Parameters
    ----------
    values : Iterable
        Values to inspect. NaN is skipped, so ``[1.0, nan]`` is floating;
        values that are all NaN are floating too.

    Returns
    -------
    ElementKind
        EMPTY for no values, MIXED for ints and floats together,
        OTHER for anything pandas labels differently (dates, bytes, ...).
    """
    values = list(values)
    inferred = pd.api.types.infer_dtype(values, skipna=True)
    if inferred == "empty" and any(_is_nan(v) for v in values):
        return ElementKind.FLOATING
    return _INFERRED_KINDS.get(inferred, ElementKind.OTHER)


def validate_sequence(
    values: Iterable[Any],
    target: Any = _MISSING,
) -> ValidationResult:
    """
    Validate a sequence (and optionally a target) before a membership check.

    Parameters
    ----------
    values : Iterable
        Sequence to validate.
    target : Any, optional
        Target to check against the element kind. Omit to validate the
        sequence alone.

    Returns
    -------
    ValidationResult
        Errors for mixed element kinds and target/element kind mismatch;
        warnings for empty input and NaN values.

    Examples
    --------
    >>> validate_sequence([1, 2, 3], 1).is_valid
    True
    >>> validate_sequence([1, 2, 3], 1.0).errors
    ["Target kind 'floating' does not match element kind 'integer'"]
    """
    values = list(values)
    errors: list[str] = []
    warnings: list[str] = []
    stats: dict[str, int | float] = {"total": len(values)}

    kind = element_kind(values)

    if kind is ElementKind.EMPTY:
        warnings.append("Sequence is empty; membership is always false")
    elif kind is ElementKind.MIXED:
        errors.append("Sequence mixes element kinds")

    nan_count = sum(1 for v in values if _is_nan(v))
    stats["nan_count"] = nan_count
    if nan_count > 0:
        warnings.append(f"Sequence has {nan_count} NaN values; NaN never matches")

    try:
        stats["distinct"] = len(set(values))
    except TypeError:
        logger.debug("validate_sequence: unhashable elements, skipping distinct count")

    if target is not _MISSING:
        target_kind = element_kind([target])
        if _is_nan(target):
            warnings.append("Target is NaN; it can never be found")
            target_kind = ElementKind.FLOATING
        if kind not in (ElementKind.EMPTY, ElementKind.MIXED) and target_kind is not kind:
            errors.append(
                f"Target kind '{target_kind.value}' does not match "
                f"element kind '{kind.value}'"
            )

    logger.info(
        f"Validated sequence of {len(values)} values: "
        f"{len(errors)} errors, {len(warnings)} warnings"
    )

    return ValidationResult(
        is_valid=len(errors) == 0,
        errors=errors,
        warnings=warnings,
        stats=stats,
    )
