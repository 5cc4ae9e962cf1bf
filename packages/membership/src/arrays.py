"""Vectorized membership checks for numpy arrays and pandas objects.

Same semantics as ``contains``: value equality, NaN never matches,
empty input is never a hit. Series/Index labels are ignored.
"""
from __future__ import annotations

import logging
from typing import Any, Iterable

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)


def _kind_of(value: Any) -> str:
    """numpy kind character for a scalar ('i', 'u', 'f', 'b', ...)."""
    return np.asarray(value).dtype.kind


def contains_array(
    values: np.ndarray | pd.Series | pd.Index | Iterable[Any],
    target: Any,
) -> bool:
    """
    Check whether ``target`` equals any element of ``values``.

    Parameters
    ----------
    values : np.ndarray | pd.Series | pd.Index | Iterable
        One-dimensional values to search.
    target : Any
        Scalar to look for.

    Returns
    -------
    bool
        True if at least one element equals ``target``.

    Examples
    --------
    >>> contains_array(np.array([1, 2, 3], dtype=np.int64), 1)
    True
    >>> contains_array(pd.Series([1.0, np.nan]), np.nan)
    False
    """
    arr = np.asarray(values)
    if arr.size == 0:
        return False

    target_kind = _kind_of(target)
    numeric = {"i", "u", "f"}
    if arr.dtype.kind in numeric and target_kind in numeric:
        int_like = {"i", "u"}
        if (arr.dtype.kind in int_like) != (target_kind in int_like):
            logger.warning(
                "contains_array: target kind '%s' differs from array dtype %s; "
                "numpy will coerce before comparing",
                target_kind,
                arr.dtype,
            )

    return bool(np.any(arr == target))


def contains_many(
    values: np.ndarray | pd.Series | pd.Index | Iterable[Any],
    targets: Iterable[Any],
) -> pd.Series:
    """
    Membership result for each target.

    Parameters
    ----------
    values : np.ndarray | pd.Series | pd.Index | Iterable
        Values to search.
    targets : Iterable
        Targets to look for, in output order.

    Returns
    -------
    pd.Series
        Boolean series indexed by target.

    Notes
    -----
    ``pd.Series.isin`` treats NaN as present; this does not.
    """
    arr = np.asarray(values)
    targets = list(targets)
    result = pd.Series(
        [contains_array(arr, t) for t in targets],
        index=pd.Index(targets, name="target"),
        dtype=bool,
    )
    result.name = "contains"
    return result
