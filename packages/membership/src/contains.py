"""Generic membership checks over ordered sequences.

contains (linear scan):
    contains(S, v) = exists i : S[i] == v

Elements are compared with ``==`` only. Python's ``in`` operator also
matches on identity, which makes ``nan in [nan]`` true for the same NaN
object; these functions keep IEEE-754 semantics instead, so NaN never
matches and ``-0.0`` matches ``0.0``.

All functions are pure: no logging, no mutation of inputs.
"""
from __future__ import annotations

from typing import Any, Callable, Iterable

from .types import T


def index(sequence: Iterable[T], target: T) -> int:
    """
    Return the position of the first element equal to ``target``.

    Parameters
    ----------
    sequence : Iterable[T]
        Ordered values to scan. May be empty.
    target : T
        Value to look for, same type as the elements.

    Returns
    -------
    int
        Zero-based position of the first match, or -1 if absent.

    Examples
    --------
    >>> index([3, 1, 1], 1)
    1
    >>> index([], 5)
    -1
    """
    for i, element in enumerate(sequence):
        if element == target:
            return i
    return -1


def contains(sequence: Iterable[T], target: T) -> bool:
    """
    Check whether ``target`` occurs in ``sequence``.

    Single pass from first to last element, stopping at the first match.

    Parameters
    ----------
    sequence : Iterable[T]
        Ordered values to scan. May be empty.
    target : T
        Value to look for, same type as the elements.

    Returns
    -------
    bool
        True if at least one element equals ``target``.

    Examples
    --------
    >>> contains([1, 2, 3], 1)
    True
    >>> contains([1.0, 2.0, 3.0], 4.0)
    False
    >>> contains([], 5)
    False

    Notes
    -----
    No tolerance is applied to floats. Round first, or use an
    approximate comparison through ``contains_func``.
    """
    return index(sequence, target) >= 0


def index_func(sequence: Iterable[T], predicate: Callable[[T], Any]) -> int:
    """Return the first position where ``predicate(element)`` is truthy, or -1."""
    for i, element in enumerate(sequence):
        if predicate(element):
            return i
    return -1


def contains_func(sequence: Iterable[T], predicate: Callable[[T], Any]) -> bool:
    """
    Check whether any element satisfies ``predicate``.

    Examples
    --------
    >>> contains_func([0.1 + 0.2, 1.0], lambda x: abs(x - 0.3) < 1e-9)
    True
    """
    return index_func(sequence, predicate) >= 0
