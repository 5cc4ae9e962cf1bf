"""Configuration and case-file loading.

This module loads YAML configuration files and the membership case
files used to drive scenario tests.

Case file layout::

    cases:
      - name: int64_hit
        dtype: int64
        values: [1, 2, 3]
        target: 1
        expected: true
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import numpy as np
import pandas as pd
import yaml

from .types import SUPPORTED_DTYPES, CheckCase

logger = logging.getLogger(__name__)


def load_config(path: str | Path) -> dict[str, Any]:
    """
    Load a YAML configuration file.

    Parameters
    ----------
    path : str | Path
        Path to the YAML configuration file.

    Returns
    -------
    dict[str, Any]
        Configuration dictionary.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist.
    yaml.YAMLError
        If the YAML is malformed.
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    with open(path, "r") as f:
        config = yaml.safe_load(f)

    return config if config is not None else {}


def get_nested(config: dict[str, Any], *keys: str, default: Any = None) -> Any:
    """
    Get a nested value from a configuration dictionary.

    Examples
    --------
    >>> cfg = {"cases": [{"name": "int64_hit"}]}
    >>> get_nested(cfg, "cases")[0]["name"]
    'int64_hit'
    >>> get_nested(cfg, "defaults", "dtype", default="int64")
    'int64'
    """
    result = config
    for key in keys:
        if isinstance(result, dict) and key in result:
            result = result[key]
        else:
            return default
    return result


def _coerce(name: str, value: Any, dtype: str | None) -> Any:
    # .item() hands back the matching Python scalar (int / float)
    if dtype is None:
        return value

    try:
        with np.errstate(invalid="ignore", over="ignore"):
            coerced = np.asarray(value, dtype=dtype).item()
    except (TypeError, ValueError, OverflowError) as exc:
        raise ValueError(
            f"Case '{name}' value {value!r} is not representable as {dtype}"
        ) from exc

    both_nan = isinstance(value, float) and pd.isna(value) and pd.isna(coerced)
    if not (both_nan or coerced == value):
        raise ValueError(f"Case '{name}' value {value!r} is not representable as {dtype}")
    return coerced


def parse_case(entry: dict[str, Any]) -> CheckCase:
    """
    Build a CheckCase from one case-file entry.

    Raises
    ------
    ValueError
        If a required key is missing, the dtype is unsupported, or a value
        cannot be stored in the dtype without changing it (1.5 as int64).
    """
    name = entry.get("name")
    if name is None:
        raise ValueError(f"Case is missing 'name': {entry}")

    missing = {"values", "target"} - set(entry)
    if missing:
        raise ValueError(f"Case '{name}' is missing keys: {sorted(missing)}")

    dtype = entry.get("dtype")
    if dtype is not None and dtype not in SUPPORTED_DTYPES:
        raise ValueError(
            f"Case '{name}' has unsupported dtype '{dtype}', "
            f"expected one of {sorted(SUPPORTED_DTYPES)}"
        )

    values = tuple(_coerce(name, v, dtype) for v in entry["values"] or [])
    target = _coerce(name, entry["target"], dtype)

    return CheckCase(
        name=name,
        values=values,
        target=target,
        expected=entry.get("expected"),
        dtype=dtype,
    )


def load_cases(path: str | Path) -> list[CheckCase]:
    """
    Load membership cases from a YAML case file.

    Parameters
    ----------
    path : str | Path
        Path to a file with a top-level ``cases`` list.

    Returns
    -------
    list[CheckCase]
        Cases in file order. Empty if the file has no ``cases`` key.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    ValueError
        If any case is malformed.
    """
    config = load_config(path)
    entries = get_nested(config, "cases", default=[]) or []

    cases = [parse_case(entry) for entry in entries]
    logger.info(f"Loaded {len(cases)} membership cases from {path}")
    return cases
