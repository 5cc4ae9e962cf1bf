"""FlowCode Membership Package - Generic membership checks.

Pure functions answering whether a value occurs in an ordered
sequence, for any element type with value equality.

Public API:
- contains: Linear membership check (IEEE equality for floats)
- index: Position of the first match, or -1
- contains_func / index_func: Predicate-based variants
- contains_array: Vectorized check for numpy arrays and pandas objects
- contains_many: One result per target, as a boolean Series
- validate_sequence: Report kind mismatches and NaN hazards
- load_cases: Load named check cases from YAML
"""

from .types import CheckCase, ElementKind
from .contains import contains, index, contains_func, index_func
from .arrays import contains_array, contains_many
from .validation import ValidationResult, element_kind, validate_sequence
from .config import load_config, load_cases

__all__ = [
    # Types
    "CheckCase",
    "ElementKind",
    "ValidationResult",
    # Core
    "contains",
    "index",
    "contains_func",
    "index_func",
    # Vectorized
    "contains_array",
    "contains_many",
    # Validation
    "element_kind",
    "validate_sequence",
    # Config
    "load_config",
    "load_cases",
]
