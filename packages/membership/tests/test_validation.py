"""Tests for validation module."""

import math

import numpy as np

from src.types import ElementKind
from src.validation import element_kind, validate_sequence


class TestElementKind:
    """Tests for element_kind function."""

    def test_integer(self) -> None:
        """Test Python and numpy integers."""
        assert element_kind([1, 2, 3]) is ElementKind.INTEGER
        assert element_kind(np.array([1, 2], dtype=np.int64)) is ElementKind.INTEGER

    def test_floating(self) -> None:
        """Test floats, with NaN skipped."""
        assert element_kind([1.0, 2.0]) is ElementKind.FLOATING
        assert element_kind([1.0, math.nan]) is ElementKind.FLOATING

    def test_mixed(self) -> None:
        """Test ints and floats together."""
        assert element_kind([1, 2.0]) is ElementKind.MIXED

    def test_empty(self) -> None:
        """Test empty input."""
        assert element_kind([]) is ElementKind.EMPTY

    def test_string_and_boolean(self) -> None:
        """Test non-numeric kinds."""
        assert element_kind(["a", "b"]) is ElementKind.STRING
        assert element_kind([True, False]) is ElementKind.BOOLEAN


class TestValidateSequence:
    """Tests for validate_sequence function."""

    def test_valid_integer_sequence(self) -> None:
        """Test a clean sequence and matching target."""
        result = validate_sequence([1, 2, 3], 1)

        assert result.is_valid is True
        assert result.errors == []
        assert result.warnings == []
        assert result.stats["total"] == 3
        assert result.stats["distinct"] == 3

    def test_sequence_without_target(self) -> None:
        """Test validating a sequence alone."""
        result = validate_sequence([1.0, 2.0])

        assert result.is_valid is True

    def test_target_kind_mismatch_is_error(self) -> None:
        """Test float target against integer elements."""
        result = validate_sequence([1, 2, 3], 1.0)

        assert result.is_valid is False
        assert any("does not match element kind 'integer'" in e for e in result.errors)

    def test_mixed_elements_is_error(self) -> None:
        """Test ints and floats in one sequence."""
        result = validate_sequence([1, 2.0, 3])

        assert result.is_valid is False
        assert "Sequence mixes element kinds" in result.errors

    def test_empty_is_warning(self) -> None:
        """Test empty sequence warns but stays valid."""
        result = validate_sequence([], 5)

        assert result.is_valid is True
        assert any("empty" in w for w in result.warnings)
        assert result.stats["total"] == 0

    def test_nan_elements_warn(self) -> None:
        """Test NaN elements are counted and flagged."""
        result = validate_sequence([1.0, math.nan, math.nan], 1.0)

        assert result.is_valid is True
        assert result.stats["nan_count"] == 2
        assert any("NaN never matches" in w for w in result.warnings)

    def test_nan_target_warns(self) -> None:
        """Test NaN target is flagged but is a float like the elements."""
        result = validate_sequence([1.0, 2.0], math.nan)

        assert result.is_valid is True
        assert any("Target is NaN" in w for w in result.warnings)

    def test_float32_nan_target_warns(self) -> None:
        """Test a numpy float32 NaN target is treated as a float."""
        values = np.array([1.0, 2.0], dtype=np.float32)

        result = validate_sequence(values, np.float32("nan"))

        assert result.is_valid is True
        assert result.errors == []
        assert any("Target is NaN" in w for w in result.warnings)

    def test_float32_nan_elements_counted(self) -> None:
        """Test numpy float32 NaN elements are counted."""
        values = np.array([1.0, np.nan, np.nan], dtype=np.float32)

        result = validate_sequence(values, np.float32(1.0))

        assert result.is_valid is True
        assert result.stats["nan_count"] == 2

    def test_all_nan_sequence_is_floating(self) -> None:
        """Test a sequence of only NaN is floating, not empty."""
        result = validate_sequence(np.array([np.nan], dtype=np.float32), 1.0)

        assert result.is_valid is True
        assert not any("empty" in w for w in result.warnings)
        assert result.stats["nan_count"] == 1

    def test_duplicates_counted(self) -> None:
        """Test distinct count with duplicated elements."""
        result = validate_sequence([2, 2, 3])

        assert result.stats["distinct"] == 2

    def test_unhashable_elements_skip_distinct(self) -> None:
        """Test unhashable elements do not break validation."""
        result = validate_sequence([[1], [2]])

        assert "distinct" not in result.stats
        assert result.stats["total"] == 2
