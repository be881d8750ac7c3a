"""Tests for the validation result model."""

from __future__ import annotations

from manifestlint.validator.models import ValidationResult, ValidationSeverity


class TestValidationResult:
    def test_empty_result_is_valid(self) -> None:
        result = ValidationResult()
        assert result.errors == 0
        assert result.valid is True
        assert result.issues == []

    def test_error_count_ignores_advisory_issues(self) -> None:
        result = ValidationResult()
        result.error("a", "broken")
        result.warn("b", "smells")
        result.recommend("c", "consider this")

        assert result.errors == 1
        assert result.valid is False
        assert [i.severity for i in result.issues] == [
            ValidationSeverity.error,
            ValidationSeverity.warning,
            ValidationSeverity.info,
        ]

    def test_advisory_only_result_is_valid(self) -> None:
        result = ValidationResult()
        result.recommend("metadata", "add tags")
        assert result.valid is True
        assert len(result.issues) == 1

    def test_merge_preserves_order_and_sums_errors(self) -> None:
        first = ValidationResult()
        first.error("a", "one")
        first.warn("a", "two")
        second = ValidationResult()
        second.error("b", "three")
        second.error("b", "four")

        merged = ValidationResult.merge(first, second)

        assert [i.message for i in merged.issues] == ["one", "two", "three", "four"]
        assert merged.errors == first.errors + second.errors == 3
        # sources untouched
        assert len(first.issues) == 2

    def test_serialises_computed_fields(self) -> None:
        result = ValidationResult()
        result.error("decode", "bad")
        data = result.model_dump(mode="json")
        assert data["errors"] == 1
        assert data["valid"] is False
        assert data["issues"][0] == {
            "severity": "error",
            "check_name": "decode",
            "message": "bad",
        }
