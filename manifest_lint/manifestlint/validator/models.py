"""Validation data models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, computed_field


class ValidationSeverity(str, Enum):
    """Severity level for validation issues.

    Only ``error`` fails a run; ``warning`` and ``info`` are advisory.
    """

    error = "error"
    warning = "warning"
    info = "info"


class ValidationIssue(BaseModel):
    """A single validation finding."""

    model_config = ConfigDict(frozen=True)

    severity: ValidationSeverity
    check_name: str
    message: str


class ValidationResult(BaseModel):
    """Aggregated result of one validation run.

    Issues keep the order in which checks reported them.
    """

    issues: list[ValidationIssue] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def errors(self) -> int:
        return sum(1 for i in self.issues if i.severity == ValidationSeverity.error)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def valid(self) -> bool:
        return self.errors == 0

    def add(self, severity: ValidationSeverity, check_name: str, message: str) -> None:
        self.issues.append(
            ValidationIssue(severity=severity, check_name=check_name, message=message)
        )

    def error(self, check_name: str, message: str) -> None:
        self.add(ValidationSeverity.error, check_name, message)

    def warn(self, check_name: str, message: str) -> None:
        self.add(ValidationSeverity.warning, check_name, message)

    def recommend(self, check_name: str, message: str) -> None:
        self.add(ValidationSeverity.info, check_name, message)

    def extend(self, other: ValidationResult) -> None:
        """Append another result's issues after this one's."""
        self.issues.extend(other.issues)

    @classmethod
    def merge(cls, *results: ValidationResult) -> ValidationResult:
        merged = cls()
        for result in results:
            merged.extend(result)
        return merged
