"""Validation of decoded pipeline resource manifests."""

from manifestlint.validator.base import Validator
from manifestlint.validator.dispatch import KIND_VALIDATORS, for_kind, validate_resource
from manifestlint.validator.image_ref import InvalidReferenceError, check_image, parse_reference
from manifestlint.validator.models import ValidationIssue, ValidationResult, ValidationSeverity

__all__ = [
    "InvalidReferenceError",
    "KIND_VALIDATORS",
    "ValidationIssue",
    "ValidationResult",
    "ValidationSeverity",
    "Validator",
    "check_image",
    "for_kind",
    "parse_reference",
    "validate_resource",
]
