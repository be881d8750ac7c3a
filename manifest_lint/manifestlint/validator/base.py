"""Validator contract shared by all kind-specific validators."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from manifestlint.parser.resource import Resource
from manifestlint.validator.models import ValidationResult

logger = logging.getLogger(__name__)


class Validator(ABC):
    """Validates a single resource.

    Instances are scoped to one resource and keep no state between calls
    to :meth:`validate`.

    Attributes:
        resource: The decoded resource being validated.
        log: Logger used for diagnostics only.
    """

    def __init__(self, log: logging.Logger | None, resource: Resource) -> None:
        self.resource = resource
        self.log = log or logger

    @abstractmethod
    def validate(self) -> ValidationResult:
        """Run every check and return the collected issues."""


class NoopValidator(Validator):
    """Produces an empty result for kinds nothing validates."""

    def validate(self) -> ValidationResult:
        self.log.debug("No validator for kind %r, skipping", self.resource.kind)
        return ValidationResult()


class UnsupportedKindValidator(Validator):
    """Reports kinds nothing validates as an error."""

    def validate(self) -> ValidationResult:
        result = ValidationResult()
        result.error("kind", f"unsupported resource kind: {self.resource.kind}")
        return result
