"""Validator dispatch: route a resource to the validator for its kind."""

from __future__ import annotations

import logging
from typing import Callable

from manifestlint.parser.resource import DecodeError, Resource
from manifestlint.validator.base import NoopValidator, UnsupportedKindValidator, Validator
from manifestlint.validator.content import ContentValidator
from manifestlint.validator.models import ValidationResult
from manifestlint.validator.pipeline import PipelineValidator
from manifestlint.validator.task import TaskValidator

logger = logging.getLogger(__name__)

ValidatorFactory = Callable[[logging.Logger | None, Resource], Validator]

# Kind tag -> validator constructor
KIND_VALIDATORS: dict[str, ValidatorFactory] = {
    "Task": TaskValidator,
    "ClusterTask": TaskValidator,
    "Pipeline": PipelineValidator,
}


def is_supported(kind: str) -> bool:
    return kind in KIND_VALIDATORS


def for_kind(
    log: logging.Logger | None, resource: Resource, strict_kinds: bool = False,
) -> Validator:
    """Return the validator for the resource's declared kind.

    Unknown kinds get a validator that reports nothing, or one that reports
    an ``unsupported resource kind`` error when ``strict_kinds`` is set.
    """
    factory = KIND_VALIDATORS.get(resource.kind)
    if factory is None:
        factory = UnsupportedKindValidator if strict_kinds else NoopValidator
    return factory(log, resource)


def _run(validator: Validator) -> ValidationResult:
    try:
        return validator.validate()
    except Exception as e:
        validator.log.exception("Validator %s crashed", type(validator).__name__)
        result = ValidationResult()
        result.error("validator_error", f"validator {type(validator).__name__} failed: {e}")
        return result


def validate_resource(
    log: logging.Logger | None, resource: Resource, strict_kinds: bool = False,
) -> ValidationResult:
    """Run the content checks and the kind-specific checks for one resource.

    Content issues come first, followed by the kind validator's issues.
    Unknown kinds skip the content checks, and so does a resource that does
    not decode: the kind validator then reports the single decode error.
    """
    (log or logger).debug("Validating %r", resource)
    kind_validator = for_kind(log, resource, strict_kinds=strict_kinds)
    if not is_supported(resource.kind):
        return _run(kind_validator)

    try:
        resource.to_type()
    except DecodeError:
        return _run(kind_validator)

    return ValidationResult.merge(
        _run(ContentValidator(log, resource)),
        _run(kind_validator),
    )
