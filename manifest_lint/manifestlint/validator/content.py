"""Kind-agnostic metadata and description conventions."""

from __future__ import annotations

from manifestlint.parser.resource import DecodeError
from manifestlint.parser.schema import ObjectMeta
from manifestlint.validator.base import Validator
from manifestlint.validator.models import ValidationResult

VERSION_LABEL = "app.kubernetes.io/version"
MIN_VERSION_ANNOTATION = "tekton.dev/pipelines.minVersion"
TAGS_ANNOTATION = "tekton.dev/tags"
DISPLAY_NAME_ANNOTATION = "tekton.dev/displayName"

MAX_SUMMARY_LENGTH = 80


class ContentValidator(Validator):
    """Checks the labels, annotations and description every resource should carry."""

    def validate(self) -> ValidationResult:
        result = ValidationResult()
        kind = self.resource.kind

        try:
            typed = self.resource.to_type()
        except DecodeError as e:
            self.log.warning("Could not decode %r: %s", self.resource, e)
            result.error("decode", f"failed to decode {kind.lower() or 'resource'} - {e}")
            return result

        label = f"{kind} {typed.metadata.name}"
        self._check_metadata(label, typed.metadata, result)
        self._check_description(label, typed.spec.description, result)
        return result

    def _check_metadata(self, label: str, meta: ObjectMeta, result: ValidationResult) -> None:
        if VERSION_LABEL not in meta.labels:
            result.error("metadata", f"{label} is missing the mandatory label {VERSION_LABEL}")
        if MIN_VERSION_ANNOTATION not in meta.annotations:
            result.error(
                "metadata", f"{label} is missing the mandatory annotation {MIN_VERSION_ANNOTATION}",
            )
        if TAGS_ANNOTATION not in meta.annotations:
            result.recommend("metadata", f"{label} should have the annotation {TAGS_ANNOTATION}")
        if DISPLAY_NAME_ANNOTATION not in meta.annotations:
            result.recommend(
                "metadata", f"{label} should have the annotation {DISPLAY_NAME_ANNOTATION}",
            )

    def _check_description(self, label: str, description: str, result: ValidationResult) -> None:
        if not description.strip():
            result.error("description", f"{label} must have a description")
            return

        summary = description.strip().splitlines()[0]
        if len(summary) > MAX_SUMMARY_LENGTH:
            result.warn(
                "description",
                f"{label} summary line should be at most {MAX_SUMMARY_LENGTH} characters",
            )
