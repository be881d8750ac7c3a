"""Task validator: step image references and tag pinning."""

from __future__ import annotations

from manifestlint.parser.resource import DecodeError
from manifestlint.parser.schema import Task
from manifestlint.validator.base import Validator
from manifestlint.validator.image_ref import check_image
from manifestlint.validator.models import ValidationResult


class TaskValidator(Validator):
    """Checks every step (then sidecar) image of a Task or ClusterTask."""

    def validate(self) -> ValidationResult:
        result = ValidationResult()

        try:
            task = self.resource.to_type(Task)
        except DecodeError as e:
            self.log.warning("Could not decode %r: %s", self.resource, e)
            result.error("decode", f"failed to decode task - {e}")
            return result

        for step in [*task.spec.steps, *task.spec.sidecars]:
            issues = check_image(step.image, self.log)
            if issues:
                self.log.debug("Step %r: %d issue(s)", step.name, len(issues))
            result.issues.extend(issues)

        return result
