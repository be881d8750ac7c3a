"""Pipeline validator: task wiring and embedded step images."""

from __future__ import annotations

from manifestlint.parser.resource import DecodeError
from manifestlint.parser.schema import Pipeline, PipelineTask
from manifestlint.validator.base import Validator
from manifestlint.validator.image_ref import check_image
from manifestlint.validator.models import ValidationResult


class PipelineValidator(Validator):
    """Checks pipeline tasks and finally tasks in declaration order."""

    def validate(self) -> ValidationResult:
        result = ValidationResult()

        try:
            pipeline = self.resource.to_type(Pipeline)
        except DecodeError as e:
            self.log.warning("Could not decode %r: %s", self.resource, e)
            result.error("decode", f"failed to decode pipeline - {e}")
            return result

        # runAfter may only name regular tasks, not finally tasks
        declared = {t.name for t in pipeline.spec.tasks}
        seen: set[str] = set()

        for pt in [*pipeline.spec.tasks, *pipeline.spec.finally_]:
            if pt.name in seen:
                result.error(
                    "pipeline_tasks",
                    f"Pipeline task name ({pt.name}) is used more than once",
                )
            seen.add(pt.name)
            self._check_task(pt, declared, result)

        return result

    def _check_task(
        self, pt: PipelineTask, declared: set[str], result: ValidationResult,
    ) -> None:
        if pt.task_ref is None and pt.task_spec is None:
            result.error(
                "pipeline_tasks",
                f"Pipeline task ({pt.name}) must reference a task or embed a task spec",
            )

        for dep in pt.run_after:
            if dep not in declared:
                result.error(
                    "pipeline_tasks",
                    f"Pipeline task ({pt.name}) runs after unknown task ({dep})",
                )

        if pt.task_spec is not None:
            for step in [*pt.task_spec.steps, *pt.task_spec.sidecars]:
                result.issues.extend(check_image(step.image, self.log))
