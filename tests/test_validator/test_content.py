"""Tests for the metadata and description conventions."""

from __future__ import annotations

from manifestlint.parser import Resource
from manifestlint.validator.content import ContentValidator
from manifestlint.validator.models import ValidationSeverity


def _task(metadata: dict, description: str = "Does a thing") -> Resource:
    return Resource(
        {
            "apiVersion": "tekton.dev/v1beta1",
            "kind": "Task",
            "metadata": {"name": "demo", **metadata},
            "spec": {"description": description, "steps": []},
        }
    )


class TestContentValidator:
    def test_valid_task(self, valid_task: Resource) -> None:
        result = ContentValidator(None, valid_task).validate()
        assert result.errors == 0
        assert result.issues == []

    def test_valid_pipeline(self, valid_pipeline: Resource) -> None:
        result = ContentValidator(None, valid_pipeline).validate()
        assert result.errors == 0
        assert result.issues == []

    def test_missing_metadata(self) -> None:
        result = ContentValidator(None, _task({})).validate()

        assert result.errors == 2
        assert [(i.severity, i.message) for i in result.issues] == [
            (ValidationSeverity.error, "Task demo is missing the mandatory label app.kubernetes.io/version"),
            (
                ValidationSeverity.error,
                "Task demo is missing the mandatory annotation tekton.dev/pipelines.minVersion",
            ),
            (ValidationSeverity.info, "Task demo should have the annotation tekton.dev/tags"),
            (ValidationSeverity.info, "Task demo should have the annotation tekton.dev/displayName"),
        ]

    def test_missing_description(self) -> None:
        meta = {
            "labels": {"app.kubernetes.io/version": "0.1"},
            "annotations": {
                "tekton.dev/pipelines.minVersion": "0.12",
                "tekton.dev/tags": "build",
                "tekton.dev/displayName": "Demo",
            },
        }
        result = ContentValidator(None, _task(meta, description="   ")).validate()
        assert result.errors == 1
        assert result.issues[0].check_name == "description"
        assert result.issues[0].message == "Task demo must have a description"

    def test_long_summary_is_a_warning(self) -> None:
        meta = {
            "labels": {"app.kubernetes.io/version": "0.1"},
            "annotations": {
                "tekton.dev/pipelines.minVersion": "0.12",
                "tekton.dev/tags": "build",
                "tekton.dev/displayName": "Demo",
            },
        }
        result = ContentValidator(None, _task(meta, description="x" * 81 + "\n\nbody")).validate()
        assert result.errors == 0
        assert result.valid is True
        assert [i.severity for i in result.issues] == [ValidationSeverity.warning]

    def test_decode_failure(self) -> None:
        resource = Resource({"kind": "Pipeline", "metadata": {"name": "p"}})
        result = ContentValidator(None, resource).validate()
        assert result.errors == 1
        assert result.issues[0].message.startswith("failed to decode pipeline - ")
