"""Typed shapes for the supported manifest kinds."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field


class _Manifest(BaseModel):
    """Base for manifest sections: accepts camelCase keys, ignores unknown ones."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class ObjectMeta(_Manifest):
    name: str = ""
    namespace: str | None = None
    labels: dict[str, str] = Field(default_factory=dict)
    annotations: dict[str, str] = Field(default_factory=dict)


class Param(_Manifest):
    name: str
    type: str = "string"
    description: str = ""
    default: Any = None


class Step(_Manifest):
    name: str = ""
    image: str
    command: list[str] = Field(default_factory=list)
    args: list[str] = Field(default_factory=list)
    script: str | None = None
    working_dir: str | None = Field(None, alias="workingDir")


class TaskSpec(_Manifest):
    description: str = ""
    params: list[Param] = Field(default_factory=list)
    steps: list[Step] = Field(default_factory=list)
    sidecars: list[Step] = Field(default_factory=list)


class Task(_Manifest):
    KINDS: ClassVar[tuple[str, ...]] = ("Task", "ClusterTask")

    api_version: str = Field("", alias="apiVersion")
    kind: str
    metadata: ObjectMeta = Field(default_factory=ObjectMeta)
    spec: TaskSpec


class TaskRef(_Manifest):
    name: str
    kind: str = "Task"
    bundle: str | None = None


class PipelineTask(_Manifest):
    name: str
    task_ref: TaskRef | None = Field(None, alias="taskRef")
    task_spec: TaskSpec | None = Field(None, alias="taskSpec")
    run_after: list[str] = Field(default_factory=list, alias="runAfter")
    params: list[dict[str, Any]] = Field(default_factory=list)


class PipelineSpec(_Manifest):
    description: str = ""
    params: list[Param] = Field(default_factory=list)
    tasks: list[PipelineTask] = Field(default_factory=list)
    finally_: list[PipelineTask] = Field(default_factory=list, alias="finally")


class Pipeline(_Manifest):
    KINDS: ClassVar[tuple[str, ...]] = ("Pipeline",)

    api_version: str = Field("", alias="apiVersion")
    kind: str
    metadata: ObjectMeta = Field(default_factory=ObjectMeta)
    spec: PipelineSpec


# Kind tag -> typed shape
KIND_MODELS: dict[str, type[Task] | type[Pipeline]] = {
    kind: model for model in (Task, Pipeline) for kind in model.KINDS
}
