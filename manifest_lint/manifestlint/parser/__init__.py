"""Manifest decoding into generic resources and typed shapes."""

from manifestlint.parser.resource import DecodeError, ParseError, Resource, parse
from manifestlint.parser.schema import KIND_MODELS, Pipeline, PipelineTask, Step, Task

__all__ = [
    "DecodeError",
    "KIND_MODELS",
    "ParseError",
    "Pipeline",
    "PipelineTask",
    "Resource",
    "Step",
    "Task",
    "parse",
]
