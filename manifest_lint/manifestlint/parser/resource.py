"""Generic manifest resource and its conversion into typed shapes."""

from __future__ import annotations

import logging
from io import StringIO
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError
from ruamel.yaml import YAML, YAMLError

from manifestlint.parser.schema import KIND_MODELS

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class ParseError(Exception):
    """The input is not a decodable manifest document."""

    def __init__(self, message: str, line: int | None = None) -> None:
        super().__init__(message)
        self.line = line


class DecodeError(Exception):
    """A resource does not match the typed shape requested for it."""


class Resource:
    """A decoded manifest document carrying its declared kind."""

    def __init__(self, content: dict[str, Any]) -> None:
        self.content = content
        self.kind: str = str(content.get("kind", ""))
        self.api_version: str = str(content.get("apiVersion", ""))
        metadata = content.get("metadata")
        self.name: str = str(metadata.get("name", "")) if isinstance(metadata, dict) else ""

    def __repr__(self) -> str:
        return f"Resource(kind={self.kind!r}, name={self.name!r})"

    def to_type(self, model: type[M] | None = None) -> M:
        """Convert the raw content into ``model``.

        Without ``model`` the shape is looked up from the declared kind.

        Raises:
            DecodeError: if the kind does not match ``model`` or the content
                does not satisfy its schema.
        """
        if model is None:
            model = KIND_MODELS.get(self.kind)  # type: ignore[assignment]
            if model is None:
                raise DecodeError(f"no schema registered for kind {self.kind!r}")

        accepted = getattr(model, "KINDS", ())
        if accepted and self.kind not in accepted:
            raise DecodeError(
                f"expected kind {' or '.join(accepted)}, got {self.kind or 'none'}"
            )

        try:
            return model.model_validate(self.content)
        except ValidationError as e:
            errors = "; ".join(
                f"{'.'.join(str(p) for p in err['loc']) or '<root>'}: {err['msg']}"
                for err in e.errors()
            )
            raise DecodeError(errors) from e


def _to_plain(obj: Any) -> Any:
    """Normalise mapping keys to strings, recursively."""
    if isinstance(obj, dict):
        return {str(k): _to_plain(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_to_plain(v) for v in obj]
    return obj


def parse(text: str) -> Resource:
    """Parse a single YAML manifest document into a Resource.

    Raises:
        ParseError: on empty input, YAML syntax errors, a non-mapping
            document or a missing ``kind``.
    """
    if not text or not text.strip():
        raise ParseError("Empty manifest")

    yaml = YAML(typ="safe")
    try:
        parsed = yaml.load(StringIO(text))
    except YAMLError as e:
        line = None
        mark = getattr(e, "problem_mark", None)
        if mark is not None:
            line = mark.line + 1
        raise ParseError(str(e), line=line) from e

    if parsed is None:
        raise ParseError("Manifest parsed to empty/null value")
    if not isinstance(parsed, dict):
        raise ParseError(f"Manifest must be a mapping, got {type(parsed).__name__}")

    content = _to_plain(parsed)
    if not content.get("kind"):
        raise ParseError("Manifest is missing the required 'kind' key")

    resource = Resource(content)
    logger.debug("Parsed %r", resource)
    return resource
