"""Shared FastAPI dependencies."""

from __future__ import annotations

from pydantic import BaseModel


class LintOptions(BaseModel):
    """Runtime options loaded at startup."""

    strict_kinds: bool = False


_options: LintOptions | None = None


def get_options() -> LintOptions:
    """FastAPI dependency: return the shared LintOptions."""
    assert _options is not None, "LintOptions not initialised"
    return _options
