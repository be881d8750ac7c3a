"""POST /api/validate endpoint."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from manifestlint.deps import LintOptions, get_options
from manifestlint.parser import ParseError, parse
from manifestlint.validator import KIND_VALIDATORS, ValidationIssue, validate_resource

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["validate"])


class ValidateRequest(BaseModel):
    """Request body for POST /api/validate."""

    manifest: str = Field(..., description="A single YAML manifest document")
    strict_kinds: bool | None = Field(
        None, description="Report unsupported kinds as errors (defaults to the add-on option)"
    )


class ValidateResponse(BaseModel):
    """Response body for POST /api/validate."""

    kind: str
    name: str = ""
    valid: bool
    errors: int = 0
    issues: list[ValidationIssue] = Field(default_factory=list)


@router.post("/validate", response_model=ValidateResponse)
async def validate_manifest(
    body: ValidateRequest,
    options: LintOptions = Depends(get_options),
) -> ValidateResponse:
    """Validate one manifest and return its issues in check order."""
    try:
        resource = parse(body.manifest)
    except ParseError as e:
        logger.warning("Rejected manifest: %s", e)
        detail = f"line {e.line}: {e}" if e.line else str(e)
        raise HTTPException(status_code=422, detail=detail)

    strict = options.strict_kinds if body.strict_kinds is None else body.strict_kinds
    result = validate_resource(logger, resource, strict_kinds=strict)
    logger.info(
        "Validated %s %s: %d error(s), %d issue(s)",
        resource.kind, resource.name, result.errors, len(result.issues),
    )

    return ValidateResponse(
        kind=resource.kind,
        name=resource.name,
        valid=result.valid,
        errors=result.errors,
        issues=result.issues,
    )


@router.get("/kinds")
async def list_kinds() -> dict[str, list[str]]:
    """List the resource kinds that have a dedicated validator."""
    return {"kinds": sorted(KIND_VALIDATORS)}
