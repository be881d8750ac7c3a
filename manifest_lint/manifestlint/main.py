"""FastAPI application -- manifest lint entrypoint."""

from __future__ import annotations

import json
import logging
import os
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator

from fastapi import FastAPI

import manifestlint.deps as deps
from manifestlint import __version__
from manifestlint.api.validate import router as validate_router

logger = logging.getLogger(__name__)

_TRUTHY = {"1", "true", "yes", "on"}


def _load_options() -> dict:
    """Load options from the JSON options file or env fallback."""
    opts_path = os.environ.get("LINT_OPTIONS_PATH", "/data/options.json")
    if Path(opts_path).exists():
        return json.loads(Path(opts_path).read_text())
    return {
        "strict_kinds": os.environ.get("LINT_STRICT_KINDS", "").lower() in _TRUTHY,
    }


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan: load options on startup, clear them on shutdown."""
    log_level = logging.DEBUG if os.environ.get("LINT_DEV_MODE") else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    deps._options = deps.LintOptions.model_validate(_load_options())
    logger.info("Manifest lint starting with options: %s", deps._options.model_dump())

    yield

    deps._options = None


app = FastAPI(
    title="Manifest Lint",
    version=__version__,
    lifespan=lifespan,
)

app.include_router(validate_router)
