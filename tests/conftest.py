"""Shared test fixtures and configuration."""

import os
import sys
from pathlib import Path

# Add manifest_lint/ to Python path so `from manifestlint.xxx` imports work
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "manifest_lint"))

import pytest

from manifestlint.parser import Resource, parse

os.environ["LINT_DEV_MODE"] = "true"

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def load_resource(fixtures_dir: Path):
    def _load(name: str) -> Resource:
        return parse((fixtures_dir / name).read_text())

    return _load


@pytest.fixture
def valid_task(load_resource) -> Resource:
    return load_resource("valid_task.yaml")


@pytest.fixture
def task_with_invalid_images(load_resource) -> Resource:
    return load_resource("task_invalid_images.yaml")


@pytest.fixture
def valid_pipeline(load_resource) -> Resource:
    return load_resource("valid_pipeline.yaml")
