"""Shared pytest fixtures for the pg-scaffold test suite.

Provides reusable fixtures for:
- Configuration records for hyphenated and plain project names
- A shared TemplateRenderer
- In-memory filesystem and scripted prompt doubles
- Settings pointing at a temporary base directory
"""

from __future__ import annotations

from pathlib import Path

import pytest

from src.config import PgConfig, Settings
from src.scaffolder import MemoryFileSystem, ScriptedPrompter, TemplateRenderer


# ---------------------------------------------------------------------------
# Configuration records
# ---------------------------------------------------------------------------

@pytest.fixture
def project_name() -> str:
    return "my-app"


@pytest.fixture
def pg_config(project_name: str) -> PgConfig:
    """``PgConfig`` for ``my-app`` on host port 5433."""
    return PgConfig.for_project(project_name, "5433")


@pytest.fixture
def simple_pg_config() -> PgConfig:
    """``PgConfig`` for a project name without a separator."""
    return PgConfig.for_project("simple", "5432")


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

@pytest.fixture
def renderer() -> TemplateRenderer:
    """TemplateRenderer over the packaged templates."""
    return TemplateRenderer()


# ---------------------------------------------------------------------------
# I/O doubles
# ---------------------------------------------------------------------------

@pytest.fixture
def memory_fs() -> MemoryFileSystem:
    return MemoryFileSystem()


@pytest.fixture
def answers_prompter() -> ScriptedPrompter:
    """Prompter answering ``my-app`` and ``5433``."""
    return ScriptedPrompter(["my-app", "5433"])


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings whose base directory is the test's ``tmp_path``."""
    return Settings(base_dir=tmp_path)
