"""Shared pytest fixtures for the create-mern-app test suite.

Provides reusable fixtures for:
- A run configuration rooted in a temporary output directory
- A factory for ``ProjectConfig`` objects with any combination of flags
- A helper that generates a project and returns its report
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from create_mern_app.config import Config
from create_mern_app.scaffolder import (
    GenerateOptions,
    GenerationReport,
    ProjectConfig,
    ProjectGenerator,
)


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

@pytest.fixture
def settings(tmp_path: Path) -> Config:
    """Run configuration writing under a fresh temporary directory."""
    return Config(output_dir=tmp_path / "out")


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep MERN_* variables from the developer's shell out of the tests."""
    for var in (
        "MERN_OUTPUT_DIR",
        "MERN_CLIENT_PORT",
        "MERN_SERVER_PORT",
        "MERN_MONGODB_PORT",
        "MERN_DATABASE_NAME",
        "MERN_APP_NAME",
        "MERN_JWT_SECRET",
    ):
        monkeypatch.delenv(var, raising=False)


# ---------------------------------------------------------------------------
# Projects
# ---------------------------------------------------------------------------

@pytest.fixture
def make_project(settings: Config) -> Callable[..., ProjectConfig]:
    """Factory: ``make_project("blog", typescript=True)``."""

    def _make(name: str = "blog", **flags: bool) -> ProjectConfig:
        return ProjectConfig(
            name=name,
            options=GenerateOptions(**flags),
            settings=settings,
        )

    return _make


@pytest.fixture
def generate(make_project) -> Callable[..., GenerationReport]:
    """Factory: generate a project on disk and return the report."""

    def _generate(name: str = "blog", **flags: bool) -> GenerationReport:
        return ProjectGenerator(make_project(name, **flags)).generate()

    return _generate


def tree_snapshot(root: Path) -> dict[str, bytes]:
    """Map every file under *root* (POSIX relative path) to its bytes."""
    return {
        p.relative_to(root).as_posix(): p.read_bytes()
        for p in sorted(root.rglob("*"))
        if p.is_file()
    }


@pytest.fixture
def snapshot() -> Callable[[Path], dict[str, bytes]]:
    return tree_snapshot
