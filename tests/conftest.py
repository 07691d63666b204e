"""Shared pytest fixtures for the new-component test suite.

Provides reusable fixtures for:
- An isolated working directory with an empty ``src/components`` parent
- A configuration with the formatter disabled
- A recording fake formatter standing in for Prettier
"""

from __future__ import annotations

from pathlib import Path

import pytest

from new_component.config import Config
from new_component.scaffolder import GenerationRequest


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------


@pytest.fixture
def project_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Temporary project root used as cwd, with an isolated home directory.

    Contains an empty ``src/components`` directory so the default
    configuration points at an existing parent.
    """
    root = tmp_path / "project"
    (root / "src" / "components").mkdir(parents=True)
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.chdir(root)
    monkeypatch.setenv("HOME", str(home))
    yield root


@pytest.fixture
def components_dir(project_dir: Path) -> Path:
    return project_dir / "src" / "components"


# ---------------------------------------------------------------------------
# Configuration & requests
# ---------------------------------------------------------------------------


@pytest.fixture
def config(components_dir: Path) -> Config:
    """Configuration writing into ``components_dir`` without Prettier."""
    return Config(dir=components_dir).without_formatting()


@pytest.fixture
def avatar_request() -> GenerationRequest:
    return GenerationRequest(component_name="Avatar", language_code="en-en")


# ---------------------------------------------------------------------------
# Formatter
# ---------------------------------------------------------------------------


class RecordingFormatter:
    """Fake formatter that appends a marker and records every call."""

    MARKER = "// formatted\n"

    def __init__(self) -> None:
        self.calls: list[tuple[str, Path]] = []

    async def format(self, source: str, file_path: str | Path) -> str:
        self.calls.append((source, Path(file_path)))
        return source + self.MARKER


@pytest.fixture
def recording_formatter() -> RecordingFormatter:
    return RecordingFormatter()
