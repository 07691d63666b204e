"""Exception hierarchy for new-component.

``UsageError`` covers everything the user can fix by changing the command
line (or the filesystem) before re-running.  ``GenerationError`` and its
subclasses are raised by the scaffolding pipeline once files start being
written; they abort the run without rolling back what was already created.
"""

from __future__ import annotations

from pathlib import Path


class NewComponentError(Exception):
    """Base class for every error raised by new-component."""


class UsageError(NewComponentError):
    """Raised when a precondition on the command line or target directory fails."""


class ConfigError(NewComponentError):
    """Raised when a configuration override file cannot be loaded or validated."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        super().__init__(f"Invalid configuration file {path}: {message}")


class GenerationError(NewComponentError):
    """Raised when a step of the scaffolding pipeline fails irrecoverably."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        self.path = path
        super().__init__(message if path is None else f"{message} ({path})")


class TemplateReadError(GenerationError):
    """A bundled template is missing or unreadable."""


class FormatError(GenerationError):
    """The code formatter failed or timed out."""


class WriteError(GenerationError):
    """A directory or output file could not be created."""
