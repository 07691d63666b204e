"""Data models for component scaffolding.

``GenerationRequest`` is the validated input of one run, ``TemplateAsset``
describes a bundled template and where it lands, and ``RenderedFile`` is the
per-asset result threaded through read, substitute, format and write.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from new_component.config import DEFAULT_LANGUAGE

# The underscored form is used as a JS identifier, the raw form in a file name.
_LANGUAGE_CODE = re.compile(r"[A-Za-z][A-Za-z0-9_-]*")


class GenerationRequest(BaseModel):
    """The (component name, language code) pair driving one invocation."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    component_name: str = Field(..., min_length=1, description="Component name, used verbatim")
    language_code: str = Field(default=DEFAULT_LANGUAGE, min_length=1)

    @field_validator("component_name")
    @classmethod
    def _no_path_separators(cls, value: str) -> str:
        if "/" in value or "\\" in value:
            raise ValueError("must be a plain name, not a path")
        if value in (".", ".."):
            raise ValueError("must be a plain name, not a path")
        return value

    @field_validator("language_code")
    @classmethod
    def _identifier_safe_language(cls, value: str) -> str:
        if not _LANGUAGE_CODE.fullmatch(value):
            raise ValueError(
                "must start with a letter and contain only letters, digits, '-' or '_'"
            )
        return value

    @property
    def underscored_language_code(self) -> str:
        """Language code usable as a JS identifier (``en-en`` -> ``en_en``)."""
        return self.language_code.replace("-", "_")


@dataclass(frozen=True)
class TemplateAsset:
    """A bundled template and the file it produces."""

    key: str
    template_name: str
    output_pattern: str
    label_pattern: str
    formatted: bool = True

    def output_name(self, request: GenerationRequest) -> str:
        return self.output_pattern.format(
            name=request.component_name, lang=request.language_code
        )

    def label(self, request: GenerationRequest) -> str:
        return self.label_pattern.format(
            name=request.component_name, lang=request.language_code
        )


@dataclass
class RenderedFile:
    """One asset after substitution and formatting."""

    asset: TemplateAsset
    output_path: Path
    raw: str
    substituted: str
    formatted: str
