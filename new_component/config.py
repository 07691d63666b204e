"""new-component configuration.

Typed configuration for a single invocation.  The effective configuration is
built once by merging, in increasing precedence:

1. built-in defaults,
2. a global override file (``~/.new-component-config.json``),
3. a project-local override file (``./.new-component-config.json``).

All settings use Pydantic v2 models so overrides are validated at load time.
The resulting ``Config`` is frozen and passed explicitly into the generator.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from new_component.errors import ConfigError

CONFIG_FILE_NAME = ".new-component-config.json"

DEFAULT_DIR = Path("src/components")
DEFAULT_LANGUAGE = "en-en"

DEFAULT_PRETTIER_OPTIONS: dict[str, Any] = {
    "singleQuote": False,
    "semi": True,
    "trailingComma": "es5",
}


class FormatterConfig(BaseModel):
    """Settings for the Prettier subprocess used to format generated code."""

    model_config = ConfigDict(frozen=True)

    enabled: bool = Field(default=True, description="Run generated code through Prettier")
    command: list[str] = Field(
        default_factory=lambda: ["npx", "--no-install", "prettier"],
        min_length=1,
        description="Executable and leading arguments used to invoke Prettier",
    )
    timeout: int = Field(default=60, ge=1, description="Per-file timeout in seconds")
    options: dict[str, Any] = Field(
        default_factory=lambda: dict(DEFAULT_PRETTIER_OPTIONS),
        description="Prettier options, using Prettier's own camelCase names",
    )


class Config(BaseModel):
    """Effective configuration for one new-component run."""

    model_config = ConfigDict(frozen=True)

    dir: Path = Field(default=DEFAULT_DIR, description="Parent components directory")
    lang: str = Field(default=DEFAULT_LANGUAGE, min_length=1, description="Default language code")
    formatter: FormatterConfig = Field(default_factory=FormatterConfig)

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def load(cls, cwd: Path | None = None, home: Path | None = None) -> "Config":
        """Build the effective configuration from defaults and override files.

        Args:
            cwd: Directory holding the project-local override file. Defaults
                to the current working directory.
            home: Directory holding the global override file. Defaults to
                the user's home directory.

        Raises:
            ConfigError: If an override file is not a valid JSON object or
                produces an invalid configuration.
        """
        cwd = Path.cwd() if cwd is None else Path(cwd)
        home = Path.home() if home is None else Path(home)

        merged: dict[str, Any] = cls().model_dump()
        sources = [home / CONFIG_FILE_NAME, cwd / CONFIG_FILE_NAME]
        for source in sources:
            merged = _deep_merge(merged, _read_overrides(source))

        try:
            return cls.model_validate(merged)
        except ValidationError as exc:
            existing = [s for s in sources if s.is_file()]
            raise ConfigError(existing[-1] if existing else sources[-1], str(exc)) from exc

    def with_overrides(self, **changes: Any) -> "Config":
        """Return a validated copy with the non-``None`` *changes* applied.

        Used by the CLI to layer ``--dir`` / ``--lang`` on top of the loaded
        configuration without mutating it.
        """
        updates = {key: value for key, value in changes.items() if value is not None}
        if not updates:
            return self
        return type(self).model_validate({**self.model_dump(), **updates})

    def without_formatting(self) -> "Config":
        """Return a copy with the formatter disabled."""
        formatter = self.formatter.model_copy(update={"enabled": False})
        return self.model_copy(update={"formatter": formatter})


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _read_overrides(path: Path) -> dict[str, Any]:
    """Load one override file, returning ``{}`` when it does not exist.

    The legacy ``prettierConfig`` key is folded into ``formatter.options``.
    """
    if not path.is_file():
        return {}

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(path, str(exc)) from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(path, f"not valid JSON ({exc})") from exc

    if not isinstance(data, dict):
        raise ConfigError(path, "expected a JSON object at the top level")

    legacy = data.pop("prettierConfig", None)
    if legacy is not None:
        if not isinstance(legacy, dict):
            raise ConfigError(path, "'prettierConfig' must be an object")
        formatter = data.setdefault("formatter", {})
        if not isinstance(formatter, dict):
            raise ConfigError(path, "'formatter' must be an object")
        options = formatter.get("options", {})
        if not isinstance(options, dict):
            raise ConfigError(path, "'formatter.options' must be an object")
        formatter["options"] = {**legacy, **options}

    return data


def _deep_merge(base: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge *overrides* into a copy of *base*."""
    result = dict(base)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result
