"""Template loading and placeholder substitution.

Templates are plain text files under ``new_component/scaffolder/templates/``
containing literal placeholder tokens such as ``COMPONENT_NAME``.  They are
located through a Jinja2 ``FileSystemLoader`` but never rendered by Jinja:
the JSX in them is full of braces, so substitution is a fixed, ordered
sequence of global string replacements.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, TemplateNotFound

from new_component.errors import TemplateReadError
from new_component.naming import resolve_classes_name, resolve_language_name

from .models import GenerationRequest

# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# Placeholder table
# ---------------------------------------------------------------------------

# Applied in this order to every template.  Tokens are case-sensitive, so
# ``COMPONENT_NAME`` and ``component_name`` are distinct.
PLACEHOLDERS: tuple[tuple[str, Callable[[GenerationRequest], str]], ...] = (
    ("COMPONENT_NAME", lambda request: request.component_name),
    ("component_name", lambda request: resolve_classes_name(request.component_name)),
    ("LANG-LANG", lambda request: request.language_code),
    ("LANG_LANG", lambda request: request.underscored_language_code),
    ("lang-LANG", lambda request: resolve_language_name(request.language_code)),
)


def substitute(template: str, request: GenerationRequest) -> str:
    """Replace every occurrence of each placeholder token in *template*."""
    for token, resolve in PLACEHOLDERS:
        if token in template:
            template = template.replace(token, resolve(request))
    return template


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Reads bundled templates through a Jinja2 loader."""

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(loader=FileSystemLoader(str(self.template_dir)))

    def load(self, template_name: str) -> str:
        """Return the raw text of *template_name*.

        Raises:
            TemplateReadError: If the template is missing or cannot be decoded.
        """
        try:
            source, _, _ = self.env.loader.get_source(self.env, template_name)
        except TemplateNotFound as exc:
            raise TemplateReadError(
                "Template not found", self.template_dir / template_name
            ) from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise TemplateReadError(
                f"Could not read template: {exc}", self.template_dir / template_name
            ) from exc
        return source

    async def read(self, template_name: str) -> str:
        """Async variant of :meth:`load`, run in a worker thread."""
        return await asyncio.to_thread(self.load, template_name)
