"""Main scaffolding orchestrator.

Takes a ``GenerationRequest`` and the effective ``Config`` and writes a new
component directory containing the component, its story, documentation,
test, styles, index re-export and localization bundle.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from pydantic import ValidationError

from new_component.config import Config
from new_component.errors import UsageError
from new_component.utils import log_item_completion, make_dir, write_text

from .formatter import PrettierFormatter
from .models import GenerationRequest, RenderedFile, TemplateAsset
from .templates import TemplateRenderer, substitute


# ---------------------------------------------------------------------------
# Asset table
# ---------------------------------------------------------------------------

# Order is the order of the progress messages.
ASSETS: tuple[TemplateAsset, ...] = (
    TemplateAsset("component", "component.js", "{name}.js", "Component"),
    TemplateAsset("story", "component.stories.js", "{name}.stories.js", "Story"),
    # Documentation is prose; Prettier would reflow it.
    TemplateAsset("doc", "component.md", "{name}.md", "Doc", formatted=False),
    TemplateAsset("test", "component.test.js", "{name}.test.js", "Test"),
    TemplateAsset("styles", "component.styles.js", "{name}.styles.js", "Styles"),
    TemplateAsset("index", "index.js", "index.js", "Index"),
    TemplateAsset("localization", "component.lang.js", "{name}.lang.{lang}.js", "Lang {lang}"),
)


class Formatter(Protocol):
    async def format(self, source: str, file_path: str | Path) -> str: ...


# ---------------------------------------------------------------------------
# Preconditions
# ---------------------------------------------------------------------------


def build_request(component_name: str | None, language_code: str) -> GenerationRequest:
    """Validate the command-line inputs into a ``GenerationRequest``.

    Raises:
        UsageError: If the name is missing or not a plain name.
    """
    if not component_name or not component_name.strip():
        raise UsageError(
            "Sorry, you need to specify a name for your component like this: "
            "new-component <name>"
        )
    try:
        return GenerationRequest(component_name=component_name, language_code=language_code)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}" for err in exc.errors()
        )
        raise UsageError(f"Sorry, that is not a valid component: {problems}") from exc


def check_preconditions(request: GenerationRequest, config: Config) -> None:
    """Ensure the parent directory exists and the component does not.

    Raises:
        UsageError: If either check fails.
    """
    if not config.dir.resolve().is_dir():
        raise UsageError(
            'Sorry, you need to create a parent "components" directory.\n'
            f"(new-component is looking for a directory at {config.dir})."
        )

    component_dir = config.dir / request.component_name
    if component_dir.resolve().exists():
        raise UsageError(
            "Looks like this component already exists! "
            f"There's already a component at {component_dir}.\n"
            "Please delete this directory and try again."
        )


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ComponentGenerator:
    """Writes every asset in ``ASSETS`` for one component, in order.

    The first failure (``TemplateReadError``, ``FormatError`` or
    ``WriteError``) stops the run.  Files written before the failure are
    left on disk.
    """

    def __init__(
        self,
        config: Config,
        *,
        renderer: TemplateRenderer | None = None,
        formatter: Formatter | None = None,
    ) -> None:
        self.config = config
        self.renderer = renderer or TemplateRenderer()
        if formatter is None and config.formatter.enabled:
            formatter = PrettierFormatter(config.formatter)
        self.formatter = formatter

    # -- Public API --------------------------------------------------------

    async def generate(self, request: GenerationRequest) -> list[RenderedFile]:
        """Create the component directory and write every asset into it.

        Returns:
            One ``RenderedFile`` per asset, in ``ASSETS`` order.
        """
        component_dir = self.config.dir / request.component_name
        await make_dir(component_dir)
        log_item_completion("Directory created.")

        rendered: list[RenderedFile] = []
        for asset in ASSETS:
            rendered.append(await self.render_asset(asset, request, component_dir))
            log_item_completion(f"{asset.label(request)} created.")
        return rendered

    async def render_asset(
        self,
        asset: TemplateAsset,
        request: GenerationRequest,
        component_dir: Path,
    ) -> RenderedFile:
        """Read, substitute, format and write a single asset."""
        output_path = component_dir / asset.output_name(request)

        raw = await self.renderer.read(asset.template_name)
        substituted = substitute(raw, request)
        formatted = substituted
        if asset.formatted and self.formatter is not None:
            formatted = await self.formatter.format(substituted, output_path)

        await write_text(output_path, formatted)
        return RenderedFile(
            asset=asset,
            output_path=output_path,
            raw=raw,
            substituted=substituted,
            formatted=formatted,
        )
