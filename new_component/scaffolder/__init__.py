"""new-component scaffolder -- writes a component directory from templates.

Quick usage::

    from new_component.config import Config
    from new_component.scaffolder import ComponentGenerator, build_request

    config = Config.load()
    request = build_request("Avatar", config.lang)
    generator = ComponentGenerator(config)
    files = await generator.generate(request)
"""

from new_component.scaffolder.generator import (
    ASSETS,
    ComponentGenerator,
    build_request,
    check_preconditions,
)
from new_component.scaffolder.models import GenerationRequest, RenderedFile, TemplateAsset
from new_component.scaffolder.templates import PLACEHOLDERS, TemplateRenderer

__all__ = [
    "ASSETS",
    "ComponentGenerator",
    "GenerationRequest",
    "PLACEHOLDERS",
    "RenderedFile",
    "TemplateAsset",
    "TemplateRenderer",
    "build_request",
    "check_preconditions",
]
