"""Renderer facade: resolve a template from cache or disk, then execute it."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

from fastapi import status
from fastapi.responses import Response

from ..core.errors import ExecutionError
from ..core.models import CompiledTemplate, RendererConfig, TemplateData
from ..discovery.finder import collect_by_tag
from ..settings import RendererSettings
from .builder import TemplateBuilder
from .cache import TemplateCache
from .sink import BufferedResponseSink, ResponseSink

logger = logging.getLogger(__name__)

Payload = TemplateData | Mapping[str, Any] | None


class Renderer:
    """Renders named templates with shared layouts and partials.

    One instance is meant to be shared by concurrent request handlers.
    Finish configuration (including layout discovery) before serving.
    """

    def __init__(self, config: RendererConfig | None = None) -> None:
        self.config = config or RendererConfig()
        self.cache = TemplateCache()
        self.builder = TemplateBuilder(self.config, self.cache)

    @classmethod
    def from_settings(cls, settings: RendererSettings, **overrides: Any) -> Renderer:
        """Create a renderer from environment settings.

        Layouts and partials are discovered up front when
        ``settings.partial_tags`` is set.
        """
        config = RendererConfig(
            template_dir=settings.template_dir,
            use_cache=settings.use_cache,
            debug=settings.debug,
            template_extension=settings.template_extension,
            **overrides,
        )
        renderer = cls(config)
        if settings.partial_tags:
            renderer.load_layouts_and_partials(settings.partial_tags)
        return renderer

    def load_layouts_and_partials(self, tags: Iterable[str]) -> list[str]:
        """Replace the configured partials with every file matching ``tags``."""
        partials = collect_by_tag(
            self.config.template_dir, list(tags), self.config.template_extension
        )
        self.config.partials = partials
        if self.config.debug:
            logger.info(f"Loaded {len(partials)} layout/partial file(s): {partials}")
        return partials

    def get_template(self, name: str) -> CompiledTemplate:
        """Return a compiled template from the cache, building it on a miss."""
        if self.config.use_cache:
            cached = self.cache.get(name)
            if cached is not None:
                if self.config.debug:
                    logger.info(f"Reading template {name} from cache")
                return cached

        return self.builder.build(name)

    def render_to(self, sink: ResponseSink, name: str, data: Payload = None) -> None:
        """Stream a rendered template into ``sink``.

        Build failures propagate before anything is written. Execution
        failures are reported to the sink with a 500 and raised.
        """
        template = self.get_template(name)
        try:
            for chunk in template.generate(data):
                sink.write(chunk)
        except Exception as exc:
            sink.error(str(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)
            raise ExecutionError(name, str(exc)) from exc

    def render_to_string(self, name: str, data: Payload = None) -> str:
        """Render a template to a string."""
        template = self.get_template(name)
        try:
            return template.render(data)
        except Exception as exc:
            raise ExecutionError(name, str(exc)) from exc

    def render_response(self, name: str, data: Payload = None) -> Response:
        """Render into a FastAPI response; execution failures become a 500."""
        sink = BufferedResponseSink()
        try:
            self.render_to(sink, name, data)
        except ExecutionError as exc:
            logger.error(f"Failed to render {name}: {exc}")
        return sink.to_response()
