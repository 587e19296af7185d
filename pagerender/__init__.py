"""Pagerender - cached Jinja2 page rendering with shared layouts and partials."""

__version__ = "0.1.0"

# Configure logging for library use
import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

from .core.errors import BuildError, DiscoveryError, ExecutionError, PageRenderError
from .core.models import CompiledTemplate, RendererConfig, TemplateData
from .discovery.finder import collect_by_tag, find_files
from .rendering.cache import TemplateCache
from .rendering.renderer import Renderer
from .rendering.sink import BufferedResponseSink, ResponseSink
from .settings import RendererSettings, get_settings

__all__ = [
    "BufferedResponseSink",
    "BuildError",
    "CompiledTemplate",
    "DiscoveryError",
    "ExecutionError",
    "PageRenderError",
    "Renderer",
    "RendererConfig",
    "RendererSettings",
    "ResponseSink",
    "TemplateCache",
    "TemplateData",
    "collect_by_tag",
    "find_files",
    "get_settings",
]
