"""Errors raised while discovering, building and executing templates."""

from __future__ import annotations


class PageRenderError(Exception):
    """Base class for pagerender failures."""


class DiscoveryError(PageRenderError):
    """Raised when the layout/partial directory cannot be walked."""


class BuildError(PageRenderError):
    """Raised when a template or one of its partials cannot be read or compiled."""

    def __init__(self, template_name: str, message: str) -> None:
        super().__init__(f"{template_name}: {message}")
        self.template_name = template_name


class ExecutionError(PageRenderError):
    """Raised when a compiled template fails while rendering."""

    def __init__(self, template_name: str, message: str) -> None:
        super().__init__(f"{template_name}: {message}")
        self.template_name = template_name
