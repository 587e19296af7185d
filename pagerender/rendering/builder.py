"""Template compilation from disk."""

from __future__ import annotations

import logging
from pathlib import Path

from jinja2 import (
    DictLoader,
    Environment,
    StrictUndefined,
    TemplateSyntaxError,
    select_autoescape,
)

from ..core.errors import BuildError
from ..core.models import CompiledTemplate, RendererConfig
from .cache import TemplateCache

logger = logging.getLogger(__name__)


def _loader_key(template_dir: Path, path: Path) -> str:
    """Name a source the way templates refer to it in extends/include."""
    try:
        return path.resolve().relative_to(template_dir.resolve()).as_posix()
    except ValueError:
        return path.name


class TemplateBuilder:
    """Builds a template together with the configured partials."""

    def __init__(self, config: RendererConfig, cache: TemplateCache) -> None:
        self.config = config
        self.cache = cache

    def source_paths(self, name: str) -> list[Path]:
        """Partials in configured order, then the target template."""
        template_dir = self.config.template_dir
        paths = [template_dir / partial for partial in self.config.partials]
        paths.append(template_dir / name)
        return paths

    def create_environment(self, sources: dict[str, str]) -> Environment:
        env = Environment(
            loader=DictLoader(sources),
            undefined=StrictUndefined,
            autoescape=select_autoescape(["html", "htm", "xml"]),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        env.globals.update(self.config.functions)
        return env

    def build(self, name: str) -> CompiledTemplate:
        """Read, compile and cache a template.

        Args:
            name: Template file name, relative to the template directory

        Returns:
            The compiled template

        Raises:
            BuildError: A source file is missing, unreadable or malformed
        """
        paths = self.source_paths(name)
        template_dir = self.config.template_dir

        sources: dict[str, str] = {}
        for path in paths:
            try:
                sources[_loader_key(template_dir, path)] = path.read_text(encoding="utf-8")
            except OSError as exc:
                raise BuildError(name, f"cannot read {path}: {exc.strerror or exc}") from exc

        target_key = _loader_key(template_dir, paths[-1])
        env = self.create_environment(sources)
        try:
            # Compile every source so a broken partial fails the build, not the render.
            for key in sources:
                env.get_template(key)
            template = env.get_template(target_key)
        except TemplateSyntaxError as exc:
            raise BuildError(
                name, f"syntax error in {exc.name or target_key} line {exc.lineno}: {exc.message}"
            ) from exc

        compiled = CompiledTemplate(name=name, template=template, sources=tuple(paths))
        logger.debug(f"Built {name} from {len(paths)} file(s)")

        if self.config.use_cache:
            self.cache.put(name, compiled)

        if self.config.debug:
            logger.info(f"Reading template {name} from disk")

        return compiled
