"""Domain models for renderer configuration, payloads and compiled templates."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Iterator, Mapping

from jinja2 import Template
from pydantic import BaseModel, ConfigDict, Field, field_validator


class RendererConfig(BaseModel):
    """Configuration owned by a single Renderer."""

    model_config = ConfigDict(validate_assignment=True)

    template_dir: Path = Field(
        default=Path("./templates"), description="Root directory of template files"
    )
    use_cache: bool = Field(default=True, description="Read and populate the template cache")
    debug: bool = Field(default=False, description="Trace cache hits and disk reads")
    functions: dict[str, Callable[..., Any]] = Field(
        default_factory=dict, description="Helper functions exposed to templates"
    )
    partials: list[str] = Field(
        default_factory=list,
        description="Layout/partial files, relative to template_dir, compiled into every build",
    )
    template_extension: str = Field(
        default=".html", description="File extension shared by pages and partials"
    )

    @field_validator("template_extension")
    @classmethod
    def _dotted_extension(cls, value: str) -> str:
        if not value.strip("."):
            raise ValueError("template_extension must not be empty")
        return value if value.startswith(".") else f".{value}"


class TemplateData(BaseModel):
    """Arbitrary key/value payload handed to a template as ``data``."""

    data: Any = Field(default_factory=dict)

    @classmethod
    def coerce(cls, value: TemplateData | Mapping[str, Any] | None) -> TemplateData:
        if value is None:
            return cls()
        if isinstance(value, TemplateData):
            return value
        # Stored as given; the payload is never validated or copied.
        return cls.model_construct(data=value)

    def context(self) -> dict[str, Any]:
        return {"data": self.data}


@dataclass(frozen=True)
class CompiledTemplate:
    """A built template, ready to execute any number of times."""

    name: str
    template: Template
    sources: tuple[Path, ...]

    def generate(self, data: TemplateData | Mapping[str, Any] | None = None) -> Iterator[str]:
        return self.template.generate(TemplateData.coerce(data).context())

    def render(self, data: TemplateData | Mapping[str, Any] | None = None) -> str:
        return self.template.render(TemplateData.coerce(data).context())
