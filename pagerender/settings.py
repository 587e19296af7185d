"""Environment-driven renderer settings."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class RendererSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="PAGERENDER_", case_sensitive=False)

    template_dir: Path = Path("./templates")
    use_cache: bool = True
    debug: bool = False
    template_extension: str = ".html"
    partial_tags: list[str] = []


@lru_cache(maxsize=1)
def get_settings() -> RendererSettings:
    return RendererSettings()
