"""Tests for pagerender.settings and RendererConfig validation."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from pagerender import DiscoveryError, Renderer, RendererConfig, RendererSettings, TemplateData
from pagerender.settings import get_settings


class TestRendererSettings:
    def test_defaults(self, monkeypatch):
        for key in ("TEMPLATE_DIR", "USE_CACHE", "DEBUG", "TEMPLATE_EXTENSION", "PARTIAL_TAGS"):
            monkeypatch.delenv(f"PAGERENDER_{key}", raising=False)
        settings = RendererSettings()
        assert settings.template_dir == Path("./templates")
        assert settings.use_cache is True
        assert settings.debug is False
        assert settings.partial_tags == []

    def test_from_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("PAGERENDER_TEMPLATE_DIR", str(tmp_path))
        monkeypatch.setenv("PAGERENDER_USE_CACHE", "false")
        monkeypatch.setenv("PAGERENDER_DEBUG", "1")
        monkeypatch.setenv("PAGERENDER_PARTIAL_TAGS", '["layout", "partial"]')
        settings = RendererSettings()
        assert settings.template_dir == tmp_path
        assert settings.use_cache is False
        assert settings.debug is True
        assert settings.partial_tags == ["layout", "partial"]

    def test_get_settings_cached(self):
        get_settings.cache_clear()
        try:
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()


class TestFromSettings:
    def test_discovers_partials(self, template_dir):
        settings = RendererSettings(template_dir=template_dir, partial_tags=["layout", "partial"])
        renderer = Renderer.from_settings(settings)
        assert renderer.config.partials == ["base.layout.html", "partials/nav.partial.html"]
        assert "hello" in renderer.render_to_string("home.page.html", {"payload": "hello"})

    def test_overrides(self, template_dir):
        settings = RendererSettings(template_dir=template_dir, partial_tags=["layout"])
        renderer = Renderer.from_settings(settings, functions={"foo": lambda: "bar"})
        assert "bar" in renderer.render_to_string("with_func.page.html")

    def test_no_tags_skips_discovery(self, tmp_path):
        renderer = Renderer.from_settings(RendererSettings(template_dir=tmp_path / "missing"))
        assert renderer.config.partials == []

    def test_missing_directory_with_tags(self, tmp_path):
        settings = RendererSettings(template_dir=tmp_path / "missing", partial_tags=["layout"])
        with pytest.raises(DiscoveryError):
            Renderer.from_settings(settings)


class TestRendererConfig:
    def test_extension_normalized(self):
        assert RendererConfig(template_extension="gohtml").template_extension == ".gohtml"
        assert RendererConfig(template_extension=".tmpl").template_extension == ".tmpl"

    def test_empty_extension_rejected(self):
        with pytest.raises(ValidationError):
            RendererConfig(template_extension="")

    def test_assignment_validated(self):
        config = RendererConfig()
        with pytest.raises(ValidationError):
            config.use_cache = "not-a-bool"


class TestTemplateData:
    def test_coerce(self):
        assert TemplateData.coerce(None).data == {}
        assert TemplateData.coerce({"a": 1}).data == {"a": 1}
        payload = TemplateData(data={"b": 2})
        assert TemplateData.coerce(payload) is payload

    def test_context(self):
        assert TemplateData(data={"payload": "x"}).context() == {"data": {"payload": "x"}}
