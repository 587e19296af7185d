"""Shared fixtures: an on-disk template tree per test."""

from __future__ import annotations

from pathlib import Path

import pytest

from pagerender import Renderer, RendererConfig

TEMPLATES = {
    "base.layout.html": (
        "<html><body>{% block content %}{% endblock %}</body></html>\n"
    ),
    "home.page.html": (
        '{% extends "base.layout.html" %}\n'
        "{% block content %}<p>{{ data.payload }}</p>{% endblock %}\n"
    ),
    "nodata.page.html": (
        '{% extends "base.layout.html" %}\n'
        "{% block content %}<p>static</p>{% endblock %}\n"
    ),
    "bad.page.html": (
        '{% extends "base.layout.html" %}\n'
        "{% block content %}{{ data.payload {% endblock %}\n"
    ),
    "with_func.page.html": (
        '{% extends "base.layout.html" %}\n'
        "{% block content %}{{ foo() }}{% endblock %}\n"
    ),
    "nav.page.html": '{% include "partials/nav.partial.html" %}\n',
    "partials/nav.partial.html": "<nav>menu</nav>\n",
    "notes.txt": "not a template\n",
}


def _write_tree(root: Path, files: dict[str, str]) -> Path:
    for rel, content in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return root


@pytest.fixture
def write_tree():
    return _write_tree


@pytest.fixture
def template_dir(tmp_path: Path) -> Path:
    return _write_tree(tmp_path / "templates", TEMPLATES)


@pytest.fixture
def renderer(template_dir: Path) -> Renderer:
    config = RendererConfig(
        template_dir=template_dir,
        partials=["base.layout.html", "partials/nav.partial.html"],
    )
    return Renderer(config)
