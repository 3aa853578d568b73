from pathlib import Path

import pytest
from jinja2 import TemplateNotFound

from quire.site.templates import TemplateLoader


def test_template_loader_finds_packaged_templates():
    loader = TemplateLoader()

    assert loader.template_dir.name == "templates"
    assert (loader.template_dir / "post.html").exists()


def test_override_dir_takes_precedence(tmp_path: Path):
    (tmp_path / "error.html").write_text("custom {{ status_code }}")
    loader = TemplateLoader(override_dir=tmp_path, globals_={"site": {"title": "T", "base_url": "/"}})

    assert loader.render_template("error.html", status_code=404) == "custom 404"
    assert "<title>" in loader.render_template("index.html", posts=[], category=None)


def test_html_is_autoescaped():
    loader = TemplateLoader(globals_={"site": {"title": "<b>T</b>", "base_url": "/"}})

    html = loader.render_template("error.html", status_code=500, message="<script>")

    assert "&lt;script&gt;" in html
    assert "<script>" not in html


def test_missing_template():
    with pytest.raises(TemplateNotFound):
        TemplateLoader().load_template("missing.html")
