from quire.core.rendering import render_html


def test_render_html_renders_commonmark():
    html = render_html("# Title\n\nSome *text*.")

    assert "<h1>Title</h1>" in html
    assert "<em>text</em>" in html


def test_render_html_supports_tables():
    html = render_html("| a | b |\n|---|---|\n| 1 | 2 |\n")

    assert "<table>" in html
    assert "<td>1</td>" in html


def test_render_html_passes_inline_html_through():
    assert '<span class="x">hi</span>' in render_html('<span class="x">hi</span>')


def test_render_html_empty_content():
    assert render_html("") == ""
    assert render_html(None) == ""
