from __future__ import annotations

import pytest

from bright_web.core.view import View
from bright_web.domain.errors import ViewError
from bright_web.domain.models import ViewPaths


@pytest.fixture
def view() -> View:
    return View(ViewPaths(http_root="/site", images="/img", css="/css", js="/js"))


def test_properties(view: View):
    view.set_property("css", "<a>")
    view.append_property("css", "<b>")

    assert view.get_property("css") == "<a>&lt;b&gt;"
    assert view.get_property("missing", "x") == "x"


def test_attribute_list_skips_empty_values():
    attrs = View._build_attribute_list({"href": "/x", "target": None, "title": "", "class": "a&b"})
    assert attrs == 'href="/x" class="a&amp;b"'


def test_title_subpage():
    assert View.build_title_subpage("Home", "|") == " | Home"


@pytest.mark.parametrize(
    "args, expected",
    [
        (("li", "x"), "<li>x</li>"),
        (("li", "x", "first"), '<li class="first">x</li>'),
        (("div", "x", "box", "main"), '<div id="main" class="box">x</div>'),
        (("p", "<i>"), "<p>&lt;i&gt;</p>"),
    ],
)
def test_generic_html_wrapper(args, expected):
    assert View.build_generic_html_wrapper(*args) == expected


def test_head_meta():
    assert View.build_head_meta("name=description", "A <site>") == '<meta name=description content="A &lt;site&gt;" />'


def test_head_meta_rejects_non_strings():
    with pytest.raises(ViewError):
        View.build_head_meta("name=keywords", ["a", "b"])


def test_head_css(view: View):
    assert view.build_head_css("main", {"is_internal": "true"}, "?123") == '<link rel="stylesheet" href="/css/main.css?123" />'
    assert view.build_head_css("cdn", {"is_internal": "false", "href": "https://cdn.example.com/x.css"}) == (
        '<link rel="stylesheet" href="https://cdn.example.com/x.css" />'
    )
    assert view.build_head_css("ie", {"is_internal": True, "ie_conditional": "lt IE 9"}) == (
        '<!--[if lt IE 9]><link rel="stylesheet" href="/css/ie.css" /><![endif]-->'
    )


def test_favicon(view: View):
    assert view.build_favicon({"is_internal": "true"}) == '<link href="/img/favicon.ico" rel="shortcut icon" />'
    assert view.build_favicon({"href": "/x.ico"}, "?1") == '<link href="/x.ico?1" rel="shortcut icon" />'


def test_js(view: View):
    assert view.build_js({"src": "main", "is_internal": "true"}, "?9") == '<script src="/js/main.js?9"></script>'
    assert view.build_js({"src": "https://cdn.example.com/a.js"}) == '<script src="https://cdn.example.com/a.js"></script>'
    assert view.build_js({"code": "var a = 1 < 2;"}) == "<script>var a = 1 < 2;</script>"


def test_anchor_tag(view: View):
    assert view.build_anchor_tag("About", "about", "true") == '<a href="/site/about" target="_blank">About</a>'
    assert view.build_anchor_tag("Ext", "https://example.com", False, None, "Go", "ext", "e1") == (
        '<a href="https://example.com" title="Go" class="ext" id="e1">Ext</a>'
    )


def test_nav(view: View):
    assert view.build_nav("Home", "first", "|") == '<li class="first">Home<span class="separator">|</span></li>'
    assert view.build_nav("A & B", None) == "<li>A &amp; B</li>"


def test_copyright(view: View):
    data = {"symbol": "©", "holder": "Me", "start_date": "2015"}

    assert view.build_copyright(data, "|", True, current_year=2026) == (
        '<li>© Me 2015 - 2026<span class="separator">|</span></li>'
    )
    assert view.build_copyright(data, None, False) == '<li>© Me 2015<span class="separator"></span></li>'
    assert view.build_copyright(data, None, True, current_year=2015) == '<li>© Me 2015<span class="separator"></span></li>'


def test_branding_logo(view: View):
    assert view.build_branding_logo("logo.svg", "Bright", "logo") == '<img src="/img/logo.svg" alt="Bright" id="logo" />'


def test_link_list_column(view: View):
    assert view.build_link_list_column("Python", {"Flask": "https://f.example"}) == (
        '<div class="link-column"><p>Python</p><ul>'
        '<li><a href="https://f.example" target="_blank">Flask</a></li>'
        "</ul></div>"
    )


def test_render_page(app):
    view = View()
    view.set_property("title", "Test Site")

    with app.test_request_context():
        html = view.render_page("about")

    assert view.output == html
    assert "<title>Test Site</title>" in html
    assert "<h1>About</h1>" in html
