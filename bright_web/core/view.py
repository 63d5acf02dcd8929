from __future__ import annotations

from datetime import date
from typing import Any, Dict, Mapping, Optional

from flask import render_template
from markupsafe import Markup, escape

from bright_web.domain.errors import ViewError
from bright_web.domain.models import ViewPaths

LAYOUT_TEMPLATE = "layout.html"


def _is_true(value: Any) -> bool:
    # Data files carry flags as bools, 0/1 or "true"/"false" strings
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes")
    return bool(value)


class View:
    """
    Base view: HTML fragment builders plus page rendering.

    Builders are pure and return ``Markup`` so the layout template can
    output them as-is. Controllers store the built fragments in
    ``properties``; ``render_page`` hands them to the templates.
    """

    def __init__(self, paths: Optional[ViewPaths] = None):
        self.paths = paths or ViewPaths()
        self.properties: Dict[str, Any] = {}
        self.output: Optional[str] = None

    # -----------------------------
    # Properties
    # -----------------------------
    def set_property(self, name: str, value: Any) -> None:
        self.properties[name] = value

    def get_property(self, name: str, default: Any = None) -> Any:
        return self.properties.get(name, default)

    def append_property(self, name: str, fragment: str) -> None:
        self.properties[name] = Markup(self.properties.get(name) or "") + fragment

    # -----------------------------
    # Internal builders
    # -----------------------------
    @staticmethod
    def _build_ie_conditional(conditional: str, embed: str) -> Markup:
        return Markup(f"<!--[if {conditional}]>{embed}<![endif]-->")

    @staticmethod
    def _build_attribute_list(attribute_data: Mapping[str, Any]) -> Markup:
        """Empty values are left out."""
        return Markup(" ").join(
            Markup('{}="{}"').format(Markup(key), value) for key, value in attribute_data.items() if value
        )

    # -----------------------------
    # Public builders
    # -----------------------------
    @staticmethod
    def build_title_subpage(sub_title: str, separator: Optional[str] = None) -> str:
        return f" {separator or ''} {sub_title}"

    @staticmethod
    def build_generic_html_wrapper(tag: str, text: str, css_class: Optional[str] = None, element_id: Optional[str] = None) -> Markup:
        attributes = View._build_attribute_list({"id": element_id, "class": css_class})
        opening = Markup(f"<{tag} ") + attributes if attributes else Markup(f"<{tag}")
        return opening + Markup(">") + text + Markup(f"</{tag}>")

    @staticmethod
    def build_list_item(text: str, css_class: Optional[str] = None) -> Markup:
        return View.build_generic_html_wrapper("li", text, css_class)

    @staticmethod
    def build_head_meta(meta_type: str, value: str) -> Markup:
        if not isinstance(meta_type, str) or not isinstance(value, str):
            raise ViewError("View Exception (meta tag type and content must be strings)")
        return Markup("<meta {} content=\"{}\" />").format(Markup(meta_type), value)

    def build_favicon(self, favicon_data: Mapping[str, Any], cache_buster: str = "") -> Markup:
        if _is_true(favicon_data.get("is_internal")):
            href = f"{self.paths.images}/favicon.ico{cache_buster}"
        else:
            href = f"{favicon_data.get('href', '')}{cache_buster}"

        favicon = Markup('<link href="{}" rel="shortcut icon" />').format(href)

        if favicon_data.get("ie_conditional"):
            favicon = self._build_ie_conditional(favicon_data["ie_conditional"], favicon)
        return favicon

    def build_head_css(self, name: str, css_data: Mapping[str, Any], cache_buster: str = "") -> Markup:
        if _is_true(css_data.get("is_internal")):
            href = f"{self.paths.css}/{name}.css{cache_buster}"
        else:
            href = f"{css_data.get('href', '')}{cache_buster}"

        css = Markup('<link rel="stylesheet" href="{}" />').format(href)

        if css_data.get("ie_conditional"):
            css = self._build_ie_conditional(css_data["ie_conditional"], css)
        return css

    def build_js(self, js_data: Mapping[str, Any], cache_buster: str = "") -> Markup:
        src = js_data.get("src") or ""
        if src and _is_true(js_data.get("is_internal")):
            src = f"{self.paths.js}/{src}.js{cache_buster}"

        code = Markup(js_data.get("code") or "")
        if src:
            js = Markup('<script src="{}">{}</script>').format(src, code)
        else:
            js = Markup("<script>{}</script>").format(code)

        if js_data.get("ie_conditional"):
            js = self._build_ie_conditional(js_data["ie_conditional"], js)
        return js

    def build_anchor_tag(
        self,
        text: str,
        path: str,
        is_internal: Any,
        target: Optional[str] = "_blank",
        title: Optional[str] = None,
        css_class: Optional[str] = None,
        element_id: Optional[str] = None,
    ) -> Markup:
        href = f"{self.paths.http_root}/{path}" if _is_true(is_internal) else path
        attributes = self._build_attribute_list(
            {"href": href, "target": target, "title": title, "class": css_class, "id": element_id}
        )
        return Markup("<a ") + attributes + Markup(">") + text + Markup("</a>")

    def build_link_list_column(self, list_name: str, list_data: Mapping[str, str]) -> Markup:
        items = Markup("").join(
            self.build_list_item(self.build_anchor_tag(text, path, False)) for text, path in list_data.items()
        )
        return Markup('<div class="link-column"><p>{}</p><ul>{}</ul></div>').format(list_name, items)

    def build_nav(self, nav: str, list_class: Optional[str], separator_string: Optional[str] = None) -> Markup:
        separator = Markup('<span class="separator">{}</span>').format(separator_string) if separator_string else ""
        return self.build_generic_html_wrapper("li", Markup(escape(nav)) + separator, list_class)

    def build_copyright(
        self,
        copyright_data: Mapping[str, Any],
        separator: Optional[str] = None,
        show_current_date: bool = True,
        current_year: Optional[int] = None,
    ) -> Markup:
        text = f"{copyright_data['symbol']} {copyright_data['holder']} {copyright_data['start_date']}"

        if show_current_date:
            year = current_year or date.today().year
            if int(copyright_data["start_date"]) < year:
                text += f" - {year}"

        sep = Markup('<span class="separator">{}</span>').format(separator or "")
        return self.build_generic_html_wrapper("li", Markup(escape(text)) + sep)

    def build_branding_logo(self, src: str, alt: str, element_id: Optional[str] = None) -> Markup:
        attributes = self._build_attribute_list({"src": f"{self.paths.images}/{src}", "alt": alt, "id": element_id})
        return Markup("<img ") + attributes + Markup(" />")

    # -----------------------------
    # Rendering
    # -----------------------------
    def render_page(self, page_name: str) -> str:
        """Render head, header, ``pages/<page_name>.html`` and footer. Needs an app context."""
        self.output = render_template(
            LAYOUT_TEMPLATE,
            view=self,
            page_template=f"pages/{page_name}.html",
            **self.properties,
        )
        return self.output
