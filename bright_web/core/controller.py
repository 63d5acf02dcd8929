from __future__ import annotations

from typing import Any, Mapping, Optional

from markupsafe import Markup

from bright_web.core.model import Model
from bright_web.core.view import View, _is_true

CACHE_BUSTER_LENGTH = 10


class Controller:
    """
    Base controller. Holds one model and one view, both fixed at construction.

    Subclasses expose public methods that the front controller can dispatch
    to; each takes the list of URL parameters. Protected helpers pull data
    out of the model and write built HTML onto view properties.
    """

    # Set by the application factory to the registered controller name
    name: str = ""

    def __init__(self, model: Model, view: View):
        self._model = model
        self._view = view

    # -----------------------------
    # Head
    # -----------------------------
    def _set_head_doc(self, head_data: Mapping[str, Any]) -> None:
        for key, value in head_data.items():
            self._view.set_property(key, value)

    def _set_head_meta(self, head_meta: Mapping[str, Mapping[str, str]]) -> None:
        self._view.set_property("meta", Markup(""))
        for content_type, content_data in head_meta.items():
            for meta_type, value in content_data.items():
                self._view.append_property("meta", self._view.build_head_meta(f"{content_type}={meta_type}", value))

    def _set_head_includes_css(self, include_data: Mapping[str, Mapping[str, Any]], cache_buster: str) -> None:
        self._view.set_property("css", Markup(""))
        for name, css_data in include_data.items():
            self._view.append_property("css", self._view.build_head_css(name, css_data, cache_buster))

    def _set_head_includes_favicon(self, favicon_data: Mapping[str, Any], cache_buster: str) -> None:
        self._view.set_property("favicon", self._view.build_favicon(favicon_data, cache_buster))

    def _set_head_includes_js(self, include_data: Mapping[str, Mapping[str, Any]], cache_buster: str) -> None:
        self._view.set_property("head_js", Markup(""))
        for js_data in include_data.values():
            self._view.append_property("head_js", self._view.build_js(js_data, cache_buster))

    def _set_footer_js(self, footer_js_data: Mapping[str, Mapping[str, Any]], cache_buster: str) -> None:
        self._view.set_property("footer_js", Markup(""))
        for js_data in footer_js_data.values():
            self._view.append_property("footer_js", self._view.build_js(js_data, cache_buster))

    def _set_head_title_page(self, title_page: Mapping[str, str], key: str) -> None:
        self._view.set_property("title_page", title_page[key])

    def _cache_buster(self, is_mode_cache_busting: bool, preexisting_value: Optional[str] = None) -> str:
        """Query string appended to CSS/JS/favicon URLs to force re-caching."""
        if not is_mode_cache_busting:
            return ""
        if preexisting_value:
            return "?" + preexisting_value
        return "?" + self._model.create_standard_key_from_key_generator(CACHE_BUSTER_LENGTH, ["digital"])

    # -----------------------------
    # Navigation / branding
    # -----------------------------
    def _set_header_nav(self, header_nav_data: Mapping[str, Mapping[str, Any]], separator: Optional[str] = None) -> None:
        self._view.set_property("header_nav", Markup(""))
        count = len(header_nav_data)

        for i, (nav, data) in enumerate(header_nav_data.items(), start=1):
            if i == 1:
                list_class = "first"
            elif i == count:
                list_class = "last"
                separator = None
            else:
                list_class = None

            if _is_true(data.get("is_anchor")):
                nav = self._view.build_anchor_tag(
                    nav,
                    data["path"],
                    data.get("is_internal"),
                    data.get("target"),
                    data.get("title"),
                )

            self._view.append_property("header_nav", self._view.build_nav(nav, list_class, separator))

    def _set_logo_in_anchor_tag(self, prefix: str, branding_data: Mapping[str, Any]) -> None:
        logo_data = branding_data["logo"]
        logo = self._view.build_branding_logo(logo_data["src"], logo_data["alt"], logo_data.get("id"))

        self._view.set_property(
            prefix + "logo",
            self._view.build_anchor_tag(
                logo,
                logo_data["path"],
                logo_data.get("is_internal"),
                logo_data.get("target"),
                logo_data.get("title"),
                logo_data.get("class"),
                logo_data.get("id"),
            ),
        )

    def _get_copyright(self, copyright_data: Mapping[str, Any], separator: Optional[str] = None, show_current_date: bool = True) -> Markup:
        return self._view.build_copyright(copyright_data, separator, show_current_date)

    def _set_footer_nav(self, footer_nav_data: Mapping[str, Mapping[str, Any]], separator: Optional[str] = None) -> None:
        self._view.set_property("footer_nav", Markup(""))
        count = len(footer_nav_data)

        for i, (nav, data) in enumerate(footer_nav_data.items(), start=1):
            # No separator after the last item
            if i == count:
                separator = None

            if nav == "copyright":
                self._view.append_property("footer_nav", self._get_copyright(data, separator, True))
                continue

            text = data["text"]
            if _is_true(data.get("is_anchor")):
                text = self._view.build_anchor_tag(
                    data["text"],
                    data["path"],
                    data.get("is_internal"),
                    data.get("target"),
                    data.get("title"),
                    data.get("class"),
                    data.get("id"),
                )

            self._view.append_property("footer_nav", self._view.build_nav(text, None, separator))

    def _set_link_list_column(self, link_data: Mapping[str, Mapping[str, str]], max_columns: int) -> None:
        self._view.set_property("link_section", Markup(""))
        for i, (list_name, list_data) in enumerate(link_data.items(), start=1):
            if i > max_columns:
                break
            self._view.append_property("link_section", self._view.build_link_list_column(list_name, list_data))

    def _set_view_property(self, name: str, data: Any) -> None:
        self._view.set_property(name, data)

    def _page_builder(self, data: Mapping[str, Any], cache_buster: str) -> None:
        """Head and footer includes shared by every page."""
        head = data["head"]
        self._set_head_doc(head["head_doc"])
        self._set_head_meta(head["head_meta"])
        self._set_head_includes_css(head["head_includes"]["head_css"], cache_buster)
        self._set_head_includes_favicon(head["head_includes"]["favicon"], cache_buster)
        self._set_head_includes_js(head["head_includes"]["head_js"], cache_buster)
        self._set_footer_js(data["footer"]["footer_js"], cache_buster)

    def render(self, page_name: str) -> str:
        self._set_view_property("page", page_name)
        return self._view.render_page(page_name)

    def index(self, parameters: list[str]) -> str:
        return self.render(parameters[0])

    @classmethod
    def has_capability(cls, method: str) -> bool:
        """
        True if ``method`` can be reached from a URL: a public method the
        subclass defines, or ``index``. Base-class plumbing is never reachable.
        """
        if not method or method.startswith("_"):
            return False
        if method == "index":
            return True
        for klass in cls.__mro__:
            if klass is Controller:
                break
            if method in vars(klass):
                return callable(vars(klass)[method])
        return False
