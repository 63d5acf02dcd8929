from __future__ import annotations

from bright_web.core.controller import Controller
from bright_web.domain.errors import PageNotFound

# Data files every page reads (storage keys)
TEMPLATE_KEY = "template"
NAVIGATION_KEY = "navigation"
BRANDING_KEY = "branding"
PAGES_KEY = "pages"


class SiteController(Controller):
    """Shared page scaffolding: head, navigation, logo and footer."""

    def _build_common(self, page_name: str) -> None:
        pages = self._model.get_data_from_storage(PAGES_KEY)
        if page_name not in pages["title_page"]:
            raise PageNotFound(f"No page named {page_name!r}")

        template = self._model.get_data_from_storage(TEMPLATE_KEY)
        settings = template["settings"]
        separator = settings.get("separator") or None

        is_mode_cache_busting = self._model.get_string_value_as_boolean(settings["is_mode_cache_busting"])
        cache_buster = self._cache_buster(is_mode_cache_busting, settings.get("cache_buster"))
        self._page_builder(template, cache_buster)
        self._set_view_property("separator", separator)

        self._set_head_title_page(pages["title_page"], page_name)

        navigation = self._model.get_data_from_storage(NAVIGATION_KEY)
        self._set_header_nav(navigation["header_nav"], separator)
        self._set_footer_nav(navigation["footer_nav"], separator)

        self._set_logo_in_anchor_tag("header_", self._model.get_data_from_storage(BRANDING_KEY))

    def index(self, parameters: list[str]) -> str:
        page_name = parameters[0]
        self._build_common(page_name)
        return self.render(page_name)
