from __future__ import annotations

from bright_web.controllers.site import PAGES_KEY, SiteController

MAX_LINK_COLUMNS = 3


class IndexController(SiteController):
    """Home page: the common scaffolding plus the link list columns."""

    def index(self, parameters: list[str]) -> str:
        page_name = parameters[0]
        self._build_common(page_name)
        self._set_link_list_column(self._model.get_data_from_storage(PAGES_KEY)["link_lists"], MAX_LINK_COLUMNS)
        return self.render(page_name)
