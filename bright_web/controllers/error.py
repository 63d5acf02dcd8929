from __future__ import annotations

from bright_web.controllers.site import SiteController

ERROR_PAGE = "error"

MESSAGES = {
    "404": "The page you requested could not be found.",
}
DEFAULT_MESSAGE = "Something went wrong while loading this page."


class ErrorController(SiteController):
    def index(self, parameters: list[str]) -> str:
        label = parameters[0] if parameters else ""
        self._build_common(ERROR_PAGE)
        self._set_view_property("error_label", label)
        self._set_view_property("error_message", MESSAGES.get(label, DEFAULT_MESSAGE))
        return self.render(ERROR_PAGE)
