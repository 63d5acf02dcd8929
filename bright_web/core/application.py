from __future__ import annotations

from typing import Any, Mapping, Optional

from bright_web.core.factory import ApplicationFactory
from bright_web.core.model import strip_tags
from bright_web.core.registry import CONTROLLER_ROOT
from bright_web.domain.errors import DispatchError, PageNotFound
from bright_web.domain.models import DispatchTarget, ErrorKind, Route

DEFAULT_PAGE_CONTROLLER = "index"
CONTROLLER_PATH = CONTROLLER_ROOT
# Holds the error controller's internals; never searched
EXCLUDE_CONTROLLER_DIRECTORY = "error"
# Never addressable from a URL
ERROR_CONTROLLER = "error"
DEFAULT_METHOD = "index"
# Segments 0 and 1 are the controller and the method
PARAMETER_INDEX_START = 2

NOT_FOUND_LOG = "pageNotFoundLog"


def sanitize_url(url: str) -> str:
    return strip_tags(url.rstrip("/"))


def split_url(get_data: Mapping[str, Any]) -> list[str]:
    """
    ``url`` query value -> segments. A missing or empty value gives ``[""]``,
    which means "no controller specified".
    """
    raw = get_data.get("url")
    url = sanitize_url(str(raw)) if raw is not None else ""
    return url.split("/")


class Application:
    """
    Front controller. Construction resolves the URL to a controller, method
    and parameters and invokes the method; there is no separate run step.

    Resolution failures are not raised: the error controller's ``index`` is
    dispatched instead and one line goes to the page-not-found log.
    """

    def __init__(
        self,
        application_factory: ApplicationFactory,
        get_data: Mapping[str, Any],
        default_page_controller: str = DEFAULT_PAGE_CONTROLLER,
        controller_path: str = CONTROLLER_PATH,
        exclude_controller_directory: str = EXCLUDE_CONTROLLER_DIRECTORY,
    ):
        self._application_factory = application_factory
        self._default_page_controller = default_page_controller
        self._controller_path = controller_path
        self._exclude_controller_directory = exclude_controller_directory

        self.target = DispatchTarget()
        self.error_kind: Optional[ErrorKind] = None
        self.output: Any = None

        self.url = split_url(get_data)
        self.route = Route.from_segments(self.url, PARAMETER_INDEX_START)

        if self._set_controller(self.route.controller_segment) and self._set_method(self.route.method_segment):
            self._set_parameter(self.url, self.target.method)

        self._router()

    @property
    def controller(self):
        return self.target.controller

    @property
    def method(self) -> str:
        return self.target.method

    @property
    def parameters(self) -> list[str]:
        return self.target.parameters

    def _invoke(self) -> Any:
        handler = getattr(self.target.controller, self.target.method)
        return handler(self.target.parameters)

    def _router(self) -> None:
        try:
            self.output = self._invoke()
        except PageNotFound:
            # The error page itself must render; anything missing there is fatal
            if self.error_kind is not None:
                raise
            self._error_controller_handler(ErrorKind.NOT_FOUND)
            self.output = self._invoke()

    def _set_controller(self, url: str) -> bool:
        if not url:
            self.target.controller = self._application_factory.make_controller(self._default_page_controller)
            return True

        is_controller = self._application_factory.registry.find(
            url, self._controller_path, self._exclude_controller_directory
        )

        if is_controller and url != ERROR_CONTROLLER:
            try:
                self.target.controller = self._application_factory.make_controller(url)
            except DispatchError:
                self._error_controller_handler(ErrorKind.UNKNOWN)
                return False
            return True

        self._error_controller_handler(ErrorKind.NOT_FOUND)
        return False

    def _set_method(self, method: str) -> bool:
        if not method:
            self.target.method = DEFAULT_METHOD
            return True

        if type(self.target.controller).has_capability(method):
            self.target.method = method
            return True

        self._error_controller_handler(ErrorKind.METHOD_NOT_FOUND, method)
        return False

    def _get_controller_name(self) -> str:
        return (self.target.controller.name or type(self.target.controller).__name__).lower()

    def _set_parameter(self, url: list[str], method: str) -> None:
        controller_name = self._get_controller_name()
        if controller_name == ERROR_CONTROLLER:
            return

        if method == DEFAULT_METHOD and len(url) <= PARAMETER_INDEX_START:
            self.target.parameters = [controller_name]
        else:
            self.target.parameters = list(url[PARAMETER_INDEX_START:])

    def _error_controller_handler(self, kind: ErrorKind, method: Optional[str] = None) -> None:
        logger = self._application_factory.make_logger()
        message = f"User entered => {'/'.join(self.url)}"
        if method:
            message += f", method => {method}"
        logger.write_log_to_file(message, kind.log_type, NOT_FOUND_LOG)

        self.error_kind = kind
        self.target.controller = self._application_factory.make_controller(ERROR_CONTROLLER)
        self.target.method = DEFAULT_METHOD
        self.target.parameters = [kind.label]
