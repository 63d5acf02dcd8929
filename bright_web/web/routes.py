## routes.py
from __future__ import annotations

from typing import Any, Mapping

from flask import Blueprint, current_app, request

from bright_web.config import AppSettings
from bright_web.core.application import Application
from bright_web.core.factory import ApplicationFactory
from bright_web.domain.models import ErrorKind

STATUS_FOR_ERROR = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.METHOD_NOT_FOUND: 404,
    ErrorKind.UNKNOWN: 500,
}


def create_blueprint(application_factory: ApplicationFactory, settings: AppSettings) -> Blueprint:
    bp = Blueprint("web", __name__)

    def dispatch(get_data: Mapping[str, Any]):
        # One Application per request; nothing carries over between requests
        application = Application(
            application_factory,
            get_data,
            default_page_controller=settings.default_page_controller,
        )

        name, method, parameters = application.target.as_triple()
        current_app.logger.info("Dispatched %r -> %s.%s(%r)", get_data.get("url", ""), name, method, parameters)

        code = STATUS_FOR_ERROR.get(application.error_kind, 200)
        return application.output or "", code

    @bp.get("/")
    def index():
        return dispatch(request.args)

    @bp.get("/<path:url>")
    def path_dispatch(url: str):
        # /blog/view/7 behaves like /?url=blog/view/7; an explicit ?url= wins
        get_data = request.args.to_dict()
        get_data.setdefault("url", url)
        return dispatch(get_data)

    return bp
