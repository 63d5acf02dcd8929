from __future__ import annotations

from typing import Optional

from flask import Flask
from werkzeug.exceptions import HTTPException

from bright_web.config import AppSettings, IniConfig
from bright_web.controllers import build_registry
from bright_web.core.error_handler import ErrorHandler
from bright_web.core.factory import ApplicationFactory
from bright_web.core.registry import ControllerRegistry
from bright_web.web.routes import create_blueprint


def create_app(settings: Optional[AppSettings] = None, registry: Optional[ControllerRegistry] = None) -> Flask:
    if settings is None:
        settings = IniConfig.from_env_or_default().load_settings()

    application_factory = ApplicationFactory(
        settings.storage_type,
        settings.has_database,
        registry=registry if registry is not None else build_registry(),
        settings=settings,
    )

    error_handler = ErrorHandler(
        application_factory.make_logger(),
        application_factory.make_email(),
        settings,
    )

    app = Flask(__name__)
    app.register_blueprint(create_blueprint(application_factory, settings))

    @app.errorhandler(Exception)
    def handle_exception(e: Exception):
        # 404/405 etc. from Flask itself keep their normal responses
        if isinstance(e, HTTPException):
            return e
        app.logger.exception("Unhandled error while serving request")
        return error_handler.show_fatal_error_page(e)

    app.config["HOST"] = settings.flask_host
    app.config["PORT"] = settings.flask_port
    app.config["DEBUG"] = settings.flask_debug
    app.extensions["bright_web"] = application_factory

    return app
