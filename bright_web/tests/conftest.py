from __future__ import annotations

import pytest

from bright_web.app_factory import create_app
from bright_web.config import AppSettings
from bright_web.controllers import build_registry
from bright_web.core.factory import ApplicationFactory


@pytest.fixture
def settings() -> AppSettings:
    # Package data files, no log directory: log lines only reach caplog
    return AppSettings()


@pytest.fixture
def factory(settings: AppSettings) -> ApplicationFactory:
    return ApplicationFactory(settings.storage_type, settings.has_database, registry=build_registry(), settings=settings)


@pytest.fixture
def app(settings: AppSettings):
    app = create_app(settings)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()
