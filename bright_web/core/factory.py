from __future__ import annotations

from typing import Optional, Type

from bright_web.adapters.email_smtp import Email
from bright_web.adapters.json_storage import JsonStorage
from bright_web.adapters.sqlserver_database import Database
from bright_web.adapters.storage import ApplicationStorage
from bright_web.adapters.xml_storage import XmlStorage
from bright_web.config.ini_config import AppSettings
from bright_web.core.controller import Controller
from bright_web.core.model import Model
from bright_web.core.registry import ControllerRegistry, ControllerSpec
from bright_web.core.view import View
from bright_web.domain.errors import AppException, ConfigurationError
from bright_web.services.logger import Logger

STORAGE_CLASSES: dict[str, Type[ApplicationStorage]] = {
    "json": JsonStorage,
    "xml": XmlStorage,
}


class ApplicationFactory:
    """
    Builds a controller together with its model (storage, logger, database)
    and view for each request, plus the shared utility collaborators.
    """

    def __init__(
        self,
        storage_type: str,
        has_database: bool,
        *,
        registry: ControllerRegistry,
        settings: Optional[AppSettings] = None,
    ):
        self.settings = settings or AppSettings()
        self.registry = registry
        self.has_database = bool(has_database)

        # Some callers pass "JSON" / " Xml "
        self.storage_type = (storage_type or "").strip().lower()
        if self.storage_type not in STORAGE_CLASSES:
            raise ConfigurationError(f"Unknown storage type {storage_type!r}")

    # -----------------------------
    # Shared utilities
    # -----------------------------
    def make_logger(self) -> Logger:
        return Logger(self.settings.is_mode_logging, self.settings.log_dir)

    def make_email(self) -> Email:
        return Email(self.settings.email)

    def make_exception(self, message: str = "", code: Optional[int] = None, exc_type: Type[AppException] = AppException) -> AppException:
        return exc_type(message, code, logger=self.make_logger())

    def make_database(self) -> Optional[Database]:
        if not self.has_database:
            return None
        return Database(self.settings.sqlserver)

    # -----------------------------
    # MVC
    # -----------------------------
    def _make_template_storage(self) -> ApplicationStorage:
        return STORAGE_CLASSES[self.storage_type](make_exception=self.make_exception)

    def _make_model(self, spec: ControllerSpec) -> Model:
        storage = self._make_template_storage()
        logger = self.make_logger()
        db = self.make_database()

        return spec.model(
            storage,
            self.storage_type,
            logger,
            db,
            data_dirs=self.settings.data_dirs,
            email_factory=self.make_email,
            is_mode_production=self.settings.is_mode_production,
        )

    def _make_view(self, spec: ControllerSpec) -> View:
        return spec.view(self.settings.view_paths)

    def make_controller(self, controller_name: str) -> Controller:
        spec = self.registry.get(controller_name)

        model = self._make_model(spec)
        view = self._make_view(spec)

        controller = spec.controller(model, view)
        controller.name = controller_name
        return controller
