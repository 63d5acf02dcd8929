from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, Mapping, Optional

from bright_web.adapters.storage import ApplicationStorage
from bright_web.config.ini_config import DEFAULT_JSON_PATH, DEFAULT_XML_PATH
from bright_web.domain.errors import DirectoryUnreadable
from bright_web.services.key_generator import KeyGenerator
from bright_web.services.logger import Logger

DEFAULT_DATA_DIRS: Dict[str, Path] = {"json": DEFAULT_JSON_PATH, "xml": DEFAULT_XML_PATH}

_TAG_RE = re.compile(r"<[^>]*(?:>|$)")


def strip_tags(value: str) -> str:
    return _TAG_RE.sub("", value)


class Model:
    """
    Base model. Owns one storage adapter and loads every data file of the
    configured storage type into it on construction.
    """

    def __init__(
        self,
        storage: ApplicationStorage,
        storage_type: str,
        logger: Logger,
        db=None,
        *,
        data_dirs: Optional[Mapping[str, Path]] = None,
        email_factory: Optional[Callable[[], Any]] = None,
        is_mode_production: bool = False,
    ):
        self._storage = storage
        self._logger = logger
        self._db = db
        self._email_factory = email_factory
        self._is_mode_production = is_mode_production
        self._email = None
        self._key_gen: Optional[KeyGenerator] = None

        self.storage_type = storage_type.lower()
        dirs = dict(DEFAULT_DATA_DIRS)
        dirs.update(data_dirs or {})

        if self.storage_type in dirs:
            self.set_files_from_directory_into_storage(dirs[self.storage_type], self.storage_type)

    @property
    def db(self):
        return self._db

    # -----------------------------
    # Storage
    # -----------------------------
    def set_files_from_directory_into_storage(self, directory, file_type: str) -> None:
        directory = Path(directory)
        try:
            listing = sorted(os.listdir(directory))
        except OSError as e:
            raise DirectoryUnreadable(f"Could not read data directory {directory}: {e.strerror}", logger=self._logger) from e

        suffix = "." + file_type
        for file in listing:
            if file.endswith(suffix):
                key = file.split(".")[0]
                self.set_data_from_storage(directory / file, key)

    def set_data_from_storage(self, data_file_path, key: str) -> None:
        self._storage.set_file_data(data_file_path, key)

    def get_data_from_storage(self, data_file_name: str) -> Any:
        return self._storage.get_file_data(data_file_name)

    def get_all_data_from_storage(self) -> Dict[str, Any]:
        return self._storage.get_all_data()

    def get_encoded_string_in_storage_format(self, value: Any) -> str:
        return self._storage.get_encoded_data_as_string(value)

    def get_string_value_as_boolean(self, value: str) -> bool:
        return self._storage.get_string_value_as_boolean(value)

    # -----------------------------
    # Logging
    # -----------------------------
    def write_log(self, message: str, log_type: str, file_name: str) -> bool:
        return self._logger.write_log_to_file(message, log_type, file_name)

    @staticmethod
    def build_log_message_from_dict(data_to_log: Mapping[str, Any]) -> str:
        return Logger.build_message(data_to_log)

    # -----------------------------
    # Keys
    # -----------------------------
    def set_key_generator(self) -> None:
        self._key_gen = KeyGenerator()

    def create_standard_key_from_key_generator(self, length: int | str, kinds: Iterable[str]) -> str:
        if self._key_gen is None:
            self.set_key_generator()
        return self._key_gen.generate_key_from_standard(length, kinds)

    # -----------------------------
    # Request data helpers
    # -----------------------------
    @staticmethod
    def sanitize_data(data):
        if isinstance(data, Mapping):
            return {k: strip_tags(str(v)) for k, v in data.items()}
        return strip_tags(str(data))

    @staticmethod
    def get_data_as_post_dict_from_serialized_url_string(url_data: Iterable[str]) -> Dict[str, str]:
        """``["a=1", "b=2"]`` -> ``{"a": "1", "b": "2"}``"""
        post: Dict[str, str] = {}
        for value in url_data:
            key, _, val = value.partition("=")
            post[key] = val
        return post

    # -----------------------------
    # Email
    # -----------------------------
    def set_email(self) -> None:
        if self._email_factory is None:
            raise RuntimeError("Model was built without an email factory.")
        self._email = self._email_factory()

    def _require_email(self):
        if self._email is None:
            self.set_email()
        return self._email

    def prepare_email(self, message: str, subject: Optional[str] = None, reply_to: Optional[str] = None, address: Optional[str] = None) -> None:
        email = self._require_email()
        email.set_message(message)
        email.set_subject(subject)
        email.set_reply_to(reply_to)
        if address is not None:
            email.set_email_address(address)

    def validate_email(self, email_address: str) -> bool:
        return self._require_email().validate_email_address(email_address)

    def send_email(self, data_to_log: Mapping[str, Any]) -> bool:
        is_successful = self._require_email().send_message(is_mode_production=self._is_mode_production)

        if not is_successful:
            self.write_log(self.build_log_message_from_dict(data_to_log), "email", "emailLog")

        return is_successful
