from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from bright_web.adapters.storage import ApplicationStorage
from bright_web.domain.errors import (
    FILE_DOES_NOT_EXIST,
    FILE_IS_NOT_READABLE,
    JSON_LAST_ERROR_DECODE,
    JSON_LAST_ERROR_ENCODE,
    StorageDecodeError,
    StorageEncodeError,
    StorageFileNotFound,
)

MAX_DEPTH = 25


def _depth(value: Any) -> int:
    if isinstance(value, dict):
        return 1 + max((_depth(v) for v in value.values()), default=0)
    if isinstance(value, list):
        return 1 + max((_depth(v) for v in value), default=0)
    return 0


class JsonStorage(ApplicationStorage):
    label = "Json"

    def decode(self, encoded: str, depth: int = MAX_DEPTH) -> Any:
        try:
            decoded = json.loads(encoded)
        except json.JSONDecodeError as e:
            raise self._make_exception(
                f"Json Exception (Syntax error, malformed JSON: {e.msg} at line {e.lineno} column {e.colno})",
                JSON_LAST_ERROR_DECODE,
                StorageDecodeError,
            ) from e

        if _depth(decoded) > depth:
            raise self._make_exception(
                "Json Exception (Maximum stack depth exceeded)",
                JSON_LAST_ERROR_DECODE,
                StorageDecodeError,
            )
        return decoded

    def get_encoded_data_as_string(self, value: Any) -> str:
        try:
            return json.dumps(value)
        except (TypeError, ValueError) as e:
            raise self._make_exception(f"Json Exception ({e})", JSON_LAST_ERROR_ENCODE, StorageEncodeError) from e

    def set_file_data(self, path, key: str) -> None:
        path = Path(path)
        if not path.is_file():
            raise self._make_exception(f"Json Exception (file does not exist: {path})", FILE_DOES_NOT_EXIST, StorageFileNotFound)

        try:
            encoded = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise self._make_exception(f"Json Exception (file is not readable: {path})", FILE_IS_NOT_READABLE, StorageDecodeError) from e

        self._data[key] = self.decode(encoded)
