from __future__ import annotations

from typing import Any, Callable, Dict, Optional, Type

from bright_web.domain.errors import (
    COULD_NOT_CONVERT_TO_BOOLEAN,
    KEY_NOT_LOADED,
    AppException,
    BooleanConversionError,
    StorageKeyError,
)

ExceptionFactory = Callable[..., AppException]


def plain_exception(message: str, code: Optional[int] = None, exc_type: Type[AppException] = AppException) -> AppException:
    return exc_type(message, code)


class ApplicationStorage:
    """
    Storage interface used by models: a keyed set of decoded data files.
    """

    label = "Storage"

    def __init__(self, make_exception: Optional[ExceptionFactory] = None):
        self._make_exception = make_exception or plain_exception
        self._data: Dict[str, Any] = {}

    def set_file_data(self, path, key: str) -> None:
        raise NotImplementedError

    def get_encoded_data_as_string(self, value: Any) -> str:
        raise NotImplementedError

    def get_file_data(self, key: str) -> Any:
        try:
            return self._data[key]
        except KeyError:
            raise self._make_exception(
                f"{self.label} Exception (no data file loaded for key {key!r})",
                KEY_NOT_LOADED,
                StorageKeyError,
            ) from None

    def get_all_data(self) -> Dict[str, Any]:
        return self._data

    def get_string_value_as_boolean(self, value: str) -> bool:
        """Only the literal strings "true" and "false" convert."""
        if value == "true":
            return True
        if value == "false":
            return False
        raise self._make_exception(
            f"{self.label} Exception (could not convert {value!r} to boolean)",
            COULD_NOT_CONVERT_TO_BOOLEAN,
            BooleanConversionError,
        )
