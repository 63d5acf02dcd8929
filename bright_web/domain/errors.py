from __future__ import annotations

import traceback
from typing import Optional


class AppException(Exception):
    """
    Base exception for the framework.
    Carries a numeric code and (optionally) a logger so it can log itself
    when a handler catches it.
    """

    default_code: int = 0

    def __init__(self, message: str = "", code: Optional[int] = None, logger=None):
        super().__init__(message)
        self.message = message
        self.code = self.default_code if code is None else code
        self.logger = logger

    def __str__(self) -> str:
        return self.message

    def log_data(self) -> dict:
        frames = traceback.extract_tb(self.__traceback__) if self.__traceback__ else []
        last = frames[-1] if frames else None
        stack = "".join(traceback.format_exception(type(self), self, self.__traceback__))
        return {
            "message": self.message,
            "code": self.code,
            "file": last.filename if last else "",
            "line": last.lineno if last else "",
            "stack_trace": "\r\n" + stack.rstrip(),
        }

    def create_log(self, logger=None) -> bool:
        logger = logger or self.logger
        if logger is None:
            return False
        message = logger.build_message(self.log_data())
        return logger.write_log_to_file(message, "exception", "exceptionLog")

    def caught_message(self) -> str:
        return f"Caught {self.message}. Exception code: #{self.code}"


# -----------------------------
# Dispatch (recovered by the front controller)
# -----------------------------
class DispatchError(AppException):
    pass


class ControllerNotFound(DispatchError):
    default_code = 404


class MethodNotFound(DispatchError):
    default_code = 404


class PageNotFound(DispatchError):
    """Raised by a controller asked to render a page the site data does not list."""

    default_code = 404


class UnknownDispatchError(DispatchError):
    default_code = 500


# -----------------------------
# Storage
# -----------------------------
JSON_LAST_ERROR_DECODE = 1001
JSON_LAST_ERROR_ENCODE = 1002
COULD_NOT_CONVERT_TO_BOOLEAN = 1003
FILE_DOES_NOT_EXIST = 1004
FILE_IS_NOT_READABLE = 1005
KEY_NOT_LOADED = 1006
INVALID_XML_FILE = 1002
DIRECTORY_NOT_READABLE = 1101


class StorageDecodeError(AppException):
    default_code = JSON_LAST_ERROR_DECODE


class StorageFileNotFound(StorageDecodeError):
    default_code = FILE_DOES_NOT_EXIST


class StorageEncodeError(AppException):
    default_code = JSON_LAST_ERROR_ENCODE


class StorageKeyError(AppException, KeyError):
    default_code = KEY_NOT_LOADED

    # KeyError quotes its argument in str(); keep the plain message
    __str__ = AppException.__str__


class BooleanConversionError(AppException, ValueError):
    default_code = COULD_NOT_CONVERT_TO_BOOLEAN


class DirectoryUnreadable(AppException):
    default_code = DIRECTORY_NOT_READABLE


# -----------------------------
# View / configuration
# -----------------------------
INCORRECT_DATA_TYPE_FOR_META_TAG = 1001


class ViewError(AppException):
    default_code = INCORRECT_DATA_TYPE_FOR_META_TAG


class ConfigurationError(AppException):
    default_code = 2001
