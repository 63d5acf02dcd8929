######## models.py
########

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Sequence


class ErrorKind(Enum):
    NOT_FOUND = "not_found"
    METHOD_NOT_FOUND = "method_not_found"
    UNKNOWN = "unknown"

    @property
    def label(self) -> str:
        """Single parameter handed to the error controller."""
        if self is ErrorKind.UNKNOWN:
            return "Unknown Error"
        return "404"

    @property
    def log_type(self) -> str:
        if self is ErrorKind.UNKNOWN:
            return "unknown"
        return "404"


@dataclass(frozen=True)
class Route:
    controller_segment: str
    method_segment: str
    parameter_segments: tuple[str, ...]

    @classmethod
    def from_segments(cls, segments: Sequence[str], index_start: int = 2) -> "Route":
        controller = segments[0] if len(segments) > 0 else ""
        method = segments[1] if len(segments) > 1 else ""
        return cls(controller, method, tuple(segments[index_start:]))


@dataclass
class DispatchTarget:
    controller: Any = None
    method: str = ""
    parameters: List[str] = field(default_factory=list)

    def as_triple(self) -> tuple[str, str, List[str]]:
        name = getattr(self.controller, "name", "") or ""
        return name, self.method, list(self.parameters)


@dataclass(frozen=True)
class ViewPaths:
    http_root: str = ""
    images: str = "/static/images"
    css: str = "/static/css"
    js: str = "/static/js"


@dataclass(frozen=True)
class EmailSettings:
    address: str = ""
    sender: str = ""
    smtp_host: str = "localhost"
    smtp_port: int = 25
    notify_on_error: bool = False


@dataclass(frozen=True)
class SqlServerSettings:
    driver: str = "ODBC Driver 17 for SQL Server"
    server: str = "localhost"
    database: str = ""
    username: str = ""
    password: str = ""
    trust_cert: bool = True
