########## ini_config.py

import os
from configparser import ConfigParser
from dataclasses import dataclass, field
from pathlib import Path

from bright_web.domain.models import EmailSettings, SqlServerSettings, ViewPaths

INI_DEFAULT_NAME = "bright_web.ini"

PACKAGE_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_JSON_PATH = PACKAGE_ROOT / "storage" / "json"
DEFAULT_XML_PATH = PACKAGE_ROOT / "storage" / "xml"
DEFAULT_ERROR_PAGE_PATH = "/static/error.html"

STORAGE_TYPES = ("json", "xml")


@dataclass(frozen=True)
class AppSettings:
    storage_type: str = "json"
    has_database: bool = False
    default_page_controller: str = "index"

    json_path: Path = DEFAULT_JSON_PATH
    xml_path: Path = DEFAULT_XML_PATH
    log_dir: Path | None = None

    is_mode_logging: bool = True
    is_mode_production: bool = False
    domain_name: str = "localhost"
    error_page_path: str = DEFAULT_ERROR_PAGE_PATH

    view_paths: ViewPaths = field(default_factory=ViewPaths)
    email: EmailSettings = field(default_factory=EmailSettings)
    sqlserver: SqlServerSettings = field(default_factory=SqlServerSettings)

    flask_host: str = "127.0.0.1"
    flask_port: int = 5000
    flask_debug: bool = True

    @property
    def data_dirs(self) -> dict[str, Path]:
        return {"json": self.json_path, "xml": self.xml_path}


class IniConfig:
    """
    Adapter around ConfigParser and filesystem resolution.
    Keeps INI handling out of the dispatcher and factory code.
    """

    def __init__(self, ini_path: Path):
        self._ini_path = ini_path
        self._cfg = ConfigParser()
        read_ok = self._cfg.read(str(ini_path), encoding="utf-8-sig")
        if not read_ok:
            raise FileNotFoundError(f"INI file not found or unreadable: {ini_path}")

    @property
    def ini_path(self) -> Path:
        return self._ini_path

    @staticmethod
    def from_env_or_default() -> "IniConfig":
        ini_raw = (os.getenv("APP_INI") or "").strip()
        # If APP_INI is not set, default to repo-root-relative ini location
        ini_path = Path(ini_raw) if ini_raw else (Path(__file__).resolve().parents[2] / INI_DEFAULT_NAME)
        return IniConfig(ini_path)

    def _cfg_str(self, section: str, key: str, default: str) -> str:
        return (self._cfg.get(section, key, fallback=default) or "").strip() or default

    def _cfg_path(self, section: str, key: str, default: Path | None) -> Path | None:
        """Filesystem path from the INI; relative values resolve against the INI file's folder."""
        raw = self._cfg_str(section, key, "")
        if not raw:
            return default

        p = Path(os.path.expandvars(os.path.expanduser(raw)))
        if not p.is_absolute():
            p = self._ini_path.resolve().parent / p
        return p.resolve()

    def load_settings(self) -> AppSettings:
        # Application
        storage_type = self._cfg_str("application", "storage_type", "json").lower()
        has_database = self._cfg.getboolean("application", "has_database", fallback=False)
        default_page_controller = self._cfg_str("application", "default_page_controller", "index")
        is_mode_logging = self._cfg.getboolean("application", "is_mode_logging", fallback=True)
        is_mode_production = self._cfg.getboolean("application", "is_mode_production", fallback=False)
        domain_name = self._cfg_str("application", "domain_name", "localhost")

        # Paths
        json_path = self._cfg_path("paths", "json_path", DEFAULT_JSON_PATH)
        xml_path = self._cfg_path("paths", "xml_path", DEFAULT_XML_PATH)
        log_dir = self._cfg_path("paths", "log_dir", None)

        # View URL prefixes
        view_paths = ViewPaths(
            http_root=(self._cfg.get("view", "http_root", fallback="") or "").strip().rstrip("/"),
            images=self._cfg_str("view", "images_path", "/static/images"),
            css=self._cfg_str("view", "css_path", "/static/css"),
            js=self._cfg_str("view", "js_path", "/static/js"),
        )

        # Email
        email = EmailSettings(
            address=self._cfg_str("email", "address", ""),
            sender=self._cfg_str("email", "sender", ""),
            smtp_host=self._cfg_str("email", "smtp_host", "localhost"),
            smtp_port=self._cfg.getint("email", "smtp_port", fallback=25),
            notify_on_error=self._cfg.getboolean("email", "notify_on_error", fallback=False),
        )

        # SQL Server (only used when has_database is on)
        trust_raw = self._cfg_str("sqlserver", "trust_cert", "yes").lower()
        sqlserver = SqlServerSettings(
            driver=self._cfg_str("sqlserver", "driver", "ODBC Driver 17 for SQL Server"),
            server=self._cfg_str("sqlserver", "server", "localhost"),
            database=self._cfg_str("sqlserver", "database", ""),
            username=self._cfg_str("sqlserver", "username", ""),
            password=(self._cfg.get("sqlserver", "password", fallback="") or "").strip(),
            trust_cert=trust_raw in ("yes", "true", "1"),
        )

        error_page_path = self._cfg_str("errors", "error_page_path", DEFAULT_ERROR_PAGE_PATH)

        # Flask
        flask_host = self._cfg_str("flask", "host", "127.0.0.1")
        flask_port = self._cfg.getint("flask", "port", fallback=5000)
        flask_debug = self._cfg.getboolean("flask", "debug", fallback=True)

        # Validate
        if storage_type not in STORAGE_TYPES:
            raise ValueError(f"Unsupported storage_type {storage_type!r}; expected one of {STORAGE_TYPES}")
        if has_database and not sqlserver.database:
            raise ValueError("sqlserver.database is empty in INI but has_database is on")

        if log_dir is not None:
            log_dir.mkdir(parents=True, exist_ok=True)

        return AppSettings(
            storage_type=storage_type,
            has_database=has_database,
            default_page_controller=default_page_controller,
            json_path=json_path,
            xml_path=xml_path,
            log_dir=log_dir,
            is_mode_logging=is_mode_logging,
            is_mode_production=is_mode_production,
            domain_name=domain_name,
            error_page_path=error_page_path,
            view_paths=view_paths,
            email=email,
            sqlserver=sqlserver,
            flask_host=flask_host,
            flask_port=flask_port,
            flask_debug=flask_debug,
        )
