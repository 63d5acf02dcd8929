from __future__ import annotations

from pathlib import Path

import pytest

from bright_web.config import IniConfig
from bright_web.config.ini_config import DEFAULT_JSON_PATH, INI_DEFAULT_NAME


def _write_ini(tmp_path: Path, text: str) -> Path:
    ini = tmp_path / "site.ini"
    ini.write_text(text, encoding="utf-8")
    return ini


def test_load_settings_reads_every_section(tmp_path: Path):
    ini = _write_ini(
        tmp_path,
        """
[application]
storage_type = XML
has_database = yes
default_page_controller = about
is_mode_logging = false
is_mode_production = true
domain_name = example.com

[paths]
xml_path = data/xml
log_dir = logs

[view]
http_root = /site/
css_path = /assets/css

[email]
address = admin@example.com
smtp_port = 2525
notify_on_error = true

[sqlserver]
server = db.example.com
database = bright
username = app
password = secret
trust_cert = no

[errors]
error_page_path = /oops.html

[flask]
port = 8080
debug = false
""",
    )

    s = IniConfig(ini).load_settings()

    assert s.storage_type == "xml"
    assert s.has_database is True
    assert s.default_page_controller == "about"
    assert s.is_mode_logging is False
    assert s.is_mode_production is True
    assert s.domain_name == "example.com"
    assert s.xml_path == (tmp_path / "data" / "xml").resolve()
    assert s.json_path == DEFAULT_JSON_PATH
    assert s.log_dir == (tmp_path / "logs").resolve()
    assert s.log_dir.is_dir()
    assert s.view_paths.http_root == "/site"
    assert s.view_paths.css == "/assets/css"
    assert s.view_paths.js == "/static/js"
    assert s.email.address == "admin@example.com"
    assert s.email.smtp_port == 2525
    assert s.email.notify_on_error is True
    assert s.sqlserver.database == "bright"
    assert s.sqlserver.trust_cert is False
    assert s.error_page_path == "/oops.html"
    assert (s.flask_host, s.flask_port, s.flask_debug) == ("127.0.0.1", 8080, False)
    assert s.data_dirs == {"json": s.json_path, "xml": s.xml_path}


def test_empty_ini_gives_defaults(tmp_path: Path):
    s = IniConfig(_write_ini(tmp_path, "[application]\n")).load_settings()

    assert s.storage_type == "json"
    assert s.has_database is False
    assert s.default_page_controller == "index"
    assert s.log_dir is None
    assert s.error_page_path == "/static/error.html"


def test_unsupported_storage_type(tmp_path: Path):
    with pytest.raises(ValueError):
        IniConfig(_write_ini(tmp_path, "[application]\nstorage_type = yaml\n")).load_settings()


def test_database_required_when_enabled(tmp_path: Path):
    with pytest.raises(ValueError):
        IniConfig(_write_ini(tmp_path, "[application]\nhas_database = true\n")).load_settings()


def test_missing_ini_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        IniConfig(tmp_path / "nope.ini")


def test_from_env_or_default(tmp_path: Path, monkeypatch):
    ini = _write_ini(tmp_path, "[application]\ndomain_name = env.example.com\n")
    monkeypatch.setenv("APP_INI", str(ini))

    assert IniConfig.from_env_or_default().load_settings().domain_name == "env.example.com"

    monkeypatch.delenv("APP_INI")
    assert IniConfig.from_env_or_default().ini_path.name == INI_DEFAULT_NAME
