from __future__ import annotations

import logging

import pytest

from bright_web.app_factory import create_app
from bright_web.config import AppSettings
from bright_web.controllers import build_registry
from bright_web.controllers.site import SiteController
from bright_web.core.error_handler import ErrorHandler
from bright_web.core.model import Model
from bright_web.core.view import View
from bright_web.domain.errors import StorageKeyError
from bright_web.domain.models import EmailSettings
from bright_web.services.logger import Logger


# -----------------------------
# Test doubles
# -----------------------------
class ExplodingController(SiteController):
    def index(self, parameters):
        raise RuntimeError("database fell over")


class FakeEmail:
    def __init__(self):
        self.sent = []
        self.address = self.subject = self.message = self.reply_to = None

    def set_email_address(self, address):
        self.address = address

    def set_subject(self, subject):
        self.subject = subject

    def set_message(self, message):
        self.message = message

    def set_reply_to(self, reply_to):
        self.reply_to = reply_to

    def send_message(self, headers=None, is_mode_production=True):
        self.sent.append((self.subject, self.message))
        return True


# -----------------------------
# Pages
# -----------------------------
def test_home_page(client):
    resp = client.get("/")

    assert resp.status_code == 200
    html = resp.get_data(as_text=True)
    assert "<title>A Bright Site | Home</title>" in html
    assert '<meta name=description content="A small data-driven site." />' in html
    assert '<link rel="stylesheet" href="/static/css/main.css" />' in html
    assert '<li class="first"><a href="/" title="Home">Home</a>' in html
    assert '<div class="link-column"><p>Python</p>' in html
    assert '<img src="/static/images/logo.svg" alt="A Bright Site" id="logo" />' in html


@pytest.mark.parametrize("url", ["/about", "/about/", "/?url=about"])
def test_about_page(client, url):
    resp = client.get(url)

    assert resp.status_code == 200
    assert "<h1>About</h1>" in resp.get_data(as_text=True)


def test_blog_lists_posts(client):
    html = client.get("/blog").get_data(as_text=True)

    assert '<a href="/blog/view/hello-world">Hello, world</a>' in html
    assert '<a href="/blog/view/data-files">' in html


@pytest.mark.parametrize("storage_type", ["json", "xml"])
def test_blog_post_with_comments(storage_type):
    app = create_app(AppSettings(storage_type=storage_type))
    client = app.test_client()

    html = client.get("/blog/view/hello-world/comments").get_data(as_text=True)

    assert "<h1>Hello, world</h1>" in html
    assert "<li>Welcome!</li>" in html
    assert "<li>Looks good.</li>" in html


def test_blog_post_without_comments_section(client):
    html = client.get("/blog/view/hello-world").get_data(as_text=True)

    assert "Show comments" in html
    assert "Welcome!" not in html


def test_missing_blog_post(client):
    resp = client.get("/blog/view/7")

    assert resp.status_code == 200
    assert "Post not found" in resp.get_data(as_text=True)


def test_unknown_page_is_404_with_error_page(client, caplog):
    caplog.set_level(logging.INFO)

    resp = client.get("/nope")

    assert resp.status_code == 404
    html = resp.get_data(as_text=True)
    assert "<title>A Bright Site | Error</title>" in html
    assert "The page you requested could not be found." in html
    assert [r.getMessage() for r in caplog.records if r.name.endswith("pageNotFoundLog")] == ["User entered => nope"]


def test_unknown_method_is_404(client):
    assert client.get("/about/missing").status_code == 404


@pytest.mark.parametrize("url", ["/about/index/team", "/index/index/x", "/blog/index/x"])
def test_unknown_page_name_is_404_not_fatal(client, caplog, url):
    caplog.set_level(logging.INFO)

    resp = client.get(url)

    assert resp.status_code == 404
    assert "The page you requested could not be found." in resp.get_data(as_text=True)
    assert [r for r in caplog.records if r.name.endswith("errorLog")] == []
    assert len([r for r in caplog.records if r.name.endswith("pageNotFoundLog")]) == 1


def test_error_controller_is_not_reachable_by_url(client):
    assert client.get("/error").status_code == 404


def test_query_url_wins_over_path(client):
    resp = client.get("/nope?url=about")

    assert resp.status_code == 200
    assert "<h1>About</h1>" in resp.get_data(as_text=True)


def test_static_error_page_is_served(client):
    assert client.get("/static/error.html").status_code == 200


# -----------------------------
# Unrecovered errors
# -----------------------------
def test_unhandled_error_redirects_to_static_page(caplog):
    caplog.set_level(logging.INFO)
    registry = build_registry()
    registry.register("explode", ExplodingController, Model, View)
    client = create_app(AppSettings(), registry).test_client()

    resp = client.get("/explode")

    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/static/error.html")
    records = [r for r in caplog.records if r.name.endswith("errorLog")]
    assert len(records) == 1
    assert "database fell over" in records[0].getMessage()
    assert "RuntimeError" in records[0].getMessage()


def test_error_handler_emails_when_enabled():
    email = FakeEmail()
    settings = AppSettings(domain_name="example.com", email=EmailSettings(address="admin@example.com", notify_on_error=True))
    handler = ErrorHandler(Logger(), email, settings)

    try:
        raise RuntimeError("boom")
    except RuntimeError as e:
        assert handler.record(e) is True

    (subject, message) = email.sent[0]
    assert subject == "example.com Fatal Error"
    assert "message => boom" in message
    assert email.address == "admin@example.com"


def test_error_handler_logs_app_exceptions_to_exception_log(caplog):
    caplog.set_level(logging.INFO)
    handler = ErrorHandler(Logger(), FakeEmail(), AppSettings())

    try:
        raise StorageKeyError("Json Exception (no data file loaded for key 'x')")
    except StorageKeyError as e:
        assert handler.record(e) is False

    records = [r for r in caplog.records if r.name.endswith("exceptionLog")]
    assert len(records) == 1
    assert "code => 1006" in records[0].getMessage()
    assert records[0].log_type == "exception"
