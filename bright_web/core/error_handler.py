from __future__ import annotations

import traceback

from flask import redirect

from bright_web.adapters.email_smtp import Email
from bright_web.config.ini_config import AppSettings
from bright_web.domain.errors import AppException
from bright_web.services.logger import Logger

ERROR_LOG = "errorLog"


def _error_details(exc: BaseException) -> dict:
    frames = traceback.extract_tb(exc.__traceback__) if exc.__traceback__ else []
    last = frames[-1] if frames else None
    return {
        "type": type(exc).__name__,
        "message": str(exc),
        "file": last.filename if last else "",
        "line": last.lineno if last else "",
    }


class ErrorHandler:
    """
    Last stop for errors the dispatcher does not recover: log, optionally
    email, then send the user to the static friendly error page.
    """

    def __init__(self, log: Logger, email: Email, settings: AppSettings):
        self._log = log
        self._email = email
        self._settings = settings

    def _make_log_message(self, msg: str, exc: BaseException) -> str:
        return msg + Logger.build_message(_error_details(exc))

    def _make_email_message(self, msg: str, exc: BaseException) -> str:
        lines = [msg] + [f"{k} => {v}" for k, v in _error_details(exc).items()]
        return "<br />".join(lines)

    def _send_email(self, subject: str, msg: str) -> bool:
        self._email.set_email_address(self._settings.email.address)
        self._email.set_subject(subject)
        self._email.set_message(msg)
        self._email.set_reply_to(self._settings.email.address)
        return self._email.send_message(is_mode_production=self._settings.is_mode_production)

    def record(self, exc: BaseException) -> bool:
        """Log (and maybe email) ``exc``. Returns whether a notification went out."""
        if isinstance(exc, AppException):
            exc.create_log(self._log)
        else:
            log_message = self._make_log_message("Encountered fatal error: ", exc)
            stack = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
            self._log.write_log_to_file(log_message + ", stack_trace => \r\n" + stack.rstrip(), "error", ERROR_LOG)

        if not self._settings.email.notify_on_error:
            return False

        email_message = self._make_email_message("Encountered fatal error: ", exc)
        return self._send_email(f"{self._settings.domain_name} Fatal Error", email_message)

    def show_fatal_error_page(self, exc: BaseException):
        self.record(exc)
        return redirect(self._settings.error_page_path)
