from __future__ import annotations

import logging
import re
import smtplib
from email.message import EmailMessage
from typing import Callable, Mapping, Optional

from bright_web.domain.models import EmailSettings

log = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[A-Za-z0-9._%+\-]+@[A-Za-z0-9.\-]+\.[A-Za-z]{2,}$")


class Email:
    """
    One outgoing message, sent over SMTP.
    Outside production mode the message is only logged.
    """

    def __init__(self, settings: Optional[EmailSettings] = None, smtp_factory: Callable[..., smtplib.SMTP] = smtplib.SMTP):
        self._settings = settings or EmailSettings()
        self._smtp_factory = smtp_factory
        self.address = self._settings.address
        self.subject = ""
        self.message = ""
        self.reply_to = ""

    def set_email_address(self, address: Optional[str]) -> None:
        self.address = (address or "").strip()

    def set_subject(self, subject: Optional[str]) -> None:
        self.subject = subject or ""

    def set_message(self, message: Optional[str]) -> None:
        self.message = message or ""

    def set_reply_to(self, reply_to: Optional[str]) -> None:
        self.reply_to = (reply_to or "").strip()

    @staticmethod
    def validate_email_address(address: str) -> bool:
        return bool(EMAIL_PATTERN.match((address or "").strip()))

    def build_message(self, headers: Optional[Mapping[str, str]] = None) -> EmailMessage:
        msg = EmailMessage()
        msg["To"] = self.address
        msg["From"] = self._settings.sender or self.address
        msg["Subject"] = self.subject
        if self.reply_to:
            msg["Reply-To"] = self.reply_to
        for name, value in (headers or {}).items():
            msg[name] = value
        msg.set_content(self.message, subtype="html")
        return msg

    def send_message(self, headers: Optional[Mapping[str, str]] = None, is_mode_production: bool = True) -> bool:
        if not self.validate_email_address(self.address):
            log.warning("Refusing to send email to invalid address %r", self.address)
            return False

        msg = self.build_message(headers)

        if not is_mode_production:
            log.info("Email (not sent, non-production) to=%s subject=%r", self.address, self.subject)
            return True

        try:
            with self._smtp_factory(self._settings.smtp_host, self._settings.smtp_port) as smtp:
                smtp.send_message(msg)
        except (smtplib.SMTPException, OSError):
            log.exception("Failed to send email to %s", self.address)
            return False
        return True
