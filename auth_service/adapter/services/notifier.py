"""
Notifier implementations

LoggingNotifier writes the reset link to the application log, for local
development. SmtpNotifier delivers a plain-text email through an SMTP relay.
"""

import asyncio
import logging
import smtplib
from email.message import EmailMessage

from auth_service.app.services.notifier import INotifier

logger = logging.getLogger(__name__)


class LoggingNotifier(INotifier):
    """Development notifier: the reset link only reaches the server log"""

    async def send_password_reset(self, email: str, reset_url: str) -> None:
        logger.info("Password reset link for %s: %s", email, reset_url)


class SmtpNotifier(INotifier):
    """Sends password reset emails through an SMTP relay"""

    def __init__(self, host: str, port: int, sender: str):
        self.host = host
        self.port = port
        self.sender = sender

    def _build_message(self, email: str, reset_url: str) -> EmailMessage:
        message = EmailMessage()
        message["Subject"] = "Reset your password"
        message["From"] = self.sender
        message["To"] = email
        message.set_content(
            "We received a request to reset the password for your account.\n\n"
            f"Use the link below within the next hour to choose a new password:\n\n"
            f"{reset_url}\n\n"
            "If you did not request this, you can ignore this email.\n"
        )
        return message

    def _send(self, message: EmailMessage) -> None:
        with smtplib.SMTP(host=self.host, port=self.port) as conn:
            conn.send_message(message)

    async def send_password_reset(self, email: str, reset_url: str) -> None:
        await asyncio.to_thread(self._send, self._build_message(email, reset_url))
        logger.info("Password reset email sent to %s", email)
