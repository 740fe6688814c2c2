import smtplib
import ssl
from email.message import EmailMessage

from loguru import logger

from orders import OrderNotificationError


class EmailDispatchFailure(OrderNotificationError):
    """The mail relay refused or failed to deliver one message."""

    def __init__(self, recipient, cause):
        super().__init__(f"could not send email to {recipient}: {cause}")
        self.recipient = recipient
        self.cause = cause


class MailDispatcher:
    """Client for the Gmail SMTP relay, logged in as one fixed account."""

    def __init__(self, settings):
        self.host = settings.smtp_host
        self.port = settings.smtp_port
        self.user = settings.gmail_user
        self._password = settings.gmail_app_password

    def send_message(self, sender, recipient, subject, html):
        # one connection per message, nothing is kept between sends
        try:
            msg = EmailMessage()
            msg["Subject"] = subject
            msg["From"] = sender
            msg["To"] = recipient
            msg.set_content(html, subtype="html")

            with smtplib.SMTP_SSL(self.host, self.port, context=ssl.create_default_context()) as server:
                server.login(self.user, self._password)
                server.send_message(msg)
        except (smtplib.SMTPException, OSError, ValueError) as err:
            # ValueError: header values with line breaks
            raise EmailDispatchFailure(recipient, err) from err

        logger.debug("Sent '{}' to {}", subject, recipient)
