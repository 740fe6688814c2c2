import pytest

from mailer import EmailDispatchFailure
from settings import Settings
from webapp import create_app


class RecordingMailer:
    """Stands in for MailDispatcher; fails the sends whose index is in fail_on."""

    def __init__(self, fail_on=()):
        self.fail_on = set(fail_on)
        self.sent = []
        self.calls = 0

    def send_message(self, sender, recipient, subject, html):
        index = self.calls
        self.calls += 1
        if index in self.fail_on:
            raise EmailDispatchFailure(recipient, ConnectionRefusedError("relay down"))
        self.sent.append(
            {"sender": sender, "recipient": recipient, "subject": subject, "html": html}
        )


@pytest.fixture
def settings():
    return Settings(
        gmail_user="owner@gmail.com",
        gmail_app_password="secret",
        port=3000,
    )


@pytest.fixture
def order_payload():
    return {
        "pancakes": 3,
        "totalAmount": 15,
        "totalXMR": 0.05,
        "userLocation": {"lat": 40.0, "lng": -75.0},
        "distance": 2.3,
        "customerEmail": "buyer@example.com",
    }


@pytest.fixture
def mailer():
    return RecordingMailer()


@pytest.fixture
def client(settings, mailer):
    app = create_app(settings, mailer)
    app.config["TESTING"] = True
    return app.test_client()
