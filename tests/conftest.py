import pytest

from contact_relay.config import Config
from contact_relay.run import create_app
from contact_relay.services.contact_service import DeliveryError


class FakeMailer:
    """Records every message and fails on the calls listed in `fail_on`."""

    def __init__(self, fail_on=()):
        self.fail_on = set(fail_on)
        self.sent = []
        self.calls = 0

    def send(self, outbound):
        self.calls += 1
        if self.calls in self.fail_on:
            raise DeliveryError('SMTP relay unavailable')
        self.sent.append(outbound)


@pytest.fixture
def config():
    return Config(
        email_user='owner@example.com',
        email_pass='secret',
        owner_name='Owner Team',
        testing=True,
    )


@pytest.fixture
def mailer():
    return FakeMailer()


@pytest.fixture
def client(config, mailer):
    app = create_app(config, mailer=mailer)
    return app.test_client()


@pytest.fixture
def valid_form():
    return {
        'name': 'Ana',
        'email': 'ana@example.com',
        'subject': 'Hi',
        'message': 'Hello there',
    }
