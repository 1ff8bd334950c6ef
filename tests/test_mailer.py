import smtplib

import pytest

from contact_relay.run import create_app
from contact_relay.services.contact_service import DeliveryError, OutboundMessage
from contact_relay.services.mailer import MailRelay


@pytest.fixture
def relay_app(config):
    app = create_app(config)
    return app, app.extensions['contact_relay']['mailer']


def test_create_app_defaults_to_mail_relay(relay_app):
    _, mailer = relay_app
    assert isinstance(mailer, MailRelay)


def test_mail_relay_builds_flask_mail_message(relay_app):
    app, mailer = relay_app
    outbound = OutboundMessage('owner@example.com', 'ana@example.com', 'Hi', 'Hello there')
    with app.app_context(), mailer.mail.record_messages() as outbox:
        mailer.send(outbound)

    assert len(outbox) == 1
    assert outbox[0].sender == 'owner@example.com'
    assert outbox[0].recipients == ['ana@example.com']
    assert outbox[0].subject == 'Hi'
    assert outbox[0].body == 'Hello there'


def test_full_relay_through_flask_mail(relay_app, valid_form):
    app, mailer = relay_app
    with mailer.mail.record_messages() as outbox:
        response = app.test_client().post('/send-email', data=valid_form)

    assert response.status_code == 200
    assert [m.recipients for m in outbox] == [['owner@example.com'], ['ana@example.com']]


def test_smtp_failure_becomes_delivery_error(relay_app, monkeypatch):
    app, mailer = relay_app

    def refuse(message):
        raise smtplib.SMTPAuthenticationError(535, b'Username and Password not accepted')

    monkeypatch.setattr(mailer.mail, 'send', refuse)
    outbound = OutboundMessage('owner@example.com', 'ana@example.com', 'Hi', 'Hello there')
    with app.app_context(), pytest.raises(DeliveryError, match='535'):
        mailer.send(outbound)


def test_connection_failure_returns_500(relay_app, valid_form, monkeypatch):
    app, mailer = relay_app

    def unreachable(message):
        raise ConnectionRefusedError(111, 'Connection refused')

    monkeypatch.setattr(mailer.mail, 'send', unreachable)
    response = app.test_client().post('/send-email', data=valid_form)
    assert response.status_code == 500


def test_missing_sender_becomes_delivery_error(relay_app):
    app, mailer = relay_app
    outbound = OutboundMessage(None, 'ana@example.com', 'Hi', 'Hello there')
    with app.app_context(), mailer.mail.record_messages() as outbox:
        with pytest.raises(DeliveryError, match='EMAIL_USER'):
            mailer.send(outbound)
    assert outbox == []
