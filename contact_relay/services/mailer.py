# services/mailer.py

import smtplib

from flask_mail import BadHeaderError, Mail, Message

from contact_relay.services.contact_service import DeliveryError


class MailRelay:
    """
    Sends OutboundMessages through Flask-Mail.

    `send` returns on success and raises DeliveryError on any SMTP or socket
    failure. Needs an application context, which every request provides.
    """

    def __init__(self, app=None):
        self.mail = Mail()
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        self.mail.init_app(app)

    def send(self, outbound):
        if not outbound.sender or not outbound.recipient:
            raise DeliveryError('message has no sender or recipient; is EMAIL_USER set?')

        msg = Message(
            subject=outbound.subject,
            sender=outbound.sender,
            recipients=[outbound.recipient],
        )
        msg.body = outbound.body
        try:
            self.mail.send(msg)
        except (BadHeaderError, smtplib.SMTPException, OSError) as e:
            raise DeliveryError(str(e)) from e
