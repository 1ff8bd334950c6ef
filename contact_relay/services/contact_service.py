import logging
import re
from collections import namedtuple

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ('name', 'email', 'subject', 'message')
CONFIRMATION_SUBJECT = 'We have received your message'

Submission = namedtuple('Submission', REQUIRED_FIELDS)
OutboundMessage = namedtuple('OutboundMessage', ['sender', 'recipient', 'subject', 'body'])


class ValidationError(ValueError):
    """The submission was rejected before anything was sent."""


class DeliveryError(RuntimeError):
    """The mail relay could not deliver a message."""


def validate_email(email):
    """
    Validate the email address using a regex pattern.
    """
    email_regex = (
        r"^[A-Za-z0-9.!#$%&'*+/=?^_`{|}~\u00a1-\uffff-]+"
        r"@[A-Za-z0-9\u00a1-\uffff-]+(\.[A-Za-z0-9\u00a1-\uffff-]+)*"
        r"\.[A-Za-z0-9\u00a1-\uffff-]{2,}$"
    )
    return re.match(email_regex, email)


def parse_submission(data):
    """
    Build a Submission from a request body mapping.

    Raises ValidationError("missing field") if any field is absent, empty or
    not text, and ValidationError("invalid email") if the address is malformed.
    """
    values = {}
    for field in REQUIRED_FIELDS:
        value = data.get(field)
        if not isinstance(value, str) or not value.strip():
            raise ValidationError('missing field')
        values[field] = value.strip()

    if not validate_email(values['email']):
        raise ValidationError('invalid email')

    return Submission(**values)


def build_notification(submission, config):
    body = (
        f"Name: {submission.name}\n\n"
        f"Email: {submission.email}\n\n"
        f"Subject: {submission.subject}\n\n"
        f"Message: {submission.message}"
    )
    return OutboundMessage(
        sender=config.email_user,
        recipient=config.owner_email,
        subject=submission.subject,
        body=body,
    )


def build_confirmation(submission, config):
    body = (
        f"Dear {submission.name},\n\n"
        f"We have received your message:\n\n\"{submission.message}\"\n\n"
        f"We will get back to you soon.\n\n"
        f"Best regards,\n{config.owner_name}"
    )
    return OutboundMessage(
        sender=config.email_user,
        recipient=submission.email,
        subject=CONFIRMATION_SUBJECT,
        body=body,
    )


def send_contact_email(data, mailer, config):
    submission = parse_submission(data)

    # Email to the owner
    try:
        mailer.send(build_notification(submission, config))
    except DeliveryError as e:
        logger.error(f"Error sending notification email: {e}")
        raise DeliveryError('notification failed') from e

    # Email to the submitter; the notification above stays sent if this fails
    try:
        mailer.send(build_confirmation(submission, config))
    except DeliveryError as e:
        logger.error(f"Error sending confirmation email to {submission.email}: {e}")
        raise DeliveryError('confirmation failed') from e

    logger.info(f"Contact submission from {submission.email} relayed")
    return submission
