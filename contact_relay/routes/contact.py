import logging

from flask import Blueprint, current_app, request

from contact_relay.services.contact_service import DeliveryError, ValidationError, send_contact_email

logger = logging.getLogger(__name__)

contact_blueprint = Blueprint('contact', __name__)

TEXT = {'Content-Type': 'text/plain; charset=utf-8'}

ERROR_MESSAGES = {
    'missing field': 'All fields are required: name, email, subject, message',
    'invalid email': 'The email address is not valid',
    'notification failed': 'Error sending email',
    'confirmation failed': 'Error sending confirmation email',
}


def _request_data():
    # JSON and form-encoded bodies are both accepted
    if request.is_json:
        data = request.get_json(silent=True)
        return data if isinstance(data, dict) else {}
    return request.form


@contact_blueprint.route('/send-email', methods=['POST'])
def send_email():
    relay = current_app.extensions['contact_relay']

    try:
        send_contact_email(_request_data(), relay['mailer'], relay['config'])
    except ValidationError as e:
        logger.warning(f"Rejected contact submission: {e}")
        return ERROR_MESSAGES.get(str(e), str(e)), 400, TEXT
    except DeliveryError as e:
        return ERROR_MESSAGES.get(str(e), str(e)), 500, TEXT

    return 'Email sent successfully and confirmation delivered.', 200, TEXT
