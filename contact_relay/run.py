# run.py

import logging

from flask import Flask
from flask_cors import CORS

from contact_relay.config import Config
from contact_relay.routes.contact import contact_blueprint
from contact_relay.services.mailer import MailRelay

logger = logging.getLogger(__name__)


def configure_logging(config):
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def create_app(config=None, mailer=None):
    """
    Build the Flask app.

    `mailer` is anything with a `send(outbound)` method that raises
    DeliveryError on failure; defaults to a Flask-Mail backed MailRelay.
    """
    config = config or Config.from_env()

    # Initialize the Flask app
    app = Flask(__name__)

    # Configure Flask-Mail
    app.config.update(config.flask_settings())

    # Configure CORS
    CORS(app, origins=config.allowed_origins)

    if mailer is None:
        mailer = MailRelay(app)

    app.extensions['contact_relay'] = {'config': config, 'mailer': mailer}

    # Register blueprints
    app.register_blueprint(contact_blueprint)

    @app.route('/')
    def home():
        return 'Server is running', 200, {'Content-Type': 'text/plain; charset=utf-8'}

    return app


def main():
    config = Config.from_env()
    configure_logging(config)
    if not config.email_user or not config.email_pass:
        logger.warning("EMAIL_USER or EMAIL_PASS is not set; deliveries will fail")

    app = create_app(config)
    logger.info(f"Server listening on http://localhost:{config.port}")
    app.run(host=config.host, port=config.port)


# Run the Flask app locally
if __name__ == '__main__':
    main()
