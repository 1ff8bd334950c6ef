# config.py

import os

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

DEFAULT_PORT = 3000
DEFAULT_MAIL_SERVER = 'smtp.gmail.com'
DEFAULT_MAIL_PORT = 587


def _bool_env(value, default):
    if value is None or value == '':
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


def _int_env(value, default):
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


class Config:
    """
    Process-wide settings, read once at startup and shared read-only
    between the app factory and the mailer.
    """

    def __init__(self, email_user=None, email_pass=None, owner_email=None, owner_name=None,
                 mail_server=DEFAULT_MAIL_SERVER, mail_port=DEFAULT_MAIL_PORT, mail_use_tls=True,
                 port=DEFAULT_PORT, host='0.0.0.0', cors_origins='*', log_level='INFO', testing=False):
        self.email_user = email_user
        self.email_pass = email_pass
        self.owner_email = owner_email or email_user
        self.owner_name = owner_name or email_user
        self.mail_server = mail_server
        self.mail_port = mail_port
        self.mail_use_tls = mail_use_tls
        self.port = port
        self.host = host
        self.cors_origins = cors_origins
        self.log_level = log_level
        self.testing = testing

    @classmethod
    def from_env(cls, environ=None):
        env = os.environ if environ is None else environ
        return cls(
            email_user=env.get('EMAIL_USER'),
            email_pass=env.get('EMAIL_PASS'),
            owner_email=env.get('OWNER_EMAIL'),
            owner_name=env.get('OWNER_NAME'),
            mail_server=env.get('MAIL_SERVER') or DEFAULT_MAIL_SERVER,
            mail_port=_int_env(env.get('MAIL_PORT'), DEFAULT_MAIL_PORT),
            mail_use_tls=_bool_env(env.get('MAIL_USE_TLS'), True),
            port=_int_env(env.get('PORT'), DEFAULT_PORT),
            host=env.get('HOST') or '0.0.0.0',
            cors_origins=env.get('CORS_ORIGINS') or '*',
            log_level=(env.get('LOG_LEVEL') or 'INFO').upper(),
        )

    @property
    def allowed_origins(self):
        # Only a bare '*' entry means allow-all
        origins = [o.strip() for o in self.cors_origins.split(',') if o.strip()]
        if '*' in origins:
            return '*'
        return origins

    def flask_settings(self):
        """Flask-Mail settings in the form `app.config.update` expects."""
        return dict(
            TESTING=self.testing,
            MAIL_SERVER=self.mail_server,
            MAIL_PORT=self.mail_port,
            MAIL_USE_TLS=self.mail_use_tls,
            MAIL_USERNAME=self.email_user,
            MAIL_PASSWORD=self.email_pass,
            MAIL_DEFAULT_SENDER=self.email_user,
            MAIL_SUPPRESS_SEND=self.testing,
        )
