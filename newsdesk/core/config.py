import os
from dotenv import load_dotenv

load_dotenv(override=True)

PACKAGE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def _is_production():
    return (
        os.getenv('NEWSDESK_ENV') == 'production' or
        os.getenv('FLASK_ENV') == 'production' or
        os.getenv('PRODUCTION') == '1'
    )


def _split_origins(value):
    return [origin.strip() for origin in value.split(',') if origin.strip()]


class Config:
    """
    Base configuration for NewsDesk.
    Every setting can be overridden through the environment or a .env file.
    """
    # Server
    HOST = os.getenv('HOST', '0.0.0.0')
    PORT = int(os.getenv('PORT', '3007'))
    IS_PRODUCTION = _is_production()

    # Storage paths
    NEWS_FILE = os.getenv('NEWS_FILE', os.path.join(os.getcwd(), 'news.json'))
    UPLOAD_FOLDER = os.getenv('UPLOAD_FOLDER', os.path.join(os.getcwd(), 'uploads'))
    SITE_ROOT = os.getenv('SITE_ROOT', os.path.join(PACKAGE_DIR, 'site'))

    # TLS material (Let's Encrypt layout)
    SSL_KEY_FILE = os.getenv('SSL_KEY_FILE', os.path.join('certs', 'privkey.pem'))
    SSL_CERT_FILE = os.getenv('SSL_CERT_FILE', os.path.join('certs', 'fullchain.pem'))

    # Origins accepted in production mode
    CORS_ALLOWED_ORIGINS = _split_origins(os.getenv('CORS_ALLOWED_ORIGINS', 'https://atomo.in'))

    # Uploads
    MAX_UPLOAD_SIZE = int(os.getenv('MAX_UPLOAD_SIZE', str(5 * 1024 * 1024)))
    # Per text field (title, content, ...)
    MAX_FORM_FIELD_SIZE = int(os.getenv('MAX_FORM_FIELD_SIZE', str(1024 * 1024)))

    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

    @classmethod
    def as_dict(cls):
        """Settings as a plain dict, suitable for app.config.setdefault()"""
        return {
            key: getattr(cls, key)
            for key in dir(cls)
            if key.isupper()
        }
