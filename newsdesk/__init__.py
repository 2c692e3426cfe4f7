"""
NewsDesk - A Flask News Server
==============================

A small news service with image attachments:
- JSON API for listing, reading, creating and deleting news items
- Flat JSON file storage and a local upload directory
- Public website and admin page served from disk
- Environment-dependent CORS policy

Usage:
    from flask import Flask
    from newsdesk import NewsDesk

    app = Flask(__name__, static_folder=None)
    NewsDesk(app, {'NEWS_FILE': 'data/news.json'})

Or simply:
    from newsdesk import create_app
    app = create_app()
"""

__version__ = '0.1.0'

from flask import Flask, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import HTTPException, InternalServerError, RequestEntityTooLarge

from .core.config import Config
from .core.logging_service import LoggingService
from .core.storage import NewsStore, UploadStore, size_limit_message

# Room for the text fields and multipart framing around a maximum-size image
FORM_OVERHEAD = 64 * 1024


class NewsDesk:
    """Flask extension wiring storage, modules, CORS and error handlers onto an app"""

    def __init__(self, app=None, config=None):
        self._modules = []
        self.store = None
        self.uploads = None
        if app is not None:
            self.init_app(app, config)

    def init_app(self, app, config=None):
        for key, value in Config.as_dict().items():
            app.config.setdefault(key, value)
        if config:
            app.config.update(config)
        if app.config.get('MAX_CONTENT_LENGTH') is None:
            app.config['MAX_CONTENT_LENGTH'] = app.config['MAX_UPLOAD_SIZE'] + FORM_OVERHEAD
        if not config or 'MAX_FORM_MEMORY_SIZE' not in config:
            app.config['MAX_FORM_MEMORY_SIZE'] = app.config['MAX_FORM_FIELD_SIZE']

        self._setup_storage(app)
        self._setup_cors(app)
        self._register_modules(app)
        self._register_error_handlers(app)

        app.extensions['newsdesk'] = self

    def _setup_storage(self, app):
        """Create the news file and upload directory if they are missing"""
        self.store = NewsStore(app.config['NEWS_FILE'])
        self.uploads = UploadStore(app.config['UPLOAD_FOLDER'], app.config['MAX_UPLOAD_SIZE'])
        self.store.init()
        self.uploads.init()

    def _setup_cors(self, app):
        if app.config['IS_PRODUCTION']:
            CORS(app, origins=app.config['CORS_ALLOWED_ORIGINS'], supports_credentials=True)
        else:
            CORS(app, origins='*', supports_credentials=True)

        @app.before_request
        def reject_disallowed_origin():
            origin = request.headers.get('Origin')
            # Requests without an Origin (curl, server-to-server) always pass
            if not origin or not app.config['IS_PRODUCTION']:
                return None
            if origin in app.config['CORS_ALLOWED_ORIGINS']:
                return None
            LoggingService.log_security_event('Rejected cross-origin request', {'origin': origin})
            return jsonify({'success': False, 'message': 'Not allowed by CORS'}), 403

    def _register_modules(self, app):
        from .modules.news import news_bp
        from .modules.pages import pages_bp

        app.register_blueprint(news_bp)
        self._modules.append('news')
        app.register_blueprint(pages_bp)
        self._modules.append('pages')

    def _register_error_handlers(self, app):
        @app.errorhandler(RequestEntityTooLarge)
        def upload_too_large(error):
            content_length = request.content_length
            if content_length is not None and content_length <= app.config['MAX_CONTENT_LENGTH']:
                # The body fit, so a single text field went over MAX_FORM_MEMORY_SIZE
                message = 'Field value too long'
            else:
                message = size_limit_message(app.config['MAX_UPLOAD_SIZE'])
            return jsonify({'success': False, 'message': message}), 400

        @app.errorhandler(Exception)
        def unhandled_error(error):
            if isinstance(error, HTTPException):
                return error
            LoggingService.log_error_with_traceback('app', error, {'path': request.path})
            if not request.path.startswith('/api/'):
                return InternalServerError(original_exception=error)
            return jsonify({'success': False, 'message': str(error)}), 500

    def get_registered_modules(self):
        return list(self._modules)


def create_app(config=None):
    """Build a Flask app with NewsDesk installed"""
    app = Flask(__name__, static_folder=None)
    NewsDesk(app, config)
    return app


__all__ = ['NewsDesk', 'create_app', '__version__']
