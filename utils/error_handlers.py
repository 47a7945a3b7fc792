"""Error handlers and logging configuration."""
from flask import render_template, jsonify, request
import logging
from logging.handlers import RotatingFileHandler
import os

LOG_FORMAT = '%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]'

ERROR_MESSAGES = {
    400: 'Bad request',
    403: 'Forbidden',
    404: 'Resource not found',
    405: 'Method not allowed',
    500: 'Internal server error',
}


def init_error_handlers(app):
    """Initialize error handlers for the application."""

    def handle(error, status):
        if status >= 500:
            app.logger.error(f'Internal error: {error}')
        message = ERROR_MESSAGES[status]
        if request.is_json:
            return jsonify({'error': message}), status
        # htmx swaps the response into the form card
        if request.headers.get('HX-Request') == 'true':
            return render_template('errors/partials/error.html', status=status, message=message), status
        return render_template('errors/error.html', status=status, message=message), status

    for status in ERROR_MESSAGES:
        app.register_error_handler(status, lambda error, status=status: handle(error, status))


def _rotating_handler(path, level):
    handler = RotatingFileHandler(
        path,
        maxBytes=10240000,  # 10MB
        backupCount=10
    )
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.setLevel(level)
    return handler


def init_logging(app):
    """Initialize logging for the application."""
    if app.debug or app.testing:
        return

    log_dir = app.config.get('LOG_DIR', 'logs')
    os.makedirs(log_dir, exist_ok=True)

    handlers = [
        _rotating_handler(os.path.join(log_dir, 'signup.log'), logging.INFO),
        _rotating_handler(os.path.join(log_dir, 'signup-errors.log'), logging.ERROR),
    ]

    # Controller and storage modules log through their own loggers
    for logger in (app.logger, logging.getLogger('blueprints.signup'), logging.getLogger('services')):
        logger.setLevel(logging.INFO)
        for handler in handlers:
            logger.addHandler(handler)

    app.logger.info('Newsletter signup startup')
