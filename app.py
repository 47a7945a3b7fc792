"""Main Flask application for the newsletter signup form."""
from flask import Flask
from config import config
import os


def create_app(config_name=None):
    """Application factory pattern."""
    if config_name is None:
        config_name = os.environ.get('FLASK_ENV', 'development')

    app = Flask(__name__)
    app.config.from_object(config.get(config_name, config['default']))

    # Initialize error handlers and logging
    from utils.error_handlers import init_error_handlers, init_logging
    init_error_handlers(app)
    init_logging(app)

    # Register blueprints
    from blueprints.signup import signup_bp

    app.register_blueprint(signup_bp)

    @app.after_request
    def add_no_cache_header(response):
        """Keep rendered form state out of shared caches."""
        if response.content_type and response.content_type.startswith('text/html'):
            response.headers['Cache-Control'] = 'no-store'
        return response

    # Health check endpoint
    @app.route('/health')
    def health():
        """Health check endpoint for monitoring."""
        return {'status': 'healthy', 'version': '1.0.0'}, 200

    return app


if __name__ == '__main__':
    app = create_app()
    app.run(host='0.0.0.0', port=5000)
