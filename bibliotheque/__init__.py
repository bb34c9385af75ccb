"""
Flask application factory for Bibliotheque.

The catalog lives in memory for the lifetime of the process; the app only
exposes it through the JSON API blueprints.
"""

import logging

from flask import Flask, jsonify

from config import Config

logger = logging.getLogger(__name__)


def _configure_logging(app):
    """Apply LOG_LEVEL to the root logger and the Flask app logger."""
    log_level_name = str(app.config.get('LOG_LEVEL', 'ERROR')).upper()
    log_level = getattr(logging, log_level_name, logging.ERROR)
    if not isinstance(log_level, int):
        log_level = logging.ERROR
    logging.getLogger().setLevel(log_level)
    app.logger.setLevel(log_level)


def create_app(test_config=None):
    app = Flask(__name__, static_folder=None)
    app.config.from_object(Config)
    if test_config:
        app.config.update(test_config)

    _configure_logging(app)
    app.json.ensure_ascii = False

    from .api import authors_api, books_api
    app.register_blueprint(books_api)
    app.register_blueprint(authors_api)

    @app.errorhandler(404)
    def not_found(e):
        return jsonify({
            'status': 'error',
            'message': 'Not found'
        }), 404

    @app.route('/')
    def index():
        return jsonify({
            'name': app.config['SITE_NAME'],
            'endpoints': ['/api/v1/books', '/api/v1/books/render', '/api/v1/authors']
        })

    app.logger.info(f"{app.config['SITE_NAME']} app created")
    return app
