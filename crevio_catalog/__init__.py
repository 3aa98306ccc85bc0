"""
Flask application factory and public accessors.
"""

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException
from crevio_catalog.config import CrevioCredentials
from crevio_catalog.services.products import (
    ProductLoadError,
    create_client,
    fetch_product,
    fetch_products,
    get_by_id,
    list_all,
)
from crevio_catalog.utils.logger import get_logger

__version__ = '0.1.0'

__all__ = [
    'CrevioCredentials',
    'ProductLoadError',
    'create_app',
    'create_client',
    'fetch_product',
    'fetch_products',
    'get_by_id',
    'list_all',
]

logger = get_logger(__name__)


def create_app():
    """
    Create and configure Flask application.

    Crevio credentials are not checked here; they are read from the
    environment on every request.

    Returns:
        Configured Flask app instance
    """
    app = Flask(__name__)

    from crevio_catalog.api import products
    app.register_blueprint(products.bp)
    logger.info("Registered product blueprint")

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        if isinstance(error, HTTPException):
            return error
        logger.exception("Unexpected error in request")
        return jsonify({
            "status": "error",
            "message": "Internal server error"
        }), 500

    # Health check endpoint
    @app.route('/health', methods=['GET'])
    def health():
        """
        Health check endpoint.

        Returns:
            200 OK if application is healthy
        """
        return jsonify({"status": "healthy"}), 200

    logger.info("Application initialized successfully")

    return app
