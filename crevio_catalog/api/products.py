"""
HTTP endpoints exposing the product accessors as JSON.
"""

import asyncio

from flask import Blueprint, jsonify
from crevio_catalog.services.products import (
    ProductLoadError,
    fetch_product,
    fetch_products,
)
from crevio_catalog.utils.logger import get_logger, log_with_context

bp = Blueprint('products', __name__)
logger = get_logger(__name__)


@bp.errorhandler(ProductLoadError)
def handle_product_load_error(error: ProductLoadError):
    """
    Map accessor failures to 502 with the generic message only.
    """
    return jsonify({"status": "error", "message": str(error)}), 502


@bp.route('/products', methods=['GET'])
def list_products():
    """
    List all products.

    Returns:
        [{"prefix_id": "prod_1", ...}, ...]
    """
    products = asyncio.run(fetch_products())

    log_with_context(
        logger, "INFO",
        "Products listed",
        product_count=len(products)
    )

    return jsonify(products), 200


@bp.route('/products/<prefix_id>', methods=['GET'])
def get_product(prefix_id: str):
    """
    Get single product by prefix ID.

    Returns:
        {"prefix_id": "prod_123", ...}
    """
    product = asyncio.run(fetch_product(prefix_id))

    log_with_context(
        logger, "INFO",
        "Product loaded",
        product_id=prefix_id
    )

    return jsonify(product), 200
