"""
Product accessors for the Crevio API.

Each accessor builds its own client, performs one remote call and
collapses every failure into a ProductLoadError. The original exception
is logged and chained, never put into the message.
"""

import asyncio
from typing import List, Optional

from crevio_catalog.clients.crevio_client import CrevioClient
from crevio_catalog.config import Config, CrevioCredentials
from crevio_catalog.utils.logger import get_logger, log_with_context, fingerprint

logger = get_logger(__name__)


class ProductLoadError(Exception):
    """Generic, user-facing product loading error."""

    def __init__(self, message: str, source: Optional[BaseException] = None):
        super().__init__(message)
        self.source = source


def create_client(credentials: Optional[CrevioCredentials] = None) -> CrevioClient:
    """
    Create a configured Crevio client.

    Credentials are not validated; a missing value surfaces later as a
    failed remote call.

    Args:
        credentials: Explicit credentials. Read from the environment
                     when omitted.

    Returns:
        New CrevioClient instance
    """
    if credentials is None:
        credentials = CrevioCredentials.from_env()

    log_with_context(
        logger, "DEBUG",
        "Creating Crevio client",
        server_url=credentials.server_url,
        api_key_hash=fingerprint(credentials.api_key)
    )

    return CrevioClient(
        credentials.api_key,
        credentials.server_url,
        Config.API_TIMEOUT
    )


def list_all(credentials: Optional[CrevioCredentials] = None) -> List[dict]:
    """
    Fetch all products for the current account.

    Args:
        credentials: Explicit credentials, environment when omitted

    Returns:
        List of product records (empty if the API returned nothing)

    Raises:
        ProductLoadError: "Failed to load products" on any failure
    """
    try:
        with create_client(credentials) as client:
            result = client.products.list()
        if not result:
            return []
        if not isinstance(result, list):
            raise TypeError(f"Expected list of products, got {type(result).__name__}")
        return result

    except Exception as e:
        log_with_context(
            logger, "ERROR",
            "Error fetching products",
            error=str(e),
            error_type=type(e).__name__
        )
        raise ProductLoadError("Failed to load products", source=e) from e


def get_by_id(
    prefix_id: str,
    credentials: Optional[CrevioCredentials] = None
) -> dict:
    """
    Fetch a specific product by its prefix ID.

    Args:
        prefix_id: Product prefix ID (e.g., "prod_123"), forwarded as-is
        credentials: Explicit credentials, environment when omitted

    Returns:
        Product record exactly as returned by the API

    Raises:
        ProductLoadError: "Failed to load product: <prefix_id>" on any failure
    """
    try:
        with create_client(credentials) as client:
            return client.products.get(prefix_id=prefix_id)

    except Exception as e:
        log_with_context(
            logger, "ERROR",
            "Error fetching product",
            product_id=prefix_id,
            error=str(e),
            error_type=type(e).__name__
        )
        raise ProductLoadError(
            f"Failed to load product: {prefix_id}", source=e
        ) from e


async def fetch_products(
    credentials: Optional[CrevioCredentials] = None
) -> List[dict]:
    """
    Async variant of list_all(); the HTTP call runs in a worker thread.

    Raises:
        ProductLoadError: "Failed to load products" on any failure
    """
    return await asyncio.to_thread(list_all, credentials)


async def fetch_product(
    prefix_id: str,
    credentials: Optional[CrevioCredentials] = None
) -> dict:
    """
    Async variant of get_by_id(); the HTTP call runs in a worker thread.

    Raises:
        ProductLoadError: "Failed to load product: <prefix_id>" on any failure
    """
    return await asyncio.to_thread(get_by_id, prefix_id, credentials)
