"""
Pytest fixtures and test configuration.
"""

import pytest
from unittest.mock import MagicMock, Mock
from crevio_catalog import create_app
from crevio_catalog.clients.crevio_client import CrevioClient, ProductsResource
from crevio_catalog.config import CrevioCredentials
from crevio_catalog.services import products as products_service


@pytest.fixture
def credentials():
    """Explicit test credentials."""
    return CrevioCredentials(
        api_key="sk_test_123",
        server_url="https://shop.crevio.test/api/v1"
    )


@pytest.fixture
def mock_crevio_client():
    """Mock Crevio client usable as a context manager."""
    client = MagicMock(spec=CrevioClient)
    client.__enter__.return_value = client
    client.products = Mock(spec=ProductsResource)
    return client


@pytest.fixture
def client_factory(monkeypatch, mock_crevio_client):
    """Replace create_client() with a mock returning mock_crevio_client."""
    factory = Mock(return_value=mock_crevio_client)
    monkeypatch.setattr(products_service, "create_client", factory)
    return factory


@pytest.fixture
def sample_products():
    """Sample list of product records for testing."""
    return [
        {"id": "prod_1", "name": "Starter Course", "price": 4900},
        {"id": "prod_2", "name": "Pro Templates", "price": 9900},
    ]


@pytest.fixture
def app():
    """Flask application for endpoint tests."""
    app = create_app()
    app.config.update(TESTING=True)
    return app


@pytest.fixture
def http_client(app):
    """Flask test client."""
    return app.test_client()
