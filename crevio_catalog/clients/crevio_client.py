"""
Crevio REST API client.
"""

import requests
from typing import Any, List, Optional


class CrevioAPIError(Exception):
    """Crevio API error."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class CrevioNotFoundError(CrevioAPIError):
    """Requested resource does not exist."""
    pass


def quote_path_segment(value: str) -> str:
    """
    Percent-encode a value for use as a single URL path segment.

    Args:
        value: Raw identifier

    Returns:
        Encoded segment; "/", "?", "#" and dot segments cannot escape it
    """
    segment = requests.utils.quote(value, safe='')
    if segment in ('.', '..'):
        segment = segment.replace('.', '%2E')
    return segment


class ProductsResource:
    """Product endpoints of the Crevio API."""

    def __init__(self, client: 'CrevioClient'):
        self._client = client

    def list(self) -> Optional[List[dict]]:
        """
        List all products of the account.

        GET /products

        Returns:
            List of product records, or None if the API returned no body

        Raises:
            CrevioAPIError: If API request fails or the body is not a JSON array
        """
        data = self._client.request('GET', '/products')
        if data is not None and not isinstance(data, list):
            raise CrevioAPIError(
                f"Unexpected response for /products: expected list, got {type(data).__name__}"
            )
        return data

    def get(self, prefix_id: str) -> dict:
        """
        Fetch single product by its prefix ID.

        GET /products/{prefix_id}

        Args:
            prefix_id: Crevio product prefix ID (e.g., "prod_123")

        Returns:
            Product record exactly as returned by the API

        Raises:
            CrevioNotFoundError: If product does not exist
            CrevioAPIError: If API request fails or the body is not a JSON object
        """
        path = f'/products/{quote_path_segment(prefix_id)}'
        data = self._client.request('GET', path)
        if not isinstance(data, dict):
            raise CrevioAPIError(
                f"Unexpected response for {path}: expected object, got {type(data).__name__}"
            )
        return data


class CrevioClient:
    """Crevio REST API client."""

    def __init__(
        self,
        api_key: Optional[str],
        server_url: Optional[str],
        timeout: int = 10
    ):
        """
        Initialize Crevio client.

        Args:
            api_key: Crevio account API key
            server_url: Crevio project URL (e.g., https://your-project.crevio.co/api/v1)
            timeout: Request timeout in seconds
        """
        self.api_key = api_key
        self.server_url = server_url.rstrip('/') if server_url else None
        self.timeout = timeout

        self.session = requests.Session()
        self.session.headers.update({
            "Accept": "application/json",
            "User-Agent": "Crevio-Catalog/1.0"
        })
        if api_key:
            self.session.headers["Authorization"] = f"Bearer {api_key}"

        self.products = ProductsResource(self)

    def __enter__(self) -> 'CrevioClient':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        """Release pooled connections."""
        self.session.close()

    def request(self, method: str, path: str) -> Any:
        """
        Send request to the Crevio API and decode the JSON body.

        Args:
            method: HTTP method
            path: Path relative to the server URL

        Returns:
            Decoded response body, unmodified (None for an empty body)

        Raises:
            CrevioNotFoundError: On HTTP 404
            CrevioAPIError: On any other transport, HTTP or decoding failure
        """
        if not self.server_url:
            raise CrevioAPIError("Crevio server URL is not configured")

        url = f"{self.server_url}{path}"

        try:
            response = self.session.request(method, url, timeout=self.timeout)
        except requests.RequestException as e:
            raise CrevioAPIError(f"Crevio API error: {str(e)}") from e

        if response.status_code == 404:
            raise CrevioNotFoundError(
                f"Not found: {path}", status_code=response.status_code
            )

        try:
            response.raise_for_status()
        except requests.HTTPError as e:
            raise CrevioAPIError(
                f"Crevio API error: {str(e)}", status_code=response.status_code
            ) from e

        if not response.content:
            return None

        try:
            return response.json()
        except ValueError as e:
            raise CrevioAPIError(
                f"Invalid JSON from Crevio API: {str(e)}",
                status_code=response.status_code
            ) from e
