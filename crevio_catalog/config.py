"""
Application configuration from environment variables.
"""

import os
from dataclasses import dataclass
from typing import Optional


class Config:
    """Application configuration from environment variables."""

    # Crevio
    API_TIMEOUT: int = int(os.getenv('API_TIMEOUT', '10'))

    # Logging
    LOG_LEVEL: str = os.getenv('LOG_LEVEL', 'INFO')
    LOG_FILE: str = os.getenv('LOG_FILE', '')


@dataclass(frozen=True)
class CrevioCredentials:
    """
    Account API key and project server URL for the Crevio API.

    Values are taken as-is: a missing key or URL is not rejected here,
    the remote call fails instead.
    """

    api_key: Optional[str]
    server_url: Optional[str]

    @classmethod
    def from_env(cls) -> 'CrevioCredentials':
        """
        Read credentials from the process environment.

        Read on every call, not at import time.

        Returns:
            CrevioCredentials built from CREVIO_ACCOUNT_API_KEY and
            CREVIO_PROJECT_URL (None when unset)
        """
        return cls(
            api_key=os.getenv('CREVIO_ACCOUNT_API_KEY'),
            server_url=os.getenv('CREVIO_PROJECT_URL')
        )
