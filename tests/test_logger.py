"""
Tests for logging utilities.
"""

import json
import logging
from crevio_catalog.config import CrevioCredentials
from crevio_catalog.utils.logger import JSONFormatter, fingerprint, log_with_context, redact_context


def test_fingerprint():
    """Test that secrets are hashed, never echoed."""
    value = fingerprint("sk_test_123")

    assert len(value) == 12
    assert "sk_test" not in value
    assert fingerprint("sk_test_123") == value
    assert fingerprint(None) == "unset"


def test_json_formatter_includes_context():
    """Test JSON output with context fields."""
    record = logging.LogRecord("crevio", logging.ERROR, __file__, 1, "Error fetching product", None, None)
    record.extra_data = {"product_id": "prod_123"}

    data = json.loads(JSONFormatter().format(record))

    assert data["level"] == "ERROR"
    assert data["logger"] == "crevio"
    assert data["message"] == "Error fetching product"
    assert data["product_id"] == "prod_123"
    assert data["timestamp"].endswith("Z")


def test_log_with_context(caplog):
    """Test that context fields are attached to the record."""
    logger = logging.getLogger("crevio_catalog.tests")

    with caplog.at_level(logging.INFO, logger="crevio_catalog.tests"):
        log_with_context(logger, "INFO", "Products listed", product_count=2)

    assert caplog.records[-1].extra_data == {"product_count": 2}


def test_credentials_from_env(monkeypatch):
    """Test reading credentials from the environment."""
    monkeypatch.setenv("CREVIO_ACCOUNT_API_KEY", "sk_env")
    monkeypatch.delenv("CREVIO_PROJECT_URL", raising=False)

    credentials = CrevioCredentials.from_env()

    assert credentials.api_key == "sk_env"
    assert credentials.server_url is None


def test_redact_context_sensitive_keys():
    """Test that credential fields are replaced by a fingerprint."""
    context = {
        "product_id": "prod_1",
        "headers": {"Authorization": "Bearer sk_live_abc", "Accept": "application/json"},
        "api_key": "sk_live_abc",
    }

    redacted = redact_context(context)

    assert redacted["product_id"] == "prod_1"
    assert redacted["headers"]["Accept"] == "application/json"
    assert redacted["api_key"] == f"redacted:{fingerprint('sk_live_abc')}"
    assert "sk_live_abc" not in json.dumps(redacted)
    assert context["api_key"] == "sk_live_abc"


def test_redact_context_bearer_in_text():
    """Test that bearer tokens inside error text are masked."""
    redacted = redact_context({"error": "401 for headers {'Authorization': 'Bearer sk_live_abc'}"})

    assert "sk_live_abc" not in redacted["error"]
    assert "Bearer [redacted]" in redacted["error"]


def test_log_with_context_redacts(caplog):
    """Test that logged context never carries the raw key."""
    logger = logging.getLogger("crevio_catalog.tests")

    with caplog.at_level(logging.INFO, logger="crevio_catalog.tests"):
        log_with_context(logger, "INFO", "Client created", token="sk_live_abc", items=[{"secret": "x"}])

    extra = caplog.records[-1].extra_data
    assert extra["token"].startswith("redacted:")
    assert extra["items"][0]["secret"].startswith("redacted:")
