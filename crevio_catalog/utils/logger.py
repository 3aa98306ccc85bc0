"""
Structured logging utilities.
"""

import logging
import hashlib
import json
import re
from datetime import datetime, timezone
from typing import Any, Optional


def fingerprint(secret: Optional[str]) -> str:
    """
    Hash a secret for safe logging.

    Args:
        secret: API key or other credential (may be None)

    Returns:
        First 12 characters of SHA256 hash, or "unset" if no value
    """
    if not secret:
        return "unset"
    return hashlib.sha256(secret.encode()).hexdigest()[:12]


SENSITIVE_KEYS = {'authorization', 'api_key', 'apikey', 'token', 'password', 'secret'}

BEARER_PATTERN = re.compile(r'(Bearer\s+)[^\s"\',]+', re.IGNORECASE)


def redact_context(value: Any) -> Any:
    """
    Strip credentials from structured log context.

    Values under sensitive keys (Authorization, api_key, ...) are replaced
    by their fingerprint and bearer tokens inside strings are masked.
    Nested dicts and lists are walked.

    Args:
        value: Context value (dict, list or scalar)

    Returns:
        Copy of value safe to log
    """
    if isinstance(value, dict):
        return {
            key: (
                f"redacted:{fingerprint(str(item))}"
                if str(key).lower() in SENSITIVE_KEYS and item
                else redact_context(item)
            )
            for key, item in value.items()
        }
    if isinstance(value, (list, tuple)):
        return [redact_context(item) for item in value]
    if isinstance(value, str):
        return BEARER_PATTERN.sub(r'\1[redacted]', value)
    return value


class JSONFormatter(logging.Formatter):
    """JSON log formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """
        Format log record as JSON.

        Args:
            record: Log record to format

        Returns:
            JSON-formatted log string
        """
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage()
        }

        # Add extra fields if provided
        if hasattr(record, 'extra_data'):
            log_data.update(redact_context(record.extra_data))

        return json.dumps(log_data, default=str)


def get_logger(name: str) -> logging.Logger:
    """
    Get configured logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger with JSON formatting
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        from crevio_catalog.config import Config

        logger.setLevel(getattr(logging, Config.LOG_LEVEL.upper(), logging.INFO))

        # Console handler
        console = logging.StreamHandler()
        console.setFormatter(JSONFormatter())
        logger.addHandler(console)

        # File handler
        if Config.LOG_FILE:
            file_handler = logging.FileHandler(Config.LOG_FILE)
            file_handler.setFormatter(JSONFormatter())
            logger.addHandler(file_handler)

    return logger


def log_with_context(
    logger: logging.Logger,
    level: str,
    message: str,
    **context
) -> None:
    """
    Log message with structured context.

    Args:
        logger: Logger instance
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        message: Log message
        **context: Additional context fields
    """
    log_method = getattr(logger, level.lower())
    extra = {"extra_data": redact_context(context)}
    log_method(message, extra=extra)
