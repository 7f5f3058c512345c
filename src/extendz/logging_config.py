"""Logging configuration with sensitive data masking.

This module provides:
- JSON or plain-text formatting for the ``extendz`` loggers
- Masking of bearer tokens, passwords and refresh tokens in log output
- A ``setup_logging`` entry point used by the CLI

Logs are written to stderr so that stdout only carries command output.
"""
from __future__ import annotations

import json
import logging
import re
import sys
from datetime import datetime, timezone
from typing import Any, Optional, Sequence

MASK_PATTERN = "***"
MAX_LOG_MESSAGE_LENGTH = 10_000

SENSITIVE_FIELDS = frozenset(
    {
        "password",
        "token",
        "refresh_token",
        "refreshtoken",
        "authorization",
    }
)

_INLINE_PATTERNS = [
    # Bearer tokens
    (re.compile(r"(Bearer\s+)[a-zA-Z0-9._~+/=-]+", re.IGNORECASE), r"\1***"),
    # JSON-ish key/value pairs
    (
        re.compile(
            r'("?(?:password|token|refreshToken|refresh_token)"?\s*[:=]\s*)"?[^"\s,}]+"?',
            re.IGNORECASE,
        ),
        r'\1"***"',
    ),
    # URLs with credentials
    (re.compile(r"(https?://)[^:/\s]+:[^@/\s]+@"), r"\1***:***@"),
]

# LogRecord attributes that are not user supplied ``extra`` fields.
_RESERVED_ATTRS = frozenset(
    {
        "name",
        "msg",
        "args",
        "created",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "message",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "thread",
        "threadName",
        "exc_info",
        "exc_text",
        "stack_info",
        "taskName",
    }
)


def mask_value(value: str, show_chars: int = 4) -> str:
    """Mask a sensitive value, showing only its first and last characters."""
    if not value or len(value) <= show_chars * 2:
        return MASK_PATTERN
    return f"{value[:show_chars]}...{value[-show_chars:]}"


def is_sensitive_key(key: str) -> bool:
    key_lower = key.lower().replace("-", "_")
    return key_lower in SENSITIVE_FIELDS or any(
        sensitive in key_lower for sensitive in ("secret", "password", "token", "auth")
    )


def mask_sensitive_data(
    data: Any,
    additional_fields: Optional[Sequence[str]] = None,
    _depth: int = 0,
    _max_depth: int = 10,
) -> Any:
    """Recursively mask sensitive data in a data structure.

    Args:
        data: The data structure to mask (dict, list, or scalar)
        additional_fields: Additional field names to mask
        _depth: Current recursion depth (internal)
        _max_depth: Maximum recursion depth

    Returns:
        Copy of data with sensitive values masked
    """
    if _depth > _max_depth:
        return data

    if isinstance(data, dict):
        result = {}
        for key, value in data.items():
            if is_sensitive_key(str(key)) or (additional_fields and key in additional_fields):
                result[key] = MASK_PATTERN
            else:
                result[key] = mask_sensitive_data(
                    value, additional_fields, _depth + 1, _max_depth
                )
        return result

    if isinstance(data, (list, tuple)):
        return type(data)(
            mask_sensitive_data(item, additional_fields, _depth + 1, _max_depth)
            for item in data
        )

    if isinstance(data, str):
        return mask_text(data)

    return data


def mask_text(text: str) -> str:
    """Mask bearer tokens, credentials and secrets embedded in text."""
    if len(text) > MAX_LOG_MESSAGE_LENGTH:
        text = text[:MAX_LOG_MESSAGE_LENGTH] + "...[truncated]"
    for pattern, replacement in _INLINE_PATTERNS:
        text = pattern.sub(replacement, text)
    return text


class SensitiveDataFilter(logging.Filter):
    """Logging filter that masks secrets in the rendered message."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.msg = mask_text(record.getMessage())
        record.args = None
        return True


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
            "thread": record.threadName,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS:
                log_data[key] = mask_sensitive_data({key: value})[key]

        return json.dumps(log_data, default=str)


def setup_logging(
    level: str = "WARNING",
    json_format: bool = False,
    stream: Any = None,
) -> logging.Handler:
    """
    Configure logging for the ``extendz`` package.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_format: Use JSON structured logging (True) or simple format (False)
        stream: Output stream (default: stderr)

    Returns:
        The installed handler
    """
    package_logger = logging.getLogger("extendz")
    package_logger.setLevel(getattr(logging, level.upper()))

    # Replace handlers from a previous call
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)

    if json_format:
        formatter: logging.Formatter = StructuredFormatter()
    else:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(formatter)
    handler.addFilter(SensitiveDataFilter())
    package_logger.addHandler(handler)
    package_logger.propagate = False
    return handler
