"""
Tests for logging configuration and masking
"""
import io
import json
import logging

from extendz.logging_config import (
    MASK_PATTERN,
    is_sensitive_key,
    mask_sensitive_data,
    mask_text,
    mask_value,
    setup_logging,
)


class TestMasking:
    """Tests for secret masking helpers."""

    def test_mask_value(self):
        """Should keep only the ends of long values."""
        assert mask_value("abcdefghijklmnop") == "abcd...mnop"
        assert mask_value("short") == MASK_PATTERN

    def test_sensitive_keys(self):
        """Should treat credential-like keys as sensitive."""
        assert is_sensitive_key("password")
        assert is_sensitive_key("refreshToken")
        assert is_sensitive_key("Authorization")
        assert not is_sensitive_key("displayName")

    def test_mask_sensitive_data(self):
        """Should mask sensitive values in nested structures."""
        data = {
            "email": "me@example.com",
            "password": "hunter2",
            "user": {"token": "abc", "firstName": "Ada"},
            "items": [{"refreshToken": "r1"}],
        }

        masked = mask_sensitive_data(data)

        assert masked["email"] == "me@example.com"
        assert masked["password"] == MASK_PATTERN
        assert masked["user"] == {"token": MASK_PATTERN, "firstName": "Ada"}
        assert masked["items"] == [{"refreshToken": MASK_PATTERN}]

    def test_mask_bearer_token(self):
        """Should mask bearer tokens in text."""
        assert mask_text("Authorization: Bearer abc.def-123") == "Authorization: Bearer ***"

    def test_mask_json_credentials(self):
        """Should mask credentials embedded in JSON text."""
        text = mask_text('{"email": "me@example.com", "password": "hunter2", "refreshToken": "r1"}')

        assert "hunter2" not in text
        assert "r1" not in text
        assert "me@example.com" in text


class TestSetupLogging:
    """Tests for handler setup."""

    def test_plain_format_masks_secrets(self):
        """Should write masked plain-text records to the stream."""
        stream = io.StringIO()
        setup_logging("INFO", stream=stream)

        logging.getLogger("extendz.session").info("sent Bearer abc123 to server")

        output = stream.getvalue()
        assert "INFO" in output
        assert "Bearer ***" in output
        assert "abc123" not in output

    def test_json_format(self):
        """Should write one JSON object per record."""
        stream = io.StringIO()
        setup_logging("DEBUG", json_format=True, stream=stream)

        logging.getLogger("extendz.client").warning("renewal failed")

        record = json.loads(stream.getvalue().splitlines()[-1])
        assert record["level"] == "WARNING"
        assert record["logger"] == "extendz.client"
        assert record["message"] == "renewal failed"

    def test_respects_level(self):
        """Should drop records below the configured level."""
        stream = io.StringIO()
        setup_logging("ERROR", stream=stream)

        logging.getLogger("extendz").warning("quiet")

        assert stream.getvalue() == ""

    def test_replaces_previous_handler(self):
        """Should install a single handler across repeated calls."""
        setup_logging(stream=io.StringIO())
        setup_logging(stream=io.StringIO())

        assert len(logging.getLogger("extendz").handlers) == 1
