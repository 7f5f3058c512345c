"""Single request/response round trips against the Extend API.

``execute`` is stateless: the caller supplies the HTTP client, the bearer
token (or ``UNAUTHENTICATED``) and the payload, and gets back the decoded
response. HTTP status codes are deliberately not interpreted; an error
payload returned with a 4xx/5xx status is decoded like any other body.
"""
from __future__ import annotations

import json
import logging
from typing import Any, Mapping, Optional, Type, Union

import httpx
from pydantic import ValidationError

from .models.base import ExtendModel
from .models.errors import DecodeError, TransportError

logger = logging.getLogger(__name__)

# Token value meaning "send no Authorization header".
UNAUTHENTICATED = ""

API_MEDIA_TYPE = "application/vnd.paywithextend.v2021-03-12+json"
DEFAULT_TIMEOUT = 10.0

Body = Union[ExtendModel, Mapping[str, Any]]


def build_headers(token: str = UNAUTHENTICATED) -> dict[str, str]:
    """Headers sent with every Extend API request."""
    headers = {
        "Content-Type": "application/json",
        "Accept": API_MEDIA_TYPE,
    }
    if token != UNAUTHENTICATED:
        headers["Authorization"] = f"Bearer {token}"
    return headers


def encode_body(body: Optional[Body]) -> Optional[bytes]:
    """Serialize a request payload to JSON bytes, or None for no body."""
    if body is None:
        return None
    if isinstance(body, ExtendModel):
        payload = body.to_dict()
    else:
        payload = dict(body)
    return json.dumps(payload).encode("utf-8")


def execute(
    http_client: httpx.Client,
    method: str,
    url: str,
    token: str = UNAUTHENTICATED,
    body: Optional[Body] = None,
    response_model: Optional[Type[ExtendModel]] = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> Any:
    """Perform one HTTP round trip and decode the JSON response.

    Args:
        http_client: Client used to send the request
        method: HTTP method
        url: Absolute request URL, including any query string
        token: Bearer token, or ``UNAUTHENTICATED``
        body: Request payload; omitted from the request when None
        response_model: Model to validate the response into. When None the
            raw decoded JSON is returned.
        timeout: Request timeout in seconds

    Returns:
        The decoded response. An empty body yields None without a
        ``response_model``, or an empty instance of it.

    Raises:
        TransportError: The request could not be sent or timed out
        DecodeError: The body is not JSON or does not fit ``response_model``
    """
    content = encode_body(body)
    try:
        response = http_client.request(
            method,
            url,
            content=content,
            headers=build_headers(token),
            timeout=timeout,
        )
    except httpx.TimeoutException as e:
        raise TransportError(
            f"{method} {url} timed out after {timeout}s", method, url
        ) from e
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        raise TransportError(f"{method} {url} failed: {e}", method, url) from e

    logger.debug(f"{method} {url} -> {response.status_code}")

    data = response.content
    if not data:
        if response_model is None:
            return None
        return response_model.model_validate({})

    try:
        payload = json.loads(data)
    except ValueError as e:
        raise DecodeError(
            f"Malformed JSON in response to {method} {url}",
            url,
            data.decode("utf-8", errors="replace"),
        ) from e

    if response_model is None:
        return payload
    try:
        return response_model.model_validate(payload)
    except ValidationError as e:
        raise DecodeError(
            f"Unexpected {response_model.__name__} shape from {method} {url}: "
            f"{e.error_count()} validation error(s)",
            url,
            data.decode("utf-8", errors="replace"),
        ) from e
