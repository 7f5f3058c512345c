"""Shared helpers for CLI commands: client lifecycle, input parsing, errors."""
from __future__ import annotations

import functools
import logging
from typing import Callable, Type, TypeVar

import click
from pydantic import ValidationError

from ..client import ExtendClient
from ..config import ExtendSettings
from ..models.base import ExtendModel
from ..models.errors import ConfigurationError, ExtendError

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=ExtendModel)
F = TypeVar("F", bound=Callable)


def fail(ctx: click.Context, message: str) -> None:
    """Log ``message`` and exit with status 1."""
    logger.error(message)
    ctx.exit(1)


def create_client(settings: ExtendSettings) -> ExtendClient:
    return ExtendClient.from_settings(settings)


def get_client(ctx: click.Context) -> ExtendClient:
    """Get the API client for this invocation, signing in on first use.

    The client is closed (signed out) when the command finishes.
    """
    root = ctx.find_root()
    client = root.obj.get("client")
    if client is not None:
        return client

    settings: ExtendSettings = root.obj["settings"]
    try:
        client = create_client(settings)
    except ConfigurationError as e:
        fail(ctx, e.message)
    except ExtendError as e:
        fail(ctx, f"Failed to initialize Extend API client: {e}")

    root.obj["client"] = client
    root.call_on_close(client.close)
    return client


def parse_request(ctx: click.Context, model: Type[M], raw: str, option: str = "--request") -> M:
    """Parse a raw JSON request option into ``model``."""
    try:
        return model.model_validate_json(raw)
    except ValidationError as e:
        fail(ctx, f"Invalid {option} JSON for {model.__name__}: {e}")


def api_errors(f: F) -> F:
    """Turn client errors raised by a command into a logged exit status 1."""

    @functools.wraps(f)
    def wrapper(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except ExtendError as e:
            fail(click.get_current_context(), str(e))

    return wrapper  # type: ignore[return-value]
