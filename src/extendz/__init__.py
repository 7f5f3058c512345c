"""
extendz

A client library and CLI for the Extend virtual card API.
"""

__version__ = "0.1.0"

from .client import DEFAULT_BASE_URL, ExtendClient, build_transactions_query
from .config import ExtendSettings, load_settings
from .models.errors import (
    ConfigurationError,
    DecodeError,
    ExtendError,
    SignInError,
    TransportError,
)
from .models.requests import (
    CreateVirtualCardRequest,
    UpdateVirtualCardRequest,
    VirtualCardPageableRequest,
)
from .models.responses import (
    Response,
    TransactionsResponse,
    VirtualCardResponse,
    VirtualCardsResponse,
)
from .session import Session, SessionState, TokenCell
from .transport import UNAUTHENTICATED

__all__ = [
    "__version__",
    # Client
    "ExtendClient",
    "DEFAULT_BASE_URL",
    "build_transactions_query",
    "Session",
    "SessionState",
    "TokenCell",
    "UNAUTHENTICATED",
    # Config
    "ExtendSettings",
    "load_settings",
    # Errors
    "ExtendError",
    "ConfigurationError",
    "DecodeError",
    "SignInError",
    "TransportError",
    # Requests
    "CreateVirtualCardRequest",
    "UpdateVirtualCardRequest",
    "VirtualCardPageableRequest",
    # Responses
    "Response",
    "TransactionsResponse",
    "VirtualCardResponse",
    "VirtualCardsResponse",
]
