"""Extend API models."""
from .base import ExtendModel
from .data import (
    Address,
    CardImage,
    DeclineReason,
    IssuerSanctions,
    MccRange,
    Pagination,
    Recurrence,
    ReferenceField,
    Transaction,
    User,
    VirtualCard,
    VirtualCardFeature,
    VirtualCardRevision,
)
from .errors import (
    ConfigurationError,
    DecodeError,
    ExtendError,
    SignInError,
    TransportError,
)
from .requests import (
    CreateVirtualCardRequest,
    ForgotPasswordRequest,
    LoginRequest,
    LogoutRequest,
    RefreshTokenLoginRequest,
    UpdateVirtualCardRequest,
    VirtualCardPageableRequest,
)
from .responses import (
    LoginSignUpResponse,
    Response,
    TransactionsResponse,
    VirtualCardResponse,
    VirtualCardsResponse,
)

__all__ = [
    "ExtendModel",
    # Records
    "Address",
    "CardImage",
    "DeclineReason",
    "IssuerSanctions",
    "MccRange",
    "Pagination",
    "Recurrence",
    "ReferenceField",
    "Transaction",
    "User",
    "VirtualCard",
    "VirtualCardFeature",
    "VirtualCardRevision",
    # Requests
    "CreateVirtualCardRequest",
    "ForgotPasswordRequest",
    "LoginRequest",
    "LogoutRequest",
    "RefreshTokenLoginRequest",
    "UpdateVirtualCardRequest",
    "VirtualCardPageableRequest",
    # Responses
    "LoginSignUpResponse",
    "Response",
    "TransactionsResponse",
    "VirtualCardResponse",
    "VirtualCardsResponse",
    # Errors
    "ExtendError",
    "ConfigurationError",
    "DecodeError",
    "SignInError",
    "TransportError",
]
