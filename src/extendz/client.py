"""
Extend API client.

Example usage:
    ```python
    from extendz import ExtendClient

    with ExtendClient(email="me@example.com", password="...") as client:
        cards = client.get_user_virtual_cards()
        txns = client.get_virtual_card_transactions(
            cards.virtual_cards[0].id, count=25, status="CLEARED"
        )
    ```
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Sequence, Union
from urllib.parse import urlencode

import httpx

from .models.requests import (
    CreateVirtualCardRequest,
    ForgotPasswordRequest,
    UpdateVirtualCardRequest,
    VirtualCardPageableRequest,
)
from .models.responses import (
    Response,
    TransactionsResponse,
    VirtualCardResponse,
    VirtualCardsResponse,
)
from .session import DEFAULT_TOKEN_VALIDITY, Session, SessionState
from .transport import DEFAULT_TIMEOUT, Body, execute

if TYPE_CHECKING:
    from .config import ExtendSettings

DEFAULT_BASE_URL = "https://api.paywithextend.com"

# Upper bound the API accepts for the transactions ``count`` parameter.
MAX_TRANSACTIONS_COUNT = 500


def build_transactions_query(
    count: int = 0,
    before: str = "",
    after: str = "",
    status: Union[str, Sequence[str]] = "",
) -> str:
    """Build the query string for listing a virtual card's transactions.

    Parameters that are unset (or, for ``count``, outside 1..500) are left
    out entirely. Returns an empty string when nothing is set.
    """
    if not isinstance(status, str):
        status = ",".join(status)
    params: dict[str, str] = {}
    if 0 < count <= MAX_TRANSACTIONS_COUNT:
        params["count"] = str(count)
    if before:
        params["before"] = before
    if after:
        params["after"] = after
    if status:
        params["status"] = status
    return urlencode(sorted(params.items()))


class ExtendClient:
    """
    Client for https://developer.paywithextend.com/#extend-api endpoints.

    Sign in happens on construction and the session token is renewed in the
    background. Call ``close()`` (or use the client as a context manager)
    when done to sign out and stop renewal.

    Args:
        server: Extend API base URL
        email: Account email address
        password: Account password
        http_client: Optional preconfigured ``httpx.Client``
        timeout: Request timeout in seconds (default: 10)
        token_validity: Seconds between token renewals (default: 600)

    Raises:
        SignInError: Sign in failed
    """

    def __init__(
        self,
        server: str = DEFAULT_BASE_URL,
        email: str = "",
        password: str = "",
        *,
        http_client: Optional[httpx.Client] = None,
        timeout: float = DEFAULT_TIMEOUT,
        token_validity: float = DEFAULT_TOKEN_VALIDITY,
    ):
        self._session = Session(
            server,
            email,
            password,
            http_client=http_client,
            timeout=timeout,
            token_validity=token_validity,
        )

    @classmethod
    def from_settings(
        cls,
        settings: "ExtendSettings",
        http_client: Optional[httpx.Client] = None,
    ) -> "ExtendClient":
        """Create a client from settings; credentials must be present."""
        settings.require_credentials()
        return cls(
            settings.api_base_url,
            settings.email,
            settings.password.get_secret_value(),
            http_client=http_client,
            timeout=settings.request_timeout,
            token_validity=settings.token_validity_seconds,
        )

    @property
    def session(self) -> Session:
        return self._session

    @property
    def state(self) -> SessionState:
        return self._session.state

    def current_token(self) -> str:
        return self._session.current_token()

    def close(self) -> None:
        """Sign out and stop token renewal."""
        self._session.close()

    def __enter__(self) -> "ExtendClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def _request(self, method: str, path: str, response_model, body: Optional[Body] = None):
        return execute(
            self._session.http_client,
            method,
            self._session.url(path),
            self._session.current_token(),
            body,
            response_model,
            self._session.timeout,
        )

    # ==================== Account ====================

    def forgot_password(self, email: str) -> Response:
        """Request a password reset email -> https://developer.paywithextend.com/#forgot-password."""
        return self._request(
            "POST", "/forgot", Response, ForgotPasswordRequest(email=email)
        )

    # ==================== Virtual cards ====================

    def get_user_virtual_cards(
        self, request: Optional[VirtualCardPageableRequest] = None
    ) -> VirtualCardsResponse:
        """List the user's virtual cards -> https://developer.paywithextend.com/#get-user-virtual-cards.

        The filters travel as a JSON body on the GET request.
        """
        return self._request(
            "GET",
            "/virtualcards",
            VirtualCardsResponse,
            request or VirtualCardPageableRequest(),
        )

    def get_virtual_card(self, virtual_card_id: str) -> VirtualCardResponse:
        """Get a virtual card -> https://developer.paywithextend.com/#get-virtual-card."""
        return self._request(
            "GET", f"/virtualcards/{virtual_card_id}", VirtualCardResponse
        )

    def get_virtual_card_transactions(
        self,
        virtual_card_id: str,
        count: int = 0,
        before: str = "",
        after: str = "",
        status: Union[str, Sequence[str]] = "",
    ) -> TransactionsResponse:
        """List a virtual card's transactions -> https://developer.paywithextend.com/#get-virtual-card-transactions.

        Args:
            virtual_card_id: Virtual card ID
            count: Number of transactions (1-500); other values are not sent
            before: Only transactions before this timestamp
            after: Only transactions after this timestamp
            status: Comma-delimited statuses (or a sequence of them)
        """
        path = f"/virtualcards/{virtual_card_id}/transactions"
        query = build_transactions_query(count, before, after, status)
        if query:
            path = f"{path}?{query}"
        return self._request("GET", path, TransactionsResponse)

    def create_virtual_card(
        self, request: CreateVirtualCardRequest
    ) -> VirtualCardResponse:
        """Create a virtual card -> https://developer.paywithextend.com/#create-virtual-card."""
        return self._request("POST", "/virtualcards", VirtualCardResponse, request)

    def update_virtual_card(
        self, virtual_card_id: str, request: UpdateVirtualCardRequest
    ) -> VirtualCardResponse:
        """Update a virtual card -> https://developer.paywithextend.com/#update-virtual-card."""
        return self._request(
            "PUT", f"/virtualcards/{virtual_card_id}", VirtualCardResponse, request
        )

    def cancel_virtual_card(self, virtual_card_id: str) -> VirtualCardResponse:
        """Cancel a virtual card -> https://developer.paywithextend.com/#cancel-virtual-card."""
        return self._request(
            "PUT", f"/virtualcards/{virtual_card_id}/cancel", VirtualCardResponse
        )

    def reject_virtual_card(self, virtual_card_id: str) -> VirtualCardResponse:
        """Reject a virtual card request -> https://developer.paywithextend.com/#reject-virtual-card."""
        return self._request(
            "PUT", f"/virtualcards/{virtual_card_id}/reject", VirtualCardResponse
        )
