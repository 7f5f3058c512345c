"""
Authenticated session management for the Extend API.

A ``Session`` signs in once on construction and then keeps its access token
fresh from a background thread:

- The access token lives in a ``TokenCell`` so request-issuing threads always
  read a complete value, either the previous token or the renewed one.
- The refresh token never leaves the renewal thread.
- Renewal failures are logged and retried on the next interval; the current
  token is kept (it may already be expired server-side by then).
- ``close()`` signs out (best effort) and signals the renewal thread to stop.
  A session-created HTTP client is closed once that thread exits; a
  caller-supplied one is left open.
"""
from __future__ import annotations

import logging
import threading
from enum import Enum
from typing import Optional

import httpx

from .models.errors import ExtendError, SignInError
from .models.requests import LoginRequest, LogoutRequest, RefreshTokenLoginRequest
from .models.responses import LoginSignUpResponse
from .transport import DEFAULT_TIMEOUT, UNAUTHENTICATED, execute

logger = logging.getLogger(__name__)

# Renew proactively every 10 minutes, regardless of the server's expiry.
DEFAULT_TOKEN_VALIDITY = 600.0


class SessionState(str, Enum):
    """Lifecycle of a session."""

    INITIALIZING = "initializing"
    ACTIVE = "active"
    CLOSING = "closing"
    CLOSED = "closed"


class TokenCell:
    """Lock-guarded single slot holding the current access token."""

    def __init__(self, token: str = UNAUTHENTICATED) -> None:
        self._lock = threading.Lock()
        self._token = token

    def get(self) -> str:
        with self._lock:
            return self._token

    def swap(self, token: str) -> str:
        """Store ``token`` and return the previous value."""
        with self._lock:
            previous, self._token = self._token, token
        return previous


class Session:
    """
    Signed in Extend API session with automatic token renewal.

    Args:
        server: Extend API base URL
        email: Account email address
        password: Account password
        http_client: HTTP client to send requests with (default: a new
            ``httpx.Client``)
        timeout: Per-request timeout in seconds
        token_validity: Seconds between token renewals

    Raises:
        SignInError: The initial sign in failed; no session is created
    """

    def __init__(
        self,
        server: str,
        email: str,
        password: str,
        *,
        http_client: Optional[httpx.Client] = None,
        timeout: float = DEFAULT_TIMEOUT,
        token_validity: float = DEFAULT_TOKEN_VALIDITY,
    ) -> None:
        self._server = server.rstrip("/")
        self._email = email
        self._password = password
        self._timeout = timeout
        self._validity = token_validity
        self._owns_http = http_client is None
        self._http = http_client if http_client is not None else httpx.Client(timeout=timeout)

        self._token = TokenCell()
        self._closed = threading.Event()
        self._state_lock = threading.Lock()
        self._state = SessionState.INITIALIZING
        self._renewal_failures = 0

        try:
            response = self._sign_in()
        except ExtendError as e:
            self._abandon()
            raise SignInError(f"Sign in failed for {email}: {e.message}", email) from e
        if not response.token:
            self._abandon()
            raise SignInError(f"Sign in response for {email} carried no token", email)

        self._token.swap(response.token)
        self._renewer = threading.Thread(
            target=self._renew_loop,
            args=(response.refresh_token or "",),
            name="extendz-token-renewal",
            daemon=True,
        )
        self._renewer.start()
        self._state = SessionState.ACTIVE
        logger.info(f"Signed in to {self._server} as {email}")

    @property
    def server(self) -> str:
        return self._server

    @property
    def http_client(self) -> httpx.Client:
        return self._http

    @property
    def timeout(self) -> float:
        return self._timeout

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def renewal_failures(self) -> int:
        """Consecutive failed renewals since the last successful one."""
        return self._renewal_failures

    @property
    def is_renewing(self) -> bool:
        """Whether the renewal thread is still running."""
        return self._renewer.is_alive()

    def current_token(self) -> str:
        """Return the current access token, or ``UNAUTHENTICATED``."""
        return self._token.get()

    def url(self, path: str) -> str:
        """Build the absolute URL for an API path."""
        return f"{self._server}{path}"

    def close(self) -> None:
        """Sign out and stop token renewal.

        Sign out failures of any kind are logged and ignored. Returns
        without waiting for the renewal thread, which exits as soon as it
        observes the signal and then closes the HTTP client if the session
        created it. Calling ``close()`` again is a no-op.
        """
        with self._state_lock:
            if self._state in (SessionState.CLOSING, SessionState.CLOSED):
                return
            self._state = SessionState.CLOSING
        try:
            self._sign_out()
        except Exception as e:
            logger.warning(f"Sign out failed, closing anyway: {e}")
        finally:
            self._closed.set()
            self._state = SessionState.CLOSED
        logger.info(f"Closed session for {self._email}")

    def __enter__(self) -> "Session":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def _sign_in(self) -> LoginSignUpResponse:
        return execute(
            self._http,
            "POST",
            self.url("/signin"),
            UNAUTHENTICATED,
            LoginRequest(email=self._email, password=self._password),
            LoginSignUpResponse,
            self._timeout,
        )

    def _renew_auth(self, refresh_token: str) -> LoginSignUpResponse:
        return execute(
            self._http,
            "POST",
            self.url("/renewauth"),
            UNAUTHENTICATED,
            RefreshTokenLoginRequest(refresh_token=refresh_token),
            LoginSignUpResponse,
            self._timeout,
        )

    def _sign_out(self) -> None:
        execute(
            self._http,
            "DELETE",
            self.url("/signout"),
            self.current_token(),
            LogoutRequest(),
            None,
            self._timeout,
        )

    def _renew_loop(self, refresh_token: str) -> None:
        # wait() returns True once close() has set the event
        while not self._closed.wait(self._validity):
            try:
                response = self._renew_auth(refresh_token)
            except Exception as e:
                self._record_renewal_failure(str(e) or type(e).__name__)
                continue
            if self._closed.is_set():
                break
            if not response.token:
                self._record_renewal_failure("response carried no token")
                continue
            self._token.swap(response.token)
            if response.refresh_token:
                refresh_token = response.refresh_token
            self._renewal_failures = 0
            logger.debug(f"Renewed access token for {self._email}")
        if self._owns_http:
            self._http.close()
        logger.debug("Token renewal stopped")

    def _record_renewal_failure(self, reason: str) -> None:
        self._renewal_failures += 1
        logger.warning(
            f"Token renewal failed ({self._renewal_failures} in a row), "
            f"keeping current token: {reason}"
        )

    def _abandon(self) -> None:
        self._state = SessionState.CLOSED
        if self._owns_http:
            self._http.close()
