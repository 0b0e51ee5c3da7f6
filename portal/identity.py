"""
Identity client: async email sign-in / sign-up against Supabase Auth.

The Supabase SDK is synchronous, so every call runs in a worker thread.
Requests the provider rejects (bad credentials, weak password, duplicate
account) come back as a structured `errors` list on AuthResult. Other SDK
failures are raised as IdentityFault carrying the same list in `items`.
Transport errors from httpx propagate as-is.
"""

import asyncio
import logging
from typing import Any, Optional

from httpx import RemoteProtocolError
from pydantic import BaseModel, ConfigDict
from supabase import AuthApiError, AuthError, Client

logger = logging.getLogger(__name__)


class ErrorItem(BaseModel):
    """One user-facing error entry; rendered as a single banner."""

    model_config = ConfigDict(extra="allow")

    message: str
    code: Any = None


class AuthResult(BaseModel):
    """Response shape shared by sign-in and sign-up."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    user: Any = None
    session: Any = None
    errors: Optional[list[ErrorItem]] = None


class IdentityFault(Exception):
    """Raised when the identity provider fails outside a structured response."""

    def __init__(self, items: list[ErrorItem]):
        super().__init__("; ".join(item.message for item in items))
        self.items = items


def _error_item(exc: AuthError) -> ErrorItem:
    return ErrorItem(message=exc.message, code=getattr(exc, "code", None))


def _retry(fn, retries=2):
    """Retry a Supabase call on stale connection errors."""
    for attempt in range(retries):
        try:
            return fn()
        except RemoteProtocolError:
            if attempt == retries - 1:
                raise
            logger.info("Stale connection to identity provider, retrying")


class IdentityClient:
    """Async facade over `client.auth` returning AuthResult values."""

    def __init__(self, client: Client):
        self._client = client

    async def sign_in_with_email(self, email: str, password: str) -> AuthResult:
        return await asyncio.to_thread(self._sign_in, email, password)

    async def sign_up_with_email(self, email: str, password: str, name: str) -> AuthResult:
        return await asyncio.to_thread(self._sign_up, email, password, name)

    async def sign_out(self) -> None:
        await asyncio.to_thread(self._client.auth.sign_out)

    def _sign_in(self, email: str, password: str) -> AuthResult:
        credentials = {"email": email, "password": password}
        return self._call(
            lambda: _retry(lambda: self._client.auth.sign_in_with_password(credentials))
        )

    def _sign_up(self, email: str, password: str, name: str) -> AuthResult:
        # sign-up is not idempotent; never retried
        credentials = {
            "email": email,
            "password": password,
            "options": {"data": {"name": name}},
        }
        return self._call(lambda: self._client.auth.sign_up(credentials))

    @staticmethod
    def _call(fn) -> AuthResult:
        try:
            response = fn()
        except AuthApiError as exc:
            logger.info("Identity provider rejected request: %s", exc.message)
            return AuthResult(errors=[_error_item(exc)])
        except AuthError as exc:
            raise IdentityFault([_error_item(exc)]) from exc
        return AuthResult(user=response.user, session=response.session)
