"""
Auth context: who is signed in, backed by st.session_state.

Controllers receive an AuthStore instead of touching session state
directly; SessionStateAuthStore is the implementation the pages use.
"""

import logging
from typing import Any, MutableMapping, Optional, Protocol

import streamlit as st

from portal.identity import IdentityClient

logger = logging.getLogger(__name__)

AUTH_KEYS = [
    "user", "user_id", "session", "access_token", "refresh_token", "authenticated",
]


class AuthStore(Protocol):
    def set_user(self, user: Any) -> None: ...

    def set_session(self, session: Any) -> None: ...


class SessionStateAuthStore:
    """AuthStore writing into st.session_state (or any mapping, for tests)."""

    def __init__(self, state: Optional[MutableMapping] = None):
        self._state = st.session_state if state is None else state

    def set_user(self, user: Any) -> None:
        self._state["user"] = user
        self._state["user_id"] = str(user.id) if getattr(user, "id", None) is not None else ""

    def set_session(self, session: Any) -> None:
        self._state["session"] = session
        if session is None:
            return
        self._state["access_token"] = getattr(session, "access_token", None)
        self._state["refresh_token"] = getattr(session, "refresh_token", None)
        self._state["authenticated"] = True


def clear_auth(state: Optional[MutableMapping] = None) -> None:
    state = st.session_state if state is None else state
    for key in AUTH_KEYS:
        state.pop(key, None)


async def sign_out(client: IdentityClient, state: Optional[MutableMapping] = None) -> None:
    """Sign out from Supabase and clear the auth context."""
    try:
        await client.sign_out()
    except Exception:
        # local state is cleared regardless
        logger.warning("Provider sign-out failed", exc_info=True)
    clear_auth(state)


def is_authenticated() -> bool:
    return st.session_state.get("authenticated", False)


def get_user() -> Any:
    return st.session_state.get("user")


def display_name(user: Any) -> str:
    metadata = getattr(user, "user_metadata", None) or {}
    return metadata.get("name") or getattr(user, "email", "") or ""
