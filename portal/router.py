"""
Path-based navigation on top of st.session_state.

navigate_to() only records the move; the page calls follow_pending()
once its handler has returned, which triggers the rerun. st.rerun()
stops the script immediately, so it must not fire mid-handler.
"""

from typing import MutableMapping, Optional

import streamlit as st

from portal.forms import discard_forms

SIGN_IN_PATH = "/sign-in"
SIGN_UP_PATH = "/sign-up"
PROFILE_PATH = "/profile"
DEFAULT_PATH = SIGN_IN_PATH
KNOWN_PATHS = {SIGN_IN_PATH, SIGN_UP_PATH, PROFILE_PATH}
GUEST_ONLY_PATHS = {SIGN_IN_PATH, SIGN_UP_PATH}

_PATH_KEY = "current_path"
_PENDING_KEY = "navigation_pending"


def _state(state: Optional[MutableMapping]) -> MutableMapping:
    return st.session_state if state is None else state


def current_path(state: Optional[MutableMapping] = None) -> str:
    return _state(state).get(_PATH_KEY, DEFAULT_PATH)


def navigate_to(path: str, state: Optional[MutableMapping] = None) -> None:
    state = _state(state)
    state[_PATH_KEY] = path
    state[_PENDING_KEY] = True
    discard_forms(state)


def follow_pending() -> None:
    """Rerun the script if a navigation was recorded during this run."""
    if st.session_state.pop(_PENDING_KEY, False):
        st.rerun()


def link(label: str, path: str, key: Optional[str] = None) -> None:
    """Render a link-styled button that navigates to `path`."""
    if st.button(label, type="tertiary", key=key or f"link:{path}"):
        navigate_to(path)
        follow_pending()


def resolve_path(path: str, authenticated: bool) -> str:
    """Apply the auth guards: guests cannot see the profile, members skip the forms."""
    if path not in KNOWN_PATHS:
        return DEFAULT_PATH
    if authenticated and path in GUEST_ONLY_PATHS:
        return PROFILE_PATH
    if not authenticated and path == PROFILE_PATH:
        return SIGN_IN_PATH
    return path
