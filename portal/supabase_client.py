"""
Supabase client per browser session.

A Supabase client keeps the signed-in session in memory, so each
Streamlit session gets its own client, stored in st.session_state.
"""

import logging
from typing import MutableMapping, Optional

import streamlit as st
from supabase import create_client, Client

from portal.config import get_secret
from portal.identity import IdentityClient

logger = logging.getLogger(__name__)

_CLIENT_KEY = "supabase_client"


def _init_client() -> Client:
    url = get_secret("SUPABASE_URL")
    key = get_secret("SUPABASE_KEY")
    logger.info("Creating Supabase client for %s", url)
    return create_client(url, key)


def get_supabase_client(state: Optional[MutableMapping] = None) -> Client:
    """Return this session's Supabase client, creating it on first use."""
    state = st.session_state if state is None else state
    if _CLIENT_KEY not in state:
        state[_CLIENT_KEY] = _init_client()
    return state[_CLIENT_KEY]


def get_identity_client(state: Optional[MutableMapping] = None) -> IdentityClient:
    return IdentityClient(get_supabase_client(state))
