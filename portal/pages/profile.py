"""
Profile view

Landing page after sign-in / sign-up with a session.
"""

import asyncio

import streamlit as st

from portal import router
from portal.auth import display_name, get_user, sign_out
from portal.supabase_client import get_identity_client


def render():
    user = get_user()

    st.title("Profile")
    st.write(f"Welcome, **{display_name(user)}**")
    st.write(f"Email: `{getattr(user, 'email', '')}`")

    if st.button("Sign out"):
        asyncio.run(sign_out(get_identity_client()))
        router.navigate_to(router.SIGN_IN_PATH)
        router.follow_pending()
