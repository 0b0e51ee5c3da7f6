"""
Account Portal — Main Entrypoint

Path-based routing between the sign-in, sign-up and profile views.

Usage:
    streamlit run streamlit_app.py
"""

import asyncio

import streamlit as st

from portal.config import APP_TITLE, configure_logging

st.set_page_config(page_title=APP_TITLE)
configure_logging()

from portal import router
from portal.auth import display_name, get_user, is_authenticated, sign_out
from portal.pages import profile, sign_in, sign_up
from portal.supabase_client import get_identity_client

PAGES = {
    router.SIGN_IN_PATH: sign_in.render,
    router.SIGN_UP_PATH: sign_up.render,
    router.PROFILE_PATH: profile.render,
}


def render_sidebar():
    with st.sidebar:
        st.title(APP_TITLE)

        if is_authenticated():
            st.write(f"Signed in as **{display_name(get_user())}**")
            st.divider()
            if st.button("Logout", use_container_width=True):
                asyncio.run(sign_out(get_identity_client()))
                router.navigate_to(router.SIGN_IN_PATH)
                router.follow_pending()


def main():
    render_sidebar()

    path = router.current_path()
    target = router.resolve_path(path, is_authenticated())
    if target != path:
        router.navigate_to(target)
        router.follow_pending()

    PAGES[target]()


if __name__ == "__main__":
    main()
