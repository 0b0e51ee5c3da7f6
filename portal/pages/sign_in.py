"""
Sign-in view

Email + password. On success the auth context is populated and the
visitor lands on the profile page.
"""

import asyncio

import streamlit as st

from portal import router
from portal.auth import SessionStateAuthStore
from portal.components.banners import render_banners
from portal.controller import SignInController
from portal.forms import get_form
from portal.supabase_client import get_identity_client

VIEW = "sign_in"


def render():
    form = get_form(VIEW)

    st.title("Login to your account")
    render_banners(form)

    form.email = st.text_input("Email", placeholder="Type your email", key=f"{VIEW}:email")
    form.password = st.text_input(
        "Password",
        type="password",
        placeholder="Type your password",
        autocomplete="new-password",
        key=f"{VIEW}:password",
    )

    col_link, col_submit = st.columns([3, 1])
    with col_link:
        router.link("Don't have an account? Register now", router.SIGN_UP_PATH)
    with col_submit:
        submitted = st.button("Login", disabled=form.loading, key=f"{VIEW}:submit")

    if submitted:
        controller = SignInController(
            get_identity_client(),
            SessionStateAuthStore(),
            router.navigate_to,
            form,
        )
        with st.spinner("Signing in..."):
            asyncio.run(controller.submit(form.email, form.password))
        router.follow_pending()
        st.rerun()
