"""
Sign-up view

Name + email + password. Accounts that need email confirmation get a
verification notice instead of a session.
"""

import asyncio

import streamlit as st

from portal import router
from portal.auth import SessionStateAuthStore
from portal.components.banners import render_banners
from portal.controller import SignUpController
from portal.forms import get_form
from portal.supabase_client import get_identity_client

VIEW = "sign_up"


def render():
    form = get_form(VIEW)

    st.title("Create an account")
    render_banners(form)

    form.name = st.text_input("Name", placeholder="Type your name", key=f"{VIEW}:name")
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
        router.link("Already have an account?", router.SIGN_IN_PATH)
    with col_submit:
        submitted = st.button("Register", disabled=form.loading, key=f"{VIEW}:submit")

    if submitted:
        controller = SignUpController(
            get_identity_client(),
            SessionStateAuthStore(),
            router.navigate_to,
            form,
        )
        with st.spinner("Creating your account..."):
            asyncio.run(controller.submit(form.email, form.password, form.name))
        router.follow_pending()
        st.rerun()
