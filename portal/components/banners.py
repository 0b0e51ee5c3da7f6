"""Error and success banners shared by the auth views."""

import streamlit as st

from portal.forms import FormState


def render_banners(form: FormState) -> None:
    if form.success:
        st.success(form.success)
    for error in form.errors:
        st.error(error.message)
