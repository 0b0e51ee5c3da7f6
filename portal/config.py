"""
Configuration: secrets lookup and logging setup.

Values come from the process environment (a local .env is loaded on import)
and fall back to st.secrets when deployed on Streamlit Cloud.
"""

import logging
import os

import streamlit as st
from dotenv import load_dotenv

load_dotenv()

APP_TITLE = "Account Portal"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_secret(name: str) -> str:
    """Read from os.environ first, then fall back to st.secrets (Streamlit Cloud)."""
    val = os.environ.get(name)
    if val:
        return val
    try:
        return st.secrets[name]
    except (KeyError, FileNotFoundError):
        raise KeyError(f"Missing secret: {name}. Set it in .env or Streamlit Cloud Secrets.")


def configure_logging(level: str | None = None) -> None:
    """Configure the root logger once, honouring LOG_LEVEL."""
    level = (level or os.environ.get("LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
