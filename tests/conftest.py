"""
Shared pytest fixtures for the portal test suite.

Streamlit session state is replaced by plain dicts and the identity
client by an AsyncMock, so nothing here needs a running Streamlit server
or a Supabase project.
"""

from unittest.mock import AsyncMock, Mock

import pytest

from portal.forms import FormState
from portal.identity import IdentityClient


@pytest.fixture()
def form():
    return FormState()


@pytest.fixture()
def identity():
    return AsyncMock(spec=IdentityClient)


@pytest.fixture()
def effects():
    """Parent mock for the store and navigation so call order is recorded."""
    parent = Mock()
    parent.store = Mock(spec=["set_user", "set_session"])
    parent.navigate = Mock()
    return parent
