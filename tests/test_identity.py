"""Tests for the Supabase-backed identity client."""

from unittest.mock import Mock

import httpx
import pytest
from supabase import AuthApiError, AuthRetryableError

from portal.identity import AuthResult, ErrorItem, IdentityClient, IdentityFault


@pytest.fixture()
def supabase():
    return Mock()


@pytest.fixture()
def client(supabase):
    return IdentityClient(supabase)


class TestSignIn:
    @pytest.mark.asyncio
    async def test_returns_user_and_session(self, client, supabase):
        user, session = Mock(id="u1"), Mock(access_token="a", refresh_token="r")
        supabase.auth.sign_in_with_password.return_value = Mock(user=user, session=session)

        result = await client.sign_in_with_email("a@b.com", "secret")

        supabase.auth.sign_in_with_password.assert_called_once_with(
            {"email": "a@b.com", "password": "secret"}
        )
        assert result.user is user
        assert result.session is session
        assert result.errors is None

    @pytest.mark.asyncio
    async def test_api_rejection_is_returned_as_errors(self, client, supabase):
        supabase.auth.sign_in_with_password.side_effect = AuthApiError(
            "Invalid login credentials", 400, "invalid_credentials"
        )

        result = await client.sign_in_with_email("a@b.com", "x")

        assert result.user is None
        assert result.session is None
        assert [e.message for e in result.errors] == ["Invalid login credentials"]
        assert result.errors[0].code == "invalid_credentials"

    @pytest.mark.asyncio
    async def test_other_auth_errors_raise_fault_with_items(self, client, supabase):
        supabase.auth.sign_in_with_password.side_effect = AuthRetryableError(
            "Service temporarily unavailable", 503
        )

        with pytest.raises(IdentityFault) as info:
            await client.sign_in_with_email("a@b.com", "x")

        assert [e.message for e in info.value.items] == ["Service temporarily unavailable"]

    @pytest.mark.asyncio
    async def test_stale_connection_is_retried_once(self, client, supabase):
        response = Mock(user=Mock(), session=Mock())
        supabase.auth.sign_in_with_password.side_effect = [
            httpx.RemoteProtocolError("Server disconnected without sending a response."),
            response,
        ]

        result = await client.sign_in_with_email("a@b.com", "secret")

        assert supabase.auth.sign_in_with_password.call_count == 2
        assert result.session is response.session

    @pytest.mark.asyncio
    async def test_persistent_stale_connection_propagates(self, client, supabase):
        supabase.auth.sign_in_with_password.side_effect = httpx.RemoteProtocolError("gone")

        with pytest.raises(httpx.RemoteProtocolError):
            await client.sign_in_with_email("a@b.com", "secret")

        assert supabase.auth.sign_in_with_password.call_count == 2

    @pytest.mark.asyncio
    async def test_transport_error_propagates_without_items(self, client, supabase):
        supabase.auth.sign_in_with_password.side_effect = httpx.ConnectError("refused")

        with pytest.raises(httpx.ConnectError) as info:
            await client.sign_in_with_email("a@b.com", "secret")

        assert not hasattr(info.value, "items")


class TestSignUp:
    @pytest.mark.asyncio
    async def test_name_is_sent_as_user_metadata(self, client, supabase):
        supabase.auth.sign_up.return_value = Mock(user=Mock(), session=None)

        result = await client.sign_up_with_email("new@x.com", "secret", "New User")

        supabase.auth.sign_up.assert_called_once_with({
            "email": "new@x.com",
            "password": "secret",
            "options": {"data": {"name": "New User"}},
        })
        assert result.session is None
        assert result.errors is None

    @pytest.mark.asyncio
    async def test_stale_connection_is_not_retried(self, client, supabase):
        supabase.auth.sign_up.side_effect = httpx.RemoteProtocolError("gone")

        with pytest.raises(httpx.RemoteProtocolError):
            await client.sign_up_with_email("new@x.com", "secret", "New")

        assert supabase.auth.sign_up.call_count == 1

    @pytest.mark.asyncio
    async def test_duplicate_account_is_returned_as_errors(self, client, supabase):
        supabase.auth.sign_up.side_effect = AuthApiError(
            "User already registered", 422, "user_already_exists"
        )

        result = await client.sign_up_with_email("new@x.com", "secret", "New")

        assert [e.message for e in result.errors] == ["User already registered"]


@pytest.mark.asyncio
async def test_sign_out_calls_provider(client, supabase):
    await client.sign_out()
    supabase.auth.sign_out.assert_called_once_with()


def test_fault_message_joins_items():
    fault = IdentityFault([ErrorItem(message="one"), ErrorItem(message="two")])
    assert str(fault) == "one; two"


def test_auth_result_defaults_are_empty():
    result = AuthResult()
    assert (result.user, result.session, result.errors) == (None, None, None)
