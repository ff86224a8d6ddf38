"""Tests for session acquisition."""

from __future__ import annotations

import json

import httpx
import pytest
import respx

from evaldsl.config import ActionConfig
from evaldsl.exceptions import AuthError
from evaldsl.model import Session
from evaldsl.remote import acquire_session

SESSIONS_URL = "https://cdro.example.com/rest/v1.0/sessions"


@respx.mock
def test_acquire_session_success(client: httpx.Client, config: ActionConfig) -> None:
    route = respx.post(SESSIONS_URL).mock(
        return_value=httpx.Response(200, json={"userName": "admin", "sessionId": "S-123"})
    )

    outcome = acquire_session(client, config)

    assert outcome.ok
    assert outcome.value == Session(username="admin", session_id="S-123")
    assert route.call_count == 1
    assert json.loads(route.calls.last.request.content) == {"token": "0a92acf1-token"}


@respx.mock
def test_acquire_session_unauthorized(client: httpx.Client, config: ActionConfig) -> None:
    respx.post(SESSIONS_URL).mock(return_value=httpx.Response(401, text='{"error":"invalid token"}'))

    outcome = acquire_session(client, config)

    assert not outcome.ok
    assert outcome.value is None
    assert isinstance(outcome.error, AuthError)
    assert outcome.error.status_code == 401
    assert outcome.error.body == '{"error":"invalid token"}'
    assert "Response status code: 401" in str(outcome.error)
    assert '{"error":"invalid token"}' in str(outcome.error)


@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(200),
        httpx.Response(200, text="null"),
        httpx.Response(200, text="<html>maintenance</html>"),
        httpx.Response(200, json={"userName": "admin"}),
        httpx.Response(200, text="false"),
        httpx.Response(200, text="0"),
    ],
    ids=["empty_body", "null_body", "non_json_body", "missing_session_id", "false_body", "zero_body"],
)
@respx.mock
def test_acquire_session_rejects_unusable_body(
    client: httpx.Client, config: ActionConfig, response: httpx.Response
) -> None:
    respx.post(SESSIONS_URL).mock(return_value=response)

    outcome = acquire_session(client, config)

    assert isinstance(outcome.error, AuthError)
    assert outcome.error.status_code == 200


@respx.mock
def test_acquire_session_transport_error(client: httpx.Client, config: ActionConfig) -> None:
    respx.post(SESSIONS_URL).mock(side_effect=httpx.ConnectError("connection refused"))

    outcome = acquire_session(client, config)

    assert isinstance(outcome.error, AuthError)
    assert outcome.error.status_code is None
    assert "connection refused" in str(outcome.error)


@respx.mock
def test_acquire_session_invalid_url(client: httpx.Client) -> None:
    config = ActionConfig(url="https://cdro.example.com:notaport", token="abc")

    outcome = acquire_session(client, config)

    assert isinstance(outcome.error, AuthError)
    assert outcome.error.status_code is None
