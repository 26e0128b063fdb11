"""Tests for the request helper, using httpx.MockTransport instead of the network."""

from __future__ import annotations

import base64
import json

import httpx
import pytest

from conduit_e2e.errors import RequestFailure
from conduit_e2e.fixture_data import UserCredentials
from conduit_e2e.http_client import http_request, is_success, token_headers

BASE_URL = "https://api.conduit.test/api"


def _recording_transport(status_code: int = 200, body=None):
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(status_code, json=body if body is not None else {})

    return httpx.MockTransport(handler), seen


@pytest.mark.parametrize("status,expected", [(199, False), (200, True), (201, True), (299, True), (300, False), (404, False)])
def test_is_success(status, expected):
    assert is_success(status) is expected


def test_token_headers():
    assert token_headers("abc") == {"Content-Type": "application/json", "Authorization": "Token abc"}


@pytest.mark.asyncio
async def test_resource_is_resolved_against_base_path():
    transport, seen = _recording_transport(body={"ok": True})

    response = await http_request("GET", "/user", base_url=BASE_URL, transport=transport)

    assert response.json() == {"ok": True}
    assert str(seen[0].url) == "https://api.conduit.test/api/user"
    assert seen[0].method == "GET"
    assert seen[0].headers["Content-Type"] == "application/json"


@pytest.mark.asyncio
async def test_json_payload_is_sent():
    transport, seen = _recording_transport(status_code=201)

    await http_request("POST", "/users", json={"user": {"email": "a@b.com"}}, base_url=BASE_URL, transport=transport)

    assert json.loads(seen[0].content) == {"user": {"email": "a@b.com"}}


@pytest.mark.asyncio
async def test_basic_auth_uses_email_and_password():
    transport, seen = _recording_transport()

    await http_request(
        "GET",
        "/user",
        auth=UserCredentials(email="a@b.com", password="secret"),
        base_url=BASE_URL,
        transport=transport,
    )

    expected = base64.b64encode(b"a@b.com:secret").decode()
    assert seen[0].headers["Authorization"] == f"Basic {expected}"


@pytest.mark.asyncio
async def test_non_2xx_status_raises_with_status_code():
    transport, _ = _recording_transport(status_code=404)

    with pytest.raises(RequestFailure) as exc_info:
        await http_request("GET", "/profiles/nobody", base_url=BASE_URL, transport=transport)

    assert exc_info.value.status_code == 404
    assert "404" in str(exc_info.value)
    assert exc_info.value.url == "https://api.conduit.test/api/profiles/nobody"


@pytest.mark.asyncio
async def test_custom_status_predicate():
    transport, _ = _recording_transport(status_code=422)

    response = await http_request(
        "POST",
        "/users",
        validate_status=lambda status: status in (201, 422),
        base_url=BASE_URL,
        transport=transport,
    )

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_predicate_can_reject_a_2xx():
    transport, _ = _recording_transport(status_code=201)

    with pytest.raises(RequestFailure):
        await http_request(
            "POST",
            "/users/login",
            validate_status=lambda status: status == 200,
            base_url=BASE_URL,
            transport=transport,
        )


@pytest.mark.asyncio
async def test_transport_error_becomes_request_failure():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(RequestFailure) as exc_info:
        await http_request("GET", "/tags", base_url=BASE_URL, transport=httpx.MockTransport(handler))

    assert exc_info.value.status_code is None
    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)
    assert exc_info.value.url == "https://api.conduit.test/api/tags"
