"""Thin request helper for the conduit public REST API."""
from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any, Callable, Literal, Optional

import httpx

from conduit_e2e.errors import RequestFailure
from conduit_e2e.fixture_data import PUBLIC_API_BASE_URL, UserCredentials

logger = logging.getLogger(__name__)

HttpMethod = Literal["GET", "POST", "PUT", "DELETE", "PATCH"]
StatusPredicate = Callable[[int], bool]

JSON_HEADERS = {"Content-Type": "application/json"}


def is_success(status: int) -> bool:
    """Default acceptance: any 2xx."""
    return HTTPStatus.OK <= status < HTTPStatus.MULTIPLE_CHOICES


def token_headers(token: str) -> dict[str, str]:
    """Headers for endpoints that expect ``Authorization: Token <jwt>``."""
    return {**JSON_HEADERS, "Authorization": f"Token {token}"}


async def http_request(
    method: HttpMethod,
    resource: str,
    *,
    json: Any = None,
    auth: Optional[UserCredentials] = None,
    headers: Optional[dict[str, str]] = None,
    validate_status: StatusPredicate = is_success,
    base_url: str = PUBLIC_API_BASE_URL,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.Response:
    """Issue a single request against ``base_url`` and return the response.

    Args:
        method: HTTP method
        resource: Path relative to ``base_url`` (e.g. "/users")
        json: Optional JSON payload
        auth: Optional credentials sent as HTTP basic auth
        headers: Extra headers merged over the JSON content type
        validate_status: Predicate deciding which status codes are accepted
        base_url: API root the resource is resolved against
        transport: Optional httpx transport (tests use ``httpx.MockTransport``)

    Raises:
        RequestFailure: status rejected by ``validate_status`` or the request
            could not be sent
    """
    basic_auth = httpx.BasicAuth(auth.email, auth.password) if auth else None
    async with httpx.AsyncClient(base_url=base_url, headers=JSON_HEADERS, transport=transport) as client:
        try:
            response = await client.request(
                method,
                resource,
                json=json,
                auth=basic_auth,
                headers=headers,
            )
        except httpx.HTTPError as exc:
            raise RequestFailure(
                message=f"Request failed: {exc}",
                method=method,
                url=f"{base_url.rstrip('/')}/{resource.lstrip('/')}",
            ) from exc

    logger.debug("%s %s -> %s", method, response.request.url, response.status_code)

    if not validate_status(response.status_code):
        raise RequestFailure(
            message=f"Unexpected response status {response.status_code}",
            status_code=response.status_code,
            method=method,
            url=str(response.request.url),
        )

    return response
