"""Create conduit users through the public API (setup step for UI tests)."""
from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any, Optional

from pydantic import BaseModel

from conduit_e2e.errors import RequestFailure
from conduit_e2e.http_client import http_request

logger = logging.getLogger(__name__)


class NewUser(BaseModel):
    email: str
    password: str
    username: str


class SignupRequest(BaseModel):
    user: NewUser


class ConduitUser(BaseModel):
    username: str
    email: str
    bio: Optional[str] = None
    image: Optional[str] = None
    token: str


class SignupResponse(BaseModel):
    user: ConduitUser


async def signup(email: str, password: str, username: str, **request_options: Any) -> SignupResponse:
    """Register a user and return the created account.

    ``request_options`` are passed through to ``http_request`` (base_url,
    transport, ...).

    Raises:
        RequestFailure: the API answered with anything but 200/201
    """
    payload = SignupRequest(user=NewUser(email=email, password=password, username=username))

    # status checked below so every rejection carries the signup message
    request_options.setdefault("validate_status", lambda status: True)
    response = await http_request("POST", "/users", json=payload.model_dump(), **request_options)

    if response.status_code not in (HTTPStatus.OK, HTTPStatus.CREATED):
        raise RequestFailure(
            message=f"Failed to create user. Status code: {response.status_code}",
            status_code=response.status_code,
            method="POST",
            url=str(response.request.url),
        )

    logger.info("Created conduit user %s <%s>", username, email)
    return SignupResponse.model_validate(response.json())
