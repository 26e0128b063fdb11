"""Structural checks for fixture data before the suites consume it."""
from __future__ import annotations

import dataclasses
from typing import List

from email_validator import EmailNotValidError, validate_email
from pydantic import AnyUrl, BaseModel, Field, ValidationError, field_validator
from pydantic_core import PydanticCustomError

from conduit_e2e.errors import SchemaViolation, ValidationIssue
from conduit_e2e.fixture_data import FixtureData

MIN_FIXTURE_PASSWORD_LENGTH = 8


class BaseUrlSchema(BaseModel):
    base_url: AnyUrl

    @field_validator("base_url")
    @classmethod
    def _require_host(cls, value: AnyUrl) -> AnyUrl:
        if not value.host:
            raise PydanticCustomError("url_host", "URL must include a host")
        return value


class UserCredentialsSchema(BaseModel):
    email: str
    password: str = Field(min_length=MIN_FIXTURE_PASSWORD_LENGTH)

    @field_validator("email")
    @classmethod
    def _check_email(cls, value: str) -> str:
        # syntax only: no DNS lookups, special-use domains are fine
        try:
            validate_email(value, check_deliverability=False, globally_deliverable=False)
        except EmailNotValidError as exc:
            raise PydanticCustomError("email", "value is not a valid email address: {reason}", {"reason": str(exc)})
        return value


class FixtureDataSchema(BaseModel):
    api_base_url: List[BaseUrlSchema]
    ui_base_url: List[BaseUrlSchema]
    public_api_base_url: List[BaseUrlSchema]
    user_credentials: List[UserCredentialsSchema]


def check_fixture_data(data: FixtureData) -> FixtureData:
    """Return ``data`` unchanged if every field satisfies its rule.

    URLs need a scheme and a host; any scheme is accepted. The password bound
    here (8) is stricter than the environment check (6); the two checks are
    independent.

    Raises:
        SchemaViolation: naming every failing field path and rule
    """
    try:
        FixtureDataSchema.model_validate(dataclasses.asdict(data))
    except ValidationError as exc:
        raise SchemaViolation(
            ValidationIssue(field=".".join(str(part) for part in error["loc"]), message=error["msg"])
            for error in exc.errors()
        ) from None
    return data
