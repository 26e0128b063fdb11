"""Static fixture data shared by the UI and API suites.

Base URLs point at the known target environments; credentials are copied
from the validated environment. Validity of the assembled data is checked
separately by ``conduit_e2e.fixture_schema``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from conduit_e2e.env_validation import EnvironmentConfig

API_BASE_URL = "https://www.automationexercise.com"
UI_BASE_URL = "https://demo.realworld.show"
PUBLIC_API_BASE_URL = "https://api.realworld.show/api"


@dataclass(frozen=True)
class BaseUrlEntry:
    base_url: str


@dataclass(frozen=True)
class UserCredentials:
    """Email/password pair used for logins and HTTP basic auth."""

    email: str
    password: str

    def __repr__(self) -> str:
        return f"UserCredentials(email={self.email!r}, password={'*' * len(self.password)})"


@dataclass(frozen=True)
class FixtureData:
    api_base_url: Tuple[BaseUrlEntry, ...]
    ui_base_url: Tuple[BaseUrlEntry, ...]
    public_api_base_url: Tuple[BaseUrlEntry, ...]
    user_credentials: Tuple[UserCredentials, ...]

    @property
    def ui_url(self) -> str:
        return self.ui_base_url[0].base_url

    @property
    def public_api_url(self) -> str:
        return self.public_api_base_url[0].base_url

    @property
    def credentials(self) -> UserCredentials:
        return self.user_credentials[0]


def build_fixture_data(
    env: EnvironmentConfig,
    *,
    api_base_url: str = API_BASE_URL,
    ui_base_url: str = UI_BASE_URL,
    public_api_base_url: str = PUBLIC_API_BASE_URL,
) -> FixtureData:
    """Assemble the fixture data for a validated environment."""
    return FixtureData(
        api_base_url=(BaseUrlEntry(api_base_url),),
        ui_base_url=(BaseUrlEntry(ui_base_url),),
        public_api_base_url=(BaseUrlEntry(public_api_base_url),),
        user_credentials=(UserCredentials(email=env.user_email, password=env.user_password),),
    )
