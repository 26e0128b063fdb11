"""Shared configuration for the conduit UI and API suites.

``load_suite_config`` validates the environment, assembles the fixture data
and reads the browser options. The result is immutable; pytest builds it once
per session (see ``conduit_e2e/tests/conftest.py``).

Browser options:
- PLAYWRIGHT_HEADLESS: "true"/"1" (default) or anything else for headed runs
- PLAYWRIGHT_BROWSER: chromium (default), firefox or webkit
- PLAYWRIGHT_TIMEOUT_MS: default action timeout (default 30000)
- AUTH_STATE_PATH: storage state file (default auth/storageState.json)
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Optional
from urllib.parse import urljoin

from conduit_e2e.auth_state import DEFAULT_AUTH_STATE_PATH
from conduit_e2e.env_validation import EnvironmentConfig, read_environment, validate_env
from conduit_e2e.fixture_data import FixtureData, UserCredentials, build_fixture_data
from conduit_e2e.fixture_schema import check_fixture_data

SUPPORTED_BROWSERS = ("chromium", "firefox", "webkit")


@dataclass(frozen=True)
class SuiteConfig:
    """Everything a test needs to know about the target and the browser."""

    env: EnvironmentConfig
    fixture_data: FixtureData
    playwright_headless: bool = True
    browser_type: str = "chromium"
    timeout_ms: int = 30000
    auth_state_path: str = str(DEFAULT_AUTH_STATE_PATH)
    _checked: dict = field(default_factory=dict, init=False, repr=False, compare=False)

    @property
    def ui_base_url(self) -> str:
        return self.fixture_data.ui_url

    @property
    def public_api_base_url(self) -> str:
        return self.fixture_data.public_api_url

    def ui_url(self, path: str) -> str:
        """Return an absolute UI URL for the provided path."""
        return urljoin(self.ui_base_url.rstrip("/") + "/", path.lstrip("/"))

    def public_api_url(self, path: str) -> str:
        return urljoin(self.public_api_base_url.rstrip("/") + "/", path.lstrip("/"))

    def checked_fixture_data(self) -> FixtureData:
        """Fixture data after the schema check; checked once, on first access."""
        if "data" not in self._checked:
            self._checked["data"] = check_fixture_data(self.fixture_data)
        return self._checked["data"]

    def credentials(self) -> UserCredentials:
        return self.checked_fixture_data().credentials


def _env_flag(environ: Mapping[str, str], key: str, default: str) -> bool:
    return environ.get(key, default).strip().lower() in {"true", "1"}


def load_suite_config(environ: Optional[Mapping[str, str]] = None) -> SuiteConfig:
    """Build the suite configuration.

    Raises:
        MissingOrInvalidEnvironment: credentials missing/invalid outside CI
        ValueError: unsupported PLAYWRIGHT_BROWSER or bad PLAYWRIGHT_TIMEOUT_MS
    """
    if environ is None:
        environ = read_environment()

    env = validate_env(environ)

    browser_type = environ.get("PLAYWRIGHT_BROWSER", "chromium").strip().lower()
    if browser_type not in SUPPORTED_BROWSERS:
        raise ValueError(
            f"PLAYWRIGHT_BROWSER={browser_type!r} is not supported "
            f"(expected one of: {', '.join(SUPPORTED_BROWSERS)})"
        )

    return SuiteConfig(
        env=env,
        fixture_data=build_fixture_data(env),
        playwright_headless=_env_flag(environ, "PLAYWRIGHT_HEADLESS", "true"),
        browser_type=browser_type,
        timeout_ms=int(environ.get("PLAYWRIGHT_TIMEOUT_MS", "30000")),
        auth_state_path=environ.get("AUTH_STATE_PATH") or str(DEFAULT_AUTH_STATE_PATH),
    )
