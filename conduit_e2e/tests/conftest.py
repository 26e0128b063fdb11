import pytest
import pytest_asyncio

from conduit_e2e.auth_state import clear_storage_state, ensure_storage_state
from conduit_e2e.config import SuiteConfig, load_suite_config
from conduit_e2e.env_validation import format_environment_failure
from conduit_e2e.errors import MissingOrInvalidEnvironment
from conduit_e2e.playwright_client import PlaywrightClient


@pytest.fixture(scope="session")
def suite_config() -> SuiteConfig:
    """Validate the environment once per session.

    Invalid credentials stop the whole run before any test executes.
    """
    try:
        return load_suite_config()
    except MissingOrInvalidEnvironment as exc:
        pytest.exit(format_environment_failure(exc), returncode=1)


@pytest.fixture(scope="session")
def storage_state_path(suite_config):
    """Seed the browser storage state and reset it when the session ends.

    Tests may save a logged-in state into it; the next run starts logged out.
    """
    path = ensure_storage_state(suite_config.auth_state_path)
    yield path
    clear_storage_state(path)


@pytest.fixture(scope="session")
def public_api_base_url(suite_config):
    return suite_config.public_api_base_url


@pytest.fixture(scope="session")
def stored_credentials(suite_config):
    """Credentials from the environment after the fixture schema check."""
    return suite_config.credentials()


@pytest_asyncio.fixture()
async def playwright_client(suite_config, storage_state_path):
    async with PlaywrightClient.from_config(suite_config) as client:
        yield client


@pytest_asyncio.fixture()
async def page(playwright_client):
    """Default page of a fresh browser context bound to the UI base URL."""
    return playwright_client.page
