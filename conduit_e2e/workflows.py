"""Reusable UI workflows and test-user generation for the conduit suites."""
from __future__ import annotations

import time
from dataclasses import dataclass

from faker import Faker
from playwright.async_api import Page, expect

fake = Faker()

HOME_HEADING = "conduit"
TEST_USER_PASSWORD = "testpassword123"


@dataclass(frozen=True)
class TestUser:
    __test__ = False  # not a pytest class

    username: str
    email: str
    password: str


def generate_user() -> TestUser:
    """Random user for UI sign-up flows."""
    return TestUser(
        username=fake.first_name(),
        email=fake.email(),
        password=fake.password(length=10),
    )


def unique_api_user() -> TestUser:
    """Timestamped user so repeated API runs do not collide."""
    stamp = int(time.time() * 1000)
    return TestUser(
        username=f"testuser_{stamp}",
        email=f"testuser_{stamp}@example.com",
        password=TEST_USER_PASSWORD,
    )


async def navigate_to_homepage(page: Page) -> None:
    await page.goto("/")
    await expect(page.get_by_role("heading", name=HOME_HEADING)).to_be_visible()


async def navigate_to_sign_in(page: Page) -> None:
    await page.get_by_role("link", name="Sign in").click()


async def navigate_to_sign_up(page: Page) -> None:
    await page.get_by_role("link", name="Sign up").click()
    await expect(page.get_by_role("heading", name="Sign up")).to_be_visible()


async def fill_login_form(page: Page, email: str, password: str) -> None:
    """Fill the sign-in form and submit it."""
    await page.get_by_role("textbox", name="Email").fill(email)
    await page.get_by_role("textbox", name="Password").fill(password)
    await page.get_by_role("button", name="Sign in").click()


async def fill_signup_form(page: Page, username: str, email: str, password: str) -> None:
    """Fill the registration form and submit it."""
    await page.get_by_role("textbox", name="Username").fill(username)
    await page.get_by_role("textbox", name="Email").fill(email)
    await page.get_by_role("textbox", name="Password").fill(password)
    await page.get_by_role("button", name="Sign up").click()
