"""
================================================================================
Login Page Object (Async / Playwright)
================================================================================

Async Login Page Object.

Locators are created once, against the page this object is bound to, and are
resolved lazily by Playwright on every action. Actions never retry: a missing
element surfaces as Playwright's TimeoutError once the context's default
timeout elapses.

================================================================================
"""

from __future__ import annotations

from typing import Optional

import allure
from loguru import logger
from playwright.async_api import Page

from testsuites.ui_testing.framework.page_base import PageBase


class LoginPage(PageBase):
    """Login page object (async)."""

    URL_PATH = "/"

    def __init__(self, page: Page, base_url: str = ""):
        super().__init__(page, base_url)
        self.username_input = page.get_by_placeholder("Username")
        self.password_input = page.get_by_placeholder("Password")
        self.login_button = page.get_by_role("button", name="Login")
        self.error_message = page.get_by_test_id("error")

    @allure.step("Open login page")
    async def open(self) -> "LoginPage":
        """Navigate to the login page and return self for chaining."""
        await self.navigate()
        return self

    async def enter_username(self, username: str) -> None:
        with allure.step(f"Fill username: {username}"):
            await self.username_input.fill(username)

    async def enter_password(self, password: str) -> None:
        with allure.step(f"Fill password: {'*' * len(password)}"):
            await self.password_input.fill(password)

    @allure.step("Click login button")
    async def click_login_button(self) -> None:
        await self.login_button.click()

    async def login(self, username: str, password: str) -> None:
        """Fill both fields and submit the form."""
        with allure.step(f"Login (username={username})"):
            logger.debug(f"Logging in as '{username}'")
            await self.enter_username(username)
            await self.enter_password(password)
            await self.click_login_button()

    async def get_error_message(self) -> Optional[str]:
        """Text of the error banner."""
        return await self.error_message.text_content()

    async def is_error_message_visible(self) -> bool:
        return await self.error_message.is_visible()
