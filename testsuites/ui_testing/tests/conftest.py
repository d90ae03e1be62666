"""
================================================================================
UI Testing Pytest Configuration
================================================================================

Fixtures for browser management, page objects and test data.

Key Features:
- One browser per session, one isolated context + page per test
- Page Object fixtures bound to the test's page
- Screenshot + URL attached to Allure on failure

All async fixtures run on the session event loop so the shared browser can be
used from every test.

================================================================================
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from loguru import logger
from playwright.async_api import BrowserContext, Error as PlaywrightError, Page

from testsuites.ui_testing.framework.browser_manager import BrowserManager
from testsuites.ui_testing.framework.config_loader import LoginEnvironment
from testsuites.ui_testing.framework.login_data_factory import LoginDataFactory
from testsuites.ui_testing.framework.page_base import BasePage
from testsuites.ui_testing.pages.inventory_page import InventoryPage
from testsuites.ui_testing.pages.login_page import LoginPage


# ================================================================================
# Environment Fixtures
# ================================================================================

@pytest.fixture(scope="session")
def login_environment() -> LoginEnvironment:
    """Environment (base URL, valid credentials) for the whole session."""
    environment = LoginEnvironment.from_config()
    logger.info(f"UI tests target: {environment.base_url}")
    return environment


@pytest.fixture
def login_data(login_environment: LoginEnvironment) -> LoginDataFactory:
    """Credentials factory bound to the session environment."""
    return LoginDataFactory(login_environment)


# ================================================================================
# Browser Fixtures
# ================================================================================

@pytest_asyncio.fixture(scope="session", loop_scope="session")
async def browser_manager(login_environment: LoginEnvironment) -> AsyncGenerator[BrowserManager, None]:
    """
    Session-scoped browser manager.

    Skips the UI suite when Playwright's browser binaries are not installed.
    """
    manager = BrowserManager.from_config(base_url=login_environment.base_url)
    try:
        await manager.start()
    except PlaywrightError as e:
        await manager.close()
        if "Executable doesn't exist" in str(e):
            pytest.skip("Playwright browsers are not installed (run `playwright install`)")
        raise
    yield manager
    await manager.close()


@pytest_asyncio.fixture(loop_scope="session")
async def context(browser_manager: BrowserManager) -> AsyncGenerator[BrowserContext, None]:
    """Fresh browser context per test."""
    context = await browser_manager.new_context()
    yield context
    await browser_manager.close_context(context)


@pytest_asyncio.fixture(loop_scope="session")
async def page(
    request: pytest.FixtureRequest,
    context: BrowserContext,
    login_environment: LoginEnvironment,
) -> AsyncGenerator[Page, None]:
    """Fresh page per test; failure details are captured before it closes."""
    page = await context.new_page()
    yield page

    report = getattr(request.node, "rep_call", None)
    if report is not None and report.failed:
        try:
            await BasePage(page, login_environment.base_url).capture_failure(request.node.name)
        except PlaywrightError as e:
            logger.warning(f"Failed to capture failure details: {e}")
    await page.close()


# ================================================================================
# Page Object Fixtures
# ================================================================================

@pytest.fixture
def login_page(page: Page, login_environment: LoginEnvironment) -> LoginPage:
    return LoginPage(page, login_environment.base_url)


@pytest.fixture
def inventory_page(page: Page, login_environment: LoginEnvironment) -> InventoryPage:
    return InventoryPage(page, login_environment.base_url)


# ================================================================================
# Test Lifecycle Hooks
# ================================================================================

@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Expose each phase's report on the item (rep_setup / rep_call / rep_teardown)."""
    outcome = yield
    report = outcome.get_result()
    setattr(item, f"rep_{report.when}", report)
