"""
================================================================================
UI Testing Framework
================================================================================

Playwright-based UI automation framework for the login suite.

Components:
    - config_loader: YAML + environment configuration, LoginEnvironment
    - page_base: Base page object for common operations
    - browser_manager: Browser lifecycle management
    - login_data_factory: Credentials for login scenarios

Author: Automation Team
License: MIT
================================================================================
"""

from .config_loader import ConfigLoader, ConfigurationError, LoginEnvironment
from .page_base import BasePage
from .browser_manager import BrowserManager
from .login_data_factory import LoginCredentials, LoginDataFactory

__all__ = [
    "ConfigLoader",
    "ConfigurationError",
    "LoginEnvironment",
    "BasePage",
    "BrowserManager",
    "LoginCredentials",
    "LoginDataFactory",
]
