"""
================================================================================
Autotest Tools
================================================================================

Utilities shared by the runner and the test suites.

Modules:
    - common: Shared configuration and logging utilities
    - report_tools: Allure attachment helpers and report generation

Example:
    from autotest_tools.common import init_logger
    from autotest_tools.report_tools.allure_utils import attach_text

    init_logger()
    attach_text("https://www.saucedemo.com/inventory.html", name="Current URL")

================================================================================
"""

__version__ = "1.0.0"

__all__ = [
    "common",
    "report_tools",
]
