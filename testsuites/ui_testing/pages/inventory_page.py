"""
================================================================================
Inventory Page Object (Async / Playwright)
================================================================================

Landing page of an authenticated session.

================================================================================
"""

from __future__ import annotations

from testsuites.ui_testing.framework.page_base import PageBase


class InventoryPage(PageBase):
    """Inventory (product list) page object (async)."""

    URL_PATH = "/inventory.html"

    def is_open(self) -> bool:
        """True when the browser is on the inventory URL (query string ignored)."""
        return self.page.url.split("?", 1)[0] == self.url
