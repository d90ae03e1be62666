"""
Allure reporting helpers.
"""

from .allure_utils import (
    AllureReportProcessor,
    RunSummary,
    attach_png,
    attach_text,
)

__all__ = [
    "AllureReportProcessor",
    "RunSummary",
    "attach_png",
    "attach_text",
]
