"""
================================================================================
Autotest Tools Common Utilities
================================================================================

Shared configuration access and logging setup for the runner and tooling.

Usage:
    from autotest_tools.common import get_config, init_logger

    init_logger()
    level = get_config("logging.level", "INFO")

================================================================================
"""

from .global_config import (
    get_config,
    init_logger,
)

__all__ = [
    "get_config",
    "init_logger",
]
