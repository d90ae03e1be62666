"""
Repository-level pytest configuration.

  - Loads a `.env` file from the repository root (real environment variables win)
  - Configures Loguru once per test session

No credentials are embedded here: VALID_USERNAME / VALID_USER_PASSWORD must be
provided by the environment, a local `.env`, or the CI secret store.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from dotenv import load_dotenv

from autotest_tools.common import init_logger


ROOT_DIR = Path(__file__).parent


def pytest_configure(config):
    load_dotenv(ROOT_DIR / ".env", override=False)
    init_logger()


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return ROOT_DIR
