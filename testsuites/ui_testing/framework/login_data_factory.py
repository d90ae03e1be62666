"""
================================================================================
Login Test Data Factory
================================================================================

Credentials for the login scenarios.

- valid credentials come from configuration (fail fast when missing)
- invalid credentials and passwords are generated with Faker
- an optional seed makes generated data reproducible when debugging a failure

================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

from faker import Faker
from loguru import logger

from testsuites.ui_testing.framework.config_loader import LoginEnvironment


# ================================================================================
# Data Models
# ================================================================================

@dataclass(frozen=True)
class LoginCredentials:
    """Username/password pair. The password is kept out of repr()."""
    username: str
    password: str = field(repr=False)


# ================================================================================
# Factory
# ================================================================================

class LoginDataFactory:
    """
    Factory for login form input.

    Usage:
        factory = LoginDataFactory(environment)
        creds = factory.valid_credentials()
        bad = factory.invalid_credentials()
    """

    # Regeneration bound when a random value collides with the valid one.
    MAX_ATTEMPTS = 10

    def __init__(
        self,
        environment: Optional[LoginEnvironment] = None,
        seed: Optional[int] = None,
    ):
        """
        Args:
            environment: Environment to read valid credentials from. When
                omitted, configuration is read on every call.
            seed: Random seed for reproducible data generation
        """
        self._environment = environment
        self._faker = Faker()
        if seed is not None:
            self._faker.seed_instance(seed)

    @property
    def environment(self) -> LoginEnvironment:
        return self._environment or LoginEnvironment.from_config()

    def valid_credentials(self) -> LoginCredentials:
        """
        Credentials of the configured valid user.

        Raises:
            ConfigurationError: VALID_USERNAME or VALID_USER_PASSWORD is not set.
        """
        username, password = self.environment.require_credentials()
        return LoginCredentials(username=username, password=password)

    def invalid_credentials(self) -> LoginCredentials:
        """
        Freshly generated username/password pair.

        Neither value ever equals its configured valid counterpart.
        """
        environment = self.environment
        credentials = LoginCredentials(
            username=self._generate_distinct(self._faker.user_name, environment.valid_username),
            password=self._generate_distinct(self._faker.password, environment.valid_password),
        )
        logger.debug(f"Generated invalid credentials: {credentials}")
        return credentials

    def random_password(self) -> str:
        """A freshly generated, non-empty password."""
        return self._generate_distinct(self._faker.password, None)

    def _generate_distinct(self, generate: Callable[[], str], excluded: Optional[str]) -> str:
        for _ in range(self.MAX_ATTEMPTS):
            value = generate()
            if value and value != excluded:
                return value
        raise RuntimeError(
            f"Could not generate a value distinct from the configured one "
            f"after {self.MAX_ATTEMPTS} attempts"
        )


# ================================================================================
# Convenience Functions
# ================================================================================

def valid_credentials() -> LoginCredentials:
    """Quick helper: credentials of the configured valid user."""
    return LoginDataFactory().valid_credentials()


def invalid_credentials() -> LoginCredentials:
    """Quick helper: a random invalid username/password pair."""
    return LoginDataFactory().invalid_credentials()


def random_password() -> str:
    """Quick helper: a random password."""
    return LoginDataFactory().random_password()


__all__ = [
    "LoginCredentials",
    "LoginDataFactory",
    "invalid_credentials",
    "random_password",
    "valid_credentials",
]
