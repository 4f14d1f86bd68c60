"""
Environment management.

Holds the base URL and ZWS-ID per environment (test / staging / production)
so clients can be created without repeating credentials.
"""

from enum import Enum
from typing import ClassVar

from pydantic import BaseModel


class EnvironmentType(str, Enum):
    """Environment types"""

    TEST = "test"
    STAGING = "staging"
    PRODUCTION = "prod"


class Environment(BaseModel):
    """Settings of one environment"""

    name: EnvironmentType
    url_prefix: str  # e.g. http://www.zillow.com/webservice/
    zws_id: str = ""


class EnvironmentManager:
    """Class-level registry of environments"""

    _environments: ClassVar[dict[EnvironmentType, Environment]] = {}
    _current: ClassVar[EnvironmentType] = EnvironmentType.PRODUCTION

    @classmethod
    def register(cls, env: Environment) -> None:
        cls._environments[env.name] = env

    @classmethod
    def switch(cls, env_type: EnvironmentType) -> None:
        """Make ``env_type`` the current environment."""
        if env_type not in cls._environments:
            msg = f"Environment {env_type.value} is not registered, call register() first"
            raise ValueError(msg)
        cls._current = env_type

    @classmethod
    def get_current(cls) -> Environment | None:
        return cls._environments.get(cls._current)

    @classmethod
    def get_url_prefix(cls) -> str:
        """Base URL of the current environment, or "" when none is registered."""
        env = cls.get_current()
        return env.url_prefix if env else ""

    @classmethod
    def get_zws_id(cls) -> str:
        env = cls.get_current()
        return env.zws_id if env else ""

    @classmethod
    def reset(cls) -> None:
        """Forget all environments (used by tests)."""
        cls._environments.clear()
        cls._current = EnvironmentType.PRODUCTION
