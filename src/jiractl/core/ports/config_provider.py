"""
Config Provider Port - Abstract interface for configuration loading.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional

from ..domain.value_objects import Credential


@dataclass(frozen=True)
class TrackerConfig:
    """Connection settings for the JIRA server."""

    url: str = ""
    username: str = ""
    api_token: str = ""
    api_version: str = "2"
    timeout: float = 30.0

    @property
    def base_url(self) -> str:
        return self.url.rstrip("/")

    @property
    def credential(self) -> Optional[Credential]:
        """Default credential, if both halves are configured."""
        if self.username and self.api_token:
            return Credential(self.username, self.api_token)
        return None


@dataclass(frozen=True)
class RunConfig:
    """How mutating operations behave."""

    dry_run: bool = True
    confirm_changes: bool = True
    verbose: bool = False


@dataclass(frozen=True)
class AppConfig:
    tracker: TrackerConfig = field(default_factory=TrackerConfig)
    run: RunConfig = field(default_factory=RunConfig)


class ConfigProviderPort(ABC):
    """Abstract interface for configuration providers."""

    @property
    @abstractmethod
    def name(self) -> str:
        ...

    @abstractmethod
    def load(self) -> AppConfig:
        """Load complete configuration."""
        ...

    @abstractmethod
    def get(self, key: str, default: Any = None) -> Any:
        ...

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        ...

    @abstractmethod
    def validate(self) -> list[str]:
        """Return a list of configuration problems (empty when valid)."""
        ...
