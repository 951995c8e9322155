"""
Environment Config Provider - Load configuration from environment variables.

Supports:
- Environment variables (JIRA_URL, JIRA_USERNAME or JIRA_EMAIL, JIRA_API_TOKEN)
- .env files
- Command line argument overrides
"""

import os
from pathlib import Path
from typing import Any, Optional

from ...core.ports.config_provider import (
    ConfigProviderPort,
    AppConfig,
    TrackerConfig,
    RunConfig,
)


class EnvironmentConfigProvider(ConfigProviderPort):
    """
    Configuration provider that loads from environment variables and .env files.

    Precedence (highest first): CLI overrides, environment, .env file.
    """

    ENV_MAPPING = {
        "JIRA_URL": "jira_url",
        "JIRA_EMAIL": "jira_username",
        "JIRA_USERNAME": "jira_username",
        "JIRA_API_TOKEN": "jira_api_token",
        "JIRA_API_VERSION": "jira_api_version",
        "JIRA_TIMEOUT": "jira_timeout",
        "JIRACTL_VERBOSE": "verbose",
    }

    BOOLEAN_KEYS = frozenset({"verbose"})

    CLI_MAPPING = {
        "server": "jira_url",
        "jira_url": "jira_url",
        "username": "jira_username",
        "api_token": "jira_api_token",
        "execute": "execute",
        "no_confirm": "no_confirm",
        "verbose": "verbose",
    }

    def __init__(
        self,
        env_file: Optional[Path] = None,
        cli_overrides: Optional[dict[str, Any]] = None,
        environ: Optional[dict[str, str]] = None,
    ):
        """
        Initialize the config provider.

        Args:
            env_file: Path to .env file (auto-detected if not specified)
            cli_overrides: Command line argument overrides
            environ: Environment mapping (defaults to os.environ)
        """
        self._values: dict[str, Any] = {}
        self._env_file = env_file
        self._cli_overrides = cli_overrides or {}
        self._environ = os.environ if environ is None else environ

        self._load_env_file()
        self._load_environment()
        self._apply_cli_overrides()

    # -------------------------------------------------------------------------
    # ConfigProviderPort Implementation
    # -------------------------------------------------------------------------

    @property
    def name(self) -> str:
        return "Environment"

    def load(self) -> AppConfig:
        """Load complete configuration."""
        tracker = TrackerConfig(
            url=self.get("jira_url", ""),
            username=self.get("jira_username", ""),
            api_token=self.get("jira_api_token", ""),
            api_version=str(self.get("jira_api_version", "2")),
            timeout=float(self.get("jira_timeout", 30.0)),
        )

        run = RunConfig(
            dry_run=not self.get("execute", False),
            confirm_changes=not self.get("no_confirm", False),
            verbose=bool(self.get("verbose", False)),
        )

        return AppConfig(tracker=tracker, run=run)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value."""
        key = key.lower().replace("-", "_")
        return self._values.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Set a configuration value."""
        key = key.lower().replace("-", "_")
        self._values[key] = value

    def validate(self) -> list[str]:
        """Validate configuration."""
        errors = []

        if not self.get("jira_url"):
            errors.append("Missing JIRA_URL - set in environment, .env file or --server")
        if self.get("jira_username") and not self.get("jira_api_token"):
            errors.append("JIRA_USERNAME is set but JIRA_API_TOKEN is missing")
        if self.get("jira_api_token") and not self.get("jira_username"):
            errors.append("JIRA_API_TOKEN is set but JIRA_USERNAME is missing")
        try:
            float(self.get("jira_timeout", 30.0))
        except (TypeError, ValueError):
            errors.append(f"Invalid JIRA_TIMEOUT: {self.get('jira_timeout')!r}")

        return errors

    # -------------------------------------------------------------------------
    # Private Methods
    # -------------------------------------------------------------------------

    def _load_env_file(self) -> None:
        """Load values from .env file."""
        env_file = self._find_env_file()
        if not env_file:
            return

        for line in env_file.read_text().splitlines():
            line = line.strip()

            if not line or line.startswith("#"):
                continue
            if "=" not in line:
                continue

            key, value = line.split("=", 1)
            key = key.strip()
            value = value.strip().strip('"').strip("'")

            config_key = self.ENV_MAPPING.get(key.upper())
            if config_key:
                self._values[config_key] = self._coerce(config_key, value)

    def _find_env_file(self) -> Optional[Path]:
        """Find .env file."""
        if self._env_file is not None:
            return self._env_file if self._env_file.exists() else None

        cwd_env = Path.cwd() / ".env"
        if cwd_env.exists():
            return cwd_env

        return None

    def _load_environment(self) -> None:
        """Load values from environment variables."""
        for env_key, config_key in self.ENV_MAPPING.items():
            raw_value = self._environ.get(env_key)
            if raw_value is not None:
                self._values[config_key] = self._coerce(config_key, raw_value)

    def _apply_cli_overrides(self) -> None:
        """Apply CLI argument overrides."""
        for cli_key, config_key in self.CLI_MAPPING.items():
            if cli_key in self._cli_overrides and self._cli_overrides[cli_key] is not None:
                self._values[config_key] = self._cli_overrides[cli_key]

    @classmethod
    def _coerce(cls, config_key: str, raw_value: str) -> Any:
        """Convert boolean-ish values of boolean keys; everything else stays a string."""
        if config_key not in cls.BOOLEAN_KEYS:
            return raw_value
        if raw_value.lower() in ("true", "yes"):
            return True
        if raw_value.lower() in ("false", "no"):
            return False
        return raw_value
