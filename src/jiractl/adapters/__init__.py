"""
Adapters - Concrete implementations of ports.

This module contains implementations for:
- Jira: requests-based transport, request builder, JSON converters
- Config: Environment variables and .env files
"""

from .jira import JiraApiClient
from .config import EnvironmentConfigProvider

__all__ = [
    "JiraApiClient",
    "EnvironmentConfigProvider",
]
