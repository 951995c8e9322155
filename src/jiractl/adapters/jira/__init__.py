"""
Jira Adapter - HTTP transport, request building and response conversion.
"""

from .client import JiraApiClient
from .request_builder import build_request, api_path, compact
from . import converters

__all__ = [
    "JiraApiClient",
    "build_request",
    "api_path",
    "compact",
    "converters",
]
