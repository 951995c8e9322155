"""
Server operations.
"""

from typing import Optional

from ...core.domain.entities import ServerInfo
from ...core.domain.value_objects import Credential
from ...adapters.jira import converters
from .base import OperationContext


def get_server_info(
    ctx: OperationContext,
    *,
    credential: Optional[Credential] = None,
) -> ServerInfo:
    """Fetch version and deployment details of the configured server."""
    data = ctx.request("serverInfo", credential=credential) or {}
    return converters.to_server_info(data)
