"""
Request Builder - Turns a logical operation into a RequestDescriptor.
"""

import json
from typing import Any, Mapping, Optional

from ...core.exceptions import ConfigurationError
from ...core.domain.value_objects import Credential
from ...core.ports.config_provider import TrackerConfig
from ...core.ports.transport import RequestDescriptor


def api_path(config: TrackerConfig, resource: str) -> str:
    """Server-relative REST path, e.g. `/rest/api/2/issue/{0}`."""
    return f"/rest/api/{config.api_version}/{resource.lstrip('/')}"


def compact(mapping: Mapping[str, Any]) -> dict[str, Any]:
    """Drop keys whose value is None."""
    return {key: value for key, value in mapping.items() if value is not None}


def build_request(
    config: TrackerConfig,
    template: str,
    *args: Any,
    method: str = "GET",
    body: Any = None,
    credential: Optional[Credential] = None,
    params: Optional[Mapping[str, Any]] = None,
) -> RequestDescriptor:
    """
    Build a fully specified request.

    Substitution into the template is plain `str.format`; escaping is left to
    the transport.

    Args:
        config: Tracker configuration holding the server URL
        template: Server-relative URI template with positional fields
        *args: Values substituted into the template
        method: HTTP verb
        body: JSON-serializable body, sent exactly as given
        credential: Per-call credential override
        params: Query parameters

    Raises:
        ConfigurationError: If no server URL is configured
    """
    if not config.base_url:
        raise ConfigurationError(
            "No JIRA server configured. Set JIRA_URL or pass --server."
        )

    path = template.format(*args) if args else template
    uri = path if path.startswith("http") else f"{config.base_url}/{path.lstrip('/')}"

    return RequestDescriptor(
        method=method.upper(),
        uri=uri,
        body=json.dumps(body) if body is not None else None,
        credential=credential,
        params=compact(params or {}),
    )
