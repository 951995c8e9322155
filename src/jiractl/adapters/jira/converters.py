"""
Converters - Map raw Jira JSON onto tagged records.

Converters only copy and rename fields. They never call the server.
"""

from typing import Any, Optional, Union

from ...core.domain.entities import (
    CreateMetaField,
    EditMetaField,
    Issue,
    MetaField,
    Project,
    RawResponse,
    ServerInfo,
    User,
    Version,
)


def _str_or_none(value: Any) -> Optional[str]:
    return None if value is None else str(value)


def to_issue(data: dict[str, Any], server_url: Optional[str] = None) -> Issue:
    """Convert an issue payload. `server_url` is used for the browse link."""
    fields = data.get("fields") or {}
    key = data.get("key", "")
    http_url = f"{server_url.rstrip('/')}/browse/{key}" if server_url and key else None
    return Issue(
        id=str(data.get("id", "")),
        key=key,
        rest_url=data.get("self"),
        http_url=http_url,
        summary=fields.get("summary"),
        fields=dict(fields),
    )


def to_user(data: dict[str, Any]) -> User:
    return User(
        name=data.get("name"),
        display_name=data.get("displayName"),
        rest_url=data.get("self"),
        key=data.get("key"),
        account_id=data.get("accountId"),
        email_address=data.get("emailAddress"),
        active=data.get("active"),
    )


def to_users(data: list[dict[str, Any]]) -> list[User]:
    """Convert a list of user objects, keeping input order."""
    return [to_user(item) for item in data]


def to_watchers(data: Any) -> Union[list[User], RawResponse]:
    """
    Convert a watchers response.

    Returns the untouched payload wrapped in RawResponse when the `watchers`
    key is missing.
    """
    if not isinstance(data, dict) or "watchers" not in data:
        return RawResponse(payload=data)
    return to_users(data["watchers"] or [])


def to_project(data: dict[str, Any]) -> Project:
    lead = data.get("lead") or {}
    return Project(
        id=str(data.get("id", "")),
        key=data.get("key", ""),
        name=data.get("name"),
        description=data.get("description"),
        rest_url=data.get("self"),
        lead=(lead.get("name") or lead.get("displayName")) if isinstance(lead, dict) else None,
    )


def to_version(data: dict[str, Any]) -> Version:
    return Version(
        name=data.get("name", ""),
        id=_str_or_none(data.get("id")),
        description=data.get("description"),
        archived=data.get("archived"),
        released=data.get("released"),
        start_date=data.get("startDate"),
        release_date=data.get("releaseDate"),
        project_id=_str_or_none(data.get("projectId")),
        project_key=data.get("project"),
        rest_url=data.get("self"),
    )


def _to_meta_field(cls: type, field_id: str, data: dict[str, Any]) -> MetaField:
    return cls(
        id=field_id,
        name=data.get("name"),
        required=bool(data.get("required", False)),
        schema=dict(data.get("schema") or {}),
        operations=list(data.get("operations") or []),
        allowed_values=data.get("allowedValues"),
        auto_complete_url=data.get("autoCompleteUrl"),
        has_default_value=data.get("hasDefaultValue"),
        default_value=data.get("defaultValue"),
    )


def to_meta_fields(cls: type, fields: Any) -> list[MetaField]:
    """
    Convert a `fields` mapping (field id -> metadata) into records.

    Entries that are not metadata objects are skipped.
    """
    if not isinstance(fields, dict):
        return []
    return [
        _to_meta_field(cls, field_id, meta)
        for field_id, meta in fields.items()
        if isinstance(meta, dict)
    ]


def to_edit_meta_fields(fields: Any) -> list[EditMetaField]:
    return to_meta_fields(EditMetaField, fields)  # type: ignore[return-value]


def to_create_meta_fields(fields: Any) -> list[CreateMetaField]:
    return to_meta_fields(CreateMetaField, fields)  # type: ignore[return-value]


def to_server_info(data: dict[str, Any]) -> ServerInfo:
    return ServerInfo(
        base_url=data.get("baseUrl"),
        version=data.get("version"),
        build_number=data.get("buildNumber"),
        deployment_type=data.get("deploymentType"),
        server_title=data.get("serverTitle"),
    )
