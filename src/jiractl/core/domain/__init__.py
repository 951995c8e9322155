"""
Domain - Tagged records and the references that point at them.
"""

from .entities import (
    Record,
    Issue,
    User,
    Project,
    Version,
    MetaField,
    EditMetaField,
    CreateMetaField,
    ServerInfo,
    RawResponse,
)
from .value_objects import (
    Credential,
    EntityRef,
    IssueRef,
    ProjectRef,
    VersionRef,
)

__all__ = [
    "Record",
    "Issue",
    "User",
    "Project",
    "Version",
    "MetaField",
    "EditMetaField",
    "CreateMetaField",
    "ServerInfo",
    "RawResponse",
    "Credential",
    "EntityRef",
    "IssueRef",
    "ProjectRef",
    "VersionRef",
]
