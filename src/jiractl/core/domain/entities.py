"""
Domain Entities - Tagged records mirroring JIRA's JSON shapes.

Every record carries an explicit type tag so consumers can discriminate by
tag instead of inspecting structure. Records are immutable snapshots; they
have no lifecycle of their own and are re-fetched on demand.
"""

from dataclasses import dataclass, field, fields
from typing import Any, ClassVar, Optional


@dataclass(frozen=True)
class Record:
    """Base class for all tagged output records."""

    TAG: ClassVar[str] = "Jira.Record"

    @property
    def tag(self) -> str:
        return self.TAG

    def to_dict(self) -> dict[str, Any]:
        """Field mapping plus the tag under "type"."""
        data: dict[str, Any] = {"type": self.tag}
        for f in fields(self):
            data[f.name] = getattr(self, f.name)
        return data


@dataclass(frozen=True)
class Issue(Record):
    """A tracked work item."""

    TAG: ClassVar[str] = "Jira.Issue"

    id: str = ""
    key: str = ""
    rest_url: Optional[str] = None
    http_url: Optional[str] = None
    summary: Optional[str] = None
    fields: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        if self.summary:
            return f"[{self.key}] {self.summary}"
        return self.key


@dataclass(frozen=True)
class User(Record):
    """A JIRA user, e.g. an issue watcher."""

    TAG: ClassVar[str] = "Jira.User"

    name: Optional[str] = None
    display_name: Optional[str] = None
    rest_url: Optional[str] = None
    key: Optional[str] = None
    account_id: Optional[str] = None
    email_address: Optional[str] = None
    active: Optional[bool] = None

    def __str__(self) -> str:
        return self.name or self.account_id or ""


@dataclass(frozen=True)
class Project(Record):
    """A JIRA project."""

    TAG: ClassVar[str] = "Jira.Project"

    id: str = ""
    key: str = ""
    name: Optional[str] = None
    description: Optional[str] = None
    rest_url: Optional[str] = None
    lead: Optional[str] = None

    def __str__(self) -> str:
        return self.name or self.key


@dataclass(frozen=True)
class Version(Record):
    """
    A named release scoped to a project.

    The owning project is referenced by id and/or key. Server responses only
    carry `projectId`; records built by the caller for duplication may carry
    either.
    """

    TAG: ClassVar[str] = "Jira.Version"

    name: str = ""
    id: Optional[str] = None
    description: Optional[str] = None
    archived: Optional[bool] = None
    released: Optional[bool] = None
    start_date: Optional[str] = None
    release_date: Optional[str] = None
    project_id: Optional[str] = None
    project_key: Optional[str] = None
    rest_url: Optional[str] = None

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class MetaField(Record):
    """Field metadata, copied verbatim from a metadata response."""

    id: str = ""
    name: Optional[str] = None
    required: bool = False
    schema: dict[str, Any] = field(default_factory=dict)
    operations: list[str] = field(default_factory=list)
    allowed_values: Optional[list[Any]] = None
    auto_complete_url: Optional[str] = None
    has_default_value: Optional[bool] = None
    default_value: Any = None

    def __str__(self) -> str:
        return self.name or self.id


@dataclass(frozen=True)
class EditMetaField(MetaField):
    """Metadata describing one editable field of an issue."""

    TAG: ClassVar[str] = "Jira.EditMetaField"


@dataclass(frozen=True)
class CreateMetaField(MetaField):
    """Metadata describing one field on the create screen of an issue type."""

    TAG: ClassVar[str] = "Jira.CreateMetaField"


@dataclass(frozen=True)
class ServerInfo(Record):
    TAG: ClassVar[str] = "Jira.ServerInfo"

    base_url: Optional[str] = None
    version: Optional[str] = None
    build_number: Optional[int] = None
    deployment_type: Optional[str] = None
    server_title: Optional[str] = None


@dataclass(frozen=True)
class RawResponse:
    """
    Untouched server payload.

    Returned instead of tagged records when the response lacks the shape a
    converter expects. It is not a Record and carries no tag.
    """

    payload: Any = None
