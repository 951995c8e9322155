"""
Project operations.
"""

from typing import Any, Optional

from ...core.domain.entities import Project
from ...core.domain.value_objects import Credential, ProjectRef
from ...core.exceptions import NotFoundError, ResolutionError
from ...adapters.jira import converters
from .base import OperationContext, require_result


def get_project(
    ctx: OperationContext,
    project: Any,
    *,
    credential: Optional[Credential] = None,
) -> Project:
    """Fetch a project by key or id (or refresh a Project record)."""
    ref = ProjectRef.from_value(project, "project")
    data = ctx.request("project/{0}", ref.identifier, credential=credential)
    return converters.to_project(require_result(data, ref.identifier))


def get_projects(
    ctx: OperationContext,
    *,
    credential: Optional[Credential] = None,
) -> list[Project]:
    """List all projects visible to the caller."""
    data = ctx.request("project", credential=credential) or []
    return [converters.to_project(item) for item in data]


def resolve_project(
    ctx: OperationContext,
    project: Any,
    *,
    credential: Optional[Credential] = None,
) -> Project:
    """
    Resolve a project reference to a Project record.

    Typed records are returned as they are; identifier strings are looked up.

    Raises:
        ResolutionError: If the project does not exist
    """
    ref = ProjectRef.from_value(project, "project")
    if ref.record is not None:
        return ref.record
    try:
        resolved = get_project(ctx, ref.identifier, credential=credential)
    except NotFoundError as e:
        raise ResolutionError(
            f"Project '{ref.identifier}' could not be found",
            target=ref.identifier,
            cause=e,
        )
    if not resolved.id:
        raise ResolutionError(
            f"Project '{ref.identifier}' has no id",
            target=ref.identifier,
        )
    return resolved
