"""
Version operations - Lookup, create, update and remove project versions.

Creation has two explicit entry points instead of inferred parameter sets:
`new_version` builds the body from discrete fields, `new_version_from_object`
duplicates an existing Version record. In both cases only fields that carry a
value are sent, so server-side defaults are never overwritten with blanks.
"""

import fnmatch
import logging
from datetime import date, datetime
from typing import Any, Optional, Union

from ...core.domain.entities import Project, Version
from ...core.domain.value_objects import Credential, ProjectRef, VersionRef
from ...core.exceptions import InputValidationError
from ...adapters.jira import converters
from ...adapters.jira.request_builder import compact
from .base import OperationContext, require_result
from .projects import resolve_project


logger = logging.getLogger("VersionOperations")

DateLike = Union[str, date, datetime]


def _format_date(value: Optional[DateLike], parameter: str) -> Optional[str]:
    """Render a date as YYYY-MM-DD; strings pass through untouched."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, str):
        return value
    raise InputValidationError(
        f"Parameter '{parameter}' must be a date or string",
        parameter=parameter,
        expected="date or str",
        actual=type(value).__name__,
    )


def _require_name(name: Any) -> str:
    if not isinstance(name, str) or not name.strip():
        raise InputValidationError(
            "Parameter 'name' must be a non-empty string",
            parameter="name",
            expected="str",
            actual=type(name).__name__,
        )
    return name


def _applied(data: Any, action: str, target: str) -> Optional[Version]:
    """Convert a mutation response; an empty body yields no output."""
    if data is None:
        logger.warning(f"{action} {target}: server returned no body")
        return None
    return converters.to_version(data)


def _project_field(project: Project) -> dict[str, str]:
    """Foreign key for the request body: `projectId` when known, else `project`."""
    if project.id:
        return {"projectId": project.id}
    return {"project": project.key}


# -----------------------------------------------------------------------------
# Queries
# -----------------------------------------------------------------------------


def get_version(
    ctx: OperationContext,
    version: Any,
    *,
    credential: Optional[Credential] = None,
) -> Version:
    """Fetch a version by id (or refresh a Version record)."""
    ref = VersionRef.from_value(version, "version")
    data = ctx.request("version/{0}", ref.identifier, credential=credential)
    return converters.to_version(require_result(data, ref.identifier))


def get_project_versions(
    ctx: OperationContext,
    project: Any,
    *,
    name: Optional[str] = None,
    credential: Optional[Credential] = None,
) -> list[Version]:
    """
    List the versions of a project.

    Args:
        ctx: Operation context
        project: Project record, or project key/id
        name: Optional case-insensitive name filter; `*` and `?` wildcards allowed
        credential: Per-call credential override
    """
    ref = ProjectRef.from_value(project, "project")
    data = ctx.request("project/{0}/versions", ref.identifier, credential=credential) or []
    versions = [converters.to_version(item) for item in data]
    if name:
        pattern = name.lower()
        versions = [v for v in versions if fnmatch.fnmatchcase(v.name.lower(), pattern)]
    return versions


# -----------------------------------------------------------------------------
# Mutations
# -----------------------------------------------------------------------------


def new_version(
    ctx: OperationContext,
    name: str,
    project: Any,
    *,
    description: Optional[str] = None,
    archived: Optional[bool] = None,
    released: Optional[bool] = None,
    start_date: Optional[DateLike] = None,
    release_date: Optional[DateLike] = None,
    credential: Optional[Credential] = None,
) -> Optional[Version]:
    """
    Create a version from discrete fields.

    A project given as a key/id string is resolved to its id first. Optional
    fields left as None never appear in the request body.

    Returns:
        The created Version, or None when the confirmation gate declined
            or the server answered with an empty body

    Raises:
        InputValidationError: Bad name, project or date shape
        ResolutionError: Project string does not resolve
    """
    name = _require_name(name)
    project_ref = ProjectRef.from_value(project, "project")
    body = compact({
        "name": name,
        "description": description,
        "archived": archived,
        "released": released,
        "startDate": _format_date(start_date, "start_date"),
        "releaseDate": _format_date(release_date, "release_date"),
    })

    if not ctx.should_process(name, "Create version"):
        return None

    resolved = resolve_project(ctx, project_ref, credential=credential)
    body.update(_project_field(resolved))

    data = ctx.request("version", method="POST", body=body, credential=credential)
    created = _applied(data, "Create version", name)
    if created is not None:
        logger.info(f"Created version {created.name} ({created.id})")
    return created


def new_version_from_object(
    ctx: OperationContext,
    version: Any,
    *,
    credential: Optional[Credential] = None,
) -> Optional[Version]:
    """
    Create a copy of an existing Version record (e.g. in another project).

    Every populated field of the record is copied; the id is not.

    Returns:
        The created Version, or None when the confirmation gate declined
            or the server answered with an empty body
    """
    if not isinstance(version, Version):
        raise InputValidationError(
            f"Wrong object type provided for version. Expected [{Version.TAG}], "
            f"but was {type(version).__name__}",
            parameter="version",
            expected=Version.TAG,
            actual=type(version).__name__,
        )
    _require_name(version.name)
    if not (version.project_id or version.project_key):
        raise InputValidationError(
            f"Version '{version.name}' carries no project reference",
            parameter="version",
            expected="Version with project_id or project_key",
            actual="Version without project",
        )

    body = compact({
        "name": version.name,
        "description": version.description,
        "archived": version.archived,
        "released": version.released,
        "startDate": version.start_date,
        "releaseDate": version.release_date,
    })
    body.update(_project_field(Project(id=version.project_id or "", key=version.project_key or "")))

    if not ctx.should_process(version.name, "Create version"):
        return None

    data = ctx.request("version", method="POST", body=body, credential=credential)
    created = _applied(data, "Create version", version.name)
    if created is not None:
        logger.info(f"Created version {created.name} ({created.id})")
    return created


def set_version(
    ctx: OperationContext,
    version: Any,
    *,
    name: Optional[str] = None,
    description: Optional[str] = None,
    archived: Optional[bool] = None,
    released: Optional[bool] = None,
    start_date: Optional[DateLike] = None,
    release_date: Optional[DateLike] = None,
    project: Any = None,
    credential: Optional[Credential] = None,
) -> Optional[Version]:
    """
    Update a version. Only the fields passed are sent.

    Returns:
        The updated Version, or None when the confirmation gate declined
            or the server answered with an empty body
    """
    ref = VersionRef.from_value(version, "version")
    if name is not None:
        _require_name(name)
    project_ref = ProjectRef.from_value(project, "project") if project is not None else None

    body = compact({
        "name": name,
        "description": description,
        "archived": archived,
        "released": released,
        "startDate": _format_date(start_date, "start_date"),
        "releaseDate": _format_date(release_date, "release_date"),
    })
    if not body and project_ref is None:
        raise InputValidationError(
            "Nothing to update: pass at least one field",
            parameter="version",
        )

    if not ctx.should_process(ref.identifier, "Update version"):
        return None

    if project_ref is not None:
        body.update(_project_field(resolve_project(ctx, project_ref, credential=credential)))

    data = ctx.request("version/{0}", ref.identifier, method="PUT", body=body, credential=credential)
    return _applied(data, "Update version", ref.identifier)


def remove_version(
    ctx: OperationContext,
    version: Any,
    *,
    credential: Optional[Credential] = None,
) -> None:
    """Delete a version (subject to the confirmation gate)."""
    ref = VersionRef.from_value(version, "version")
    if not ctx.should_process(ref.identifier, "Remove version"):
        return None
    ctx.request("version/{0}", ref.identifier, method="DELETE", credential=credential)
    logger.info(f"Removed version {ref.identifier}")
    return None
