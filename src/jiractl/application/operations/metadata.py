"""
Metadata operations - Edit and create screen field metadata.

Both responses may carry nested `projects` / `issuetypes` collections that
are expected to hold exactly one entry. A different count is reported as a
non-terminating error and conversion continues with what is there.
"""

from typing import Any, Optional

from ...core.domain.entities import CreateMetaField, EditMetaField
from ...core.domain.value_objects import Credential, IssueRef, ProjectRef
from ...core.exceptions import EmptyResultError, InputValidationError
from ...adapters.jira import converters
from .base import OperationContext


def _check_single(
    ctx: OperationContext,
    collection: Any,
    what: str,
    target: str,
) -> Optional[dict[str, Any]]:
    """
    Report anything but exactly one entry; return the first entry, if any.
    """
    items = list(collection or [])
    if len(items) == 0:
        ctx.write_error(
            category="InvalidResult",
            message=f"No {what} were found for the given input",
            target=target,
            error_id=f"{what}.NotFound",
        )
        return None
    if len(items) > 1:
        ctx.write_error(
            category="InvalidResult",
            message=f"Multiple {what} were found for the given input ({len(items)})",
            target=target,
            error_id=f"{what}.NonUnique",
        )
    first = items[0]
    return first if isinstance(first, dict) else None


def get_issue_edit_metadata(
    ctx: OperationContext,
    issue: Any,
    *,
    credential: Optional[Credential] = None,
) -> list[EditMetaField]:
    """
    Fetch the metadata of the fields that can be edited on an issue.

    Raises:
        InputValidationError: If `issue` is neither an Issue nor a string
        EmptyResultError: If the server returned no metadata
    """
    ref = IssueRef.from_value(issue, "issue")
    data = ctx.request("issue/{0}/editmeta", ref.identifier, credential=credential)
    if not data:
        raise EmptyResultError(f"No metadata found for issue {ref.identifier}")

    fields = data.get("fields") if isinstance(data, dict) else None
    if isinstance(fields, dict) and "projects" in fields:
        project = _check_single(ctx, fields["projects"], "projects", ref.identifier)
        if project is not None and "issuetypes" in project:
            _check_single(ctx, project["issuetypes"], "issuetypes", ref.identifier)

    return converters.to_edit_meta_fields(fields)


def get_issue_create_metadata(
    ctx: OperationContext,
    project: Any,
    issue_type: str,
    *,
    credential: Optional[Credential] = None,
) -> list[CreateMetaField]:
    """
    Fetch the create screen metadata for one project / issue type pair.

    Args:
        ctx: Operation context
        project: Project record, or project key/id
        issue_type: Issue type id (numeric) or name
        credential: Per-call credential override

    Raises:
        EmptyResultError: If the server returned no metadata
    """
    ref = ProjectRef.from_value(project, "project")
    if not isinstance(issue_type, str) or not issue_type.strip():
        raise InputValidationError(
            "Parameter 'issue_type' must be a non-empty string",
            parameter="issue_type",
            expected="str",
            actual=type(issue_type).__name__,
        )

    project_id = ref.record.id if ref.record is not None and ref.record.id else None
    params = {
        "projectIds": project_id or (ref.identifier if ref.identifier.isdigit() else None),
        "projectKeys": None if project_id or ref.identifier.isdigit() else ref.identifier,
        "issuetypeIds": issue_type if issue_type.isdigit() else None,
        "issuetypeNames": None if issue_type.isdigit() else issue_type,
        "expand": "projects.issuetypes.fields",
    }
    data = ctx.request("issue/createmeta", params=params, credential=credential)
    if not data:
        raise EmptyResultError(
            f"No metadata found for project {ref.identifier} and issue type {issue_type}"
        )

    target = f"{ref.identifier}/{issue_type}"
    found_project = _check_single(ctx, data.get("projects"), "projects", target)
    if found_project is None:
        return []
    found_type = _check_single(ctx, found_project.get("issuetypes"), "issuetypes", target)
    if found_type is None:
        return []

    return converters.to_create_meta_fields(found_type.get("fields"))
