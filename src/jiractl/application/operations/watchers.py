"""
Watcher operations - List, add and remove the watchers of an issue.
"""

from typing import Any, Optional, Union

from ...core.domain.entities import RawResponse, User
from ...core.domain.value_objects import Credential, IssueRef
from ...core.exceptions import InputValidationError
from ...adapters.jira import converters
from .base import OperationContext


def get_issue_watchers(
    ctx: OperationContext,
    issue: Any,
    *,
    credential: Optional[Credential] = None,
) -> Union[list[User], RawResponse]:
    """
    List the watchers of an issue.

    Returns:
        Users in server order (empty when nobody watches or the server
        returned nothing), or the untouched payload as RawResponse when the
        response has no `watchers` key. Callers must handle both.
    """
    ref = IssueRef.from_value(issue, "issue")
    data = ctx.request("issue/{0}/watchers", ref.identifier, credential=credential)
    if data is None:
        return []
    return converters.to_watchers(data)


def _watcher_name(watcher: Any) -> str:
    if isinstance(watcher, User) and (watcher.name or watcher.account_id):
        return watcher.name or watcher.account_id  # type: ignore[return-value]
    if isinstance(watcher, str) and watcher.strip():
        return watcher.strip()
    raise InputValidationError(
        f"Wrong object type provided for watcher. Expected [{User.TAG}] or [str], "
        f"but was {type(watcher).__name__}",
        parameter="watcher",
        expected=f"{User.TAG} or str",
        actual=type(watcher).__name__,
    )


def add_issue_watcher(
    ctx: OperationContext,
    issue: Any,
    watcher: Any,
    *,
    credential: Optional[Credential] = None,
) -> None:
    """Add a user to the watchers of an issue (subject to the confirmation gate)."""
    ref = IssueRef.from_value(issue, "issue")
    name = _watcher_name(watcher)

    if not ctx.should_process(ref.identifier, f"Add watcher '{name}'"):
        return None

    # The endpoint takes a bare JSON string as body.
    ctx.request(
        "issue/{0}/watchers",
        ref.identifier,
        method="POST",
        body=name,
        credential=credential,
    )
    return None


def remove_issue_watcher(
    ctx: OperationContext,
    issue: Any,
    watcher: Any,
    *,
    credential: Optional[Credential] = None,
) -> None:
    """Remove a user from the watchers of an issue (subject to the confirmation gate)."""
    ref = IssueRef.from_value(issue, "issue")
    name = _watcher_name(watcher)

    if not ctx.should_process(ref.identifier, f"Remove watcher '{name}'"):
        return None

    ctx.request(
        "issue/{0}/watchers",
        ref.identifier,
        method="DELETE",
        params={"username": name},
        credential=credential,
    )
    return None
