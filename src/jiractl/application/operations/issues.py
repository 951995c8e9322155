"""
Issue operations - Retrieve issues by key/id or by JQL.
"""

import logging
from typing import Any, Optional, Sequence

from ...core.domain.entities import Issue
from ...core.domain.value_objects import Credential, IssueRef
from ...core.exceptions import InputValidationError
from ...adapters.jira import converters
from .base import OperationContext, require_result


logger = logging.getLogger("IssueOperations")


def get_issue(
    ctx: OperationContext,
    issue: Any,
    *,
    fields: Optional[Sequence[str]] = None,
    expand: Optional[Sequence[str]] = None,
    credential: Optional[Credential] = None,
) -> Issue:
    """
    Fetch a single issue.

    Args:
        ctx: Operation context
        issue: Issue record, or issue key/id
        fields: Restrict the returned field bag
        expand: Entities to expand (e.g. "changelog")
        credential: Per-call credential override

    Raises:
        InputValidationError: If `issue` is neither an Issue nor a string
        EmptyResultError: If the server answered with an empty body
        TransportError: On HTTP failure (404 for unknown issues)
    """
    ref = IssueRef.from_value(issue, "issue")
    params = {
        "fields": ",".join(fields) if fields else None,
        "expand": ",".join(expand) if expand else None,
    }
    data = ctx.request("issue/{0}", ref.identifier, credential=credential, params=params)
    return converters.to_issue(require_result(data, ref.identifier), ctx.config.base_url)


def search_issues(
    ctx: OperationContext,
    jql: str,
    *,
    fields: Optional[Sequence[str]] = None,
    page_size: int = 50,
    limit: Optional[int] = None,
    credential: Optional[Credential] = None,
) -> list[Issue]:
    """
    Run a JQL search, following pages until the result set or `limit` is exhausted.

    Each page is a separate request; nothing is fetched concurrently.
    """
    if not isinstance(jql, str) or not jql.strip():
        raise InputValidationError(
            "Parameter 'jql' must be a non-empty string",
            parameter="jql",
            expected="str",
            actual=type(jql).__name__,
        )
    if page_size < 1:
        raise InputValidationError(
            "Parameter 'page_size' must be positive",
            parameter="page_size",
            expected="int > 0",
            actual=str(page_size),
        )

    issues: list[Issue] = []
    start_at = 0
    while True:
        max_results = page_size
        if limit is not None:
            max_results = min(page_size, limit - len(issues))
            if max_results <= 0:
                break

        body: dict[str, Any] = {
            "jql": jql,
            "startAt": start_at,
            "maxResults": max_results,
        }
        if fields:
            body["fields"] = list(fields)

        data = ctx.request("search", method="POST", body=body, credential=credential) or {}
        page = data.get("issues") or []
        issues.extend(converters.to_issue(item, ctx.config.base_url) for item in page)
        logger.debug(f"Fetched {len(page)} issues (startAt={start_at})")

        start_at += len(page)
        total = data.get("total")
        if not page or (total is not None and start_at >= total):
            break

    return issues
