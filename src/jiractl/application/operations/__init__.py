"""
Operations - One public function per Jira REST action.

Every operation takes an OperationContext first, validates its primary input
before any request is built, and returns tagged records.
"""

from .base import OperationContext, process_each
from .issues import get_issue, search_issues
from .watchers import get_issue_watchers, add_issue_watcher, remove_issue_watcher
from .projects import get_project, get_projects, resolve_project
from .versions import (
    get_version,
    get_project_versions,
    new_version,
    new_version_from_object,
    set_version,
    remove_version,
)
from .metadata import get_issue_edit_metadata, get_issue_create_metadata
from .server import get_server_info

__all__ = [
    "OperationContext",
    "process_each",
    "get_issue",
    "search_issues",
    "get_issue_watchers",
    "add_issue_watcher",
    "remove_issue_watcher",
    "get_project",
    "get_projects",
    "resolve_project",
    "get_version",
    "get_project_versions",
    "new_version",
    "new_version_from_object",
    "set_version",
    "remove_version",
    "get_issue_edit_metadata",
    "get_issue_create_metadata",
    "get_server_info",
]
