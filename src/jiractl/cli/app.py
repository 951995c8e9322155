"""
CLI Application - Argument parsing and command dispatch.

Examples:
    jiractl issue PROJ-1 PROJ-2
    jiractl watchers PROJ-1
    jiractl projects
    jiractl version new --name 1.0 --project PROJ --execute
    jiractl editmeta PROJ-1
"""

import argparse
import logging
from pathlib import Path
from typing import Any, Optional

from ..adapters.config import EnvironmentConfigProvider
from ..application import operations as ops
from ..application.operations import OperationContext, process_each
from ..core.exceptions import JiractlError
from ..core.ports.transport import TransportPort
from .exit_codes import ExitCode
from .output import Console


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _csv(value: Optional[str]) -> Optional[list[str]]:
    if not value:
        return None
    return [part.strip() for part in value.split(",") if part.strip()]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jiractl",
        description="Typed operations over the Jira REST API",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument("--server", type=str, help="Jira server URL (or set JIRA_URL)")
    parser.add_argument("--username", type=str, help="Username or email (or set JIRA_USERNAME)")
    parser.add_argument("--api-token", type=str, help="API token (or set JIRA_API_TOKEN)")
    parser.add_argument("--env-file", type=Path, help="Path to a .env file")
    parser.add_argument(
        "--execute",
        action="store_true",
        help="Actually execute changes (default is dry-run)",
    )
    parser.add_argument(
        "--no-confirm",
        action="store_true",
        help="Skip confirmation prompts (use with caution!)",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("issue", help="Get issues by key or id")
    p.add_argument("issues", nargs="+")
    p.add_argument("--fields", type=str, help="Comma separated field list")
    p.add_argument("--expand", type=str, help="Comma separated expand list")

    p = sub.add_parser("search", help="Search issues with JQL")
    p.add_argument("jql")
    p.add_argument("--fields", type=str, help="Comma separated field list")
    p.add_argument("--limit", type=int)
    p.add_argument("--page-size", type=int, default=50)

    p = sub.add_parser("watchers", help="List watchers of issues")
    p.add_argument("issues", nargs="+")

    for name, help_text in (("watch", "Add a watcher"), ("unwatch", "Remove a watcher")):
        p = sub.add_parser(name, help=help_text)
        p.add_argument("issue")
        p.add_argument("watcher")

    p = sub.add_parser("project", help="Get projects by key or id")
    p.add_argument("projects", nargs="+")

    sub.add_parser("projects", help="List all visible projects")

    p = sub.add_parser("editmeta", help="Get edit metadata of issues")
    p.add_argument("issues", nargs="+")

    p = sub.add_parser("createmeta", help="Get create metadata for a project and issue type")
    p.add_argument("project")
    p.add_argument("issue_type")

    sub.add_parser("server-info", help="Show server information")

    version = sub.add_parser("version", help="Manage project versions")
    vsub = version.add_subparsers(dest="version_command", required=True)

    p = vsub.add_parser("get", help="Get versions by id")
    p.add_argument("versions", nargs="+")

    p = vsub.add_parser("list", help="List versions of a project")
    p.add_argument("project")
    p.add_argument("--name", type=str, help="Name filter, wildcards allowed")

    for name, help_text in (("new", "Create a version"), ("set", "Update a version")):
        p = vsub.add_parser(name, help=help_text)
        if name == "new":
            p.add_argument("--name", required=True)
            p.add_argument("--project", required=True)
        else:
            p.add_argument("version")
            p.add_argument("--name")
            p.add_argument("--project")
        p.add_argument("--description")
        p.add_argument("--archived", action=argparse.BooleanOptionalAction, default=None)
        p.add_argument("--released", action=argparse.BooleanOptionalAction, default=None)
        p.add_argument("--start-date", help="YYYY-MM-DD")
        p.add_argument("--release-date", help="YYYY-MM-DD")

    p = vsub.add_parser("remove", help="Remove versions by id")
    p.add_argument("versions", nargs="+")

    return parser


def _version_fields(args: argparse.Namespace) -> dict[str, Any]:
    return {
        "description": args.description,
        "archived": args.archived,
        "released": args.released,
        "start_date": args.start_date,
        "release_date": args.release_date,
    }


def is_mutation(args: argparse.Namespace) -> bool:
    if args.command in ("watch", "unwatch"):
        return True
    return args.command == "version" and args.version_command in ("new", "set", "remove")


def dispatch(args: argparse.Namespace, ctx: OperationContext) -> list[Any]:
    """Run the selected command and return its output values."""
    command = args.command

    if command == "issue":
        return process_each(
            ctx, args.issues, ops.get_issue,
            fields=_csv(args.fields), expand=_csv(args.expand),
        )
    if command == "search":
        return ops.search_issues(
            ctx, args.jql, fields=_csv(args.fields),
            page_size=args.page_size, limit=args.limit,
        )
    if command == "watchers":
        return process_each(ctx, args.issues, ops.get_issue_watchers)
    if command == "watch":
        ops.add_issue_watcher(ctx, args.issue, args.watcher)
        return []
    if command == "unwatch":
        ops.remove_issue_watcher(ctx, args.issue, args.watcher)
        return []
    if command == "projects":
        return ops.get_projects(ctx)
    if command == "project":
        return process_each(ctx, args.projects, ops.get_project)
    if command == "editmeta":
        return process_each(ctx, args.issues, ops.get_issue_edit_metadata)
    if command == "createmeta":
        return ops.get_issue_create_metadata(ctx, args.project, args.issue_type)
    if command == "server-info":
        return [ops.get_server_info(ctx)]

    if command == "version":
        sub = args.version_command
        if sub == "get":
            return process_each(ctx, args.versions, ops.get_version)
        if sub == "list":
            return ops.get_project_versions(ctx, args.project, name=args.name)
        if sub == "new":
            created = ops.new_version(ctx, args.name, args.project, **_version_fields(args))
            return [created] if created is not None else []
        if sub == "set":
            updated = ops.set_version(
                ctx, args.version, name=args.name, project=args.project,
                **_version_fields(args),
            )
            return [updated] if updated is not None else []
        if sub == "remove":
            return process_each(ctx, args.versions, ops.remove_version)

    raise ValueError(f"Unknown command: {command}")


def run(
    args: argparse.Namespace,
    console: Optional[Console] = None,
    transport: Optional[TransportPort] = None,
    environ: Optional[dict[str, str]] = None,
) -> int:
    """
    Execute parsed arguments.

    Args:
        args: Parsed CLI arguments
        console: Output console
        transport: Transport override (tests)
        environ: Environment override (tests)

    Returns:
        Process exit code
    """
    console = console or Console(color=not args.no_color, verbose=args.verbose)
    logger = logging.getLogger("main")

    provider = EnvironmentConfigProvider(
        env_file=args.env_file,
        cli_overrides={
            "server": args.server,
            "username": args.username,
            "api_token": args.api_token,
            "execute": args.execute,
            "no_confirm": args.no_confirm,
            "verbose": args.verbose,
        },
        environ=environ,
    )
    problems = provider.validate()
    if problems:
        for problem in problems:
            console.error(problem)
        return ExitCode.CONFIG_ERROR

    app_config = provider.load()

    def confirm(target: str, action: str) -> bool:
        return console.confirm(f"{action}: {target}?")

    ctx = OperationContext.from_config(app_config, transport=transport, confirm=confirm)

    if ctx.dry_run and is_mutation(args):
        console.dry_run_banner()

    try:
        outputs = dispatch(args, ctx)
    except JiractlError as e:
        logger.debug("Command failed", exc_info=True)
        console.error(e.message)
        for detail in getattr(e, "error_messages", []):
            console.detail(detail)
        console.error_records(ctx.errors)
        return ExitCode.from_exception(e)

    console.records(outputs)
    console.error_records(ctx.errors)
    return ExitCode.PARTIAL_FAILURE if ctx.errors else ExitCode.SUCCESS


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)
    return int(run(args))
