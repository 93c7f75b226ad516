"""Reactions CLI entry points.
This module exposes profile and baseline asset commands.
It maps argparse commands onto workspace session calls.
"""

from __future__ import annotations

import argparse
from dataclasses import replace
import sys
from typing import Any, Sequence

from capability.image_selection import read_source_files
from capability.local_fs import guess_mime_type
from capability.pickers import FixedDirectoryPicker, build_directory_picker
from capability.ports import DirectoryPicker
from core.config import ReactionsConfig
from core.constants import SUPPORTED_PICKER_MODES
from core.errors import ReactionsError
from core.logging_config import configure_logging
from session.workspace_session import WorkspaceSession


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="reactions",
        description="Profile-driven baseline image preparation",
    )
    parser.add_argument(
        "--picker",
        choices=SUPPORTED_PICKER_MODES,
        help="Override REACTIONS_PICKER for this command",
    )
    parser.add_argument("--verbose", action="store_true", help="Log info and debug events")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_open_command(subparsers)
    _add_create_command(subparsers)
    _add_add_baseline_command(subparsers)
    _add_list_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Reactions CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(verbose=args.verbose)
    try:
        config = ReactionsConfig.from_env()
        if args.picker:
            config = replace(config, picker_mode=args.picker)
        if args.command == "open":
            return _run_open_command(config, args)
        if args.command == "create":
            return _run_create_command(config, args)
        if args.command == "add-baseline":
            return _run_add_baseline_command(config, args)
        if args.command == "list":
            return _run_list_command(config, args)
    except ReactionsError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _run_open_command(config: ReactionsConfig, args: argparse.Namespace) -> int:
    """Handle open command.

    Args:
        config: Runtime configuration.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    picker = _picker_for(config, args.path)
    with WorkspaceSession(picker, config) as session:
        opened = session.open_profile()
        return _report(session, opened)


def _run_create_command(config: ReactionsConfig, args: argparse.Namespace) -> int:
    """Handle create command.

    Args:
        config: Runtime configuration.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    picker = _picker_for(config, args.parent)
    with WorkspaceSession(picker, config) as session:
        created = session.create_profile(args.name)
        return _report(session, created)


def _run_add_baseline_command(config: ReactionsConfig, args: argparse.Namespace) -> int:
    """Handle add-baseline command.

    Args:
        config: Runtime configuration.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    files = read_source_files(args.files)
    if not files:
        print("error: no image files selected", file=sys.stderr)
        return 1
    with WorkspaceSession(FixedDirectoryPicker(args.profile), config) as session:
        if not session.open_profile():
            return _report(session, False)
        saved = session.save_assets(files)
        return _report(session, saved)


def _run_list_command(config: ReactionsConfig, args: argparse.Namespace) -> int:
    """Handle list command."""
    with WorkspaceSession(FixedDirectoryPicker(args.profile), config) as session:
        opened = session.open_profile()
        return _report(session, opened)


def _picker_for(config: ReactionsConfig, path: str | None) -> DirectoryPicker:
    """Use an explicit path when given, otherwise the interactive picker."""
    if path:
        return FixedDirectoryPicker(path)
    return build_directory_picker(config)


def _report(session: WorkspaceSession, succeeded: bool) -> int:
    """Print the session outcome and map it onto an exit code.

    A cancelled picker exits quietly with status 0.

    Args:
        session: Session after running one command.
        succeeded: Whether the command completed.

    Returns:
        Exit code.
    """
    view = session.view()
    if view.input_error:
        print(f"error: {view.input_error}", file=sys.stderr)
        return 2
    if view.error_message:
        print(f"error: {view.error_message}", file=sys.stderr)
        return 1
    if not view.supported:
        print(f"error: {view.notice}", file=sys.stderr)
        return 1
    if not succeeded:
        return 0
    print(f"profile={view.profile_name}")
    for asset in view.assets:
        content = session.resolve_display(asset.display_reference)
        print(f"{asset.name}\t{len(content)}\t{guess_mime_type(asset.name)}")
    return 0


def _add_open_command(subparsers: Any) -> None:
    """Register open subcommand."""
    parser = subparsers.add_parser("open", help="Open a profile folder and list its baseline")
    parser.add_argument("path", nargs="?", help="Profile folder; omit to pick interactively")


def _add_create_command(subparsers: Any) -> None:
    """Register create subcommand."""
    parser = subparsers.add_parser("create", help="Create a profile folder under a parent")
    parser.add_argument("name", help="Profile name")
    parser.add_argument("--parent", help="Parent folder; omit to pick interactively")


def _add_add_baseline_command(subparsers: Any) -> None:
    """Register add-baseline subcommand."""
    parser = subparsers.add_parser(
        "add-baseline",
        help="Copy image files into a profile's baseline set",
    )
    parser.add_argument("--profile", required=True, help="Profile folder")
    parser.add_argument("files", nargs="+", help="Image files; only the first few are kept")


def _add_list_command(subparsers: Any) -> None:
    """Register list subcommand."""
    parser = subparsers.add_parser("list", help="List a profile's baseline images")
    parser.add_argument("--profile", required=True, help="Profile folder")
