"""Command-line interface for tracking git repositories and their recent commits."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from pathlib import Path

from commitcortex.config import Config, open_config
from commitcortex.repos import add, list_repos, tidy
from commitcortex.report import create_report
from commitcortex.scan import scan


def _fail(message: object) -> int:
    print(f"Error: {message}", file=sys.stderr)
    return 1


def _run_add(args: argparse.Namespace, config: Config) -> int:
    try:
        add(args.path, config)
    except (OSError, ValueError) as err:
        return _fail(err)
    return 0


def _run_list(args: argparse.Namespace, config: Config) -> int:
    try:
        list_repos(config)
    except (OSError, ValueError) as err:
        return _fail(f"error listing repos: {err}")
    return 0


def _run_report(args: argparse.Namespace, config: Config) -> int:
    try:
        create_report(config)
    except (OSError, ValueError):
        pass
    return 0


def _run_scan(args: argparse.Namespace, config: Config) -> int:
    path = args.path
    if path is None:
        try:
            path = str(Path.home())
        except RuntimeError as err:
            return _fail(err)
    try:
        scan(path)
    except OSError as err:
        return _fail(err)
    return 0


def _run_tidy(args: argparse.Namespace, config: Config) -> int:
    try:
        tidy(config)
    except (OSError, ValueError):
        pass
    return 0


Handler = Callable[[argparse.Namespace, Config], int]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="commit-cortex",
        description="Track local git repositories and report their recent commits.",
    )
    commands = parser.add_subparsers(dest="command", metavar="command")

    add_parser = commands.add_parser(
        "add", help="Add a repository", description="Add a repository to commit-cortex."
    )
    add_parser.add_argument("path", nargs="?", default=".", help="repository directory")
    add_parser.set_defaults(handler=_run_add)

    list_parser = commands.add_parser("list", help="List tracked repositories")
    list_parser.set_defaults(handler=_run_list)

    report_parser = commands.add_parser(
        "report", help="Show the commits of the last 24 hours"
    )
    report_parser.set_defaults(handler=_run_report)

    scan_parser = commands.add_parser(
        "scan", help="Scan a directory tree for repositories"
    )
    scan_parser.add_argument(
        "path", nargs="?", default=None, help="directory to search (home by default)"
    )
    scan_parser.set_defaults(handler=_run_scan)

    tidy_parser = commands.add_parser(
        "tidy", help="Remove repositories that can no longer be found"
    )
    tidy_parser.set_defaults(handler=_run_tidy)

    return parser


def _load_config() -> Config:
    try:
        return open_config()
    except RuntimeError as err:
        raise OSError(f"error getting home dir: {err}") from err


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return the exit status."""
    parser = _build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as exc:
        return 0 if exc.code in (0, None) else 1

    if args.command is None:
        parser.print_help()
        return 0

    try:
        config = _load_config()
    except (OSError, ValueError) as err:
        return _fail(err)

    handler: Handler = args.handler
    return handler(args, config)


if __name__ == "__main__":
    sys.exit(main())