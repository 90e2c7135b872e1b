"""Reports of the commits made in the last day on every branch."""

from __future__ import annotations

import os
import subprocess
from datetime import datetime, timedelta, timezone
from typing import TextIO

from commitcortex.components import Repo, Report, ReportItem
from commitcortex.config import Config, open_config
from commitcortex.output import print_report

_WINDOW = timedelta(hours=24)
_FIELD = "\x1f"


def _git(git_dir: str, *args: str) -> str:
    return subprocess.run(
        ["git", f"--git-dir={git_dir}", *args],
        capture_output=True,
        text=True,
        encoding="utf-8",
        errors="replace",
        check=True,
    ).stdout


def _describe(err: Exception) -> str:
    if isinstance(err, subprocess.CalledProcessError):
        return (err.stderr or "").strip() or str(err)
    return str(err)


def _branches(git_dir: str) -> list[tuple[str, str]]:
    try:
        listing = _git(git_dir, "for-each-ref", "--format=%(objectname) %(refname)", "refs/heads")
    except (OSError, subprocess.CalledProcessError) as err:
        raise RuntimeError(f"error getting references: {_describe(err)}") from err
    branches = []
    for line in listing.splitlines():
        if not line:
            continue
        commit_hash, _, refname = line.partition(" ")
        branches.append((refname.removeprefix("refs/heads/"), commit_hash))
    return branches


def _recent_commits(git_dir: str, branch: str, commit_hash: str, cutoff: datetime) -> list[ReportItem]:
    try:
        log = _git(git_dir, "log", "-z", f"--format=%an{_FIELD}%cI{_FIELD}%B", commit_hash)
    except (OSError, subprocess.CalledProcessError) as err:
        raise RuntimeError(
            f"error getting commit history for branch {branch}: {_describe(err)}"
        ) from err

    items = []
    for record in log.split("\0"):
        if _FIELD not in record:
            continue
        author, when_text, message = record.split(_FIELD, 2)
        when = datetime.fromisoformat(when_text.strip())
        if when < cutoff:
            break
        items.append(ReportItem(branch=branch, commit=message, time=when, author=author))
    return items


def collect_report(repo: Repo, now: datetime | None = None) -> Report:
    """Gather the commits of the last 24 hours on every local branch of ``repo``.

    Each branch's history is walked newest first and stops at the first
    commit older than the window. Git failures raise RuntimeError.
    """
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.astimezone()
    cutoff = now - _WINDOW

    git_dir = os.fspath(repo.path)
    try:
        _git(git_dir, "rev-parse", "--git-dir")
    except (OSError, subprocess.CalledProcessError) as err:
        raise RuntimeError(f"error opening git repository: {_describe(err)}") from err

    report = Report(repository=repo)
    for branch, commit_hash in _branches(git_dir):
        report.report_items.extend(_recent_commits(git_dir, branch, commit_hash, cutoff))
    return report


def create_report(
    config: Config | None = None,
    file: TextIO | None = None,
    now: datetime | None = None,
) -> list[Report]:
    """Print a report for every tracked repository; unreadable ones are skipped."""
    if config is None:
        config = open_config()
    reports = []
    for repo in config.repos:
        try:
            report = collect_report(repo, now)
        except RuntimeError:
            continue
        print_report(report, file)
        reports.append(report)
    return reports