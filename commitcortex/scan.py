"""Searching a directory tree for git repositories."""

from __future__ import annotations

import os
import sys
from collections import deque
from collections.abc import Iterator
from pathlib import Path
from typing import TextIO


def _is_dir(entry: os.DirEntry[str]) -> bool:
    try:
        return entry.is_dir(follow_symlinks=False)
    except OSError:
        return False


def _walk(root: str) -> Iterator[tuple[str, bool]]:
    """Yield each visited directory and whether it holds a ``.git`` directory.

    Directories whose name contains a dot are not descended into, and
    unreadable directories are passed over.
    """
    pending = deque([root])
    while pending:
        directory = pending.popleft()
        is_repo = False
        try:
            with os.scandir(directory) as listing:
                entries = sorted(listing, key=lambda entry: entry.name)
        except OSError:
            yield directory, False
            continue
        for entry in entries:
            if not _is_dir(entry):
                continue
            if entry.name == ".git":
                is_repo = True
            elif "." not in entry.name:
                pending.append(os.path.join(directory, entry.name))
        yield directory, is_repo


def find_git_repositories(path: str | os.PathLike[str]) -> list[str]:
    """Return the absolute paths of all repository roots below ``path``."""
    root = os.path.abspath(os.fspath(path))
    return [directory for directory, is_repo in _walk(root) if is_repo]


def scan(path: str | os.PathLike[str] | None = None, file: TextIO | None = None) -> list[str]:
    """Search ``path`` (the home directory by default), printing progress and results."""
    out = file if file is not None else sys.stdout
    root = os.path.abspath(os.fspath(path) if path is not None else str(Path.home()))
    found = []
    for directory, is_repo in _walk(root):
        print(f"Currently processing: {directory}", file=out)
        if is_repo:
            found.append(directory)
    print("Found .git repositories:", file=out)
    for repo in found:
        print(repo, file=out)
    return found