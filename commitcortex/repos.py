"""Adding, listing and tidying the tracked repositories."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Iterable
from typing import TextIO

from commitcortex.components import Repo, get_unavailable_repositories
from commitcortex.config import Config, open_config
from commitcortex.fsutil import require_path
from commitcortex.output import Style, color, link


class AlreadyAddedError(ValueError):
    """Raised when a repository is already tracked."""


def _out(file: TextIO | None) -> TextIO:
    return file if file is not None else sys.stdout


def add(path: str | os.PathLike[str] = ".", config: Config | None = None) -> Repo:
    """Start tracking the git repository at ``path`` and save the configuration."""
    if config is None:
        config = open_config()
    try:
        abs_path = os.path.abspath(os.fspath(path))
    except OSError as err:
        raise OSError(f"error getting absolute path: {err}") from err
    git_path = f"{abs_path}/.git"

    require_path(abs_path)
    require_path(git_path)
    is_added(config.repos, git_path)

    try:
        remote_url = get_remote_url(abs_path)
    except RuntimeError:
        remote_url = ""

    repo = Repo(path=git_path, name=get_repo_name(abs_path), remote_url=remote_url)
    config.repos.append(repo)
    config.save()
    return repo


def is_added(repos: Iterable[Repo], git_path: str) -> None:
    """Raise AlreadyAddedError if a repository with ``git_path`` is tracked."""
    if any(repo.path == git_path for repo in repos):
        raise AlreadyAddedError("repo already added")


def get_repo_name(path: str) -> str:
    """Return the last element of ``path``, ignoring trailing separators."""
    if not path:
        return "."
    stripped = path.rstrip("/" + os.sep)
    if not stripped:
        return os.sep
    return os.path.basename(stripped)


def get_remote_url(path: str | os.PathLike[str]) -> str:
    """Return the browsable URL of the ``origin`` remote of the repository at ``path``."""
    try:
        result = subprocess.run(
            ["git", "-C", os.fspath(path), "remote", "get-url", "origin"],
            capture_output=True,
            text=True,
            check=True,
        )
    except subprocess.CalledProcessError as err:
        detail = (err.stderr or "").strip() or str(err)
        raise RuntimeError(f"error getting remote url: {detail}") from err
    except OSError as err:
        raise RuntimeError(f"error getting remote url: {err}") from err

    url = result.stdout.replace("[email]:", "https://github.com/", 1)
    if url.endswith(".git\n"):
        url = url[: -len(".git\n")]
    return url


def _repo_line(repo: Repo) -> str:
    prefix = color(f"[{link(repo.name, repo.remote_url)}]: ", Style.BLUE, Style.BOLD)
    return prefix + color(repo.path, Style.CYAN)


def list_repos(config: Config | None = None, file: TextIO | None = None) -> None:
    """Print the tracked repositories, with the missing ones listed separately."""
    if config is None:
        config = open_config()
    out = _out(file)
    repos = config.repos

    if not repos:
        print(color("Currently no repositories are tracked.", Style.RED, Style.BOLD), file=out)
        return

    unavailable = get_unavailable_repositories(repos)

    print(color("Tracked repositories:", Style.GREEN, Style.BOLD), file=out)
    for repo in repos:
        if repo in unavailable:
            continue
        print(_repo_line(repo), file=out)

    if unavailable:
        print(file=out)
        print(
            color(
                "Not found repositories: (remove with `cc tidy` if not needed anymore)",
                Style.RED,
                Style.BOLD,
            ),
            file=out,
        )
        for repo in unavailable:
            print(_repo_line(repo), file=out)


def remove_subset(fullset: Iterable[Repo], subset: Iterable[Repo]) -> list[Repo]:
    """Return ``fullset`` without the first repository matching each path in ``subset``."""
    remaining = list(fullset)
    for unwanted in subset:
        for position, repo in enumerate(remaining):
            if repo.path == unwanted.path:
                del remaining[position]
                break
    return remaining


def tidy(config: Config | None = None, file: TextIO | None = None) -> list[Repo]:
    """Drop repositories that can no longer be found and save the configuration.

    Returns the repositories that were removed.
    """
    if config is None:
        config = open_config()
    unavailable = get_unavailable_repositories(config.repos)
    config.repos = remove_subset(config.repos, unavailable)
    config.save()
    print("Removed unavailable repositories from the config.", file=_out(file))
    return unavailable