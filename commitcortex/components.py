"""Data types for tracked repositories and commit reports."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from commitcortex.fsutil import require_path


@dataclass(frozen=True)
class Repo:
    """A repository tracked in the configuration."""

    path: str
    name: str = ""
    remote_url: str = ""

    def to_dict(self) -> dict[str, str]:
        """Return the mapping stored in the configuration file."""
        return {"Path": self.path, "Name": self.name, "RemoteUrl": self.remote_url}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Repo":
        """Build a Repo from a configuration mapping; keys match case-insensitively."""
        if not isinstance(data, Mapping):
            raise TypeError(f"expected a mapping, got {type(data).__name__}")
        lowered = {str(key).lower(): value for key, value in data.items()}

        def text(key: str) -> str:
            value = lowered.get(key)
            return "" if value is None else str(value)

        return cls(path=text("path"), name=text("name"), remote_url=text("remoteurl"))


@dataclass(frozen=True)
class ReportItem:
    """A single commit shown in a report."""

    branch: str
    commit: str
    time: datetime
    author: str


@dataclass
class Report:
    """Recent commits of one repository."""

    repository: Repo
    report_items: list[ReportItem] = field(default_factory=list)


def get_unavailable_repositories(repos: Iterable[Repo]) -> list[Repo]:
    """Return the repositories whose path can no longer be found, in order."""
    unavailable = []
    for repo in repos:
        try:
            require_path(repo.path)
        except OSError:
            unavailable.append(repo)
    return unavailable