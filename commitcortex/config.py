"""The JSON configuration file that lists tracked repositories."""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from commitcortex.components import Repo

CONFIG_NAME = ".commit-cortex"
CONFIG_TYPE = "json"


def default_config_path(home: str | os.PathLike[str] | None = None) -> Path:
    """Return the configuration file path inside ``home`` (the user's home by default)."""
    base = Path(home) if home is not None else Path.home()
    return base / f"{CONFIG_NAME}.{CONFIG_TYPE}"


@dataclass
class Config:
    """Loaded configuration: tracked repositories plus any other settings."""

    path: Path
    repos: list[Repo] = field(default_factory=list)
    extra: dict[str, Any] = field(default_factory=dict)

    def save(self) -> None:
        """Write the configuration back to its file."""
        data = dict(self.extra)
        data["repos"] = [repo.to_dict() for repo in self.repos]
        try:
            self.path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
        except OSError as err:
            raise OSError(f"error writing config: {err}") from err


def _parse_repos(value: Any) -> list[Repo]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError("error unmarshalling repos: expected a list")
    try:
        return [Repo.from_dict(item) for item in value]
    except TypeError as err:
        raise ValueError(f"error unmarshalling repos: {err}") from err


def open_config(path: str | os.PathLike[str] | None = None) -> Config:
    """Load the configuration, creating an empty file first if none exists."""
    config_path = Path(path) if path is not None else default_config_path()
    if not config_path.exists():
        try:
            config_path.write_text("{}\n", encoding="utf-8")
        except OSError as err:
            raise OSError(f"failed to write: {err}") from err
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as err:
        raise ValueError(f"error reading config file: {err}") from err
    if not isinstance(data, Mapping):
        raise ValueError("error reading config file: top level is not an object")

    extra: dict[str, Any] = {}
    repos_value = None
    for key, value in data.items():
        if key.lower() == "repos":
            repos_value = value
        else:
            extra[key] = value
    return Config(path=config_path, repos=_parse_repos(repos_value), extra=extra)