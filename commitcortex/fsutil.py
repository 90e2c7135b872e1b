"""Filesystem helpers."""

from __future__ import annotations

import os
from pathlib import Path


def require_path(path: str | os.PathLike[str]) -> Path:
    """Return ``path`` as a Path, raising if it cannot be found.

    A missing path raises FileNotFoundError. Any other failure to stat the
    path raises OSError.
    """
    try:
        os.stat(path)
    except FileNotFoundError as err:
        raise FileNotFoundError(f"path does not exist: {os.fspath(path)}") from err
    except OSError as err:
        raise OSError(f"path exists check failed: {err}") from err
    return Path(path)