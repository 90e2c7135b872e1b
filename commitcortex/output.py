"""Terminal styling and report rendering."""

from __future__ import annotations

import sys
from enum import Enum
from typing import Any, TextIO

from commitcortex.components import Report


class Style(str, Enum):
    """ANSI escape sequences for colours and text attributes."""

    RESET = "\033[0m"
    BLACK = "\033[30m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    MAGENTA = "\033[35m"
    CYAN = "\033[36m"
    GRAY = "\033[37m"
    WHITE = "\033[97m"
    BOLD = "\033[1m"
    ITALIC = "\033[3m"
    UNDERLINE = "\033[4m"
    INVERT = "\033[7m"


_TIME_FORMAT = "%Y-%m-%d %H:%M:%y"


def _code(style: Any) -> str:
    return style.value if isinstance(style, Style) else str(style)


def color(value: Any, *args: Style | str) -> str:
    """Wrap ``value`` in the given styles followed by a reset.

    Strings, integers, booleans and lists of strings are accepted.
    """
    if isinstance(value, bool):
        text = "true" if value else "false"
    elif isinstance(value, int):
        text = str(value)
    elif isinstance(value, str):
        text = value
    elif isinstance(value, list) and all(isinstance(item, str) for item in value):
        text = ", ".join(value)
    else:
        raise TypeError(f"unsupported type provided to color: {type(value).__name__}")
    prefix = "".join(_code(style) for style in args)
    return prefix + text + Style.RESET.value


def link(name: str, url: str) -> str:
    """Return a terminal hyperlink showing ``name`` and pointing at ``url``."""
    return f"\033]8;;{url}\033\\{name}\033]8;;\033\\"


def format_report(report: Report) -> str:
    """Render a report as it is printed to the terminal."""
    title = f"--------------- {report.repository.name.upper()} ----------------"
    parts = [color(title, Style.GREEN, Style.BOLD), "\n"]
    for item in report.report_items:
        commit_time = color(item.time.strftime(_TIME_FORMAT), Style.GRAY)
        branch = color(item.branch, Style.BLUE, Style.BOLD)
        message = color(item.commit, Style.WHITE)
        parts.append(f"{commit_time} ({branch}): {message}")
    parts.append("\n")
    return "".join(parts)


def print_report(report: Report, file: TextIO | None = None) -> None:
    """Write a rendered report to ``file`` (standard output by default)."""
    print(format_report(report), end="", file=file if file is not None else sys.stdout)