from __future__ import annotations

import os
import sys
from typing import TextIO

ANSI_COLORS = {
    "green": "0;32",
    "yellow": "1;33",
}


def use_color(stream: TextIO) -> bool:
    if os.environ.get("NO_COLOR"):
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def colorize(text: str, *, color: str, stream: TextIO) -> str:
    code = ANSI_COLORS.get(color)
    if code is None or not use_color(stream):
        return text
    return f"\033[{code}m{text}\033[0m"


def info(msg: str, *, stream: TextIO | None = None) -> None:
    out = stream or sys.stdout
    print(f"{colorize('✓', color='green', stream=out)} {msg}", file=out)


def warn(msg: str, *, stream: TextIO | None = None) -> None:
    out = stream or sys.stdout
    print(f"{colorize('!', color='yellow', stream=out)} {msg}", file=out)


def error(msg: str, *, stream: TextIO | None = None) -> None:
    print(f"error: {msg}", file=stream or sys.stderr)
