from __future__ import annotations

from pathlib import Path

import pytest

from devdocs.templates import DictTemplates

AGENTS_TEMPLATE_TEXT = "# Agent Instructions\n\n## Issue Tracking (bd)\n\nUse bd.\n"


class FakeRunner:
    """Records tracker invocations; `bd init` creates `.beads/` like the real tool."""

    def __init__(self, *, codes: dict[str, int] | None = None, missing: bool = False) -> None:
        self.codes = codes or {}
        self.missing = missing
        self.calls: list[tuple[list[str], Path]] = []

    def __call__(self, argv: list[str], cwd: Path) -> int:
        self.calls.append((list(argv), cwd))
        if self.missing:
            raise FileNotFoundError(2, "No such file or directory", argv[0])
        code = self.codes.get(argv[1], 0)
        if argv[1:] == ["init"] and code == 0:
            (cwd / ".beads").mkdir()
        return code


@pytest.fixture
def templates() -> DictTemplates:
    return DictTemplates(
        {
            "devdocs-README.md": "# devdocs\n",
            "AGENTS.md": AGENTS_TEMPLATE_TEXT,
            "bd-prime.ts": "// bd prime\n",
            "devdocs-commands.ts": "// commands\n",
        }
    )


@pytest.fixture
def make_runner() -> type[FakeRunner]:
    return FakeRunner
