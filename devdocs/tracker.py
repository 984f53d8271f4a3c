"""Client for the external beads issue tracker (`bd`).

`TrackerClient` maps a small set of tracker operations onto argument vectors and hands them
to a `CommandRunner`. The default runner (`run_command`) shells out via `subprocess` with
stdout/stderr inherited from this process, so tracker output reaches the user unchanged;
only the exit status is inspected.

Error mapping
- A non-zero exit status raises `TrackerError`.
- A missing or non-executable binary (`OSError` from the runner) also raises `TrackerError`.
Whether a failure is fatal is decided by the caller (see `devdocs.orchestrator`).
"""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Callable

from .errors import TrackerError

CommandRunner = Callable[[list[str], Path], int]

TRACKER_DIR = ".beads"


def run_command(argv: list[str], cwd: Path) -> int:
    p = subprocess.run(argv, cwd=cwd, check=False)
    return p.returncode


class TrackerClient:
    def __init__(self, *, root: Path, executable: str = "bd", runner: CommandRunner = run_command) -> None:
        self.root = root
        self.executable = executable
        self.runner = runner

    @property
    def tracker_dir(self) -> Path:
        return self.root / TRACKER_DIR

    def is_initialized(self) -> bool:
        return self.tracker_dir.is_dir()

    def init(self) -> None:
        self._run(["init"])

    def set_config(self, key: str, value: str) -> None:
        self._run(["config", "set", key, value])

    def _run(self, args: list[str]) -> None:
        argv = [self.executable, *args]
        try:
            code = self.runner(argv, self.root)
        except OSError as exc:
            raise TrackerError(f"{' '.join(argv)}: {exc}") from exc
        if code != 0:
            raise TrackerError(f"{' '.join(argv)}: exit status {code}")
