"""devdocs.cli

Command-line entrypoint for devdocs, which bootstraps a repository with:
1) beads issue tracking (`bd init`, with `no-git-ops` enabled),
2) a `devdocs/` documentation skeleton,
3) an `AGENTS.md` methodology section,
4) pi hooks under `.pi/hooks/`.

Entry points
- `devdocs.cli:main`
- `python3 -m devdocs ...` (delegates to this module)

Commands
- `init`: run the bootstrap sequence (`devdocs.orchestrator.InitOrchestrator`).
- `help`, `-h`, `--help`, or no command: print usage and exit 0.
- anything else: `unknown command: <X>` on stderr, usage, exit 1. Nothing is written.
- `--version`: print the package version.
Only the first argument is looked at; anything after it is ignored (`devdocs init extra` runs init).

Environment
- `DEVDOCS_ROOT`: repository root to initialize (default: current working directory).
- `DEVDOCS_TRACKER_CMD`: tracker executable (default: `bd`).
- `NO_COLOR`: disable colored status glyphs.

Exit status
`main()` is the only place fatal errors are turned into an exit status: any `DevdocsError`
raised during `init` is printed as `error: <message>` on stderr and yields 1.
"""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from . import __version__
from .console import error
from .errors import DevdocsError
from .orchestrator import InitConfig, InitOrchestrator
from .templates import PackageTemplates
from .tracker import TrackerClient, run_command

USAGE = """devdocs - Initialize devdocs + beads methodology

Usage:
  devdocs init    Initialize in current directory
  devdocs help    Show this help

Environment:
  DEVDOCS_ROOT          Directory to initialize (default: current directory)
  DEVDOCS_TRACKER_CMD   Tracker executable (default: bd)"""


def print_usage() -> None:
    print(USAGE)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="devdocs",
        add_help=False,
        allow_abbrev=False,
        description="Initialize devdocs + beads methodology.",
    )
    p.add_argument("command", nargs="?", default=None, help="Command to run (init, help).")
    p.add_argument("-h", "--help", action="store_true", help="Show usage and exit.")
    p.add_argument("--version", action="version", version=f"devdocs {__version__}")
    return p


def _resolve_root() -> Path:
    root_env = os.environ.get("DEVDOCS_ROOT")
    return (Path(root_env) if root_env else Path.cwd()).resolve()


def main(argv: list[str] | None = None) -> int:
    raw_argv = list(sys.argv[1:] if argv is None else argv)
    # Only the first argument selects the command; anything after it is ignored.
    command = raw_argv[0] if raw_argv else "help"
    if command.startswith("-"):
        args, _ = build_parser().parse_known_args([command])
        if args.help:
            command = "help"

    if command == "help":
        print_usage()
        return 0
    if command != "init":
        print(f"unknown command: {command}", file=sys.stderr)
        print_usage()
        return 1

    root = _resolve_root()
    tracker = TrackerClient(root=root, executable=os.environ.get("DEVDOCS_TRACKER_CMD", "bd"), runner=run_command)
    cfg = InitConfig(root=root, tracker=tracker, templates=PackageTemplates())
    try:
        InitOrchestrator(cfg).run()
    except DevdocsError as exc:
        error(str(exc))
        return 1
    return 0
