"""devdocs: bootstrap a repository's documentation and issue-tracking conventions.

`devdocs init` (see `devdocs.cli:main`, runnable via `python -m devdocs`) prepares the
current repository for agent-assisted work:

- initializes beads (`bd`) issue tracking if `.beads/` is missing, and turns on `no-git-ops`,
- creates `devdocs/archive/` and a `devdocs/README.md` index,
- adds the devdocs methodology to `AGENTS.md`,
- installs the `bd-prime` and `devdocs-commands` pi hooks under `.pi/hooks/`.

Important invariants
- Every run is idempotent: files that already exist are never overwritten, except an
  `AGENTS.md` that is recognizably the tracker's stock content ("Landing the Plane"),
  which is replaced once by the methodology.
- A user-authored `AGENTS.md` is only ever appended to, never rewritten.
- Fatal errors stop the run immediately; nothing is rolled back.

Key exports from this module
- `__version__`: the package version string.
"""

from __future__ import annotations

__all__ = ["__version__"]

__version__ = "0.1.0"
