"""Module entrypoint for ``python -m devdocs``.

A thin wrapper around :func:`devdocs.cli.main`; the CLI return code becomes the process
exit status through ``SystemExit``. Equivalent to the ``devdocs`` console script.
"""

from __future__ import annotations

from .cli import main

if __name__ == "__main__":
    raise SystemExit(main())
