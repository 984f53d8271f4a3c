"""Template lookup for the files `devdocs init` writes.

Templates ship as package data under `devdocs/embed/` and are addressed by their file
name (the "key"). The orchestrator depends only on the `TemplateProvider` protocol, so tests
can inject `DictTemplates` instead of reading the packaged files.
"""

from __future__ import annotations

from importlib import resources
from typing import Mapping, Protocol

from .errors import TemplateNotFoundError

README_TEMPLATE = "devdocs-README.md"
AGENTS_TEMPLATE = "AGENTS.md"
BD_PRIME_HOOK_TEMPLATE = "bd-prime.ts"
COMMANDS_HOOK_TEMPLATE = "devdocs-commands.ts"

TEMPLATE_KEYS = (
    README_TEMPLATE,
    AGENTS_TEMPLATE,
    BD_PRIME_HOOK_TEMPLATE,
    COMMANDS_HOOK_TEMPLATE,
)


class TemplateProvider(Protocol):
    def load(self, key: str) -> str: ...


class PackageTemplates:
    """Templates bundled inside the installed `devdocs` package."""

    def __init__(self, *, package: str = "devdocs", directory: str = "embed") -> None:
        self.package = package
        self.directory = directory

    def load(self, key: str) -> str:
        resource = resources.files(self.package).joinpath(self.directory).joinpath(key)
        try:
            return resource.read_text(encoding="utf-8")
        except OSError as exc:
            raise TemplateNotFoundError(f"failed to read embedded file {key}: {exc}") from exc


class DictTemplates:
    def __init__(self, templates: Mapping[str, str]) -> None:
        self._templates = dict(templates)

    def load(self, key: str) -> str:
        try:
            return self._templates[key]
        except KeyError:
            raise TemplateNotFoundError(f"failed to read embedded file {key}: unknown template") from None
