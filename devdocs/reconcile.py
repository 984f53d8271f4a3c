"""Artifact reconciliation: bring one file or directory to its desired state.

Each artifact is handled independently and statelessly; the filesystem content is the only
state. Two merge policies exist:

- `MergePolicy.CREATE_IF_ABSENT`: write-once. An existing file is never touched, whatever its
  content.
- `MergePolicy.MARKER_RECONCILE`: inspect the existing content and pick the least disruptive
  write. Checks run in this order:
  1) missing file -> write the template (`CREATED`)
  2) content contains `marker` -> leave it alone (`ALREADY_PRESENT`)
  3) content contains `legacy_marker` -> overwrite with the template (`REPLACED`)
  4) anything else -> append `"\\n" + template` (`APPENDED`)
  The marker check must precede the legacy check so a reconciled file that also mentions the
  legacy text is never re-classified as legacy.

Markers are plain substring tests; a marker inside a code block or comment still counts.

Every failure (filesystem errors and template content that could never reach a fixed point)
is raised as `ReconcileError` so the CLI can report it as fatal.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .errors import ReconcileError
from .templates import TemplateProvider

AGENTS_MARKER = "## Issue Tracking (bd)"
BEADS_LEGACY_MARKER = "Landing the Plane"


class MergePolicy(str, Enum):
    CREATE_IF_ABSENT = "create-if-absent"
    MARKER_RECONCILE = "marker-reconcile"


class ReconciliationOutcome(str, Enum):
    CREATED = "created"
    ALREADY_PRESENT = "already-present"
    APPENDED = "appended"
    REPLACED = "replaced"


@dataclass(frozen=True)
class Artifact:
    path: Path
    template_key: str
    merge_policy: MergePolicy = MergePolicy.CREATE_IF_ABSENT
    marker: str | None = None
    legacy_marker: str | None = None


def reconcile(artifact: Artifact, templates: TemplateProvider) -> ReconciliationOutcome:
    content = templates.load(artifact.template_key)
    if artifact.merge_policy == MergePolicy.CREATE_IF_ABSENT:
        return create_if_absent(artifact.path, content)
    if artifact.merge_policy == MergePolicy.MARKER_RECONCILE:
        if artifact.marker is None or artifact.legacy_marker is None:
            raise ReconcileError(f"{artifact.path}: marker reconciliation needs marker and legacy_marker")
        return marker_reconcile(
            artifact.path,
            content,
            marker=artifact.marker,
            legacy_marker=artifact.legacy_marker,
        )
    raise ReconcileError(f"Unknown merge policy: {artifact.merge_policy}")


def create_if_absent(path: Path, content: str) -> ReconciliationOutcome:
    if path.exists():
        return ReconciliationOutcome.ALREADY_PRESENT
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise ReconcileError(f"failed to create {path.parent} directory: {exc}") from exc
    try:
        with path.open("x", encoding="utf-8") as handle:
            handle.write(content)
    except FileExistsError:
        return ReconciliationOutcome.ALREADY_PRESENT
    except OSError as exc:
        raise ReconcileError(f"failed to write {path}: {exc}") from exc
    return ReconciliationOutcome.CREATED


def marker_reconcile(path: Path, new_content: str, *, marker: str, legacy_marker: str) -> ReconciliationOutcome:
    check_reconcilable(new_content, marker=marker, legacy_marker=legacy_marker)

    if not path.exists():
        _write(path, new_content)
        return ReconciliationOutcome.CREATED

    try:
        existing = path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise ReconcileError(f"failed to read {path}: {exc}") from exc

    if marker in existing:
        return ReconciliationOutcome.ALREADY_PRESENT

    if legacy_marker in existing:
        _write(path, new_content)
        return ReconciliationOutcome.REPLACED

    try:
        with path.open("a", encoding="utf-8") as handle:
            handle.write("\n" + new_content)
    except OSError as exc:
        raise ReconcileError(f"failed to append to {path}: {exc}") from exc
    return ReconciliationOutcome.APPENDED


def check_reconcilable(content: str, *, marker: str, legacy_marker: str) -> None:
    """Reject template content that would never reach a fixed point.

    Without `marker` every run would append another copy; with `legacy_marker` (and no
    marker) every run would replace the file again.
    """
    if marker not in content:
        raise ReconcileError(f"template content does not contain marker {marker!r}")
    if legacy_marker in content:
        raise ReconcileError(f"template content contains legacy marker {legacy_marker!r}")


def ensure_directory(path: Path) -> ReconciliationOutcome:
    if path.is_dir():
        return ReconciliationOutcome.ALREADY_PRESENT
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise ReconcileError(f"failed to create {path} directory: {exc}") from exc
    return ReconciliationOutcome.CREATED


def _write(path: Path, content: str) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise ReconcileError(f"failed to write {path}: {exc}") from exc
