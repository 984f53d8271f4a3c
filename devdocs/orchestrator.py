"""devdocs orchestrator: the `devdocs init` bootstrap sequence.

Steps, in order (each artifact prints exactly one status line before the next starts):

1. Tracker
  - If `.beads/` is missing, run `bd init`. Failure is fatal (`TrackerError`).
  - Always run `bd config set no-git-ops true`. Failure is only a warning: later steps do not
    depend on it, so the run continues and the warning is recorded in the report.
2. Directory skeleton
  - Create `devdocs/archive/` recursively (fatal on failure).
  - `devdocs/README.md`: create-if-absent.
3. Methodology
  - `AGENTS.md`: marker reconciliation (see `devdocs.reconcile`).
4. Hooks
  - Create `.pi/hooks/` (fatal on failure).
  - `.pi/hooks/bd-prime.ts` and `.pi/hooks/devdocs-commands.ts`: create-if-absent.

There is no rollback: a fatal error raises out of `run()` and leaves earlier effects in place.
Running `init` again is always safe; a fully initialized repository reports
`ALREADY_PRESENT` for every artifact and is not modified.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .console import info, warn
from .errors import TrackerError
from .reconcile import (
    AGENTS_MARKER,
    BEADS_LEGACY_MARKER,
    Artifact,
    MergePolicy,
    ReconciliationOutcome,
    ensure_directory,
    reconcile,
)
from .templates import (
    AGENTS_TEMPLATE,
    BD_PRIME_HOOK_TEMPLATE,
    COMMANDS_HOOK_TEMPLATE,
    README_TEMPLATE,
    TemplateProvider,
)
from .tracker import TRACKER_DIR, TrackerClient

NO_GIT_OPS_KEY = "no-git-ops"

AGENTS_MESSAGES: dict[ReconciliationOutcome, str] = {
    ReconciliationOutcome.CREATED: "Created AGENTS.md",
    ReconciliationOutcome.ALREADY_PRESENT: "AGENTS.md already contains devdocs methodology",
    ReconciliationOutcome.REPLACED: "Replaced beads AGENTS.md with devdocs methodology (no-git-ops mode)",
    ReconciliationOutcome.APPENDED: "Appended devdocs methodology to AGENTS.md",
}

SUMMARY = """
Done! Your repository now has:
  • Beads issue tracking (bd)
  • devdocs/ for epics and reference docs
  • AGENTS.md with methodology
  • pi hooks for bd prime + slash commands

Slash commands: /epic-create, /epic-archive, /devdocs-status, etc.
Run /help in pi to see all commands."""


@dataclass(frozen=True)
class InitConfig:
    root: Path
    tracker: TrackerClient
    templates: TemplateProvider

    @property
    def devdocs_dir(self) -> Path:
        return self.root / "devdocs"

    @property
    def archive_dir(self) -> Path:
        return self.devdocs_dir / "archive"

    @property
    def hooks_dir(self) -> Path:
        return self.root / ".pi" / "hooks"

    def readme_artifact(self) -> Artifact:
        return Artifact(path=self.devdocs_dir / "README.md", template_key=README_TEMPLATE)

    def agents_artifact(self) -> Artifact:
        return Artifact(
            path=self.root / "AGENTS.md",
            template_key=AGENTS_TEMPLATE,
            merge_policy=MergePolicy.MARKER_RECONCILE,
            marker=AGENTS_MARKER,
            legacy_marker=BEADS_LEGACY_MARKER,
        )

    def hook_artifacts(self) -> list[Artifact]:
        return [
            Artifact(path=self.hooks_dir / "bd-prime.ts", template_key=BD_PRIME_HOOK_TEMPLATE),
            Artifact(path=self.hooks_dir / "devdocs-commands.ts", template_key=COMMANDS_HOOK_TEMPLATE),
        ]


@dataclass(frozen=True)
class StepReport:
    label: str
    outcome: ReconciliationOutcome


@dataclass
class InitReport:
    steps: list[StepReport] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def outcomes(self) -> dict[str, ReconciliationOutcome]:
        return {s.label: s.outcome for s in self.steps}


class InitOrchestrator:
    def __init__(self, cfg: InitConfig) -> None:
        self.cfg = cfg

    def run(self) -> InitReport:
        report = InitReport()
        self._init_tracker(report)
        self._init_devdocs(report)
        self._init_agents_md(report)
        self._init_hooks(report)
        print(SUMMARY)
        return report

    def _init_tracker(self, report: InitReport) -> None:
        tracker = self.cfg.tracker
        label = f"{TRACKER_DIR}/"
        if tracker.is_initialized():
            info("Beads already initialized")
            report.steps.append(StepReport(label, ReconciliationOutcome.ALREADY_PRESENT))
        else:
            try:
                tracker.init()
            except TrackerError as exc:
                raise TrackerError(f"failed to initialize beads: {exc}") from exc
            info("Initialized beads")
            report.steps.append(StepReport(label, ReconciliationOutcome.CREATED))

        try:
            tracker.set_config(NO_GIT_OPS_KEY, "true")
        except TrackerError as exc:
            msg = f"failed to set {NO_GIT_OPS_KEY} config: {exc}"
            warn(msg)
            report.warnings.append(msg)
        else:
            info(f"Set {NO_GIT_OPS_KEY} config")

    def _init_devdocs(self, report: InitReport) -> None:
        label = self._label(self.cfg.archive_dir) + "/"
        outcome = ensure_directory(self.cfg.archive_dir)
        if outcome == ReconciliationOutcome.CREATED:
            info(f"Created {label}")
        else:
            info(f"{label} already exists")
        report.steps.append(StepReport(label, outcome))

        self._create_if_absent(self.cfg.readme_artifact(), report)

    def _init_agents_md(self, report: InitReport) -> None:
        artifact = self.cfg.agents_artifact()
        outcome = reconcile(artifact, self.cfg.templates)
        info(AGENTS_MESSAGES[outcome])
        report.steps.append(StepReport(self._label(artifact.path), outcome))

    def _init_hooks(self, report: InitReport) -> None:
        ensure_directory(self.cfg.hooks_dir)
        for artifact in self.cfg.hook_artifacts():
            self._create_if_absent(artifact, report)

    def _create_if_absent(self, artifact: Artifact, report: InitReport) -> None:
        label = self._label(artifact.path)
        outcome = reconcile(artifact, self.cfg.templates)
        if outcome == ReconciliationOutcome.CREATED:
            info(f"Created {label}")
        else:
            info(f"{label} already exists")
        report.steps.append(StepReport(label, outcome))

    def _label(self, path: Path) -> str:
        try:
            return path.relative_to(self.cfg.root).as_posix()
        except ValueError:
            return str(path)
