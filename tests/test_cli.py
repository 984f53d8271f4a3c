from __future__ import annotations

from pathlib import Path

import pytest

import devdocs.cli as cli
from devdocs.errors import TrackerError
from devdocs.templates import TEMPLATE_KEYS, DictTemplates


def test_build_parser_accepts_optional_command() -> None:
    parser = cli.build_parser()

    assert parser.parse_args([]).command is None
    assert parser.parse_args(["init"]).command == "init"
    assert parser.parse_args(["-h"]).help is True


@pytest.mark.parametrize("argv", [[], ["help"], ["-h"], ["--help"], ["help", "extra"], ["-h", "init"]])
def test_main_prints_usage(argv: list[str], capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(argv) == 0

    out = capsys.readouterr().out
    assert "Usage:" in out
    assert "devdocs init" in out


@pytest.mark.parametrize(
    ("argv", "name"),
    [
        (["foo"], "foo"),
        (["foo", "bar"], "foo"),
        (["-x"], "-x"),
        (["--force"], "--force"),
        (["--hel"], "--hel"),
        (["-"], "-"),
    ],
)
def test_main_unknown_command_writes_nothing(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, capsys: pytest.CaptureFixture[str], argv: list[str], name: str
) -> None:
    monkeypatch.setenv("DEVDOCS_ROOT", str(tmp_path))

    assert cli.main(argv) == 1

    captured = capsys.readouterr()
    assert captured.err == f"unknown command: {name}\n"
    assert "Usage:" in captured.out
    assert list(tmp_path.iterdir()) == []


def test_main_init_wires_root_tracker_and_templates(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("DEVDOCS_ROOT", str(tmp_path))
    monkeypatch.setenv("DEVDOCS_TRACKER_CMD", "bd-custom")
    captured: dict[str, object] = {}

    class FakeOrchestrator:
        def __init__(self, cfg: object) -> None:
            captured["cfg"] = cfg

        def run(self) -> None:
            captured["ran"] = True

    monkeypatch.setattr(cli, "InitOrchestrator", FakeOrchestrator)

    assert cli.main(["init"]) == 0

    cfg = captured["cfg"]
    assert captured["ran"] is True
    assert cfg.root == tmp_path.resolve()
    assert cfg.tracker.root == tmp_path.resolve()
    assert cfg.tracker.executable == "bd-custom"
    assert isinstance(cfg.templates, cli.PackageTemplates)


def test_main_init_defaults_to_cwd(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.delenv("DEVDOCS_ROOT", raising=False)
    monkeypatch.delenv("DEVDOCS_TRACKER_CMD", raising=False)
    monkeypatch.chdir(tmp_path)
    captured: dict[str, object] = {}

    class FakeOrchestrator:
        def __init__(self, cfg: object) -> None:
            captured["cfg"] = cfg

        def run(self) -> None:
            return None

    monkeypatch.setattr(cli, "InitOrchestrator", FakeOrchestrator)

    assert cli.main(["init"]) == 0
    assert captured["cfg"].root == tmp_path.resolve()
    assert captured["cfg"].tracker.executable == "bd"


def test_main_reports_fatal_errors(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("DEVDOCS_ROOT", str(tmp_path))

    class FailingOrchestrator:
        def __init__(self, cfg: object) -> None:
            pass

        def run(self) -> None:
            raise TrackerError("failed to initialize beads: bd init: exit status 1")

    monkeypatch.setattr(cli, "InitOrchestrator", FailingOrchestrator)

    assert cli.main(["init"]) == 1
    assert capsys.readouterr().err == "error: failed to initialize beads: bd init: exit status 1\n"


def test_main_init_end_to_end_with_fake_tracker(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, make_runner: type
) -> None:
    monkeypatch.setenv("DEVDOCS_ROOT", str(tmp_path))
    runner = make_runner()
    monkeypatch.setattr(cli, "run_command", runner)

    assert cli.main(["init"]) == 0
    assert (tmp_path / ".beads").is_dir()
    assert "## Issue Tracking (bd)" in (tmp_path / "AGENTS.md").read_text(encoding="utf-8")
    assert (tmp_path / ".pi" / "hooks" / "bd-prime.ts").is_file()
    assert (tmp_path / "devdocs" / "README.md").is_file()


def test_main_init_ignores_trailing_arguments(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("DEVDOCS_ROOT", str(tmp_path))
    ran: list[bool] = []

    class FakeOrchestrator:
        def __init__(self, cfg: object) -> None:
            pass

        def run(self) -> None:
            ran.append(True)

    monkeypatch.setattr(cli, "InitOrchestrator", FakeOrchestrator)

    assert cli.main(["init", "extra", "--force"]) == 0
    assert ran == [True]


def test_main_reports_template_without_marker_as_error(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
    make_runner: type,
    templates: DictTemplates,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setenv("DEVDOCS_ROOT", str(tmp_path))
    monkeypatch.setattr(cli, "run_command", make_runner())
    broken = DictTemplates({key: templates.load(key) for key in TEMPLATE_KEYS} | {"AGENTS.md": "no methodology\n"})
    monkeypatch.setattr(cli, "PackageTemplates", lambda: broken)

    assert cli.main(["init"]) == 1

    err = capsys.readouterr().err
    assert err.startswith("error: template content does not contain marker")
    assert not (tmp_path / "AGENTS.md").exists()
