"""Tests for the modern-cli create command."""

from __future__ import annotations

import json
import shutil
from pathlib import Path

import pytest
from typer.testing import CliRunner

from modern_cli.cli.main import app
from modern_cli.scaffold.clone import CloneError

runner = CliRunner()


@pytest.fixture()
def workspace(make_project, tmp_path: Path, monkeypatch) -> Path:
    """A working directory plus a fake clone that copies a boilerplate tree."""
    boilerplate = make_project()
    (boilerplate / ".git").mkdir()
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)

    def fake_clone(repo_url: str, target: Path) -> None:
        shutil.copytree(boilerplate, target)

    def fake_reset(target: Path) -> None:
        shutil.rmtree(target / ".git", ignore_errors=True)

    monkeypatch.setattr("modern_cli.cli.create_cmd.clone_boilerplate", fake_clone)
    monkeypatch.setattr("modern_cli.cli.create_cmd.reset_history", fake_reset)
    return work


class TestCreateCommand:
    """Tests for modern-cli create."""

    def test_creates_and_renames(self, workspace: Path) -> None:
        result = runner.invoke(app, ["create", "shop"])

        assert result.exit_code == 0, result.output
        project = workspace / "shop"
        assert json.loads((project / "package.json").read_text(encoding="utf-8"))["name"] == "shop"
        frontend = json.loads(
            (project / "packages" / "frontend" / "package.json").read_text(encoding="utf-8")
        )
        assert frontend["name"] == "@shop/frontend"
        assert not (project / ".git").exists()
        assert "Project shop created successfully!" in result.output
        assert "pnpm install" in result.output

    def test_prompts_until_valid(self, workspace: Path) -> None:
        result = runner.invoke(app, ["create"], input="Bad Name\nmy-shop\n")

        assert result.exit_code == 0, result.output
        assert "Use only lowercase letters" in result.output
        assert (workspace / "my-shop" / "README.md").read_text(encoding="utf-8").startswith("# My Shop")

    def test_invalid_argument_name(self, workspace: Path) -> None:
        result = runner.invoke(app, ["create", "Bad.Name"])
        assert result.exit_code == 1
        assert "Invalid name" in result.output

    def test_existing_directory(self, workspace: Path) -> None:
        (workspace / "shop").mkdir()
        result = runner.invoke(app, ["create", "shop"])
        assert result.exit_code == 1
        assert "already exists" in result.output

    def test_clone_failure_aborts(self, workspace: Path, monkeypatch) -> None:
        def broken_clone(repo_url: str, target: Path) -> None:
            raise CloneError("git clone failed", "fatal: unable to access")

        monkeypatch.setattr("modern_cli.cli.create_cmd.clone_boilerplate", broken_clone)

        result = runner.invoke(app, ["create", "shop"])

        assert result.exit_code == 1
        assert "Failed to clone repository." in result.output
        assert "fatal: unable to access" in result.output

    def test_history_reset_failure_only_warns(self, workspace: Path, monkeypatch) -> None:
        def broken_reset(target: Path) -> None:
            raise CloneError("git init failed")

        monkeypatch.setattr("modern_cli.cli.create_cmd.reset_history", broken_reset)

        result = runner.invoke(app, ["create", "shop"])

        assert result.exit_code == 0, result.output
        assert "Failed to reset git history." in result.output
        assert json.loads((workspace / "shop" / "package.json").read_text(encoding="utf-8"))["name"] == "shop"

    def test_uses_configured_repo_url(self, workspace: Path, monkeypatch) -> None:
        seen: list[str] = []

        def recording_clone(repo_url: str, target: Path) -> None:
            seen.append(repo_url)
            target.mkdir()

        monkeypatch.setattr("modern_cli.cli.create_cmd.clone_boilerplate", recording_clone)
        (workspace / "modern-cli.yaml").write_text(
            "repo_url: https://example.com/mine.git\n", encoding="utf-8"
        )

        result = runner.invoke(app, ["create", "shop"])

        assert result.exit_code == 0, result.output
        assert seen == ["https://example.com/mine.git"]
