"""Tests for init, ensure, and show commands."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from tests.conftest import STD
from vendorctl.cli import cli


@pytest.mark.usefixtures("_isolated_workspace")
class TestInitCommand:
    def test_init(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "vendorctl.json").unlink()
        result = cli_runner.invoke(cli, ["init"])
        assert result.exit_code == 0
        assert "OK" in result.output
        assert json.loads((tmp_path / "vendorctl.json").read_text()) == {
            "modules": [],
            "aliases": {},
        }

    def test_init_twice(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["init"])
        assert result.exit_code == 1
        assert "ALREADY_INITIALIZED" in result.output

    def test_custom_manifest_name(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "vendorctl.toml").write_text('[vendor]\nmanifest = "deps.json"\n')
        result = cli_runner.invoke(cli, ["init"])
        assert result.exit_code == 0
        assert (tmp_path / "deps.json").exists()


@pytest.mark.usefixtures("_isolated_workspace")
class TestEnsureCommand:
    def test_ensure_restores_links(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        assert cli_runner.invoke(cli, ["add", STD]).exit_code == 0
        assert cli_runner.invoke(cli, ["link", f"{STD}/path/mod.ts"]).exit_code == 0
        link_file = tmp_path / "vendor/https/deno.land/std/path/mod.ts"
        link_file.unlink()

        result = cli_runner.invoke(cli, ["--json", "ensure"])
        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["data"] == {"links": 1, "aliases": 0}
        assert link_file.exists()


@pytest.mark.usefixtures("_isolated_workspace")
class TestShowCommand:
    def test_empty(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["show"])
        assert result.exit_code == 0
        assert "No modules vendored." in result.output

    def test_table(self, cli_runner: CliRunner) -> None:
        cli_runner.invoke(cli, ["add", STD])
        cli_runner.invoke(cli, ["alias", f"{STD}/path/mod.ts", "path.ts"])
        result = cli_runner.invoke(cli, ["show"])
        assert result.exit_code == 0
        assert "https://deno.land/std" in result.output
        assert "v0.50.0" in result.output
        assert "path.ts" in result.output

    def test_quiet_lists_urls(self, cli_runner: CliRunner) -> None:
        cli_runner.invoke(cli, ["add", STD, "https://deno.land/x/oak@v4.0.0"])
        result = cli_runner.invoke(cli, ["-q", "show"])
        assert result.exit_code == 0
        assert result.output.splitlines() == [STD, "https://deno.land/x/oak@v4.0.0"]

    def test_missing_manifest(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "vendorctl.json").unlink()
        result = cli_runner.invoke(cli, ["show"])
        assert result.exit_code == 1
        assert "INVALID_MANIFEST" in result.output
