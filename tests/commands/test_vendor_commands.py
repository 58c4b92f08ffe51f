"""Tests for the manifest-mutating CLI commands."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from tests.conftest import STD
from vendorctl.cli import cli


def invoke_json(runner: CliRunner, *args: str) -> dict:
    result = runner.invoke(cli, ["--json", *args])
    assert result.exit_code == 0, result.output
    return json.loads(result.output)


@pytest.mark.usefixtures("_isolated_workspace")
class TestAddCommand:
    def test_add_help(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["add", "--help"])
        assert result.exit_code == 0
        assert "PROTOCOL://PATH@VERSION" in result.output

    def test_add(self, cli_runner: CliRunner) -> None:
        data = invoke_json(cli_runner, "add", STD)
        assert data["ok"] is True
        assert data["op"] == "add"
        assert data["data"]["modules"] == 1

    def test_add_requires_url(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["add"])
        assert result.exit_code == 2

    def test_duplicate_exits_1(self, cli_runner: CliRunner) -> None:
        invoke_json(cli_runner, "add", STD)
        result = cli_runner.invoke(cli, ["add", STD])
        assert result.exit_code == 1
        assert "DUPLICATE_MODULE" in result.output


@pytest.mark.usefixtures("_isolated_workspace")
class TestLinkCommands:
    def test_link_and_unlink(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        invoke_json(cli_runner, "add", STD)
        data = invoke_json(cli_runner, "link", f"{STD}/path/mod.ts")
        assert data["data"]["actions"] == ["add_link"]
        link_file = tmp_path / "vendor/https/deno.land/std/path/mod.ts"
        assert link_file.exists()

        invoke_json(cli_runner, "unlink", f"{STD}/path/mod.ts")
        assert not link_file.exists()

    def test_link_unknown_module(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["link", f"{STD}/path/mod.ts"])
        assert result.exit_code == 1
        assert "MODULE_NOT_FOUND" in result.output


@pytest.mark.usefixtures("_isolated_workspace")
class TestAliasCommands:
    def test_alias_and_unalias(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        invoke_json(cli_runner, "add", STD)
        invoke_json(cli_runner, "alias", f"{STD}/path/mod.ts", "path.ts")
        assert (tmp_path / "path.ts").exists()

        invoke_json(cli_runner, "unalias", "path.ts")
        assert not (tmp_path / "path.ts").exists()

    def test_alias_exists(self, cli_runner: CliRunner) -> None:
        invoke_json(cli_runner, "add", STD)
        invoke_json(cli_runner, "alias", f"{STD}/path/mod.ts", "path.ts")
        result = cli_runner.invoke(cli, ["alias", f"{STD}/fs/mod.ts", "path.ts"])
        assert result.exit_code == 1
        assert "ALIAS_EXISTS" in result.output

    def test_alias_outside_workspace(self, cli_runner: CliRunner) -> None:
        invoke_json(cli_runner, "add", STD)
        result = cli_runner.invoke(cli, ["alias", f"{STD}/path/mod.ts", "../escape.ts"])
        assert result.exit_code == 1
        assert "INVALID_PATH" in result.output
        assert not isinstance(result.exception, ValueError)


@pytest.mark.usefixtures("_isolated_workspace")
class TestUpdateRemoveCommands:
    def test_update(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        invoke_json(cli_runner, "add", STD)
        invoke_json(cli_runner, "link", f"{STD}/fs/mod.ts")
        invoke_json(cli_runner, "update", "https://deno.land/std@v0.51.0")
        manifest = json.loads((tmp_path / "vendorctl.json").read_text())
        assert manifest["modules"][0]["version"] == "v0.51.0"

    def test_remove(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        invoke_json(cli_runner, "add", STD)
        invoke_json(cli_runner, "remove", "https://deno.land/std")
        manifest = json.loads((tmp_path / "vendorctl.json").read_text())
        assert manifest["modules"] == []

    def test_examples_flag(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["update", "--examples"])
        assert result.exit_code == 0
        assert "vendorctl update https://deno.land/std@v0.51.0" in result.output
