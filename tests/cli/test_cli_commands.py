#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Tests for the easybuilder CLI commands."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import MagicMock, patch

from click.testing import CliRunner
from provide.foundation.errors import ProcessError

from easybuilder.cli import main as cli_main
from easybuilder.pipeline import BuildReport, BuildResult


class TestSymbolsCommand:
    """`easybuilder symbols`."""

    def test_release_symbols(self) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli_main,
            ["symbols", "--target", "android", "--env", "release", "--current", "ENABLE_LOG", "--current", "MY_FLAG"],
        )
        assert result.exit_code == 0, result.output
        lines = [line.strip() for line in result.output.splitlines()]
        symbols = lines[lines.index("Symbols:") + 1 :]
        assert symbols == ["RELEASE_BUILD", "MY_FLAG", "IL2CPP"]
        assert "Development: False" in result.output

    def test_symbols_from_settings_file(self, tmp_path: Path) -> None:
        settings_file = tmp_path / "settings.json"
        settings_file.write_text(json.dumps({"symbols": {"webgl": ["STAGING_BUILD", "ANALYTICS"]}}))
        runner = CliRunner()
        result = runner.invoke(
            cli_main,
            ["symbols", "--target", "webgl", "--env", "debug", "--settings", str(settings_file)],
        )
        assert result.exit_code == 0, result.output
        assert "ANALYTICS" in result.output
        assert "STAGING_BUILD" not in result.output
        assert "Development: True" in result.output

    def test_environment_from_env_var(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli_main, ["symbols"], env={"EASYBUILDER_ENVIRONMENT": "staging"})
        assert result.exit_code == 0, result.output
        assert "STAGING_BUILD" in result.output

    def test_invalid_env_choice(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli_main, ["symbols", "--env", "nightly"])
        assert result.exit_code != 0


class TestBuildCommand:
    """`easybuilder build`."""

    def test_requires_host_or_dry_run(self, tmp_path: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(cli_main, ["build", "--settings", str(tmp_path / "s.json")])
        assert result.exit_code != 0
        assert "--host-command or --dry-run" in result.output

    def test_dry_run(self, tmp_path: Path, version_file: Path) -> None:
        settings_file = tmp_path / "settings.json"
        info_dir = tmp_path / "info"
        runner = CliRunner()
        result = runner.invoke(
            cli_main,
            [
                "build",
                "--dry-run",
                "--target",
                "windows64",
                "--env",
                "staging",
                "--product-name",
                "Skyrunner",
                "--build-number",
                "88",
                "--version-file",
                str(version_file),
                "--build-root",
                str(tmp_path),
                "--settings",
                str(settings_file),
                "--info-dir",
                str(info_dir),
            ],
        )
        assert result.exit_code == 0, result.output
        assert "Build succeeded" in result.output

        saved = json.loads(settings_file.read_text())
        assert saved["product_name"] == "Skyrunner (Stag)"
        assert saved["build_number"] == 88
        assert saved["active_target"] == "windows64"
        assert saved["symbols"]["standalone"] == ["ENABLE_LOG", "STAGING_BUILD", "INTERNAL_BUILD", "IL2CPP"]
        assert (info_dir / "windows64-client-build-info.json").exists()

    @patch("easybuilder.commands.build.CommandBuildHost")
    def test_host_failure_aborts(self, mock_host_class: MagicMock, tmp_path: Path) -> None:
        mock_host = mock_host_class.return_value
        mock_host.build_player.return_value = BuildReport(
            result=BuildResult.FAILED, output_path="out.apk", errors=["Exit code 1"]
        )
        runner = CliRunner()
        result = runner.invoke(
            cli_main,
            [
                "build",
                "--host-command",
                "unity -batchmode -quit",
                "--build-root",
                str(tmp_path),
                "--settings",
                str(tmp_path / "settings.json"),
                "--version-file",
                str(tmp_path / "version.json"),
            ],
        )
        assert result.exit_code != 0
        mock_host_class.assert_called_once_with(command=["unity", "-batchmode", "-quit"])
        mock_host.reveal.assert_not_called()

    @patch("easybuilder.pipeline.host.run")
    def test_missing_host_executable_aborts(self, mock_run: MagicMock, tmp_path: Path) -> None:
        mock_run.side_effect = ProcessError("Command not found: /nonexistent/unity", command=["/nonexistent/unity"])
        settings_file = tmp_path / "settings.json"
        runner = CliRunner()
        result = runner.invoke(
            cli_main,
            [
                "build",
                "--host-command",
                "/nonexistent/unity -batchmode",
                "--build-root",
                str(tmp_path),
                "--settings",
                str(settings_file),
                "--version-file",
                str(tmp_path / "version.json"),
            ],
        )
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Command not found" in result.output
        assert json.loads(settings_file.read_text())["active_target"] == "android"

    def test_malformed_settings_aborts(self, tmp_path: Path) -> None:
        settings_file = tmp_path / "settings.json"
        settings_file.write_text(json.dumps({"scenes": [{"name": "Boot"}]}))
        runner = CliRunner()
        result = runner.invoke(cli_main, ["build", "--dry-run", "--settings", str(settings_file)])
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Build failed" in result.output

    def test_server_on_mobile_aborts(self, tmp_path: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli_main,
            ["build", "--dry-run", "--target", "ios", "--app-target", "server", "--settings", str(tmp_path / "s.json")],
        )
        assert result.exit_code != 0
        assert "not supported" in result.output


class TestVersionCommands:
    """`easybuilder version`."""

    def test_show(self, version_file: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(cli_main, ["version", "show", "--version-file", str(version_file)])
        assert result.exit_code == 0, result.output
        assert "Bundle version: 1.4.0" in result.output
        assert "Package version: 1.4.12.0" in result.output

    def test_bump(self, version_file: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(cli_main, ["version", "bump", "--version-file", str(version_file)])
        assert result.exit_code == 0, result.output
        assert json.loads(version_file.read_text())["build"] == 13

    def test_show_invalid_environment_variable(self, version_file: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli_main,
            ["version", "show"],
            env={"EASYBUILDER_ENVIRONMENT": "qa", "EASYBUILDER_VERSION_FILE": str(version_file)},
        )
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "qa" in result.output

    def test_show_invalid_file(self, tmp_path: Path) -> None:
        path = tmp_path / "version.json"
        path.write_text(json.dumps({"build": -4}))
        runner = CliRunner()
        result = runner.invoke(cli_main, ["version", "show", "--version-file", str(path)])
        assert result.exit_code != 0


# 🏗️🎮🔚
