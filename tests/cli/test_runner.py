"""Tests for CLIRunner and command handlers."""

import sys
from argparse import Namespace
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from ghfetch.cli import runner
from ghfetch.cli.commands import DownloadHandler, UntagHandler
from ghfetch.cli.commands.download import build_options
from ghfetch.config import GlobalConfigManager
from ghfetch.core.workflows.download import DownloadMode, DownloadResult
from ghfetch.domain.types import Asset, Repository, Tag
from ghfetch.exceptions import DestinationError, ValidationError


@pytest.fixture(autouse=True)
def patch_sys_exit(monkeypatch):
    called = {}

    def fake_exit(code=0):
        called["code"] = code
        raise SystemExit(code)

    monkeypatch.setattr(sys, "exit", fake_exit)
    return called


@pytest.fixture
def cli_runner(tmp_path: Path) -> runner.CLIRunner:
    manager = GlobalConfigManager(config_file=tmp_path / "settings.conf")
    with patch.object(runner, "update_logger_from_config"):
        return runner.CLIRunner(config_manager=manager)


def download_args(**overrides) -> Namespace:
    values = {
        "command": "download",
        "repository": "acme/tool",
        "select": None,
        "automatic": False,
        "tag": None,
        "output": None,
        "install": None,
    }
    values.update(overrides)
    return Namespace(**values)


class TestBuildOptions:
    def test_defaults(self):
        options = build_options(download_args())

        assert options.repository == Repository("acme", "tool")
        assert options.mode is DownloadMode.INTERACTIVE
        assert options.tag is None
        assert options.install is None

    def test_install_without_name_uses_repository_name(self):
        options = build_options(download_args(install="", automatic=True))

        assert options.install is not None
        assert options.install.executable_for(options.repository).name == "tool"

    def test_install_with_name(self):
        options = build_options(download_args(install="tl", tag="v1", output="."))

        assert options.install.desired_executable_name == "tl"
        assert options.tag == Tag("v1")
        assert options.output == Path()

    def test_invalid_repository(self):
        with pytest.raises(ValidationError):
            build_options(download_args(repository="not-a-repo"))


class TestRunner:
    def test_logger_levels_use_loaded_config(self, tmp_path: Path):
        manager = GlobalConfigManager(config_file=tmp_path / "settings.conf")

        with (
            patch.object(runner, "update_logger_from_config") as mock_update,
            patch.object(
                manager,
                "load_global_config",
                wraps=manager.load_global_config,
            ) as mock_load,
        ):
            cli = runner.CLIRunner(config_manager=manager)

        mock_load.assert_called_once_with()
        mock_update.assert_called_once_with(cli.global_config)

    @pytest.mark.asyncio
    async def test_version(self, cli_runner, capsys):
        await cli_runner.run(["--version"])

        assert capsys.readouterr().out.strip()

    @pytest.mark.asyncio
    async def test_missing_command_exits(self, cli_runner, patch_sys_exit):
        with pytest.raises(SystemExit):
            await cli_runner.run([])

        assert patch_sys_exit["code"] == 1

    @pytest.mark.asyncio
    async def test_error_is_printed_and_exits(
        self, cli_runner, patch_sys_exit, capsys
    ):
        with (
            patch.object(
                cli_runner,
                "_execute_command",
                AsyncMock(side_effect=DestinationError("/nope")),
            ),
            pytest.raises(SystemExit),
        ):
            await cli_runner.run(["download", "-i", "-o", "/nope", "acme/tool"])

        assert patch_sys_exit["code"] == 1
        assert "❌ Installation failed: /nope is not a directory" in (
            capsys.readouterr().out
        )

    @pytest.mark.asyncio
    async def test_dispatches_to_handler(self, cli_runner):
        executed = {}

        async def fake_execute(self, args):
            executed["handler"] = type(self)
            executed["args"] = args

        with (
            patch.object(runner, "create_http_session") as mock_session,
            patch.object(UntagHandler, "execute", fake_execute),
        ):
            mock_session.return_value.__aenter__ = AsyncMock(
                return_value=MagicMock()
            )
            mock_session.return_value.__aexit__ = AsyncMock(return_value=None)
            await cli_runner.run(["untag", "acme/tool"])

        assert executed["handler"] is UntagHandler
        assert executed["args"].repository == "acme/tool"


class TestHandlers:
    def test_token_from_environment(self, monkeypatch, cli_runner):
        monkeypatch.setenv("GITHUB_TOKEN", "from-env")

        handler = UntagHandler(cli_runner.global_config, MagicMock())

        assert handler.github_client.token == "from-env"

    @pytest.mark.asyncio
    async def test_untag_prints_names(self, cli_runner, capsys):
        handler = UntagHandler(cli_runner.global_config, MagicMock(), token="")
        with patch(
            "ghfetch.cli.commands.untag.untagged_asset_names",
            AsyncMock(return_value=["tool-{tag}.zip"]),
        ):
            await handler.execute(Namespace(repository="acme/tool", tag=None))

        assert capsys.readouterr().out == "tool-{tag}.zip\n"

    @pytest.mark.asyncio
    async def test_download_reports_installed_path(self, cli_runner, capsys):
        handler = DownloadHandler(cli_runner.global_config, MagicMock(), token="")
        result = DownloadResult(
            asset=Asset("tool", "https://example.com/tool"),
            installed_path=Path("/opt/bin/tool"),
        )
        with patch(
            "ghfetch.cli.commands.download.DownloadWorkflow.run",
            AsyncMock(return_value=result),
        ):
            await handler.execute(download_args(install=""))

        assert "✅ Installed /opt/bin/tool" in capsys.readouterr().out
