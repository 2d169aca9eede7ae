"""Tests for the ghostmarket command line."""

import argparse
import json
import os
from unittest.mock import AsyncMock, MagicMock, patch

import aiohttp
import pytest

from ghostmarket.cli import COMMANDS, build_parser, key_value, main
from ghostmarket.client import APIError


@pytest.fixture
def fake_api():
    """Patch GhostMarketAPI in the CLI with an async-context mock."""
    api = MagicMock()
    api.api_base_url = "http://test.example.com"
    api.assets.list = AsyncMock(return_value={"assets": [1, 2]})
    api.orders.list = AsyncMock(return_value={"orders": []})
    api.users.exists = AsyncMock(return_value={"exists": True})

    with (
        patch("ghostmarket.cli.GhostMarketAPI") as api_cls,
        patch("ghostmarket.cli.setup_logging"),
    ):
        api_cls.return_value.__aenter__ = AsyncMock(return_value=api)
        api_cls.return_value.__aexit__ = AsyncMock(return_value=False)
        api.cls = api_cls
        yield api


class TestKeyValue:
    """Test suite for key=value parsing."""

    def test_valid(self):
        """Test a simple pair and a value containing '='."""
        assert key_value("chain=n3") == ("chain", "n3")
        assert key_value("name=a=b") == ("name", "a=b")
        assert key_value("name=") == ("name", "")

    @pytest.mark.parametrize("item", ["chain", "=n3"])
    def test_invalid(self, item):
        """Test that malformed pairs are rejected."""
        with pytest.raises(argparse.ArgumentTypeError):
            key_value(item)


class TestParser:
    """Test suite for the argument parser."""

    def test_every_endpoint_has_a_subcommand(self):
        """Test that each command parses."""
        parser = build_parser()
        for name in COMMANDS:
            argv = [name, "alice"] if name == "user-exists" else [name]
            args = parser.parse_args(argv)
            assert args.command == name
            assert args.param == []

    def test_params_and_paging(self):
        """Test repeated params and paging options."""
        args = build_parser().parse_args(
            ["--network", "rinkeby", "orders", "-p", "chain=n3", "--param", "limit=5", "--page", "3"]
        )
        assert args.network == "rinkeby"
        assert dict(args.param) == {"chain": "n3", "limit": "5"}
        assert args.page == 3
        assert args.page_size is None

    def test_unknown_network_is_rejected(self):
        """Test that the CLI only offers known networks."""
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--network", "moon", "assets"])


class TestMain:
    """Test suite for running commands end to end."""

    def test_prints_json_result(self, fake_api, capsys, tmp_path):
        """Test that a successful call prints the payload."""
        code = main(
            ["--env-file", str(tmp_path / "missing.env"), "assets", "-p", "chain=n3"]
        )

        assert code == 0
        assert json.loads(capsys.readouterr().out) == {"assets": [1, 2]}
        fake_api.assets.list.assert_awaited_once_with({"chain": "n3"})

    def test_config_from_arguments(self, fake_api, tmp_path):
        """Test that global options reach the client configuration."""
        main(
            [
                "--env-file",
                str(tmp_path / "missing.env"),
                "--api-key",
                "k",
                "--api-base-url",
                "http://local",
                "user-exists",
                "alice",
            ]
        )

        config = fake_api.cls.call_args.args[0]
        assert config.api_key == "k"
        assert config.api_base_url == "http://local"
        fake_api.users.exists.assert_awaited_once_with("alice")

    def test_page_and_page_size(self, fake_api, tmp_path):
        """Test that paging options are forwarded to the orders resource."""
        main(
            [
                "--env-file",
                str(tmp_path / "missing.env"),
                "orders",
                "--page",
                "2",
                "--page-size",
                "5",
            ]
        )

        assert fake_api.page_size == 5
        fake_api.orders.list.assert_awaited_once_with({}, page=2)

    def test_env_file_is_loaded(self, fake_api, tmp_path):
        """Test that variables from the env file configure the client."""
        env_file = tmp_path / ".env"
        env_file.write_text("GHOSTMARKET_API_KEY=from-file\n")

        try:
            main(["--env-file", str(env_file), "assets"])
        finally:
            os.environ.pop("GHOSTMARKET_API_KEY", None)

        config = fake_api.cls.call_args.args[0]
        assert config.api_key == "from-file"

    def test_api_error_exits_with_one(self, fake_api, tmp_path):
        """Test that API errors are reported with a non-zero exit code."""
        fake_api.assets.list.side_effect = APIError(404, "Not found.")
        assert main(["--env-file", str(tmp_path / "missing.env"), "assets"]) == 1

    def test_transport_error_exits_with_one(self, fake_api, tmp_path):
        """Test that connection failures are reported with a non-zero exit code."""
        fake_api.assets.list.side_effect = aiohttp.ClientConnectionError("down")
        assert main(["--env-file", str(tmp_path / "missing.env"), "assets"]) == 1
