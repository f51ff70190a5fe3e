"""Tests for CLI commands."""

import json
from pathlib import Path
from unittest.mock import patch

from click.testing import CliRunner

from geopages.cli import cli
from geopages.config import Config


class TestResolveCommand:
    """Tests for the resolve command."""

    def test__swap_case__prints_resolved_triple(self) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli, ["resolve", "texas", "seo-web-design-agency", "some-slug"]
        )

        assert result.exit_code == 0
        assert json.loads(result.output) == {
            "city": None,
            "category": "texas",
            "slug": "seo-web-design-agency",
        }

    def test__dash__means_missing_segment(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["resolve", "-", "seo-web-design-agency", "x"])

        assert result.exit_code == 0
        assert json.loads(result.output)["category"] == "seo-web-design-agency"


class TestServeCommand:
    """Tests for the serve command."""

    def test__overrides__passed_to_server(self, tmp_path: Path) -> None:
        config_file = tmp_path / "geopages.toml"
        config_file.write_text('[site]\nbase_url = "https://acme.example"\n')

        runner = CliRunner()
        with patch("geopages.server.run_server") as run_server:
            result = runner.invoke(
                cli,
                [
                    "serve",
                    "-c",
                    str(config_file),
                    "--port",
                    "9000",
                    "--api-url",
                    "http://localhost:4000",
                ],
            )

        assert result.exit_code == 0
        assert "Starting server on 127.0.0.1:9000" in result.output
        assert "Upstream API: http://localhost:4000/api" in result.output
        config: Config = run_server.call_args.args[0]
        assert config.server.port == 9000
        assert config.site.base_url == "https://acme.example"

    def test__invalid_config__exits_with_error(self, tmp_path: Path) -> None:
        config_file = tmp_path / "geopages.toml"
        config_file.write_text('[server]\nport = "eighty"\n')

        runner = CliRunner()
        with patch("geopages.server.run_server") as run_server:
            result = runner.invoke(cli, ["serve", "-c", str(config_file)])

        assert result.exit_code == 1
        assert "server.port must be an integer" in result.output
        run_server.assert_not_called()

    def test__missing_config__rejected(self, tmp_path: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["serve", "-c", str(tmp_path / "missing.toml")])

        assert result.exit_code != 0
