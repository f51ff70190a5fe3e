"""Tests for configuration loading."""

from pathlib import Path

import pytest

from geopages.config import (
    ApiConfig,
    Config,
    ServerConfig,
    SiteConfig,
    normalize_api_base_url,
)


class TestConfigLoad:
    """Tests for Config.load()."""

    def test__explicit_path__loads_config(self, tmp_path: Path) -> None:
        """Load config from explicit path."""
        config_file = tmp_path / "geopages.toml"
        config_file.write_text("""
[server]
host = "0.0.0.0"
port = 3000

[api]
base_url = "https://content.example.org/"
timeout = 10
user_agent = "acme-bot"

[site]
base_url = "https://acme.example/"
name = "Acme"
default_author = "Acme Team"

[[site.root_pages]]
title = "Web Design Agency"
path = "/web-design-agency"
keywords = ["web design"]
""")

        config = Config.load(config_file)

        assert config.server.host == "0.0.0.0"
        assert config.server.port == 3000
        assert config.api.base_url == "https://content.example.org/api"
        assert config.api.timeout == 10.0
        assert config.api.user_agent == "acme-bot"
        assert config.site.base_url == "https://acme.example"
        assert config.site.name == "Acme"
        assert config.site.default_author == "Acme Team"
        assert config.site.root_pages[0].title == "Web Design Agency"
        assert config.site.root_pages[0].keywords == ["web design"]
        assert config.config_path == config_file

    def test__missing_explicit_path__raises(self, tmp_path: Path) -> None:
        """Raise FileNotFoundError for a missing explicit config."""
        with pytest.raises(FileNotFoundError):
            Config.load(tmp_path / "missing.toml")

    def test__empty_file__uses_defaults(self, tmp_path: Path) -> None:
        config_file = tmp_path / "geopages.toml"
        config_file.write_text("")

        config = Config.load(config_file)

        assert config.server == ServerConfig()
        assert config.api == ApiConfig()
        assert config.site == SiteConfig()

    def test__discovers_config_in_parent(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Find geopages.toml in a parent directory."""
        (tmp_path / "geopages.toml").write_text("[server]\nport = 9000\n")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)

        config = Config.load()

        assert config.server.port == 9000
        assert config.config_path == tmp_path / "geopages.toml"

    def test__nothing_discovered__returns_defaults(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)
        if any((p / "geopages.toml").exists() for p in tmp_path.parents):
            pytest.skip("geopages.toml present above tmp_path")

        config = Config.load()

        assert config.config_path is None
        assert config.api.timeout is None


class TestConfigValidation:
    """Tests for invalid configuration values."""

    @pytest.mark.parametrize(
        ("content", "message"),
        [
            ('server = "x"', "server section must be a dictionary"),
            ('[server]\nport = "80"', "server.port must be an integer"),
            ("[server]\nport = true", "server.port must be an integer"),
            ("[api]\nbase_url = 1", "api.base_url must be a string"),
            ('[api]\ntimeout = "5"', "api.timeout must be a number"),
            ("[site]\nname = 3", "site.name must be a string"),
            ('[site]\nroot_pages = "x"', "site.root_pages must be a list"),
            (
                '[[site.root_pages]]\ntitle = "x"',
                "site.root_pages.path must be a string",
            ),
        ],
    )
    def test__invalid_value__raises(
        self, tmp_path: Path, content: str, message: str
    ) -> None:
        config_file = tmp_path / "geopages.toml"
        config_file.write_text(content)

        with pytest.raises(ValueError, match=message):
            Config.load(config_file)


class TestWithOverrides:
    """Tests for Config.with_overrides()."""

    def test__overrides_applied_without_mutation(self) -> None:
        config = Config.default()

        updated = config.with_overrides(
            host="0.0.0.0", port=9000, api_url="http://localhost:4000"
        )

        assert updated.server.host == "0.0.0.0"
        assert updated.server.port == 9000
        assert updated.api.base_url == "http://localhost:4000/api"
        assert config.server.port == 8080
        assert config.api.base_url == "https://api.example.com/api"

    def test__no_overrides__keeps_values(self) -> None:
        config = Config.default()

        assert config.with_overrides() == config


class TestNormalizeApiBaseUrl:
    """Tests for normalize_api_base_url()."""

    @pytest.mark.parametrize(
        ("url", "expected"),
        [
            ("https://x.test", "https://x.test/api"),
            ("https://x.test/", "https://x.test/api"),
            ("https://x.test/api/", "https://x.test/api"),
            ("https://x.test/api", "https://x.test/api"),
        ],
    )
    def test__ensures_api_suffix(self, url: str, expected: str) -> None:
        assert normalize_api_base_url(url) == expected
