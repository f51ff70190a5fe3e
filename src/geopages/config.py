"""Configuration management for Geopages.

Supports TOML configuration format with auto-discovery.
"""

import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path

CONFIG_FILENAME = "geopages.toml"


@dataclass
class ServerConfig:
    """Server configuration."""

    host: str = "127.0.0.1"
    port: int = 8080


@dataclass
class ApiConfig:
    """Upstream content API configuration."""

    base_url: str = "https://api.example.com/api"
    timeout: float | None = None
    user_agent: str = "geopages"


@dataclass
class RootPage:
    """Static page advertised at the top of the site-wide AI index."""

    title: str
    path: str
    snippet: str | None = None
    category: str | None = None
    keywords: list[str] = field(default_factory=list)


@dataclass
class SiteConfig:
    """Public site configuration."""

    base_url: str = "https://example.com"
    name: str = "Example"
    default_author: str = "Editorial Team"
    root_pages: list[RootPage] = field(default_factory=list)


@dataclass
class Config:
    """Application configuration."""

    server: ServerConfig
    api: ApiConfig
    site: SiteConfig
    config_path: Path | None = None

    @classmethod
    def load(cls, config_path: Path | None = None) -> "Config":
        """Load configuration from file.

        If config_path is provided, loads from that file.
        Otherwise, searches for geopages.toml in current directory and parents.

        Args:
            config_path: Optional explicit path to config file

        Returns:
            Config instance with defaults for missing sections

        Raises:
            FileNotFoundError: If explicit config_path doesn't exist
            ValueError: If configuration is invalid
        """
        if config_path is not None:
            if not config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {config_path}")
            return cls._load_from_file(config_path)

        discovered_path = cls._discover_config()
        if discovered_path is None:
            return cls.default()

        return cls._load_from_file(discovered_path)

    @classmethod
    def default(cls) -> "Config":
        """Create config with all defaults."""
        return cls(server=ServerConfig(), api=ApiConfig(), site=SiteConfig())

    @classmethod
    def _discover_config(cls) -> Path | None:
        current = Path.cwd()
        while True:
            candidate = current / CONFIG_FILENAME
            if candidate.exists():
                return candidate
            parent = current.parent
            if parent == current:
                return None
            current = parent

    @classmethod
    def _load_from_file(cls, path: Path) -> "Config":
        """Load configuration from a specific file.

        Args:
            path: Path to TOML configuration file

        Returns:
            Config instance

        Raises:
            ValueError: If configuration is invalid
        """
        with path.open("rb") as f:
            data = tomllib.load(f)

        return cls(
            server=cls._parse_server(data.get("server")),
            api=cls._parse_api(data.get("api")),
            site=cls._parse_site(data.get("site")),
            config_path=path,
        )

    @classmethod
    def _parse_server(cls, data: object) -> ServerConfig:
        if data is None:
            return ServerConfig()

        if not isinstance(data, dict):
            raise ValueError("server section must be a dictionary")

        host = data.get("host", "127.0.0.1")
        if not isinstance(host, str):
            raise ValueError("server.host must be a string")

        port = data.get("port", 8080)
        if not isinstance(port, int) or isinstance(port, bool):
            raise ValueError("server.port must be an integer")

        return ServerConfig(host=host, port=port)

    @classmethod
    def _parse_api(cls, data: object) -> ApiConfig:
        """Parse api configuration section.

        Args:
            data: Raw api section data

        Returns:
            ApiConfig instance with a normalized base URL
        """
        if data is None:
            return ApiConfig()

        if not isinstance(data, dict):
            raise ValueError("api section must be a dictionary")

        base_url = data.get("base_url", ApiConfig.base_url)
        if not isinstance(base_url, str):
            raise ValueError("api.base_url must be a string")

        timeout = data.get("timeout")
        if timeout is not None and (
            not isinstance(timeout, int | float) or isinstance(timeout, bool)
        ):
            raise ValueError("api.timeout must be a number")

        user_agent = data.get("user_agent", "geopages")
        if not isinstance(user_agent, str):
            raise ValueError("api.user_agent must be a string")

        return ApiConfig(
            base_url=normalize_api_base_url(base_url),
            timeout=float(timeout) if timeout is not None else None,
            user_agent=user_agent,
        )

    @classmethod
    def _parse_site(cls, data: object) -> SiteConfig:
        """Parse site configuration section.

        Args:
            data: Raw site section data

        Returns:
            SiteConfig instance
        """
        if data is None:
            return SiteConfig()

        if not isinstance(data, dict):
            raise ValueError("site section must be a dictionary")

        base_url = data.get("base_url", "https://example.com")
        if not isinstance(base_url, str):
            raise ValueError("site.base_url must be a string")

        name = data.get("name", "Example")
        if not isinstance(name, str):
            raise ValueError("site.name must be a string")

        default_author = data.get("default_author", "Editorial Team")
        if not isinstance(default_author, str):
            raise ValueError("site.default_author must be a string")

        root_pages_raw = data.get("root_pages", [])
        if not isinstance(root_pages_raw, list):
            raise ValueError("site.root_pages must be a list")
        root_pages = [cls._parse_root_page(item) for item in root_pages_raw]

        return SiteConfig(
            base_url=base_url.rstrip("/"),
            name=name,
            default_author=default_author,
            root_pages=root_pages,
        )

    @classmethod
    def _parse_root_page(cls, data: object) -> RootPage:
        if not isinstance(data, dict):
            raise ValueError("site.root_pages items must be tables")

        title = data.get("title")
        if not isinstance(title, str):
            raise ValueError("site.root_pages.title must be a string")

        path = data.get("path")
        if not isinstance(path, str):
            raise ValueError("site.root_pages.path must be a string")

        snippet = data.get("snippet")
        if snippet is not None and not isinstance(snippet, str):
            raise ValueError("site.root_pages.snippet must be a string")

        category = data.get("category")
        if category is not None and not isinstance(category, str):
            raise ValueError("site.root_pages.category must be a string")

        keywords = data.get("keywords", [])
        if not isinstance(keywords, list) or not all(
            isinstance(k, str) for k in keywords
        ):
            raise ValueError("site.root_pages.keywords must be a list of strings")

        return RootPage(
            title=title,
            path=path,
            snippet=snippet,
            category=category,
            keywords=keywords,
        )

    def with_overrides(
        self,
        *,
        host: str | None = None,
        port: int | None = None,
        api_url: str | None = None,
    ) -> "Config":
        """Create a new Config with CLI overrides applied.

        Only non-None values override the existing config. The original
        Config is not modified.

        Args:
            host: Override server.host
            port: Override server.port
            api_url: Override api.base_url

        Returns:
            New Config instance with overrides applied
        """
        server = self.server
        if host is not None or port is not None:
            server = replace(
                self.server,
                host=host if host is not None else self.server.host,
                port=port if port is not None else self.server.port,
            )

        api = self.api
        if api_url is not None:
            api = replace(self.api, base_url=normalize_api_base_url(api_url))

        return replace(self, server=server, api=api)


def normalize_api_base_url(url: str) -> str:
    """Strip trailing slashes and make sure the URL ends with /api."""
    clean = url.rstrip("/")
    if not clean.endswith("/api"):
        clean = f"{clean}/api"
    return clean
