"""Shared test fixtures."""

import pytest
from aiohttp import web

from geopages.config import ApiConfig, Config, RootPage, ServerConfig, SiteConfig
from geopages.server import create_app
from tests.upstream import API_BASE, FakeUpstream


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture
def test_config() -> Config:
    """Create a test configuration pointing at the fake upstream."""
    return Config(
        server=ServerConfig(),
        api=ApiConfig(base_url=API_BASE),
        site=SiteConfig(
            base_url="https://example.com",
            name="Acme",
            default_author="Acme Editorial Team",
            root_pages=[
                RootPage(
                    title="Web Design Agency",
                    path="/web-design-agency",
                    snippet="Websites for brands worldwide.",
                    category="web-design",
                    keywords=["web design agency"],
                ),
            ],
        ),
    )


@pytest.fixture
def app(test_config: Config, upstream: FakeUpstream) -> web.Application:
    """Create app wired to the fake upstream."""
    return create_app(test_config, transport=upstream.transport)
