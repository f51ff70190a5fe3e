"""AI index feed and path-based AI summary endpoints."""

import logging
from datetime import UTC, datetime
from typing import Any

from aiohttp import web

from geopages.api.responses import cached_response, error_response
from geopages.app_keys import gateway_key, site_key
from geopages.config import SiteConfig
from geopages.core.normalize import normalize_collection, normalize_record
from geopages.gateway import ApiFailure
from geopages.projections.summary import (
    build_feed_item,
    build_page_summary,
    matches_country,
)

logger = logging.getLogger(__name__)


def create_feed_routes() -> list[web.RouteDef]:
    return [
        web.get("/ai-index.json", get_ai_index),
        web.get("/blog/{country}/ai-index.json", get_country_ai_index),
        web.get("/api/ai-summary/{path:.+}", get_ai_summary_by_path),
    ]


def _generated_at() -> str:
    return datetime.now(UTC).isoformat()


def _root_pages(site: SiteConfig, generated_at: str) -> list[dict[str, Any]]:
    return [
        {
            "title": page.title,
            "snippet": page.snippet,
            "url": f"{site.base_url}{page.path}",
            "category": page.category,
            "keywords": page.keywords,
            "updated_at": generated_at,
        }
        for page in site.root_pages
    ]


async def get_ai_index(request: web.Request) -> web.Response:
    """Site-wide AI index with configured root pages listed first."""
    site = request.app[site_key]
    result = await request.app[gateway_key].get_ai_index("site")
    if isinstance(result, ApiFailure):
        return error_response(result.error or "Failed to fetch AI index", 500)

    generated_at = _generated_at()
    root_pages = _root_pages(site, generated_at)

    if isinstance(result.data, list):
        feed = [
            build_feed_item(record, site_url=site.base_url)
            for record in normalize_collection(result.data)
        ]
        document = {
            "generated_at": generated_at,
            "total": len(root_pages) + len(feed),
            "items": root_pages + feed,
        }
    else:
        upstream = result.data if isinstance(result.data, dict) else {}
        document = {
            "generated_at": generated_at,
            **upstream,
            "root_pages": root_pages,
        }

    return cached_response(document, result.policy)


async def get_country_ai_index(request: web.Request) -> web.Response:
    """AI index restricted to one country."""
    country = request.match_info["country"]
    site = request.app[site_key]
    result = await request.app[gateway_key].get_ai_index("country")
    if isinstance(result, ApiFailure):
        return error_response(
            result.error or "Failed to fetch AI index for country", 500
        )

    generated_at = _generated_at()

    if isinstance(result.data, list):
        feed = [
            build_feed_item(record, site_url=site.base_url)
            for record in normalize_collection(result.data)
            if matches_country(record, country)
        ]
        document = {
            "generated_at": generated_at,
            "country": country,
            "total": len(feed),
            "items": feed,
        }
    else:
        upstream = result.data if isinstance(result.data, dict) else {}
        document = {"generated_at": generated_at, "country": country, **upstream}

    return cached_response(document, result.policy)


async def get_ai_summary_by_path(request: web.Request) -> web.Response:
    path = request.match_info["path"].strip("/")
    site = request.app[site_key]

    result = await request.app[gateway_key].get_page_by_path(path)
    if isinstance(result, ApiFailure):
        logger.info(f"No page for path {path}: {result.error}")
        return error_response("Page not found", 404, path=path)

    record = normalize_record(result.data)
    if record is None:
        return error_response("Page not found", 404, path=path)

    document = build_page_summary(record, url=f"{site.base_url}/{path}")
    return cached_response(document, result.policy)
