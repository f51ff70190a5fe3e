"""Content gateway.

One method per consumed upstream endpoint. Each builds its endpoint path from
individually percent-encoded segments and declares the cache policy of the
call. Results are returned as ApiResult envelopes; nothing raises.
"""

import logging
from typing import Any, Literal
from urllib.parse import quote

from geopages.core.segments import ResolvedIdentity
from geopages.core.types import ContentFamily
from geopages.gateway.cache import (
    REVALIDATE_AI_INDEX,
    REVALIDATE_CATEGORIES,
    REVALIDATE_GEO,
    REVALIDATE_POST,
    REVALIDATE_SEARCH,
    REVALIDATE_SERVICE_PAGE,
    CachePolicy,
)
from geopages.gateway.client import ApiResult, ContentClient

logger = logging.getLogger(__name__)

AiIndexScope = Literal["site", "country", "state", "city"]

_AI_INDEX_ENDPOINTS: dict[AiIndexScope, str] = {
    "site": "/ai-index",
    "country": "/ai-index-country",
    "state": "/ai-index-state",
    "city": "/ai-index-city",
}


def encode_segment(value: str) -> str:
    """Percent-encode one path segment, including any ``/``."""
    return quote(value, safe="")


def join_segments(prefix: str, *segments: str | None) -> str:
    """Append encoded non-empty segments to an endpoint prefix."""
    parts = [prefix]
    parts.extend(encode_segment(s) for s in segments if s)
    return "/".join(parts)


class ContentGateway:
    """Typed access to the upstream content API."""

    def __init__(self, client: ContentClient) -> None:
        self.client = client

    # Detail pages

    async def fetch_by_location(
        self,
        family: ContentFamily,
        identity: ResolvedIdentity,
    ) -> ApiResult:
        """Fetch a detail page by its geo identity.

        The city slot falls back to the state when the identity has no
        distinct city.

        Args:
            family: Content family ("blog" or "services")
            identity: Resolved geo identity

        Returns:
            ApiResult with the raw page payload
        """
        if family == "blog":
            return await self.get_blog_post_by_location(
                identity.country,
                identity.state,
                identity.city_or_state,
                identity.category,
                identity.slug,
            )
        return await self.get_service_page_by_location(
            identity.country,
            identity.state,
            identity.city_or_state,
            identity.category,
            identity.slug,
        )

    async def fetch_by_slug(self, family: ContentFamily, slug: str) -> ApiResult:
        """Fetch a detail page by slug alone."""
        if family == "blog":
            return await self.get_blog_post(slug)
        return await self.get_service_page(slug)

    async def get_blog_post_by_location(
        self,
        country: str,
        state: str | None,
        city: str | None,
        category: str | None,
        slug: str,
    ) -> ApiResult:
        endpoint = join_segments("/v1/blog", country, state, city, category, slug)
        return await self.client.get(
            endpoint,
            CachePolicy.timed(REVALIDATE_POST, f"blog-post-loc:{country}:{slug}"),
        )

    async def get_blog_post(self, slug: str) -> ApiResult:
        return await self.client.get(
            join_segments("/v1/blog", slug),
            CachePolicy.timed(REVALIDATE_POST, f"blog-post:{slug}"),
        )

    async def get_blog_list(
        self,
        *,
        country: str | None = None,
        state: str | None = None,
        city: str | None = None,
        category: str | None = None,
        page: int | None = None,
        per_page: int | None = None,
    ) -> ApiResult:
        """Fetch a filtered blog listing."""
        params = _query(
            country=country,
            state=state,
            city=city,
            category=category,
            page=page,
            per_page=per_page,
        )
        tag = f"blog-list:{country or ''}:{state or ''}:{city or ''}:{category or ''}"
        return await self.client.get(
            "/v1/blog", CachePolicy.timed(REVALIDATE_POST, tag), params=params or None
        )

    async def get_service_page_by_location(
        self,
        country: str,
        state: str | None,
        city: str | None,
        category: str | None,
        slug: str,
    ) -> ApiResult:
        endpoint = join_segments(
            "/v1/service-pages", country, state, city, category, slug
        )
        return await self.client.get(
            endpoint,
            CachePolicy.timed(
                REVALIDATE_SERVICE_PAGE, f"service-page-v1:{country}:{slug}"
            ),
        )

    async def get_service_page(self, slug: str) -> ApiResult:
        return await self.client.get(
            join_segments("/service-pages", slug),
            CachePolicy.timed(REVALIDATE_SERVICE_PAGE, f"service-page:{slug}"),
        )

    async def get_page_by_path(self, path: str) -> ApiResult:
        """Fetch a page by its full site path (e.g., "blog/us/texas/austin/x")."""
        segments = [s for s in path.split("/") if s]
        return await self.client.get(
            join_segments("/page", *segments),
            CachePolicy.timed(REVALIDATE_POST, f"page:{'/'.join(segments)}"),
        )

    # Taxonomy

    async def get_categories(
        self, page: int | None = None, per_page: int | None = None
    ) -> ApiResult:
        params = _query(page=page, per_page=per_page)
        return await self.client.get(
            "/v1/categories",
            CachePolicy.timed(REVALIDATE_CATEGORIES, "categories"),
            params=params or None,
        )

    async def get_category(self, slug: str) -> ApiResult:
        return await self.client.get(
            join_segments("/v1/categories", slug),
            CachePolicy.timed(REVALIDATE_CATEGORIES, f"category:{slug}"),
        )

    async def get_countries(self) -> ApiResult:
        return await self.client.get(
            "/v1/geo/countries",
            CachePolicy.timed(REVALIDATE_GEO, "geo-countries"),
        )

    async def get_states(self, country: str) -> ApiResult:
        endpoint = join_segments("/v1/geo/countries", country) + "/states"
        return await self.client.get(
            endpoint, CachePolicy.timed(REVALIDATE_GEO, f"geo-states:{country}")
        )

    async def get_cities(self, country: str) -> ApiResult:
        endpoint = join_segments("/v1/geo/countries", country) + "/cities"
        return await self.client.get(
            endpoint, CachePolicy.timed(REVALIDATE_GEO, f"geo-cities:{country}")
        )

    # Search and stories

    async def search(self, query: str) -> ApiResult:
        return await self.client.get(
            "/search", CachePolicy.timed(REVALIDATE_SEARCH), params={"q": query}
        )

    async def get_stories(self) -> ApiResult:
        return await self.client.get("/stories", CachePolicy.fresh("stories"))

    async def get_story(self, slug: str) -> ApiResult:
        return await self.client.get(
            join_segments("/story", slug),
            CachePolicy.timed(REVALIDATE_POST, f"story:{slug}"),
        )

    async def generate_story(
        self, source_type: Literal["blog", "service"], source_id: str | int
    ) -> ApiResult:
        logger.info(f"Requesting story generation for {source_type} {source_id}")
        return await self.client.post(
            "/story/generate",
            {"source_type": source_type, "source_id": source_id},
        )

    # AI feeds and leads

    async def get_ai_index(self, scope: AiIndexScope = "site") -> ApiResult:
        endpoint = _AI_INDEX_ENDPOINTS[scope]
        return await self.client.get(
            endpoint,
            CachePolicy.timed(REVALIDATE_AI_INDEX, endpoint.lstrip("/")),
        )

    async def submit_lead(self, lead: dict[str, Any]) -> ApiResult:
        logger.info("Forwarding lead submission")
        return await self.client.post("/leads", lead)


def _query(**values: str | int | None) -> dict[str, str]:
    return {key: str(value) for key, value in values.items() if value}
