"""Detail page projection endpoints.

Serves the AI-friendly documents of blog and service detail pages addressed
as ``/{family}/{country}/{state}/{city?}/{category}/{slug}/{document}``.
"""

import logging
from dataclasses import dataclass

from aiohttp import web

from geopages.api.responses import cached_response, error_response
from geopages.app_keys import gateway_key, site_key
from geopages.core.normalize import normalize_record
from geopages.core.records import ContentRecord
from geopages.core.segments import (
    ResolvedIdentity,
    build_detail_path,
    split_path_segments,
)
from geopages.core.types import ContentFamily
from geopages.gateway import ApiFailure, CachePolicy
from geopages.projections import schema
from geopages.projections.breadcrumbs import (
    BreadcrumbItem,
    build_blog_trail,
    generate_breadcrumbs,
)
from geopages.projections.summary import (
    build_ai_facts,
    build_ai_summary,
    build_faq_document,
    build_schema_faqs,
    build_service_summary,
)

logger = logging.getLogger(__name__)

BLOG_PREFIX = "/blog/{country}/{segments:.+}"
SERVICES_PREFIX = "/services/{country}/{segments:.+}"


@dataclass
class DetailPage:
    """A fetched detail page with its resolved identity."""

    identity: ResolvedIdentity
    record: ContentRecord
    policy: CachePolicy
    url: str


def create_detail_routes() -> list[web.RouteDef]:
    return [
        web.get(f"{BLOG_PREFIX}/ai-summary.json", get_blog_summary),
        web.get(f"{BLOG_PREFIX}/ai-qna.json", get_blog_qna),
        web.get(f"{BLOG_PREFIX}/ai-facts.json", get_blog_facts),
        web.get(f"{BLOG_PREFIX}/schema.json", get_blog_schema),
        web.get(f"{SERVICES_PREFIX}/ai-summary.json", get_service_summary),
        web.get(f"{SERVICES_PREFIX}/schema.json", get_service_schema),
    ]


async def load_detail_page(
    request: web.Request, family: ContentFamily
) -> DetailPage | None:
    """Resolve the request path and fetch the page it addresses.

    Returns:
        DetailPage, or None when the path is not a detail path or the
        upstream has no record for it
    """
    identity = split_path_segments(
        request.match_info["country"], request.match_info["segments"]
    )
    if identity is None:
        return None

    result = await request.app[gateway_key].fetch_by_location(family, identity)
    if isinstance(result, ApiFailure):
        logger.info(f"No {family} page for {identity.to_dict()}: {result.error}")
        return None

    record = normalize_record(result.data)
    if record is None:
        return None

    site = request.app[site_key]
    url = f"{site.base_url}{build_detail_path(family, identity)}"
    return DetailPage(identity=identity, record=record, policy=result.policy, url=url)


def _not_found(family: ContentFamily) -> web.Response:
    message = "Post not found" if family == "blog" else "Not found"
    return error_response(message, 404)


async def get_blog_summary(request: web.Request) -> web.Response:
    page = await load_detail_page(request, "blog")
    if page is None:
        return _not_found("blog")

    site = request.app[site_key]
    document = build_ai_summary(
        page.record,
        page.identity,
        url=page.url,
        default_author=site.default_author,
    )
    return cached_response(document, page.policy)


async def get_blog_qna(request: web.Request) -> web.Response:
    page = await load_detail_page(request, "blog")
    if page is None:
        return _not_found("blog")

    site = request.app[site_key]
    document = build_faq_document(page.record, page.identity, site_name=site.name)
    return cached_response(document, page.policy)


async def get_blog_facts(request: web.Request) -> web.Response:
    page = await load_detail_page(request, "blog")
    if page is None:
        return _not_found("blog")

    site = request.app[site_key]
    document = build_ai_facts(
        page.record, page.identity, default_author=site.default_author
    )
    return cached_response(document, page.policy)


async def get_blog_schema(request: web.Request) -> web.Response:
    page = await load_detail_page(request, "blog")
    if page is None:
        return _not_found("blog")

    site = request.app[site_key]
    trail = build_blog_trail(
        page.identity, title=page.record.title, url=page.url, site_url=site.base_url
    )
    document = schema.blog_schema_graph(
        page.record,
        page.identity,
        url=page.url,
        trail=trail,
        organization=schema.Organization(name=site.name, url=site.base_url),
        default_author=site.default_author,
    )
    return cached_response(document, page.policy)


async def get_service_summary(request: web.Request) -> web.Response:
    page = await load_detail_page(request, "services")
    if page is None:
        return _not_found("services")

    document = build_service_summary(page.record, page.identity, url=page.url)
    return cached_response(document, page.policy)


async def get_service_schema(request: web.Request) -> web.Response:
    page = await load_detail_page(request, "services")
    if page is None:
        return _not_found("services")

    site = request.app[site_key]
    identity = page.identity
    service = schema.service(
        url=page.url,
        name=page.record.title,
        description=page.record.snippet or page.record.meta_description or "",
        category=page.record.business_type or identity.category,
        organization=schema.Organization(name=site.name, url=site.base_url),
        location=schema.Location(
            city=identity.city,
            state=identity.state,
            country_code=identity.country.upper(),
        ),
        image_url=page.record.image_url,
    )
    segments = [
        s
        for s in (identity.country, identity.state, identity.city, identity.slug)
        if s
    ]
    crumbs = [
        BreadcrumbItem(name=c.name, url=f"{site.base_url}{c.url}")
        for c in generate_breadcrumbs("services", segments)
    ]
    faqs = build_schema_faqs(page.record, identity, site_name=site.name)
    graph = [
        service,
        schema.breadcrumb_list(crumbs),
        schema.faq_page(faqs, url=page.url),
    ]
    return cached_response(
        {"@context": schema.SCHEMA_CONTEXT, "@graph": graph}, page.policy
    )
