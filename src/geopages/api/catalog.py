"""Pass-through endpoints for taxonomy, geo lists, search, and stories.

Responses relay the upstream JSON and carry the cache headers declared by
the gateway call.
"""

from aiohttp import web

from geopages.api.responses import cached_response, error_response
from geopages.app_keys import gateway_key
from geopages.gateway import ApiFailure, ApiResult

STORY_SOURCE_TYPES = ("blog", "service")


def create_catalog_routes() -> list[web.RouteDef]:
    return [
        web.get("/api/categories", get_categories),
        web.get("/api/categories/{slug}", get_category),
        web.get("/api/geo/countries", get_countries),
        web.get("/api/geo/{country}/states", get_states),
        web.get("/api/geo/{country}/cities", get_cities),
        web.get("/api/search", search),
        web.get("/api/stories", get_stories),
        web.post("/api/stories/generate", generate_story),
        web.get("/api/stories/{slug}", get_story),
    ]


def _relay_list(result: ApiResult) -> web.Response:
    if isinstance(result, ApiFailure):
        return error_response(result.error, 500)
    return cached_response(result.data, result.policy)


def _relay_record(result: ApiResult) -> web.Response:
    if isinstance(result, ApiFailure) or result.data is None:
        return error_response("Not found", 404)
    return cached_response(result.data, result.policy)


def _valid_source_id(value: object) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, str) and bool(value.strip())


def _positive_int(value: str | None) -> int | None:
    if value is None or not value.isdigit():
        return None
    return int(value) or None


async def get_categories(request: web.Request) -> web.Response:
    result = await request.app[gateway_key].get_categories(
        page=_positive_int(request.query.get("page")),
        per_page=_positive_int(request.query.get("per_page")),
    )
    return _relay_list(result)


async def get_category(request: web.Request) -> web.Response:
    result = await request.app[gateway_key].get_category(request.match_info["slug"])
    return _relay_record(result)


async def get_countries(request: web.Request) -> web.Response:
    return _relay_list(await request.app[gateway_key].get_countries())


async def get_states(request: web.Request) -> web.Response:
    result = await request.app[gateway_key].get_states(request.match_info["country"])
    return _relay_list(result)


async def get_cities(request: web.Request) -> web.Response:
    result = await request.app[gateway_key].get_cities(request.match_info["country"])
    return _relay_list(result)


async def search(request: web.Request) -> web.Response:
    query = request.query.get("q", "").strip()
    if not query:
        return error_response("Missing query parameter: q", 400)
    return _relay_list(await request.app[gateway_key].search(query))


async def get_stories(request: web.Request) -> web.Response:
    return _relay_list(await request.app[gateway_key].get_stories())


async def get_story(request: web.Request) -> web.Response:
    result = await request.app[gateway_key].get_story(request.match_info["slug"])
    return _relay_record(result)


async def generate_story(request: web.Request) -> web.Response:
    try:
        body = await request.json()
    except ValueError:
        return error_response("Invalid JSON body", 400)

    if not isinstance(body, dict):
        return error_response("Invalid JSON body", 400)

    source_type = body.get("source_type")
    source_id = body.get("source_id")
    if source_type not in STORY_SOURCE_TYPES:
        return error_response("source_type must be 'blog' or 'service'", 400)
    if not _valid_source_id(source_id):
        return error_response("source_id is required", 400)

    result = await request.app[gateway_key].generate_story(source_type, source_id)
    if isinstance(result, ApiFailure):
        return error_response(result.error, 502, upstream_status=result.status)
    return web.json_response(result.data)
