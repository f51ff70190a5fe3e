"""aiohttp server for Geopages.

Application factory, error middleware, and route registration.
"""

import logging
from collections.abc import Awaitable, Callable

import httpx
from aiohttp import web

from geopages.api.catalog import create_catalog_routes
from geopages.api.detail import create_detail_routes
from geopages.api.feeds import create_feed_routes
from geopages.api.leads import create_lead_routes
from geopages.app_keys import gateway_key, http_client_key, site_key
from geopages.config import Config
from geopages.gateway import ContentClient, ContentGateway

logger = logging.getLogger(__name__)

Handler = Callable[[web.Request], Awaitable[web.StreamResponse]]


@web.middleware
async def error_middleware(
    request: web.Request, handler: Handler
) -> web.StreamResponse:
    """Turn unexpected exceptions into a generic 500 JSON response.

    HTTP exceptions raised by aiohttp itself (404 for unknown routes, 405)
    pass through unchanged.
    """
    try:
        return await handler(request)
    except web.HTTPException:
        raise
    except Exception:
        logger.exception(f"Unhandled error for {request.method} {request.path}")
        return web.json_response({"error": "Internal server error"}, status=500)


def create_app(
    config: Config,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> web.Application:
    """Create aiohttp application.

    Args:
        config: Application configuration
        transport: Optional httpx transport for upstream calls (used in tests)

    Returns:
        Configured aiohttp application
    """
    app = web.Application(middlewares=[error_middleware])

    http_client = httpx.AsyncClient(
        timeout=httpx.Timeout(config.api.timeout),
        headers={"User-Agent": config.api.user_agent},
        transport=transport,
    )
    client = ContentClient(http_client, config.api.base_url)

    app[http_client_key] = http_client
    app[gateway_key] = ContentGateway(client)
    app[site_key] = config.site

    app.router.add_routes(create_feed_routes())
    app.router.add_routes(create_detail_routes())
    app.router.add_routes(create_lead_routes())
    app.router.add_routes(create_catalog_routes())

    app.on_cleanup.append(_close_http_client)

    return app


async def _close_http_client(app: web.Application) -> None:
    """Close the upstream HTTP client on application cleanup."""
    await app[http_client_key].aclose()


def run_server(config: Config) -> None:
    """Run the server.

    Args:
        config: Application configuration
    """
    app = create_app(config)
    logger.info(f"Upstream API: {config.api.base_url}")
    web.run_app(app, host=config.server.host, port=config.server.port)
