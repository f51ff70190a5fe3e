"""JSON response helpers shared by route handlers."""

from typing import Any

from aiohttp import web

from geopages.gateway import CachePolicy


def error_response(message: str, status: int, **extra: Any) -> web.Response:
    return web.json_response({"error": message, **extra}, status=status)


def cached_response(data: Any, policy: CachePolicy) -> web.Response:
    """JSON response carrying the cache headers of the gateway call."""
    return web.json_response(data, headers=policy.to_headers())
