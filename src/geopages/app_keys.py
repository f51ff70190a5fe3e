"""Application keys for type-safe app configuration access."""

import httpx
from aiohttp import web

from geopages.config import SiteConfig
from geopages.gateway import ContentGateway

gateway_key = web.AppKey("gateway", ContentGateway)
site_key = web.AppKey("site", SiteConfig)
http_client_key = web.AppKey("http_client", httpx.AsyncClient)
