"""Upstream content API integration for Geopages.

This package provides the HTTP client, result envelopes, cache policies,
and the endpoint-level content gateway.
"""

from .cache import CachePolicy
from .client import ApiFailure, ApiResult, ApiSuccess, ContentClient
from .content import ContentGateway

__all__ = [
    "ApiFailure",
    "ApiResult",
    "ApiSuccess",
    "CachePolicy",
    "ContentClient",
    "ContentGateway",
]
