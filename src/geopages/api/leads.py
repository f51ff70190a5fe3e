"""Lead submission endpoint."""

import logging
from typing import Any

from aiohttp import web

from geopages.app_keys import gateway_key
from geopages.gateway import ApiFailure

logger = logging.getLogger(__name__)

LEAD_SOURCE = "chatkit"
DEFAULT_PROJECT_TYPE = "website"


def create_lead_routes() -> list[web.RouteDef]:
    return [web.post("/api/leads", post_lead)]


def _field(body: dict[str, Any], key: str, default: str = "") -> str:
    value = body.get(key)
    return str(value if value else default).strip()


def _failure(message: str, status: int) -> web.Response:
    return web.json_response({"success": False, "error": message}, status=status)


async def post_lead(request: web.Request) -> web.Response:
    """Validate a lead and forward it upstream.

    Returns 400 for a malformed body or missing email/brief, 502 when the
    upstream rejects the lead.
    """
    try:
        body = await request.json()
    except ValueError:
        return _failure("Invalid JSON body.", 400)

    if not isinstance(body, dict):
        return _failure("Invalid JSON body.", 400)

    email = _field(body, "email")
    brief = _field(body, "brief")
    if not email or not brief:
        return _failure("Missing required fields: email, brief.", 400)

    lead = {
        "email": email,
        "projectType": _field(body, "projectType", DEFAULT_PROJECT_TYPE),
        "budget": _field(body, "budget"),
        "timeline": _field(body, "timeline"),
        "brief": brief,
        "source": LEAD_SOURCE,
        "metadata": body.get("metadata") or {"page": None, "userAgent": None},
    }

    result = await request.app[gateway_key].submit_lead(lead)
    if isinstance(result, ApiFailure):
        logger.warning(f"Lead rejected upstream ({result.status}): {result.error}")
        return _failure(result.error, 502)

    data = result.data if isinstance(result.data, dict) else {}
    lead_id = data.get("leadId")
    if lead_id is None:
        lead_id = data.get("id")

    return web.json_response(
        {"success": bool(data.get("success", True)), "leadId": lead_id}
    )
