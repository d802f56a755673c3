"""Static documents served next to the MCP endpoint: icon, ERC-8004 registration, agent card."""

from __future__ import annotations

import asyncio
from pathlib import Path

from starlette.responses import PlainTextResponse, Response

from github_dev_intel.catalog import ENTRYPOINTS
from github_dev_intel.settings import AGENT_NAME, AGENT_VERSION, Settings

ERC8004_TYPE = "https://eips.ethereum.org/EIPS/eip-8004#registration-v1"
A2A_VERSION = "0.3.0"

_REGISTRATION_DESCRIPTION = (
    "GitHub intelligence for AI agents - trending repos, releases, stars tracking. "
    "1 free + 5 paid endpoints via x402."
)
_AGENT_DESCRIPTION = (
    "GitHub intelligence for AI agents - trending repos, releases, stars, "
    "and developer activity tracking"
)


def _read_icon(icon_path: Path) -> bytes | None:
    if not icon_path.is_file():
        return None
    return icon_path.read_bytes()


async def icon_response(icon_path: Path) -> Response:
    """PNG passthrough, or a plain-text 404 when the file is absent."""
    data = await asyncio.to_thread(_read_icon, icon_path)
    if data is None:
        return PlainTextResponse("Icon not found", status_code=404)
    return Response(data, media_type="image/png")


def registration_document(settings: Settings) -> dict[str, object]:
    """ERC-8004 registration file describing this agent."""
    base_url = settings.public_base_url
    return {
        "type": ERC8004_TYPE,
        "name": AGENT_NAME,
        "description": _REGISTRATION_DESCRIPTION,
        "image": f"{base_url}/icon.png",
        "services": [
            {"name": "web", "endpoint": base_url},
            {
                "name": "A2A",
                "endpoint": f"{base_url}/.well-known/agent.json",
                "version": A2A_VERSION,
            },
        ],
        "x402Support": True,
        "active": True,
        "registrations": [],
        "supportedTrust": ["reputation"],
    }


def agent_card(settings: Settings) -> dict[str, object]:
    """A2A agent card: identity plus one skill per entrypoint, with its price."""
    base_url = settings.public_base_url
    return {
        "name": AGENT_NAME,
        "version": AGENT_VERSION,
        "description": _AGENT_DESCRIPTION,
        "url": base_url,
        "protocolVersion": A2A_VERSION,
        "iconUrl": f"{base_url}/icon.png",
        "capabilities": {"streaming": False, "pushNotifications": False},
        "skills": [
            {
                "id": spec.key,
                "name": spec.key,
                "description": spec.description,
                "price": {"amount": spec.price, "label": spec.price_label},
            }
            for spec in ENTRYPOINTS
        ],
    }
