"""
Upstream access to the Aare.guru API.

Builds query requests from resolved parameters and executes them with httpx.
No retries and no explicit timeout: httpx's default applies.
"""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx

from aareguru_mcp.config import LOGGER_NAME, USER_AGENT, get_api_base_url
from aareguru_mcp.types import ParseError, ResolvedParameters, UpstreamError, UpstreamRequest

logger = logging.getLogger(LOGGER_NAME)


# =============================================================================
# Request Building
# =============================================================================


def build_request(endpoint_path: str, params: ResolvedParameters) -> UpstreamRequest:
    """Turn resolved parameters into a request against the versioned API."""
    query = {key: str(value) for key, value in params.items() if value is not None}
    return UpstreamRequest(
        endpoint_path=endpoint_path,
        query_parameters=query,
        base_url=get_api_base_url(),
    )


# =============================================================================
# Execution
# =============================================================================


def create_client() -> httpx.AsyncClient:
    """Create the HTTP client used for a single tool call."""
    return httpx.AsyncClient(headers={"User-Agent": USER_AGENT})


async def execute(
    request: UpstreamRequest,
    client: httpx.AsyncClient | None = None,
) -> Any:
    """
    Issue one GET for ``request`` and return the parsed JSON body.

    Args:
        request: The request to execute
        client: Optional client to reuse; a fresh one is opened otherwise

    Raises:
        UpstreamError: on any non-2xx status
        ParseError: if the body is not valid JSON
    """
    if client is None:
        async with create_client() as owned:
            return await _get_json(owned, request)
    return await _get_json(client, request)


async def _get_json(client: httpx.AsyncClient, request: UpstreamRequest) -> Any:
    logger.debug("   GET %s %s", request.url, request.query_parameters)
    response = await client.get(request.url, params=list(request.query_parameters.items()))

    if not response.is_success:
        logger.warning("   ❌ HTTP %d from %s", response.status_code, request.endpoint_path)
        raise UpstreamError(response.status_code, response.reason_phrase)

    try:
        return response.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ParseError(
            f"Invalid JSON in API response: {e}",
            {"endpoint": request.endpoint_path},
        ) from e


__all__ = ["build_request", "create_client", "execute"]
