"""
Tool dispatch: route an invocation to its handler and run the pipeline.

Every handler fixes its endpoint and delegates to the shared
resolve -> build -> execute -> format pipeline. ``call_tool`` is the only
place errors are caught; whatever goes wrong becomes an error ``ToolResult``.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Mapping

import httpx

from aareguru_mcp import upstream
from aareguru_mcp.catalog import TOOLS, get_tool
from aareguru_mcp.config import LOGGER_NAME
from aareguru_mcp.formatting import format_result
from aareguru_mcp.params import is_missing, resolve
from aareguru_mcp.types import (
    AareGuruError,
    ToolDefinition,
    ToolInvocation,
    ToolResult,
    UnexpectedError,
    ValidationError,
)

logger = logging.getLogger(LOGGER_NAME)

Handler = Callable[[ToolDefinition, ToolInvocation, httpx.AsyncClient | None], Awaitable[ToolResult]]


# =============================================================================
# Pipeline
# =============================================================================


async def _run_pipeline(
    definition: ToolDefinition,
    invocation: ToolInvocation,
    client: httpx.AsyncClient | None,
) -> ToolResult:
    params = resolve(definition, invocation)
    request = upstream.build_request(definition.endpoint, params)
    payload = await upstream.execute(request, client)
    return format_result(definition, params, payload)


# =============================================================================
# Handlers
# =============================================================================


async def get_cities(
    definition: ToolDefinition,
    invocation: ToolInvocation,
    client: httpx.AsyncClient | None = None,
) -> ToolResult:
    return await _run_pipeline(definition, invocation, client)


async def get_current_conditions(
    definition: ToolDefinition,
    invocation: ToolInvocation,
    client: httpx.AsyncClient | None = None,
) -> ToolResult:
    return await _run_pipeline(definition, invocation, client)


async def get_today_summary(
    definition: ToolDefinition,
    invocation: ToolInvocation,
    client: httpx.AsyncClient | None = None,
) -> ToolResult:
    return await _run_pipeline(definition, invocation, client)


async def get_widget_data(
    definition: ToolDefinition,
    invocation: ToolInvocation,
    client: httpx.AsyncClient | None = None,
) -> ToolResult:
    return await _run_pipeline(definition, invocation, client)


async def get_historical_data(
    definition: ToolDefinition,
    invocation: ToolInvocation,
    client: httpx.AsyncClient | None = None,
) -> ToolResult:
    args = invocation.arguments
    if any(is_missing(args.get(key)) for key in ("city", "start", "end")):
        raise ValidationError("Historical data requires city, start, and end parameters")
    return await _run_pipeline(definition, invocation, client)


HANDLERS: dict[str, Handler] = {
    "get_cities": get_cities,
    "get_current_conditions": get_current_conditions,
    "get_today_summary": get_today_summary,
    "get_widget_data": get_widget_data,
    "get_historical_data": get_historical_data,
}

if set(HANDLERS) != {tool.name for tool in TOOLS}:
    raise RuntimeError("Every catalog tool needs exactly one handler")


# =============================================================================
# Boundary
# =============================================================================


def list_tools() -> list[ToolDefinition]:
    """Return every tool definition, in catalog order."""
    return list(TOOLS)


async def call_tool(
    name: str,
    arguments: Mapping[str, str | None] | None = None,
    client: httpx.AsyncClient | None = None,
) -> ToolResult:
    """
    Invoke a tool by name and return its result envelope.

    Never raises: unknown tools, validation problems, upstream failures and
    unexpected exceptions all come back as ``is_error=True`` results.

    Args:
        name: Tool name as advertised by ``list_tools``
        arguments: Caller-supplied arguments
        client: Optional httpx client for the upstream call

    Returns:
        ToolResult with a single text block
    """
    invocation = ToolInvocation(name=name, arguments=dict(arguments or {}))
    logger.info("🔧 %s: %s", name, dict(invocation.arguments))

    try:
        definition = get_tool(name)
        return await HANDLERS[definition.name](definition, invocation, client)
    except AareGuruError as e:
        logger.warning("   ❌ %s failed [%s]: %s", name, e.code, e.message)
        return ToolResult.from_error(e)
    except Exception as e:
        logger.exception("%s failed unexpectedly: %s", name, e)
        return ToolResult.from_error(UnexpectedError(str(e) or type(e).__name__))


__all__ = ["HANDLERS", "call_tool", "list_tools"]
