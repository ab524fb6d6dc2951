"""
Result formatting: wrap an upstream payload in a readable text envelope.
"""

from __future__ import annotations

import json
from collections import defaultdict
from typing import Any

from aareguru_mcp.config import DEFAULT_CITY_DISPLAY
from aareguru_mcp.params import is_missing
from aareguru_mcp.types import ResolvedParameters, TextContent, ToolDefinition, ToolResult


def format_header(definition: ToolDefinition, params: ResolvedParameters) -> str:
    """Fill the tool's header template, falling back to Bern for the city."""
    context: defaultdict[str, str] = defaultdict(str)
    context.update({k: str(v) for k, v in params.items() if not is_missing(v)})
    context.setdefault("city", DEFAULT_CITY_DISPLAY)
    return definition.header.format_map(context)


def format_result(
    definition: ToolDefinition,
    params: ResolvedParameters,
    payload: Any,
) -> ToolResult:
    body = json.dumps(payload, indent=2, ensure_ascii=False)
    text = f"{format_header(definition, params)}\n\n{body}"
    return ToolResult(content=(TextContent(text),))


__all__ = ["format_header", "format_result"]
