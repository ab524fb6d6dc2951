"""Aare.guru MCP Server

Aare river data from aareguru.existenz.ch as MCP tools:
- get_cities, get_current_conditions, get_today_summary
- get_widget_data, get_historical_data
"""

try:
    from importlib.metadata import PackageNotFoundError, version
except (ImportError, ModuleNotFoundError):
    __version__ = "0.0.0+unknown"
else:
    try:
        __version__ = version("aareguru-mcp")
    except PackageNotFoundError:
        __version__ = "0.0.0+unknown"

from aareguru_mcp.catalog import TOOLS, get_tool
from aareguru_mcp.dispatch import call_tool, list_tools
from aareguru_mcp.server import main, mcp
from aareguru_mcp.types import (
    AareGuruError,
    ParseError,
    ToolDefinition,
    ToolResult,
    UnexpectedError,
    UnknownToolError,
    UpstreamError,
    ValidationError,
)

__all__ = [
    "__version__",
    "AareGuruError",
    "ParseError",
    "TOOLS",
    "ToolDefinition",
    "ToolResult",
    "UnexpectedError",
    "UnknownToolError",
    "UpstreamError",
    "ValidationError",
    "call_tool",
    "get_tool",
    "list_tools",
    "main",
    "mcp",
]
