"""
Aare.guru MCP Server

Exposes the Aare.guru river data API as MCP tools:
- get_cities: Available monitoring locations
- get_current_conditions: Full current data for one location
- get_today_summary: Minimal temperature and swimming recommendation
- get_widget_data: Current data for all locations at once
- get_historical_data: Time series for a location and time range

Each catalog definition is registered as a FastMCP tool whose input schema is
taken verbatim from the catalog; calls go straight to the dispatcher.
"""

import logging
from typing import Any

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.tools.tool import Tool
from fastmcp.tools.tool import ToolResult as MCPToolResult
from mcp.types import TextContent, ToolAnnotations

from aareguru_mcp import __version__
from aareguru_mcp.catalog import TOOLS
from aareguru_mcp.config import LOGGER_NAME
from aareguru_mcp.dispatch import call_tool
from aareguru_mcp.types import ToolDefinition

# Configure logging (stderr, stdout carries the MCP stream)
logger = logging.getLogger(LOGGER_NAME)
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)


# =============================================================================
# Server Instance
# =============================================================================

mcp = FastMCP(
    name="aareguru-server",
    instructions="""
Aare.guru MCP Server - live and historical data for the Aare river (Switzerland)

- get_cities: list monitoring locations and their identifiers
- get_current_conditions / get_today_summary: conditions for one city (default: bern)
- get_widget_data: all locations at once
- get_historical_data: time series; requires city, start and end
""",
)


# =============================================================================
# Catalog Tools
# =============================================================================


class CatalogTool(Tool):
    """FastMCP tool backed by a catalog definition."""

    @classmethod
    def from_definition(cls, definition: ToolDefinition) -> "CatalogTool":
        return cls(
            name=definition.name,
            description=definition.description,
            parameters=definition.input_schema(),
            annotations=ToolAnnotations(readOnlyHint=True),
        )

    async def run(self, arguments: dict[str, Any]) -> MCPToolResult:
        result = await call_tool(self.name, arguments)
        if result.is_error:
            # ToolError text reaches the client unchanged with isError set
            raise ToolError(result.text)
        return MCPToolResult(
            content=[TextContent(type="text", text=block.text) for block in result.content]
        )


for _definition in TOOLS:
    mcp.add_tool(CatalogTool.from_definition(_definition))


# =============================================================================
# Main Entry Point
# =============================================================================


def main() -> None:
    """Run the MCP server on stdio transport."""
    logger.info("🚀 Starting Aare.guru MCP Server v%s (FastMCP)", __version__)
    logger.info("Aare.guru MCP server running on stdio")

    mcp.run(transport="stdio")


# Export for use as module
__all__ = ["CatalogTool", "main", "mcp"]


if __name__ == "__main__":
    main()
