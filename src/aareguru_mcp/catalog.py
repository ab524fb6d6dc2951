"""
Tool catalog: the static definitions of every tool this server exposes.

Definitions are built once at import, so ``AAREGURU_APP`` and
``AAREGURU_VERSION`` are read at process start.
"""

from __future__ import annotations

from aareguru_mcp.config import DEFAULT_CITY, get_default_app, get_default_version
from aareguru_mcp.types import ParameterSpec, ToolDefinition, UnknownToolError

# =============================================================================
# Shared Parameters
# =============================================================================

APP = ParameterSpec(
    name="app",
    description="Optional app identifier",
    default=get_default_app(),
)

VERSION = ParameterSpec(
    name="version",
    description="Optional version number",
    default=get_default_version(),
)

VALUES = ParameterSpec(
    name="values",
    description="Optional comma-separated list of specific values to extract",
)

# The API falls back to Bern on its own, so the default is advertised only
CITY = ParameterSpec(
    name="city",
    description="City identifier (e.g., 'bern', 'thun')",
    default=DEFAULT_CITY,
    send_default=False,
)

COMMON = (APP, VERSION, VALUES)


# =============================================================================
# Tools
# =============================================================================

TOOLS: tuple[ToolDefinition, ...] = (
    ToolDefinition(
        name="get_cities",
        description="Get list of all available cities/locations with Aare data",
        endpoint="/cities",
        header="Available Aare monitoring locations:",
        parameters=COMMON,
    ),
    ToolDefinition(
        name="get_current_conditions",
        description=(
            "Get comprehensive current Aare data for a specific location "
            "including temperature, flow, forecasts"
        ),
        endpoint="/current",
        header="Current Aare conditions for {city}:",
        parameters=(CITY, *COMMON),
    ),
    ToolDefinition(
        name="get_today_summary",
        description=(
            "Get minimal current Aare temperature and swimming recommendation "
            "for a location"
        ),
        endpoint="/today",
        header="Today's Aare summary for {city}:",
        parameters=(CITY, *COMMON),
    ),
    ToolDefinition(
        name="get_widget_data",
        description=(
            "Get current Aare data for all locations at once, suitable for "
            "widgets/dashboards"
        ),
        endpoint="/widget",
        header="Aare widget data for all locations:",
        parameters=COMMON,
    ),
    ToolDefinition(
        name="get_historical_data",
        description=(
            "Get historical time series data for water temperature, flow, "
            "and air temperature"
        ),
        endpoint="/history",
        header="Historical Aare data for {city} ({start} to {end}):",
        parameters=(
            ParameterSpec(
                name="city",
                description="City identifier (required for historical data)",
                required=True,
            ),
            ParameterSpec(
                name="start",
                description=(
                    "Start date/time in various formats "
                    "(ISO, timestamp, 'yesterday', '-1 day')"
                ),
                required=True,
            ),
            ParameterSpec(
                name="end",
                description="End date/time in various formats (ISO, timestamp, 'now')",
                required=True,
            ),
            *COMMON,
        ),
    ),
)

_BY_NAME = {tool.name: tool for tool in TOOLS}
if len(_BY_NAME) != len(TOOLS):
    raise RuntimeError("Tool names must be unique")


def get_tool(name: str) -> ToolDefinition:
    """Look up a tool definition by name."""
    try:
        return _BY_NAME[name]
    except KeyError:
        raise UnknownToolError(name) from None


def tool_names() -> list[str]:
    return [tool.name for tool in TOOLS]


__all__ = ["TOOLS", "get_tool", "tool_names"]
