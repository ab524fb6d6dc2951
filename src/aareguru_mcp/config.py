"""
Configuration management for the Aare.guru MCP Server.

Constants carry sensible defaults; the getters allow environment overrides.
"""

from __future__ import annotations

import os

LOGGER_NAME = "aareguru_mcp"


# =============================================================================
# Upstream API
# =============================================================================

API_BASE_URL = "https://aareguru.existenz.ch"
API_VERSION_PREFIX = "/v2018"

# Client identification expected by the Aare.guru API on every request
DEFAULT_APP = "mcp-aareguru-server"
DEFAULT_VERSION = "1.0.0"

# Shown in result headers when no city argument was given
DEFAULT_CITY = "bern"
DEFAULT_CITY_DISPLAY = "Bern"

USER_AGENT = "aareguru-mcp (+https://aareguru.existenz.ch)"


# =============================================================================
# Getters
# =============================================================================


def get_api_base_url() -> str:
    """Get the versioned upstream base URL with env override support."""
    base = os.environ.get("AAREGURU_API_URL", API_BASE_URL).rstrip("/")
    return f"{base}{API_VERSION_PREFIX}"


def get_default_app() -> str:
    """Get the app identifier sent upstream when the caller omits one."""
    return os.environ.get("AAREGURU_APP") or DEFAULT_APP


def get_default_version() -> str:
    """Get the version string sent upstream when the caller omits one."""
    return os.environ.get("AAREGURU_VERSION") or DEFAULT_VERSION
