"""
Data types for the Aare.guru MCP Server.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

# Caller arguments after default injection, in insertion order
ResolvedParameters = dict[str, str | None]


# =============================================================================
# Exceptions
# =============================================================================


class AareGuruError(Exception):
    """Base error for tool invocations.

    Every subclass carries a stable ``code`` for programmatic handling; the
    ``message`` is what ends up in the ``Error: ...`` result text.
    """

    code = "AAREGURU_ERROR"

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(AareGuruError):
    """A required parameter is missing or empty."""

    code = "VALIDATION_ERROR"


class UnknownToolError(AareGuruError):
    """The invocation names a tool absent from the catalog."""

    code = "UNKNOWN_TOOL"

    def __init__(self, name: str):
        super().__init__(f"Unknown tool: {name}", {"name": name})


class UpstreamError(AareGuruError):
    """The Aare.guru API answered with a non-success status."""

    code = "UPSTREAM_ERROR"

    def __init__(self, status_code: int, reason: str):
        self.status_code = status_code
        self.reason = reason
        super().__init__(
            f"API request failed: {status_code} {reason}",
            {"status_code": status_code, "reason": reason},
        )


class ParseError(AareGuruError):
    """The Aare.guru API answered with a body that is not valid JSON."""

    code = "PARSE_ERROR"


class UnexpectedError(AareGuruError):
    """Anything else raised inside a tool pipeline."""

    code = "UNEXPECTED_ERROR"


# =============================================================================
# Catalog Types
# =============================================================================


@dataclass(frozen=True, slots=True)
class ParameterSpec:
    """One entry of a tool's parameter schema.

    ``send_default`` is False for defaults that are only advertised (and used
    for display) but never injected into the upstream query.
    """

    name: str
    description: str
    type: str = "string"
    default: str | None = None
    required: bool = False
    send_default: bool = True

    def to_schema(self) -> dict[str, Any]:
        schema: dict[str, Any] = {"type": self.type, "description": self.description}
        if self.default is not None:
            schema["default"] = self.default
        return schema


@dataclass(frozen=True, slots=True)
class ToolDefinition:
    """Static description of one tool: what it is called and what it accepts."""

    name: str
    description: str
    endpoint: str
    header: str
    parameters: tuple[ParameterSpec, ...] = ()

    @property
    def required(self) -> tuple[str, ...]:
        return tuple(p.name for p in self.parameters if p.required)

    def input_schema(self) -> dict[str, Any]:
        """Render the parameter schema as a JSON-Schema object."""
        schema: dict[str, Any] = {
            "type": "object",
            "properties": {p.name: p.to_schema() for p in self.parameters},
        }
        if self.required:
            schema["required"] = list(self.required)
        return schema


# =============================================================================
# Invocation Types
# =============================================================================


@dataclass(frozen=True, slots=True)
class ToolInvocation:
    """A single incoming tool call."""

    name: str
    arguments: Mapping[str, str | None] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class UpstreamRequest:
    """A fully-built GET request against the Aare.guru API."""

    endpoint_path: str
    query_parameters: dict[str, str]
    base_url: str

    @property
    def url(self) -> str:
        return f"{self.base_url}{self.endpoint_path}"


@dataclass(frozen=True, slots=True)
class TextContent:
    """A text content block of a tool result."""

    text: str
    type: str = "text"

    def to_dict(self) -> dict[str, str]:
        return {"type": self.type, "text": self.text}


@dataclass(frozen=True, slots=True)
class ToolResult:
    """Uniform result envelope returned for every invocation."""

    content: tuple[TextContent, ...]
    is_error: bool = False

    @property
    def text(self) -> str:
        return "\n".join(block.text for block in self.content)

    @classmethod
    def from_error(cls, error: AareGuruError) -> ToolResult:
        return cls(content=(TextContent(f"Error: {error.message}"),), is_error=True)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the MCP ``CallToolResult`` wire shape."""
        return {
            "content": [block.to_dict() for block in self.content],
            "isError": self.is_error,
        }
