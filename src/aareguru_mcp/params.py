"""
Parameter resolution: default injection and required-field validation.
"""

from __future__ import annotations

from aareguru_mcp.types import (
    ResolvedParameters,
    ToolDefinition,
    ToolInvocation,
    ValidationError,
)


def is_missing(value: object) -> bool:
    """True for absent values: ``None`` and the empty string."""
    return value is None or value == ""


def resolve(definition: ToolDefinition, invocation: ToolInvocation) -> ResolvedParameters:
    """
    Resolve caller arguments against a tool's parameter schema.

    Caller-supplied keys keep their order; injected defaults are appended
    after them. Keys unknown to the schema pass through unchanged, and
    date-like values such as ``start``/``end`` are never interpreted.

    Raises:
        ValidationError: if a required parameter is missing or empty
    """
    params: ResolvedParameters = dict(invocation.arguments)

    for spec in definition.parameters:
        if spec.default is not None and spec.send_default and is_missing(params.get(spec.name)):
            params[spec.name] = spec.default

    for spec in definition.parameters:
        if spec.required and is_missing(params.get(spec.name)):
            raise ValidationError(
                f"missing required parameter: {spec.name}",
                {"tool": definition.name, "parameter": spec.name},
            )

    return params


__all__ = ["is_missing", "resolve"]
