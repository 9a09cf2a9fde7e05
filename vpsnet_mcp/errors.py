"""
Errors raised while resolving and executing a tool call.

Every error a tool call can end with derives from `ToolError`, so transports
only need one `except` clause to turn a failure into an error result.
Upstream HTTP error statuses are deliberately absent here: their bodies are
passed through to the caller as regular results.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional


class ToolError(Exception):
    """Base class for tool-call failures.

    Attributes:
        message: Human-readable error message
        details: Additional structured context
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


class UnknownToolError(ToolError, LookupError):
    """Raised when no tool is registered under the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown tool '{name}'", details={"tool": name})
        self.name = name


class InvalidArgumentsError(ToolError, ValueError):
    """Raised when tool arguments do not satisfy the tool's input contract."""

    def __init__(self, tool: str, errors: List[str], fields: List[str]) -> None:
        summary = "; ".join(errors)
        super().__init__(
            f"Invalid arguments for tool '{tool}': {summary}",
            details={"tool": tool, "fields": fields, "errors": errors},
        )
        self.tool = tool
        self.fields = fields


class UpstreamTransportError(ToolError):
    """Raised when the VPSnet API cannot be reached (connect error, timeout, DNS)."""

    def __init__(self, method: str, path: str, cause: Exception) -> None:
        super().__init__(
            f"{method} {path} failed: {type(cause).__name__}: {cause}",
            details={"method": method, "path": path},
        )
        self.cause = cause
