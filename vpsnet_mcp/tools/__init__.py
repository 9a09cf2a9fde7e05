"""
Tool registration utilities.

Each `*_tools` module in this package declares its tools as `ToolSpec`
entries and exposes a `register_tools(registry)` function that adds them to
the central registry used by the MCP server.

A tool is pure data: an input model and a `route` function that turns the
validated input into exactly one `UpstreamRequest`. The registry is the only
place that talks to the HTTP client.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, Type

from mcp import types
from pydantic import ValidationError

from ..api_client import ApiResponse, VpsNetClient
from ..errors import InvalidArgumentsError, ToolError, UnknownToolError
from ..models import ToolInput, UpstreamRequest

logger = logging.getLogger(__name__)


Route = Callable[[Any], UpstreamRequest]


@dataclass(frozen=True)
class ToolSpec:
    name: str
    description: str
    input_model: Type[ToolInput]
    route: Route
    # Groups of optional fields of which at most one may be supplied.
    exclusive: Tuple[Tuple[str, ...], ...] = field(default=())

    def to_mcp_tool(self) -> types.Tool:
        return types.Tool(
            name=self.name,
            description=self.description,
            inputSchema=self.input_model.model_json_schema(),
        )


def format_json(data: Any) -> str:
    """Pretty-print an upstream body the way it is shown to agents."""
    return json.dumps(data, indent=2, ensure_ascii=False)


class ToolRegistry:
    """
    In-memory registry mapping MCP tool names to their specifications.

    Holds no per-call state, so concurrent invocations need no locking.
    """

    def __init__(self, client: VpsNetClient) -> None:
        self._client = client
        self._tools: Dict[str, ToolSpec] = {}

    def add_tool(self, spec: ToolSpec) -> None:
        if spec.name in self._tools:
            raise ValueError(f"Tool '{spec.name}' already registered")
        self._tools[spec.name] = spec

    def list_tools(self) -> List[types.Tool]:
        return [spec.to_mcp_tool() for spec in self._tools.values()]

    def names(self) -> List[str]:
        return list(self._tools)

    def get(self, name: str) -> ToolSpec:
        if name not in self._tools:
            raise UnknownToolError(name)
        return self._tools[name]

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)

    def build_request(
        self,
        name: str,
        arguments: Optional[Mapping[str, Any]],
    ) -> UpstreamRequest:
        """
        Resolve, validate and translate a tool call without touching the network.

        Raises `UnknownToolError` or `InvalidArgumentsError`.
        """
        spec = self.get(name)
        if arguments is None:
            arguments = {}
        if not isinstance(arguments, Mapping):
            raise InvalidArgumentsError(
                name, ["arguments must be an object"], fields=[]
            )

        try:
            parsed = spec.input_model.model_validate(dict(arguments))
        except ValidationError as exc:
            errors, fields = _describe_validation_error(exc)
            raise InvalidArgumentsError(name, errors, fields) from exc

        for group in spec.exclusive:
            present = [f for f in group if getattr(parsed, f) is not None]
            if len(present) > 1:
                raise InvalidArgumentsError(
                    name,
                    [f"{' and '.join(present)} are mutually exclusive"],
                    fields=present,
                )

        return spec.route(parsed)

    async def dispatch(
        self,
        name: str,
        arguments: Optional[Mapping[str, Any]],
    ) -> ApiResponse:
        """Validate the call and issue its single upstream request."""
        request = self.build_request(name, arguments)
        return await self._client.send(request.method, request.path, request.body)

    async def invoke(
        self,
        name: str,
        arguments: Optional[Mapping[str, Any]],
    ) -> types.CallToolResult:
        """
        Run a tool and package the outcome as an MCP tool result.

        The upstream body is passed through verbatim as indented JSON, whatever
        the status code. Tool errors become results flagged with `isError`.
        """
        try:
            response = await self.dispatch(name, arguments)
        except ToolError as exc:
            logger.warning("Tool '%s' failed: %s", name, exc)
            return types.CallToolResult(
                content=[types.TextContent(type="text", text=str(exc))],
                isError=True,
            )
        return types.CallToolResult(
            content=[types.TextContent(type="text", text=format_json(response.data))],
        )


def _describe_validation_error(exc: ValidationError) -> Tuple[List[str], List[str]]:
    errors: List[str] = []
    fields: List[str] = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err["loc"])
        errors.append(f"{location}: {err['msg']}" if location else err["msg"])
        if location and location not in fields:
            fields.append(location)
    return errors, fields
