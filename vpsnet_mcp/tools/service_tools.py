"""
Service listing, inspection and power actions.

Start, stop and restart are asynchronous upstream: the response carries a
noty UUID that tracks the action's progress.
"""

from __future__ import annotations

from ..models import OrderInput, ToolInput
from . import ToolRegistry, ToolSpec
from .paths import get, post, service_path


def _power_action(name: str, action: str, summary: str) -> ToolSpec:
    return ToolSpec(
        name=name,
        description=f"{summary} Returns noty UUID for tracking.",
        input_model=OrderInput,
        route=lambda args: post(service_path(args.orderNo, action)),
    )


TOOLS = [
    ToolSpec(
        name="list_services",
        description="List all active VPS services with state, plan, IPs, and expiry",
        input_model=ToolInput,
        route=lambda args: get("/account/services"),
    ),
    ToolSpec(
        name="get_service",
        description="Get detailed info for a service by order number",
        input_model=OrderInput,
        route=lambda args: get(f"/account/services/{args.orderNo}"),
    ),
    ToolSpec(
        name="get_service_graphs",
        description="Get performance graphs (CPU, RAM, disk, network)",
        input_model=OrderInput,
        route=lambda args: get(service_path(args.orderNo, "graphs")),
    ),
    ToolSpec(
        name="get_service_history",
        description="Get action history for a service",
        input_model=OrderInput,
        route=lambda args: get(service_path(args.orderNo, "history")),
    ),
    _power_action("start_service", "start", "Start a stopped VPS."),
    _power_action("stop_service", "stop", "Stop a running VPS."),
    _power_action("restart_service", "restart", "Restart a VPS."),
]


def register_tools(registry: ToolRegistry) -> None:
    for spec in TOOLS:
        registry.add_tool(spec)
