"""Public pricing, system status and FAQ; no account data involved."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from ..models import ToolInput
from . import ToolRegistry, ToolSpec
from .paths import get


class PricingInput(ToolInput):
    type: Literal["vps", "vds", "ds", "vps_storage"] = Field(description="Service type")


TOOLS = [
    ToolSpec(
        name="get_pricing",
        description="Get public pricing for a service type",
        input_model=PricingInput,
        route=lambda args: get(f"/public/prices/{args.type}/plans"),
    ),
    ToolSpec(
        name="get_system_status",
        description="Get VPSnet.com system status",
        input_model=ToolInput,
        route=lambda args: get("/public/status"),
    ),
    ToolSpec(
        name="get_faq",
        description="Get frequently asked questions",
        input_model=ToolInput,
        route=lambda args: get("/public/faq"),
    ),
]


def register_tools(registry: ToolRegistry) -> None:
    for spec in TOOLS:
        registry.add_tool(spec)
