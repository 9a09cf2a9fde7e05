"""
Plan changes and billing periods.

Plan changes are free: the remaining time is recalculated (an upgrade
shortens the expiry, a downgrade extends it). Renewal is paid and takes the
same payment object as ordering.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field, StrictBool, StrictInt

from ..models import PAYMENT_DESCRIPTION, OrderInput, Payment
from . import ToolRegistry, ToolSpec
from .paths import body_of, get, post, service_path


RESOURCES_DESCRIPTION = (
    "Array of numeric resource value IDs, one per resource type (RAM, SSD, IP, etc.). "
    "Get IDs from get_plan_resources response: each resource type has 'values' array, "
    "pick one value's 'id' per type. Use isDefault=1 values for defaults. "
    "Do NOT pass empty array."
)


class PlanInput(OrderInput):
    plan: StrictInt = Field(description="Plan ID from get_plan_options")


class PlanChangeInput(PlanInput):
    resources: List[StrictInt] = Field(description=RESOURCES_DESCRIPTION)


class AutoRenewInput(OrderInput):
    state: StrictBool = Field(description="true to enable, false to disable")
    period: Optional[StrictInt] = Field(
        default=None,
        description="Billing period ID (required when enabling)",
    )


class RenewInput(OrderInput):
    period: StrictInt = Field(description="Period ID from get_period_options")
    payment: Payment = Field(description=PAYMENT_DESCRIPTION)


TOOLS = [
    ToolSpec(
        name="get_plan_options",
        description="Get available plans for upgrade/downgrade. Plan changes are FREE.",
        input_model=OrderInput,
        route=lambda args: get(service_path(args.orderNo, "plans-options")),
    ),
    ToolSpec(
        name="get_plan_resources",
        description="Get configurable resources for a specific plan",
        input_model=PlanInput,
        route=lambda args: get(
            service_path(args.orderNo, f"plans-options/{args.plan}/options")
        ),
    ),
    ToolSpec(
        name="calculate_plan_change",
        description=(
            "Preview plan change cost and new expiry. Plan changes are FREE, remaining "
            "time is recalculated. Use get_plan_resources first to see available "
            "resource IDs for the target plan."
        ),
        input_model=PlanChangeInput,
        route=lambda args: post(
            service_path(args.orderNo, "plans-options/calculate"),
            body_of(args, "plan", "resources"),
        ),
    ),
    ToolSpec(
        name="change_plan",
        description=(
            "Change VPS plan (FREE). Recalculates expiry based on price difference. "
            "Always call calculate_plan_change first to preview. Use get_plan_resources "
            "to get resource IDs for the target plan."
        ),
        input_model=PlanChangeInput,
        route=lambda args: post(
            service_path(args.orderNo, "plans-options"),
            body_of(args, "plan", "resources"),
        ),
    ),
    ToolSpec(
        name="get_period_options",
        description="Get billing period and auto-renewal options",
        input_model=OrderInput,
        route=lambda args: get(service_path(args.orderNo, "periods-options")),
    ),
    ToolSpec(
        name="set_auto_renew",
        description="Enable or disable auto-renewal for a service",
        input_model=AutoRenewInput,
        route=lambda args: post(
            service_path(args.orderNo, "periods-options/auto-renew"),
            body_of(args, "state", "period"),
        ),
    ),
    ToolSpec(
        name="renew_service",
        description=(
            "Manually renew a service for a specific period. Payment object: "
            "{ payment: 1, successUrl: '', cancelUrl: '' } for balance payment."
        ),
        input_model=RenewInput,
        route=lambda args: post(
            service_path(args.orderNo, "periods-options"),
            body_of(args, "period", "payment"),
        ),
    ),
]


def register_tools(registry: ToolRegistry) -> None:
    for spec in TOOLS:
        registry.add_tool(spec)
