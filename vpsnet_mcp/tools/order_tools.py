"""New service orders: plans, options and checkout."""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import Field, StrictInt, StrictStr

from ..models import PAYMENT_DESCRIPTION, Payment, ToolInput, UpstreamRequest
from . import ToolRegistry, ToolSpec
from .paths import body_of, get, post


class OrderPlansInput(ToolInput):
    type: Literal["vps"] = Field(default="vps", description="Service type (vps)")


class OrderOptionsInput(ToolInput):
    plan: StrictInt = Field(description="Plan ID from get_order_plans")


class OrderServiceInput(ToolInput):
    plan: StrictInt = Field(description="Plan ID from get_order_plans")
    os: Optional[StrictInt] = Field(
        default=None, description="OS version ID from get_order_options"
    )
    rootPassword: Optional[StrictStr] = Field(
        default=None,
        description=(
            "Root password. 6-40 chars, alphanumeric, must contain uppercase + "
            "lowercase + digit. Mutually exclusive with sshKey"
        ),
    )
    sshKey: Optional[StrictInt] = Field(
        default=None,
        description=(
            "SSH key ID from list_ssh_keys to deploy. Mutually exclusive with rootPassword"
        ),
    )
    period: Optional[StrictInt] = Field(
        default=None, description="Billing period ID from get_order_options"
    )
    resources: Optional[List[StrictInt]] = Field(
        default=None,
        description=(
            "Array of numeric resource value IDs from get_order_options, e.g. [901, 907, 902]"
        ),
    )
    payment: Payment = Field(description=PAYMENT_DESCRIPTION)


def _route_order_service(args: OrderServiceInput) -> UpstreamRequest:
    return post(
        "/order/configuration/confirm",
        body_of(args, "plan", "payment", "os", "rootPassword", "sshKey", "period", "resources"),
    )


TOOLS = [
    ToolSpec(
        name="get_order_plans",
        description="Get available plans for ordering a new VPS",
        input_model=OrderPlansInput,
        route=lambda args: get(f"/order/configuration/{args.type}/plans"),
    ),
    ToolSpec(
        name="get_order_options",
        description="Get configurable options (OS, resources, periods) for a plan",
        input_model=OrderOptionsInput,
        route=lambda args: get(f"/order/configuration/{args.plan}/options"),
    ),
    ToolSpec(
        name="order_service",
        description=" ".join(
            [
                "Order a new VPS. Requires sufficient account balance for balance payment.",
                "Payment object for balance: { payment: 1, successUrl: '', cancelUrl: '' }.",
                "Resources: array of numeric resource value IDs from get_order_options, "
                "e.g. [901, 907].",
                "rootPassword: 6-40 chars, alphanumeric, must contain uppercase + lowercase "
                "+ digit. Example: 'MyPass123'.",
                "sshKey and rootPassword are mutually exclusive, provide one or the other.",
            ]
        ),
        input_model=OrderServiceInput,
        route=_route_order_service,
        exclusive=(("rootPassword", "sshKey"),),
    ),
]


def register_tools(registry: ToolRegistry) -> None:
    for spec in TOOLS:
        registry.add_tool(spec)
