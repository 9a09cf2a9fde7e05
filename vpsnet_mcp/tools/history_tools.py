"""Billing and account activity history."""

from __future__ import annotations

from pydantic import Field

from ..models import PageInput, PathSegment, ToolInput
from . import ToolRegistry, ToolSpec
from .paths import get, with_page


class InvoiceInput(ToolInput):
    hash: PathSegment = Field(description="Invoice hash")


TOOLS = [
    ToolSpec(
        name="list_invoices",
        description="List invoices with pagination",
        input_model=PageInput,
        route=lambda args: get(with_page("/account/history/invoices", args.page)),
    ),
    ToolSpec(
        name="get_invoice",
        description="Get a specific invoice by hash",
        input_model=InvoiceInput,
        route=lambda args: get(f"/account/history/invoices/{args.hash}"),
    ),
    ToolSpec(
        name="list_payments",
        description="List payment history with pagination",
        input_model=PageInput,
        route=lambda args: get(with_page("/account/history/payments", args.page)),
    ),
    ToolSpec(
        name="get_login_history",
        description="Get account login history (IPs, dates)",
        input_model=ToolInput,
        route=lambda args: get("/account/history/login"),
    ),
    ToolSpec(
        name="get_management_history",
        description="Get management/activity history (service actions, changes)",
        input_model=ToolInput,
        route=lambda args: get("/account/history/management"),
    ),
]


def register_tools(registry: ToolRegistry) -> None:
    for spec in TOOLS:
        registry.add_tool(spec)
