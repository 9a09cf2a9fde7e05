"""Account session and profile details."""

from __future__ import annotations

from ..models import ToolInput
from . import ToolRegistry, ToolSpec
from .paths import get


TOOLS = [
    ToolSpec(
        name="get_account",
        description="Get account info: user ID, email, balance, VAT rate",
        input_model=ToolInput,
        route=lambda args: get("/account/session"),
    ),
    ToolSpec(
        name="get_profile",
        description="Get user profile details (name, address, company info)",
        input_model=ToolInput,
        route=lambda args: get("/account/profile"),
    ),
]


def register_tools(registry: ToolRegistry) -> None:
    for spec in TOOLS:
        registry.add_tool(spec)
