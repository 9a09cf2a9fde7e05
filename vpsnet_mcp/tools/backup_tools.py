"""
Backups. Creating one is a paid operation.

Flow: `get_backup_status` lists the dates a backup can be taken for (up to
seven days back) and the price, then `create_backup` orders it.
"""

from __future__ import annotations

from pydantic import Field, StrictStr

from ..models import PAYMENT_DESCRIPTION, OrderInput, Payment
from . import ToolRegistry, ToolSpec
from .paths import body_of, get, post, service_path


class CreateBackupInput(OrderInput):
    period: StrictStr = Field(
        description=(
            "Backup date in YYYY-MM-DD format. Must be one of the dates from "
            "get_backup_status options (up to 7 days in the past)"
        )
    )
    directories: StrictStr = Field(
        description="Directories to backup, e.g. '/' for full backup"
    )
    payment: Payment = Field(description=PAYMENT_DESCRIPTION)


TOOLS = [
    ToolSpec(
        name="get_backup_status",
        description="Get backup status and configuration for a service",
        input_model=OrderInput,
        route=lambda args: get(service_path(args.orderNo, "backup/status")),
    ),
    ToolSpec(
        name="get_backup_history",
        description="Get backup history for a service",
        input_model=OrderInput,
        route=lambda args: get(service_path(args.orderNo, "backup/history")),
    ),
    ToolSpec(
        name="create_backup",
        description=(
            "Create a new backup. Returns noty UUID for tracking. First call "
            "get_backup_status to see available period dates and price. Backup is a "
            "paid operation (price shown in get_backup_status)."
        ),
        input_model=CreateBackupInput,
        route=lambda args: post(
            service_path(args.orderNo, "backup"),
            body_of(args, "period", "directories", "payment"),
        ),
    ),
]


def register_tools(registry: ToolRegistry) -> None:
    for spec in TOOLS:
        registry.add_tool(spec)
