"""
Per-service settings: hostname, root password, rDNS, firewall flush, title,
IPv6 and extra kernel features, SSH key deployment and OS reinstall.

Password and rDNS rules in the descriptions are guidance for the agent; the
VPSnet API is the one that enforces them.
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field, StrictBool, StrictInt, StrictStr

from ..models import OrderInput
from . import ToolRegistry, ToolSpec
from .paths import body_of, get, post, service_path


PASSWORD_RULES = "6-40 chars, alphanumeric, must contain uppercase + lowercase + digit"


class ChangeHostnameInput(OrderInput):
    hostname: StrictStr = Field(description="New hostname")


class ChangeRootPasswordInput(OrderInput):
    password: StrictStr = Field(description=f"New root password. {PASSWORD_RULES}")


class ChangeRdnsInput(OrderInput):
    ip: StrictStr = Field(
        description="IP address to set rDNS for. Must belong to this service (check get_rdns)"
    )
    value: StrictStr = Field(
        description=(
            "New rDNS value (hostname). Valid FQDN, e.g. 'mail.example.com'. "
            "Labels: 1-30 chars, alphanumeric+hyphen, no leading/trailing hyphens. "
            "Cannot contain 'vpsnet' or 'speedy'"
        )
    )


class ChangeTitleInput(OrderInput):
    title: StrictStr = Field(description="New display title")


class ToggleInput(OrderInput):
    value: StrictBool = Field(description="true to enable, false to disable")


class ToggleExtraSettingsInput(ToggleInput):
    name: Literal["ppp", "fuse", "tuntap", "nfs"] = Field(description="Setting name")


class DeploySshKeyInput(OrderInput):
    # Snake case on purpose: order_service calls the same value `sshKey`.
    ssh_key: StrictInt = Field(description="SSH key ID from list_ssh_keys")


class ReinstallOsInput(OrderInput):
    osVersion: StrictInt = Field(description="OS version ID from get_os_options")
    rootPassword: Optional[StrictStr] = Field(
        default=None,
        description=f"New root password (auto-generated if omitted). {PASSWORD_RULES}",
    )


TOOLS = [
    ToolSpec(
        name="change_hostname",
        description="Change VPS hostname",
        input_model=ChangeHostnameInput,
        route=lambda args: post(
            service_path(args.orderNo, "change-hostname"), body_of(args, "hostname")
        ),
    ),
    ToolSpec(
        name="change_root_password",
        description=(
            "Change VPS root password. Rules: 6-40 chars, alphanumeric, MUST contain "
            "uppercase + lowercase + digit. Example: 'MyPass123'."
        ),
        input_model=ChangeRootPasswordInput,
        route=lambda args: post(
            service_path(args.orderNo, "change-root-password"), body_of(args, "password")
        ),
    ),
    ToolSpec(
        name="get_rdns",
        description="Get current rDNS records for a service",
        input_model=OrderInput,
        route=lambda args: get(service_path(args.orderNo, "change-rdns")),
    ),
    ToolSpec(
        name="change_rdns",
        description=(
            "Change reverse DNS record for a service IP. PTR value rules: min 3 chars, "
            "max 10 dot-separated labels, each label 1-30 chars (alphanumeric + hyphen, "
            "no leading/trailing hyphens). Blacklisted words in any label: 'vpsnet', "
            "'speedy'. Use get_rdns first to see available IPs."
        ),
        input_model=ChangeRdnsInput,
        route=lambda args: post(
            service_path(args.orderNo, "change-rdns"), body_of(args, "ip", "value")
        ),
    ),
    ToolSpec(
        name="flush_iptables",
        description="Flush iptables rules on VPS (useful when locked out)",
        input_model=OrderInput,
        route=lambda args: post(service_path(args.orderNo, "flush-ip-tables")),
    ),
    ToolSpec(
        name="change_title",
        description="Change service display title",
        input_model=ChangeTitleInput,
        route=lambda args: post(
            service_path(args.orderNo, "change-title"), body_of(args, "title")
        ),
    ),
    ToolSpec(
        name="toggle_ipv6",
        description="Enable or disable IPv6 on VPS",
        input_model=ToggleInput,
        route=lambda args: post(
            service_path(args.orderNo, "ipv6-toggle"), body_of(args, "value")
        ),
    ),
    ToolSpec(
        name="toggle_extra_settings",
        description="Toggle extra VPS settings: ppp, fuse, tuntap, or nfs",
        input_model=ToggleExtraSettingsInput,
        route=lambda args: post(
            service_path(args.orderNo, "extra-settings-toggle"),
            body_of(args, "name", "value"),
        ),
    ),
    ToolSpec(
        name="deploy_ssh_key",
        description=(
            "Deploy an SSH key to VPS. Returns noty UUID for tracking. ASYNC: wait "
            "15-30 seconds after deploying before attempting SSH. Use list_ssh_keys to "
            "get available key IDs. To add your own key first: read ~/.ssh/id_rsa.pub "
            "from local machine, then create_ssh_key, then deploy it here."
        ),
        input_model=DeploySshKeyInput,
        route=lambda args: post(
            service_path(args.orderNo, "change-ssh-key"), body_of(args, "ssh_key")
        ),
    ),
    ToolSpec(
        name="get_os_options",
        description="Get available OS templates for reinstall",
        input_model=OrderInput,
        route=lambda args: get(service_path(args.orderNo, "change-os")),
    ),
    ToolSpec(
        name="reinstall_os",
        description=(
            "Reinstall OS on VPS. WARNING: destroys all data! Returns noty UUID. "
            f"Password rules: {PASSWORD_RULES}."
        ),
        input_model=ReinstallOsInput,
        route=lambda args: post(
            service_path(args.orderNo, "change-os"),
            body_of(args, "osVersion", "rootPassword"),
        ),
    ),
]


def register_tools(registry: ToolRegistry) -> None:
    for spec in TOOLS:
        registry.add_tool(spec)
