"""
Account-level SSH keys and API keys.

Uploading a key here does not put it on any server; `deploy_ssh_key` (or
`sshKey` when ordering) does that.
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field, StrictInt, StrictStr

from ..models import ToolInput, UpstreamRequest
from . import ToolRegistry, ToolSpec
from .paths import body_of, delete, get, post


class SshKeyIdInput(ToolInput):
    id: StrictInt = Field(description="SSH key ID")


class CreateSshKeyInput(ToolInput):
    name: StrictStr = Field(description="Key name/label")
    public_key: StrictStr = Field(description="SSH public key content")


class ApiKeyIdInput(ToolInput):
    id: StrictInt = Field(description="API key ID")


class ApiKeyInput(ToolInput):
    name: StrictStr = Field(description="Key name")
    allowed_ips: Optional[StrictStr] = Field(
        default=None, description="Comma-separated allowed IPs"
    )
    expires_at: Optional[StrictStr] = Field(
        default=None, description="Expiry date (YYYY-MM-DD)"
    )


class UpdateApiKeyInput(ApiKeyInput):
    id: StrictInt = Field(description="API key ID")


def _route_update_api_key(args: UpdateApiKeyInput) -> UpstreamRequest:
    # The key ID lives in the path only.
    return post(
        f"/account/api-keys/{args.id}",
        body_of(args, "name", "allowed_ips", "expires_at"),
    )


TOOLS = [
    ToolSpec(
        name="list_ssh_keys",
        description="List all SSH keys on the account",
        input_model=ToolInput,
        route=lambda args: get("/account/ssh-keys"),
    ),
    ToolSpec(
        name="get_ssh_key",
        description="Get a specific SSH key by ID",
        input_model=SshKeyIdInput,
        route=lambda args: get(f"/account/ssh-keys/{args.id}"),
    ),
    ToolSpec(
        name="create_ssh_key",
        description=(
            "Add a new SSH key to the account. To deploy software on a VPS, read the "
            "local machine's public key from ~/.ssh/id_rsa.pub or ~/.ssh/id_ed25519.pub, "
            "upload it here, then deploy_ssh_key to the VPS."
        ),
        input_model=CreateSshKeyInput,
        route=lambda args: post("/account/ssh-keys", body_of(args, "name", "public_key")),
    ),
    ToolSpec(
        name="delete_ssh_key",
        description="Delete an SSH key from the account",
        input_model=SshKeyIdInput,
        route=lambda args: delete(f"/account/ssh-keys/{args.id}"),
    ),
    ToolSpec(
        name="list_api_keys",
        description="List all API keys on the account",
        input_model=ToolInput,
        route=lambda args: get("/account/api-keys"),
    ),
    ToolSpec(
        name="create_api_key",
        description="Create a new API key",
        input_model=ApiKeyInput,
        route=lambda args: post(
            "/account/api-keys", body_of(args, "name", "allowed_ips", "expires_at")
        ),
    ),
    ToolSpec(
        name="update_api_key",
        description="Update an existing API key",
        input_model=UpdateApiKeyInput,
        route=_route_update_api_key,
    ),
    ToolSpec(
        name="revoke_api_key",
        description="Revoke (delete) an API key",
        input_model=ApiKeyIdInput,
        route=lambda args: delete(f"/account/api-keys/{args.id}"),
    ),
]


def register_tools(registry: ToolRegistry) -> None:
    for spec in TOOLS:
        registry.add_tool(spec)
