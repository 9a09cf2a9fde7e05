"""Every tool maps to exactly one upstream (method, path, body)."""

import importlib

import pytest

from tests.conftest import BASE_URL

PAYMENT = {"payment": 1, "successUrl": "", "cancelUrl": ""}

# (tool, arguments, method, path, body)
TOOL_TABLE = [
    ("get_account", {}, "GET", "/account/session", None),
    ("get_profile", {}, "GET", "/account/profile", None),
    ("list_services", {}, "GET", "/account/services", None),
    ("get_service", {"orderNo": "VP1"}, "GET", "/account/services/VP1", None),
    ("get_service_graphs", {"orderNo": "VP1"}, "GET", "/account/services/VP1/graphs", None),
    ("get_service_history", {"orderNo": "VP1"}, "GET", "/account/services/VP1/history", None),
    ("start_service", {"orderNo": "VP1"}, "POST", "/account/services/VP1/start", None),
    ("stop_service", {"orderNo": "VP1"}, "POST", "/account/services/VP1/stop", None),
    ("restart_service", {"orderNo": "VP1"}, "POST", "/account/services/VP1/restart", None),
    (
        "change_hostname",
        {"orderNo": "VP1", "hostname": "web1"},
        "POST",
        "/account/services/VP1/change-hostname",
        {"hostname": "web1"},
    ),
    (
        "change_root_password",
        {"orderNo": "VP1", "password": "MyPass123"},
        "POST",
        "/account/services/VP1/change-root-password",
        {"password": "MyPass123"},
    ),
    ("get_rdns", {"orderNo": "VP1"}, "GET", "/account/services/VP1/change-rdns", None),
    (
        "change_rdns",
        {"orderNo": "VP1", "ip": "192.0.2.10", "value": "mail.example.com"},
        "POST",
        "/account/services/VP1/change-rdns",
        {"ip": "192.0.2.10", "value": "mail.example.com"},
    ),
    ("flush_iptables", {"orderNo": "VP1"}, "POST", "/account/services/VP1/flush-ip-tables", None),
    (
        "change_title",
        {"orderNo": "VP1", "title": "Staging"},
        "POST",
        "/account/services/VP1/change-title",
        {"title": "Staging"},
    ),
    (
        "toggle_ipv6",
        {"orderNo": "VP1", "value": True},
        "POST",
        "/account/services/VP1/ipv6-toggle",
        {"value": True},
    ),
    (
        "toggle_extra_settings",
        {"orderNo": "VP1", "name": "tuntap", "value": False},
        "POST",
        "/account/services/VP1/extra-settings-toggle",
        {"name": "tuntap", "value": False},
    ),
    (
        "deploy_ssh_key",
        {"orderNo": "VP1", "ssh_key": 42},
        "POST",
        "/account/services/VP1/change-ssh-key",
        {"ssh_key": 42},
    ),
    ("get_os_options", {"orderNo": "VP1"}, "GET", "/account/services/VP1/change-os", None),
    (
        "reinstall_os",
        {"orderNo": "VP1", "osVersion": 12},
        "POST",
        "/account/services/VP1/change-os",
        {"osVersion": 12},
    ),
    ("get_plan_options", {"orderNo": "VP1"}, "GET", "/account/services/VP1/plans-options", None),
    (
        "get_plan_resources",
        {"orderNo": "VP1", "plan": 7},
        "GET",
        "/account/services/VP1/plans-options/7/options",
        None,
    ),
    (
        "calculate_plan_change",
        {"orderNo": "VP1", "plan": 7, "resources": [1, 2]},
        "POST",
        "/account/services/VP1/plans-options/calculate",
        {"plan": 7, "resources": [1, 2]},
    ),
    (
        "change_plan",
        {"orderNo": "VP1", "plan": 7, "resources": [1, 2]},
        "POST",
        "/account/services/VP1/plans-options",
        {"plan": 7, "resources": [1, 2]},
    ),
    ("get_period_options", {"orderNo": "VP1"}, "GET", "/account/services/VP1/periods-options", None),
    (
        "set_auto_renew",
        {"orderNo": "VP1", "state": True, "period": 3},
        "POST",
        "/account/services/VP1/periods-options/auto-renew",
        {"state": True, "period": 3},
    ),
    (
        "renew_service",
        {"orderNo": "VP1", "period": 3, "payment": PAYMENT},
        "POST",
        "/account/services/VP1/periods-options",
        {"period": 3, "payment": PAYMENT},
    ),
    ("get_order_plans", {}, "GET", "/order/configuration/vps/plans", None),
    ("get_order_options", {"plan": 100}, "GET", "/order/configuration/100/options", None),
    (
        "order_service",
        {"plan": 100, "payment": PAYMENT},
        "POST",
        "/order/configuration/confirm",
        {"plan": 100, "payment": PAYMENT},
    ),
    ("get_backup_status", {"orderNo": "VP1"}, "GET", "/account/services/VP1/backup/status", None),
    ("get_backup_history", {"orderNo": "VP1"}, "GET", "/account/services/VP1/backup/history", None),
    (
        "create_backup",
        {"orderNo": "VP1", "period": "2026-10-15", "directories": "/", "payment": PAYMENT},
        "POST",
        "/account/services/VP1/backup",
        {"period": "2026-10-15", "directories": "/", "payment": PAYMENT},
    ),
    ("list_ssh_keys", {}, "GET", "/account/ssh-keys", None),
    ("get_ssh_key", {"id": 5}, "GET", "/account/ssh-keys/5", None),
    (
        "create_ssh_key",
        {"name": "laptop", "public_key": "ssh-ed25519 AAAA test"},
        "POST",
        "/account/ssh-keys",
        {"name": "laptop", "public_key": "ssh-ed25519 AAAA test"},
    ),
    ("delete_ssh_key", {"id": 5}, "DELETE", "/account/ssh-keys/5", None),
    ("list_api_keys", {}, "GET", "/account/api-keys", None),
    ("create_api_key", {"name": "ci"}, "POST", "/account/api-keys", {"name": "ci"}),
    (
        "update_api_key",
        {"id": 9, "name": "ci", "expires_at": "2027-01-01"},
        "POST",
        "/account/api-keys/9",
        {"name": "ci", "expires_at": "2027-01-01"},
    ),
    ("revoke_api_key", {"id": 9}, "DELETE", "/account/api-keys/9", None),
    ("list_invoices", {}, "GET", "/account/history/invoices", None),
    ("get_invoice", {"hash": "abc123"}, "GET", "/account/history/invoices/abc123", None),
    ("list_payments", {"page": 4}, "GET", "/account/history/payments?page=4", None),
    ("get_login_history", {}, "GET", "/account/history/login", None),
    ("get_management_history", {}, "GET", "/account/history/management", None),
    ("get_pricing", {"type": "vps_storage"}, "GET", "/public/prices/vps_storage/plans", None),
    ("get_system_status", {}, "GET", "/public/status", None),
    ("get_faq", {}, "GET", "/public/faq", None),
]


def test_table_covers_every_registered_tool(registry):
    assert len(TOOL_TABLE) == 49
    assert len(registry) == 49
    assert sorted(row[0] for row in TOOL_TABLE) == sorted(registry.names())


@pytest.mark.parametrize(
    "tool,arguments,method,path,body",
    TOOL_TABLE,
    ids=[row[0] for row in TOOL_TABLE],
)
@pytest.mark.asyncio
async def test_tool_issues_single_documented_request(
    registry, upstream, tool, arguments, method, path, body
):
    await registry.dispatch(tool, arguments)

    assert len(upstream.requests) == 1
    request = upstream.last
    assert request.method == method
    assert str(request.url) == BASE_URL + path
    assert upstream.last_body() == body


@pytest.mark.parametrize(
    "tool,arguments,method,path,body",
    TOOL_TABLE,
    ids=[row[0] for row in TOOL_TABLE],
)
def test_build_request_matches_table(registry, tool, arguments, method, path, body):
    request = registry.build_request(tool, arguments)

    assert (request.method, request.path) == (method, path)
    assert request.body == body


@pytest.mark.parametrize(
    "module",
    [
        "account_tools",
        "backup_tools",
        "history_tools",
        "key_tools",
        "order_tools",
        "paths",
        "plan_tools",
        "public_tools",
        "service_tools",
        "settings_tools",
    ],
)
def test_tool_modules_are_documented(module):
    imported = importlib.import_module(f"vpsnet_mcp.tools.{module}")

    assert imported.__doc__ and imported.__doc__.strip()
