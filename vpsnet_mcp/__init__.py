"""
VPSnet MCP server package.

This package exposes the VPSnet.com REST API as MCP tools for:
- Account and profile details
- Service lifecycle (start/stop/restart) and settings
- OS reinstall, plan changes, billing periods and renewal
- Ordering new VPS services
- Backups, SSH keys and API keys
- Billing and activity history, public pricing and status

Each tool maps to exactly one VPSnet API request; the JSON response is
returned to the agent unchanged.
"""
