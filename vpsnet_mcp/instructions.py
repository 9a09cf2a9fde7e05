"""Usage guidance the server hands to agents during MCP initialization."""

SERVER_NAME = "vpsnet"
SERVER_VERSION = "1.0.0"

INSTRUCTIONS = "\n".join(
    [
        "This MCP server controls VPS (Virtual Private Server) services on VPSnet.com.",
        "It manages VPS servers ONLY, not VDS or Dedicated Servers.",
        "",
        "## Ordering a new VPS",
        "Flow: get_order_plans -> get_order_options(plan) -> order_service.",
        "Payment object format: { payment: <numeric_id>, successUrl: '', cancelUrl: '' }.",
        "For balance payment use payment ID 1: { payment: 1, successUrl: '', cancelUrl: '' }.",
        "Resources is an array of numeric resource value IDs from get_order_options, "
        "e.g. [901, 907].",
        "rootPassword rules: 6-40 chars, alphanumeric only, MUST contain uppercase + "
        "lowercase + digit. Example: 'MyPass123'.",
        "sshKey and rootPassword are mutually exclusive: provide one or the other "
        "(or neither for an auto-generated password).",
        "After placing an order, wait 10-30 seconds before attempting SSH; the VPS needs "
        "time to boot and start its SSH daemon.",
        "deploy_ssh_key is also async: wait 15-30 seconds after deploying a key before "
        "attempting SSH to any VPS.",
        "",
        "## SSH key workflow (for deploying software to a VPS)",
        "To install or configure anything INSIDE a VPS, deploy your own SSH key first, "
        "then connect directly with your terminal tool:",
        "  ssh -o StrictHostKeyChecking=no root@<vps_ip>",
        "1. Look for a local public key: ~/.ssh/id_rsa.pub, ~/.ssh/id_ed25519.pub or "
        "~/.ssh/id_ecdsa.pub.",
        "2. If none exists, generate one first, e.g. ssh-keygen -t ed25519 -N '' "
        "-f ~/.ssh/id_ed25519, then read the new public key.",
        "3. Upload it with create_ssh_key(name, public_key), using a descriptive name.",
        "4. Deploy it with deploy_ssh_key(orderNo, ssh_key) or pass sshKey when ordering.",
        "5. Connect over SSH and run commands inside the VPS.",
        "Notes:",
        "- Prefer sshKey over rootPassword; fall back to a password only if key "
        "generation is impossible.",
        "- Never use someone else's SSH key; always read it from the local machine.",
        "- order_service uses 'sshKey' (camelCase) but deploy_ssh_key uses 'ssh_key' "
        "(snake_case). The field names differ!",
        "",
        "## Plan changes",
        "Plan changes are FREE: remaining time is recalculated (upgrade = shorter expiry, "
        "downgrade = longer expiry).",
        "Flow: get_plan_options -> get_plan_resources(orderNo, plan) -> "
        "calculate_plan_change -> change_plan.",
        "Resources must be an array of numeric resource value IDs, one ID per resource "
        "type (RAM, SSD, CPU, Traffic, Bandwidth).",
        "Get IDs from get_plan_resources: each resource type has a 'values' array, pick "
        "one value's 'id' per type.",
        "Use isDefault=1 values for plan defaults. Do NOT pass an empty array.",
        "IP resources are typically disabled (managed by backend). Admin resources are "
        "auto-managed; do not include them.",
        "",
        "## Backups",
        "Creating a backup is a PAID operation. Flow: get_backup_status -> create_backup.",
        "get_backup_status returns available period dates (up to 7 days in past) and price.",
        "create_backup requires: period (YYYY-MM-DD date from options), directories "
        "(e.g. '/'), and payment object.",
        "",
        "## Async operations",
        "All service actions (start/stop/restart/OS reinstall) are async; they return a "
        "noty UUID for tracking progress.",
        "",
        "## Renewal",
        "Payment object for renewal is the same format: { payment: 1, successUrl: '', "
        "cancelUrl: '' } for balance.",
        "Flow: get_period_options -> renew_service(orderNo, period, payment).",
    ]
)
