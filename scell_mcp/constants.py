"""Shared constants for the Scell.io MCP configuration generator."""

DEFAULT_BASE_URL = "https://api.scell.io/api"
SANDBOX_SUFFIX = "/sandbox"

DOCS_URL = "https://docs.scell.io"

# Key under "mcpServers" in every generated document
SERVER_NAME = "scell"

# Launcher for the HTTP proxy process
LAUNCHER_COMMAND = "npx"
LAUNCHER_PACKAGE = "@modelcontextprotocol/server-http"

# Environment entries written into the launch descriptor
API_KEY_HEADER = "X-Scell-API-Key"
API_KEY_ENV = "SCELL_API_KEY"
BASE_URL_ENV = "SCELL_BASE_URL"
ENVIRONMENT_ENV = "SCELL_ENVIRONMENT"

API_KEY_MIN_LENGTH = 10

# Fallback destination for clients without a config file convention
GENERIC_CONFIG_PATH = "mcp.json"

# Remote tools exposed by the Scell.io MCP server, listed in the generic header
AVAILABLE_TOOLS: tuple[tuple[str, str], ...] = (
    ("scell_health_check", "Check API health status"),
    ("scell_validate_api_key", "Validate your API key"),
    ("scell_create_invoice", "Create a new electronic invoice"),
    ("scell_get_invoice", "Retrieve an invoice by ID"),
    ("scell_list_invoices", "List all invoices"),
    ("scell_download_invoice", "Download invoice PDF/XML"),
    ("scell_create_signature", "Create a signature request"),
    ("scell_get_signature", "Get signature request status"),
    ("scell_list_signatures", "List all signature requests"),
    ("scell_download_signed", "Download signed document"),
    ("scell_cancel_signature", "Cancel a signature request"),
    ("scell_send_reminder", "Send signing reminder"),
)
