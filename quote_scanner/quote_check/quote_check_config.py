"""Default settings for quote checking.

These values back the command-line defaults and the ``ScanConfiguration``
model. They can be overridden with a JSON configuration file or CLI flags.
"""

DEFAULT_INCLUDE_PATTERNS = (
    "**/*.{go,js,ts,jsx,tsx,py,java,cpp,c,h,md,txt}",
)

# Globbed paths are relative, so top-level directories need their own entry:
# "**/vendor/**" does not match "vendor/x.go".
DEFAULT_EXCLUDE_PATTERNS = (
    "vendor/**",
    "node_modules/**",
    ".git/**",
    "**/vendor/**",
    "**/node_modules/**",
    "**/.git/**",
)

DEFAULT_MAX_LINE_LENGTH = 120

# Excerpt lengths used for the ``context`` field of reported issues.
CONTEXT_MAX_LENGTH = 80
LINE_LENGTH_CONTEXT_MAX_LENGTH = 50

ELLIPSIS = "..."

# Environment variables consulted by the CLI (after loading .env).
ENV_CONFIG_PATH = "QUOTE_SCANNER_CONFIG"
ENV_MAX_LINE_LENGTH = "QUOTE_SCANNER_MAX_LINE_LENGTH"
