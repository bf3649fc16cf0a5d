"""
Application constants and metadata.
"""

# Application info
APP_NAME = "jailconf"
APP_VERSION = "0.1.0"

# Parser limits
MAX_NESTING_DEPTH = 64

# Default values
DEFAULT_ENCODING = "utf-8"
STDIN_NAME = "<stdin>"
