"""
Constants for the AccessGrid client library.
"""

VERSION = "1.1.0"

DEFAULT_BASE_URL = "https://api.accessgrid.com"

# HTTP Headers
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_ACCOUNT_ID = "X-ACCT-ID"
HEADER_PAYLOAD_SIG = "X-PAYLOAD-SIG"
HEADER_USER_AGENT = "User-Agent"

USER_AGENT = f"accessgrid.py @ v{VERSION}"

# Query parameter carrying the signed payload of bodiless requests
SIG_PAYLOAD_PARAM = "sig_payload"

# Path suffixes whose resource id is the preceding segment
ACTION_SEGMENTS = frozenset({"suspend", "resume", "unlink", "delete"})

# Default configuration values
DEFAULT_CONFIG = {
    'timeout': None,  # HTTP timeout in seconds, None leaves it to the transport
}
