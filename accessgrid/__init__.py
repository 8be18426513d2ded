"""
AccessGrid Client Library

A Python client for the AccessGrid API: NFC key card provisioning and
enterprise card template management over HMAC-signed requests.

Example usage:
    from accessgrid import AccessGrid

    client = AccessGrid("your-account-id", "your-secret-key")
    card = client.access_cards.provision(card_template_id="0xd3adb00b5", full_name="Jane Doe")
"""

from .client import AccessGrid
from .access_cards import AccessCards
from .console import Console
from .dispatcher import RequestDispatcher
from .models import AccessCard, Template
from .exceptions import (
    AccessGridError,
    AuthenticationError,
    SigningError,
    ConfigurationError
)
from .constants import (
    HEADER_ACCOUNT_ID,
    HEADER_PAYLOAD_SIG,
    DEFAULT_BASE_URL,
    DEFAULT_CONFIG,
    VERSION
)

__version__ = VERSION
__author__ = "AccessGrid"
__all__ = [
    "AccessGrid",
    "AccessCards",
    "Console",
    "RequestDispatcher",
    "AccessCard",
    "Template",
    "AccessGridError",
    "AuthenticationError",
    "SigningError",
    "ConfigurationError",
    "HEADER_ACCOUNT_ID",
    "HEADER_PAYLOAD_SIG",
    "DEFAULT_BASE_URL",
    "DEFAULT_CONFIG",
    "VERSION"
]
