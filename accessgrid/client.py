"""
AccessGrid API client.

This module wires the account credentials into a single RequestDispatcher
shared by the access card and console resource clients.
"""

import logging

from .access_cards import AccessCards
from .console import Console
from .constants import DEFAULT_BASE_URL, DEFAULT_CONFIG
from .dispatcher import RequestDispatcher
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class AccessGrid:
    """
    Client for the AccessGrid API.

    Exposes key card operations as ``access_cards`` and enterprise template
    operations as ``console``.
    """

    def __init__(self, account_id: str, secret_key: str,
                 base_url: str = DEFAULT_BASE_URL, **config):
        """
        Initialize AccessGrid client.

        Args:
            account_id: AccessGrid account id
            secret_key: Account secret key
            base_url: Base URL for API requests
            **config: Configuration options (timeout, session)
        """
        self.account_id = account_id
        self.secret_key = secret_key
        self.base_url = (base_url or DEFAULT_BASE_URL).rstrip('/')

        session = config.pop('session', None)

        # Merge default config with user overrides
        self.config = {**DEFAULT_CONFIG, **config}

        # Validate configuration
        self._validate_config()

        self.dispatcher = RequestDispatcher(
            self.account_id,
            self.secret_key,
            self.base_url,
            session=session,
            timeout=self.config['timeout']
        )
        self.access_cards = AccessCards(self.dispatcher)
        self.console = Console(self.dispatcher)

        logger.debug("AccessGrid client initialized: %s", self.base_url)

    def _validate_config(self):
        """Validate client configuration."""
        if not self.account_id:
            raise ConfigurationError("Account ID is required")

        if not self.secret_key:
            raise ConfigurationError("Secret Key is required")

        unknown = set(self.config) - set(DEFAULT_CONFIG)
        if unknown:
            raise ConfigurationError(f"Unknown configuration options: {', '.join(sorted(unknown))}")

        timeout = self.config['timeout']
        if timeout is not None and timeout <= 0:
            raise ConfigurationError("timeout must be positive")

    def close(self):
        """Close HTTP session."""
        self.dispatcher.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
