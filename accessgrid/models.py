"""
Response models for AccessGrid resources.
"""

from typing import Any, Dict, Optional


class AccessCard:
    """An NFC key card issued to an employee."""

    def __init__(self, data: Optional[Dict[str, Any]] = None):
        data = data or {}
        self.id = data.get('id')
        self.url = data.get('install_url')
        self.state = data.get('state')
        self.full_name = data.get('full_name')
        self.expiration_date = data.get('expiration_date')
        self.raw = data

    def __str__(self):
        return f"AccessCard(name='{self.full_name}', id='{self.id}', state='{self.state}')"

    def __repr__(self):
        return self.__str__()


class Template:
    """An enterprise card template."""

    def __init__(self, data: Optional[Dict[str, Any]] = None):
        data = data or {}
        self.id = data.get('id')
        self.name = data.get('name')
        self.platform = data.get('platform')
        self.use_case = data.get('use_case')
        self.protocol = data.get('protocol')
        self.created_at = data.get('created_at')
        self.last_published_at = data.get('last_published_at')
        self.issued_keys_count = data.get('issued_keys_count')
        self.active_keys_count = data.get('active_keys_count')
        self.raw = data

    def __str__(self):
        return f"Template(name='{self.name}', id='{self.id}', platform='{self.platform}')"

    def __repr__(self):
        return self.__str__()
