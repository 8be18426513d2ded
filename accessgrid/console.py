"""
Enterprise console operations: card templates and event logs.
"""

from typing import Any, Dict, Mapping, Optional

from .access_cards import compact
from .dispatcher import RequestDispatcher
from .models import Template

TEMPLATES_PATH = "/v1/console/card-templates"

# Event log filter keys, in the order they are sent
EVENT_LOG_FILTERS = ('device', 'start_date', 'end_date', 'event_type')


def _support_fields(support_info: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    support_info = support_info or {}
    return {
        'support_url': support_info.get('support_url'),
        'support_phone_number': support_info.get('support_phone_number'),
        'support_email': support_info.get('support_email'),
        'privacy_policy_url': support_info.get('privacy_policy_url'),
        'terms_and_conditions_url': support_info.get('terms_and_conditions_url'),
    }


class Console:
    """Enterprise console API operations."""

    def __init__(self, dispatcher: RequestDispatcher):
        self.dispatcher = dispatcher

    def create_template(self, name: str = None, platform: str = None, use_case: str = None,
                        protocol: str = None, allow_on_multiple_devices: bool = None,
                        watch_count: int = None, iphone_count: int = None,
                        design: Optional[Mapping[str, Any]] = None,
                        support_info: Optional[Mapping[str, Any]] = None) -> Template:
        """
        Create a card template.

        Args:
            name: Template name
            platform: Wallet platform (e.g. apple, google)
            use_case: Template use case (e.g. employee_badge)
            protocol: Card protocol (e.g. desfire, seos)
            allow_on_multiple_devices: Allow cards on more than one device
            watch_count: Watches a card may be installed on
            iphone_count: iPhones a card may be installed on
            design: background_color, label_color, label_secondary_color
            support_info: support_url, support_phone_number, support_email,
                privacy_policy_url, terms_and_conditions_url

        Returns:
            The created Template
        """
        design = design or {}
        body = compact(
            name=name,
            platform=platform,
            use_case=use_case,
            protocol=protocol,
            allow_on_multiple_devices=allow_on_multiple_devices,
            watch_count=watch_count,
            iphone_count=iphone_count,
            background_color=design.get('background_color'),
            label_color=design.get('label_color'),
            label_secondary_color=design.get('label_secondary_color'),
            **_support_fields(support_info)
        )
        return Template(self.dispatcher.post(TEMPLATES_PATH, body=body))

    def update_template(self, card_template_id: str, name: str = None,
                        allow_on_multiple_devices: bool = None, watch_count: int = None,
                        iphone_count: int = None,
                        support_info: Optional[Mapping[str, Any]] = None) -> Template:
        """Update an existing card template."""
        body = compact(
            name=name,
            allow_on_multiple_devices=allow_on_multiple_devices,
            watch_count=watch_count,
            iphone_count=iphone_count,
            **_support_fields(support_info)
        )
        return Template(self.dispatcher.put(f"{TEMPLATES_PATH}/{card_template_id}", body=body))

    def read_template(self, card_template_id: str) -> Template:
        """Fetch a card template."""
        return Template(self.dispatcher.get(f"{TEMPLATES_PATH}/{card_template_id}"))

    def get_event_logs(self, card_template_id: str,
                       filters: Optional[Mapping[str, Any]] = None) -> Any:
        """
        Fetch the event log of a card template.

        Args:
            card_template_id: Card template id
            filters: Any of device, start_date, end_date, event_type

        Returns:
            Parsed response body
        """
        filters = filters or {}
        params = [
            (f"filters[{key}]", filters[key])
            for key in EVENT_LOG_FILTERS
            if filters.get(key)
        ]
        return self.dispatcher.get(f"{TEMPLATES_PATH}/{card_template_id}/logs", params=params)

    event_log = get_event_logs
