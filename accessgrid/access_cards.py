"""
Key card provisioning and lifecycle operations.
"""

from typing import List, Optional

from .dispatcher import RequestDispatcher
from .models import AccessCard

KEY_CARDS_PATH = "/v1/key-cards"


def compact(**fields):
    """Drop fields that were not supplied."""
    return {key: value for key, value in fields.items() if value is not None}


class AccessCards:
    """Access card API operations."""

    def __init__(self, dispatcher: RequestDispatcher):
        self.dispatcher = dispatcher

    def provision(self, card_template_id: str = None, employee_id: str = None,
                  tag_id: str = None, allow_on_multiple_devices: bool = None,
                  full_name: str = None, email: str = None, phone_number: str = None,
                  classification: str = None, start_date: str = None,
                  expiration_date: str = None, employee_photo: str = None) -> AccessCard:
        """
        Issue a new key card.

        Args:
            card_template_id: Template the card is issued from
            employee_id: Employee identifier in your system
            tag_id: Physical tag id, if any
            allow_on_multiple_devices: Allow install on more than one device
            full_name: Card holder name
            email: Address the install link is sent to
            phone_number: Number the install link is sent to
            classification: Employee classification (e.g. full_time)
            start_date: ISO 8601 start of validity
            expiration_date: ISO 8601 end of validity
            employee_photo: Base64 encoded photo

        Returns:
            The provisioned AccessCard
        """
        body = compact(
            card_template_id=card_template_id,
            employee_id=employee_id,
            tag_id=tag_id,
            allow_on_multiple_devices=allow_on_multiple_devices,
            full_name=full_name,
            email=email,
            phone_number=phone_number,
            classification=classification,
            start_date=start_date,
            expiration_date=expiration_date,
            employee_photo=employee_photo
        )
        return AccessCard(self.dispatcher.post(KEY_CARDS_PATH, body=body))

    issue = provision

    def get(self, card_id: str) -> AccessCard:
        """Fetch a single key card."""
        return AccessCard(self.dispatcher.get(f"{KEY_CARDS_PATH}/{card_id}"))

    def update(self, card_id: str, employee_id: str = None, full_name: str = None,
               classification: str = None, expiration_date: str = None,
               employee_photo: str = None) -> AccessCard:
        """Update the details of an issued key card."""
        body = compact(
            employee_id=employee_id,
            full_name=full_name,
            classification=classification,
            expiration_date=expiration_date,
            employee_photo=employee_photo
        )
        return AccessCard(self.dispatcher.patch(f"{KEY_CARDS_PATH}/{card_id}", body=body))

    def list(self, template_id: str, state: Optional[str] = None) -> List[AccessCard]:
        """
        List key cards issued from a template.

        Args:
            template_id: Card template id
            state: Only return cards in this state (e.g. active, suspended)

        Returns:
            List of AccessCard
        """
        params = [('template_id', template_id)]
        if state:
            params.append(('state', state))

        data = self.dispatcher.get(KEY_CARDS_PATH, params=params)
        return [AccessCard(item) for item in data.get('keys', [])]

    def _manage(self, card_id: str, action: str) -> AccessCard:
        return AccessCard(self.dispatcher.post(f"{KEY_CARDS_PATH}/{card_id}/{action}"))

    def suspend(self, card_id: str) -> AccessCard:
        """Temporarily disable a key card."""
        return self._manage(card_id, 'suspend')

    def resume(self, card_id: str) -> AccessCard:
        """Re-enable a suspended key card."""
        return self._manage(card_id, 'resume')

    def unlink(self, card_id: str) -> AccessCard:
        """Detach a key card from the device it is installed on."""
        return self._manage(card_id, 'unlink')

    def delete(self, card_id: str) -> AccessCard:
        """Permanently delete a key card."""
        return self._manage(card_id, 'delete')
