#!/usr/bin/env python3
"""
Basic usage examples for the AccessGrid Python client library.

This script walks through card provisioning, card lifecycle management and
template administration against the AccessGrid API. Credentials are read
from ACCESSGRID_ACCOUNT_ID and ACCESSGRID_SECRET_KEY.
"""

import logging
import os
import sys

from accessgrid import AccessGrid, AccessGridError, AuthenticationError


def main():
    """Run basic usage examples."""

    account_id = os.environ.get("ACCESSGRID_ACCOUNT_ID")
    secret_key = os.environ.get("ACCESSGRID_SECRET_KEY")
    template_id = os.environ.get("ACCESSGRID_TEMPLATE_ID", "0xd3adb00b5")

    print("=== AccessGrid Python Client Usage Examples ===\n")

    print("1. Creating client...")
    client = AccessGrid(account_id, secret_key)
    print(f"   Client created for: {client.base_url}\n")

    try:
        print("2. Provisioning a key card...")
        card = client.access_cards.provision(
            card_template_id=template_id,
            employee_id="123456789",
            full_name="Employee name",
            email="employee@yourwebsite.com",
            phone_number="+19547212241",
            classification="full_time",
            start_date="2025-01-31T22:46:25.601Z",
            expiration_date="2025-04-30T22:46:25.601Z"
        )
        print(f"   ✓ Card provisioned: {card.id}")
        print(f"   Install URL: {card.url}\n")

        print("3. Updating the card...")
        card = client.access_cards.update(card.id, full_name="Updated Employee Name")
        print(f"   ✓ Card updated: {card}\n")

        print("4. Listing active cards for the template...")
        for listed in client.access_cards.list(template_id, state="active"):
            print(f"   - {listed}")
        print()

        print("5. Suspending and resuming the card...")
        print(f"   ✓ Suspended: {client.access_cards.suspend(card.id).state}")
        print(f"   ✓ Resumed: {client.access_cards.resume(card.id).state}\n")

        print("6. Reading the template...")
        template = client.console.read_template(template_id)
        print(f"   ✓ {template.name}: {template.issued_keys_count} issued, "
              f"{template.active_keys_count} active\n")

        print("7. Fetching install events from mobile devices...")
        logs = client.console.get_event_logs(template_id, filters={
            "device": "mobile",
            "event_type": "install"
        })
        print(f"   ✓ Events: {logs}\n")

        print("8. Unlinking and deleting the card...")
        client.access_cards.unlink(card.id)
        client.access_cards.delete(card.id)
        print("   ✓ Card removed\n")

        print("=== All Examples Completed Successfully! ===")

    except AuthenticationError as e:
        print(f"Authentication failed, check your account id and secret key: {e}")
        sys.exit(1)
    except AccessGridError as e:
        print(f"AccessGrid Error: {e}")
        sys.exit(1)
    finally:
        # Clean up
        client.close()


def demonstrate_template_creation():
    """Demonstrate creating a card template."""

    print("\n=== Template Creation Example ===")

    with AccessGrid(os.environ["ACCESSGRID_ACCOUNT_ID"], os.environ["ACCESSGRID_SECRET_KEY"]) as client:
        template = client.console.create_template(
            name="Employee NFC key",
            platform="apple",
            use_case="employee_badge",
            protocol="desfire",
            allow_on_multiple_devices=True,
            watch_count=2,
            iphone_count=3,
            design={
                "background_color": "#FFFFFF",
                "label_color": "#000000",
                "label_secondary_color": "#333333"
            },
            support_info={
                "support_url": "https://help.yourcompany.com",
                "support_email": "support@yourcompany.com"
            }
        )
        print(f"✓ Template created: {template}")


if __name__ == "__main__":
    if not os.environ.get("ACCESSGRID_ACCOUNT_ID") or not os.environ.get("ACCESSGRID_SECRET_KEY"):
        print("Set ACCESSGRID_ACCOUNT_ID and ACCESSGRID_SECRET_KEY first.")
        sys.exit(1)

    logging.basicConfig(level=logging.INFO)

    main()
    demonstrate_template_creation()
