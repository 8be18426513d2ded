"""
Unit tests for response models.
"""

from accessgrid.models import AccessCard, Template


class TestModels:
    """Test mapping of wire fields onto models."""

    def test_access_card(self):
        """Test AccessCard properties."""
        data = {
            "id": "card-123",
            "install_url": "https://example.com/install",
            "state": "active",
            "full_name": "Test User",
            "expiration_date": "2025-01-01"
        }
        card = AccessCard(data)

        assert card.id == "card-123"
        assert card.url == "https://example.com/install"
        assert card.state == "active"
        assert card.full_name == "Test User"
        assert card.expiration_date == "2025-01-01"
        assert card.raw is data
        assert "Test User" in str(card)

    def test_access_card_missing_fields(self):
        """Test AccessCard tolerates partial responses."""
        card = AccessCard({"id": "1"})

        assert card.id == "1"
        assert card.url is None
        assert AccessCard().id is None

    def test_template(self):
        """Test Template properties."""
        template = Template({
            "id": "template-123",
            "name": "Test Template",
            "platform": "apple",
            "use_case": "employee_badge",
            "protocol": "desfire",
            "created_at": "2025-01-01",
            "last_published_at": "2025-01-02",
            "issued_keys_count": 10,
            "active_keys_count": 8
        })

        assert template.id == "template-123"
        assert template.name == "Test Template"
        assert template.platform == "apple"
        assert template.use_case == "employee_badge"
        assert template.protocol == "desfire"
        assert template.created_at == "2025-01-01"
        assert template.last_published_at == "2025-01-02"
        assert template.issued_keys_count == 10
        assert template.active_keys_count == 8
        assert "Test Template" in repr(template)
