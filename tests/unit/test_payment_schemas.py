"""Unit tests for gateway value types."""

import pytest
from pydantic import ValidationError

from hosted_checkout.models.payment import EventCategory
from hosted_checkout.schemas.events import ChargeRecord, CheckoutSessionRecord, event_payload_adapter
from hosted_checkout.schemas.payments import OrderSnapshot, WebhookResult

VALID_ORDER = {
    "order_number": "ORD-1",
    "amount_minor": 100,
    "currency": "EUR",
    "customer_email": "a@example.com",
    "success_url": "https://example.com/success",
    "cancel_url": "https://example.com/cancel",
}


class TestOrderSnapshot:
    """Tests for OrderSnapshot validation."""

    @pytest.mark.parametrize(
        ("field", "value"),
        [
            ("order_number", ""),
            ("amount_minor", 0),
            ("amount_minor", -5),
            ("currency", "EURO"),
            ("success_url", "not-a-url"),
            ("cancel_url", "/relative/path"),
        ],
    )
    def test_rejects_invalid_fields(self, field: str, value: object) -> None:
        """Test that invalid order data is rejected."""
        with pytest.raises(ValidationError):
            OrderSnapshot(**{**VALID_ORDER, field: value})

    def test_is_immutable(self) -> None:
        """Test that snapshots cannot be modified."""
        order = OrderSnapshot(**VALID_ORDER)

        with pytest.raises(ValidationError):
            order.order_number = "ORD-2"


class TestWebhookResult:
    """Tests for WebhookResult invariants."""

    def test_rejected_has_no_order_number(self) -> None:
        """Test the unhandled result shape."""
        result = WebhookResult.rejected()

        assert result.handled is False
        assert result.order_number is None
        assert result.category is None

    def test_unhandled_with_order_number_is_invalid(self) -> None:
        """Test that unhandled results cannot carry an order number."""
        with pytest.raises(ValidationError):
            WebhookResult(handled=False, order_number="ORD-1")

    def test_unhandled_with_category_is_invalid(self) -> None:
        """Test that unhandled results cannot carry event details."""
        with pytest.raises(ValidationError):
            WebhookResult(handled=False, category=EventCategory.PAYMENT_FAILED)

    def test_handled_without_order_number_is_valid(self) -> None:
        """Test that extraction misses are representable."""
        result = WebhookResult(handled=True, category=EventCategory.CHARGE_REFUNDED)

        assert result.order_number is None


class TestEventPayload:
    """Tests for decoding event payload records."""

    def test_charge_keeps_only_reference_fields(self) -> None:
        """Test that amounts and statuses on a charge are not decoded."""
        record = event_payload_adapter.validate_python(
            {
                "id": "ch_1",
                "object": "charge",
                "amount": 2500,
                "amount_refunded": 1000,
                "refunded": False,
                "currency": "usd",
                "payment_intent": "pi_1",
                "metadata": {"orderNumber": "ORD-1"},
            }
        )

        assert isinstance(record, ChargeRecord)
        assert record.model_dump() == {"id": "ch_1", "object": "charge", "metadata": {"orderNumber": "ORD-1"}}

    @pytest.mark.parametrize("metadata", [None, "oops", [1, 2]])
    def test_non_mapping_metadata_is_empty(self, metadata: object) -> None:
        """Test that malformed metadata decodes to an empty mapping."""
        record = event_payload_adapter.validate_python(
            {"id": "cs_1", "object": "checkout.session", "metadata": metadata, "client_reference_id": 7}
        )

        assert isinstance(record, CheckoutSessionRecord)
        assert record.metadata == {}
        assert record.client_reference_id is None

    def test_missing_id_is_invalid(self) -> None:
        """Test that a record without an id fails validation."""
        with pytest.raises(ValidationError):
            event_payload_adapter.validate_python({"object": "charge", "metadata": {}})
