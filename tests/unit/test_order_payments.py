"""Unit tests for the order payments collaborator."""

import logging

import pytest

from hosted_checkout.models.payment import EventCategory, PaymentState
from hosted_checkout.services.order_payments import LoggingOrderPayments, order_status_for, payment_state_for


class TestPaymentStateFor:
    """Tests for payment_state_for."""

    @pytest.mark.parametrize(
        ("category", "expected"),
        [
            (EventCategory.CHECKOUT_COMPLETED, PaymentState.PROCESSING),
            (EventCategory.PAYMENT_SUCCEEDED, PaymentState.SUCCEEDED),
            (EventCategory.PAYMENT_FAILED, PaymentState.FAILED),
            (EventCategory.CHARGE_REFUNDED, PaymentState.REFUNDED),
            (EventCategory.REFUND_UPDATED, PaymentState.REFUNDED),
        ],
    )
    def test_maps_every_category(self, category: EventCategory, expected: PaymentState) -> None:
        """Test that every supported category implies a state."""
        assert payment_state_for(category) is expected


class TestOrderStatusFor:
    """Tests for order_status_for."""

    def test_every_state_has_a_status(self) -> None:
        """Test that the mapping covers the whole enumeration."""
        for state in PaymentState:
            assert order_status_for(state)

    def test_refunds_fall_back_to_payment_received(self) -> None:
        """Test the fallback for hosts without refund statuses."""
        assert order_status_for(PaymentState.REFUNDED) == "PaymentReceived"
        assert order_status_for(PaymentState.PARTIALLY_REFUNDED) == "PaymentReceived"
        assert order_status_for(PaymentState.FAILED) == "PaymentFailed"


class TestLoggingOrderPayments:
    """Tests for LoggingOrderPayments."""

    @pytest.mark.asyncio
    async def test_records_and_logs_state(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test that transitions are kept and logged."""
        sink = LoggingOrderPayments()

        with caplog.at_level(logging.INFO, logger="hosted_checkout.services.order_payments"):
            await sink.set_state("ORD-1", PaymentState.SUCCEEDED, provider_ref="pi_123")

        assert sink.states == {"ORD-1": PaymentState.SUCCEEDED}
        assert "ORD-1" in caplog.text
        assert "PaymentReceived" in caplog.text
        assert "pi_123" in caplog.text

    @pytest.mark.asyncio
    async def test_later_state_replaces_earlier(self) -> None:
        """Test that the last applied state wins."""
        sink = LoggingOrderPayments()

        await sink.set_state("ORD-1", PaymentState.PROCESSING)
        await sink.set_state("ORD-1", PaymentState.REFUNDED)

        assert sink.states["ORD-1"] is PaymentState.REFUNDED
