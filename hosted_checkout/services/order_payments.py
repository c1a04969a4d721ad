"""Order payment state collaborator used by the host application."""

import logging
from typing import Protocol

from hosted_checkout.models.payment import EventCategory, PaymentState

logger = logging.getLogger(__name__)


PAYMENT_STATE_BY_CATEGORY: dict[EventCategory, PaymentState] = {
    EventCategory.CHECKOUT_COMPLETED: PaymentState.PROCESSING,
    EventCategory.PAYMENT_SUCCEEDED: PaymentState.SUCCEEDED,
    EventCategory.PAYMENT_FAILED: PaymentState.FAILED,
    EventCategory.CHARGE_REFUNDED: PaymentState.REFUNDED,
    EventCategory.REFUND_UPDATED: PaymentState.REFUNDED,
}

ORDER_STATUS_BY_STATE: dict[PaymentState, str] = {
    PaymentState.PENDING: "Pending",
    PaymentState.PROCESSING: "Processing",
    PaymentState.SUCCEEDED: "PaymentReceived",
    PaymentState.FAILED: "PaymentFailed",
    PaymentState.REFUNDED: "PaymentReceived",
    PaymentState.PARTIALLY_REFUNDED: "PaymentReceived",
}


def payment_state_for(category: EventCategory) -> PaymentState:
    """Return the payment state implied by a webhook category."""
    return PAYMENT_STATE_BY_CATEGORY[category]


def order_status_for(state: PaymentState) -> str:
    """Return the host order status code name for a payment state.

    Refunded and partially refunded payments map to PaymentReceived since
    host orders have no dedicated refund status.
    """
    return ORDER_STATUS_BY_STATE[state]


class OrderPayments(Protocol):
    """Sink that applies payment state transitions to host orders."""

    async def set_state(
        self,
        order_number: str,
        state: PaymentState,
        provider_ref: str | None = None,
    ) -> None:
        """Apply a payment state to an order."""
        ...


class LoggingOrderPayments:
    """OrderPayments implementation that only logs transitions.

    Keeps the last applied state per order in memory so a demo host can show
    it. Not suitable for production use.
    """

    def __init__(self) -> None:
        self.states: dict[str, PaymentState] = {}

    async def set_state(
        self,
        order_number: str,
        state: PaymentState,
        provider_ref: str | None = None,
    ) -> None:
        """Record and log a payment state transition.

        Args:
            order_number: Merchant order number.
            state: New payment state.
            provider_ref: Optional Stripe object ID.
        """
        self.states[order_number] = state
        logger.info(
            "Order %s status updated to %s (payment state: %s, provider ref: %s)",
            order_number,
            order_status_for(state),
            state.value,
            provider_ref or "-",
        )
