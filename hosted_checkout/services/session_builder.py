"""Stripe Checkout Session creation."""

import logging
from typing import Any

import stripe

from hosted_checkout.core.exceptions import ProviderError
from hosted_checkout.core.stripe import get_stripe
from hosted_checkout.schemas.payments import CreateSessionResult, OrderSnapshot

logger = logging.getLogger(__name__)


def build_session_params(order: OrderSnapshot) -> dict[str, Any]:
    """Map an order snapshot to Checkout Session create parameters.

    Args:
        order: The order to be paid.

    Returns:
        dict: Parameters for ``stripe.checkout.Session.create``.
    """
    return {
        "mode": "payment",
        "client_reference_id": order.order_number,
        "success_url": str(order.success_url),
        "cancel_url": str(order.cancel_url),
        "metadata": {
            "orderNumber": order.order_number,
            "customerEmail": order.customer_email,
        },
        "line_items": [
            {
                "quantity": 1,
                "price_data": {
                    "currency": order.currency.lower(),
                    "unit_amount": order.amount_minor,
                    "product_data": {"name": f"Order {order.order_number}"},
                },
            }
        ],
    }


class SessionBuilder:
    """Creates one hosted Checkout Session per call.

    There is no lookup or reuse of earlier sessions; repeated calls for the
    same order create distinct sessions.
    """

    def __init__(self, api_key: str) -> None:
        """Initialize the builder.

        Args:
            api_key: Stripe secret key sent with every request.
        """
        self.api_key = api_key
        self.stripe = get_stripe()

    async def create_session(self, order: OrderSnapshot) -> CreateSessionResult:
        """Create a Checkout Session for an order.

        Cancelling the awaiting task abandons the request.

        Args:
            order: The order to be paid.

        Returns:
            CreateSessionResult: Redirect URL and session ID.

        Raises:
            ProviderError: If the Stripe API call fails.
        """
        params = build_session_params(order)

        try:
            session = await self.stripe.checkout.Session.create_async(api_key=self.api_key, **params)
        except stripe.StripeError as e:
            logger.error("Stripe error creating checkout session for order %s: %s", order.order_number, str(e))
            raise ProviderError(f"Stripe rejected checkout session for order {order.order_number}", e) from e

        logger.info("Created checkout session %s for order %s", session.id, order.order_number)
        return CreateSessionResult(redirect_url=session.url, session_id=session.id)
