"""Webhook API routes for Stripe notifications."""

import logging

from fastapi import APIRouter, Request, status

from hosted_checkout.api.deps import Gateway, OrderPaymentsSink
from hosted_checkout.api.middleware.error_handler import WebhookNotHandledError
from hosted_checkout.schemas.checkout import WebhookAckResponse
from hosted_checkout.services.order_payments import payment_state_for

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/webhooks", tags=["webhooks"])


@router.post(
    "/stripe",
    response_model=WebhookAckResponse,
    status_code=status.HTTP_200_OK,
    summary="Handle Stripe webhooks",
    description="Receives Stripe webhook events. Requires a valid signature.",
)
async def stripe_webhook(
    request: Request,
    gateway: Gateway,
    order_payments: OrderPaymentsSink,
) -> WebhookAckResponse:
    """Handle Stripe webhook events.

    The gateway verifies the signature over the raw body and reports whether
    the event was handled. Handled events that carry an order number are
    applied through the order payments sink. Duplicate deliveries are applied
    again; deduplication is left to the sink.

    Args:
        request: FastAPI request object for reading raw body and headers.
        gateway: The application's Stripe gateway.
        order_payments: Sink that applies payment states to orders.

    Returns:
        WebhookAckResponse: Acknowledgment message.

    Raises:
        WebhookNotHandledError: 400 if the webhook was not handled.
    """
    # Signature covers the exact bytes received
    payload = await request.body()
    sig_header = request.headers.get("stripe-signature")

    logger.info("Stripe webhook received (%d bytes)", len(payload))

    result = gateway.handle_webhook(payload, sig_header)

    if not result.handled:
        logger.warning(
            "Stripe webhook not handled: missing webhook secret, invalid signature, or unsupported event type"
        )
        raise WebhookNotHandledError()

    if result.order_number is not None and result.category is not None:
        state = payment_state_for(result.category)
        await order_payments.set_state(result.order_number, state, provider_ref=result.provider_ref)
        logger.info("Order %s payment state set to %s", result.order_number, state.value)

    return WebhookAckResponse(order_number=result.order_number)
