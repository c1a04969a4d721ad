"""Recovers the merchant order number from a classified event."""

from typing import Any

from hosted_checkout.models.payment import EventCategory
from hosted_checkout.schemas.events import ChargeRecord, CheckoutSessionRecord, PaymentIntentRecord, RawEvent

ORDER_NUMBER_METADATA_KEY = "orderNumber"


def _metadata_order_number(metadata: dict[str, Any]) -> str | None:
    value = metadata.get(ORDER_NUMBER_METADATA_KEY)
    if isinstance(value, str) and value:
        return value
    return None


def extract_order_number(category: EventCategory, event: RawEvent) -> str | None:
    """Extract the order number using the category's field precedence.

    Checkout sessions prefer ``client_reference_id`` and fall back to the
    ``orderNumber`` metadata entry. Payment intents and charges only carry
    metadata. A payload that does not match the category yields None, as
    does a missing, empty or non-string value.

    Args:
        category: Category assigned by the classifier.
        event: The verified event.

    Returns:
        str | None: The order number, or None when the event carries none.
    """
    match category, event.payload:
        case EventCategory.CHECKOUT_COMPLETED, CheckoutSessionRecord() as session:
            if session.client_reference_id:
                return session.client_reference_id
            return _metadata_order_number(session.metadata)
        case (EventCategory.PAYMENT_SUCCEEDED | EventCategory.PAYMENT_FAILED), PaymentIntentRecord() as intent:
            return _metadata_order_number(intent.metadata)
        case (EventCategory.CHARGE_REFUNDED | EventCategory.REFUND_UPDATED), ChargeRecord() as charge:
            return _metadata_order_number(charge.metadata)
        case _:
            return None
