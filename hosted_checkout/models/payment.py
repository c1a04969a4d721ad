"""Payment enumerations shared by the gateway and the host."""

from enum import Enum


class PaymentState(str, Enum):
    """Payment state of an order as applied by the host.

    The gateway never stores this. A handled webhook only implies a
    transition that the host applies through its OrderPayments sink.
    """

    PENDING = "pending"
    PROCESSING = "processing"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    REFUNDED = "refunded"
    PARTIALLY_REFUNDED = "partially_refunded"


class EventCategory(str, Enum):
    """Supported Stripe webhook event categories.

    Values are the Stripe event type tags.
    """

    CHECKOUT_COMPLETED = "checkout.session.completed"
    PAYMENT_SUCCEEDED = "payment_intent.succeeded"
    PAYMENT_FAILED = "payment_intent.payment_failed"
    CHARGE_REFUNDED = "charge.refunded"
    REFUND_UPDATED = "refund.updated"
