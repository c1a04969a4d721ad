"""Webhook verification and normalization pipeline."""

import logging

from hosted_checkout.core.exceptions import UnsupportedEventError, VerificationError
from hosted_checkout.schemas.payments import WebhookResult
from hosted_checkout.services.event_classifier import classify_event
from hosted_checkout.services.order_reference import extract_order_number
from hosted_checkout.services.signature_verifier import DEFAULT_TOLERANCE_SECONDS, verify_event

logger = logging.getLogger(__name__)


class WebhookPipeline:
    """Turns a raw webhook request into a WebhookResult.

    Each call runs verify, classify, then extract. Expected failures never
    escape: a missing secret, a bad signature, a malformed body and an
    unsupported event type all produce the same unhandled result. The
    pipeline keeps no state between calls and performs no network I/O.
    """

    def __init__(self, secret: str | None, tolerance: int = DEFAULT_TOLERANCE_SECONDS) -> None:
        """Initialize the pipeline.

        Args:
            secret: Webhook signing secret. None or blank rejects every request.
            tolerance: Maximum age in seconds of the signed timestamp.
        """
        self.secret = secret
        self.tolerance = tolerance

    @property
    def is_configured(self) -> bool:
        """Check whether a signing secret is available."""
        return bool(self.secret and self.secret.strip())

    def handle(self, raw_body: bytes, signature_header: str | None) -> WebhookResult:
        """Verify, classify and correlate one webhook request.

        Args:
            raw_body: Request body bytes as transmitted.
            signature_header: Value of the Stripe-Signature header.

        Returns:
            WebhookResult: Handled with an optional order number, or unhandled.
        """
        if not self.is_configured:
            logger.warning("Webhook rejected: signing secret is not configured")
            return WebhookResult.rejected()

        try:
            event = verify_event(raw_body, signature_header, self.secret, self.tolerance)
        except VerificationError as e:
            logger.warning("Webhook rejected: %s", e)
            return WebhookResult.rejected()

        try:
            category = classify_event(event)
        except UnsupportedEventError as e:
            logger.info("Webhook ignored: %s (event %s)", e, event.id)
            return WebhookResult.rejected()

        order_number = extract_order_number(category, event)
        if order_number is None:
            logger.info("Webhook event %s (%s) carries no order number", event.id, event.type)

        return WebhookResult(
            handled=True,
            order_number=order_number,
            event_id=event.id,
            event_type=event.type,
            category=category,
            provider_ref=event.payload.id if event.payload is not None else None,
        )
