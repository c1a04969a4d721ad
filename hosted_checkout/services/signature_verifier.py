"""Stripe webhook signature verification and event decoding."""

import hashlib
import hmac
import logging
import time

import stripe
from pydantic import ValidationError

from hosted_checkout.core.exceptions import VerificationError
from hosted_checkout.schemas.events import EventEnvelope, RawEvent

logger = logging.getLogger(__name__)

DEFAULT_TOLERANCE_SECONDS = 300


def sign_payload(raw_body: bytes, secret: str, timestamp: int | None = None) -> str:
    """Build a Stripe-Signature header value for a body.

    Used to send signed test events to a local endpoint.

    Args:
        raw_body: Body bytes to sign.
        secret: Webhook signing secret.
        timestamp: Unix timestamp to sign; defaults to now.

    Returns:
        str: Header value in ``t=<timestamp>,v1=<hex digest>`` form.
    """
    if timestamp is None:
        timestamp = int(time.time())
    signed_payload = f"{timestamp}.".encode("utf-8") + raw_body
    signature = hmac.new(secret.encode("utf-8"), signed_payload, hashlib.sha256).hexdigest()
    return f"t={timestamp},v1={signature}"


def verify_event(
    raw_body: bytes,
    signature_header: str | None,
    secret: str | None,
    tolerance: int = DEFAULT_TOLERANCE_SECONDS,
) -> RawEvent:
    """Verify a webhook signature and decode the event.

    The HMAC is computed by the Stripe SDK over the body exactly as it was
    received, so callers must pass the raw request bytes.

    Args:
        raw_body: Request body bytes as transmitted.
        signature_header: Value of the Stripe-Signature header.
        secret: Webhook signing secret.
        tolerance: Maximum age in seconds of the signed timestamp.

    Returns:
        RawEvent: The verified event.

    Raises:
        VerificationError: If the secret is missing, the signature does not
            match, or the body cannot be decoded.
    """
    if not secret or not secret.strip():
        raise VerificationError("Webhook secret is not configured")

    if not signature_header:
        raise VerificationError("Missing signature header")

    try:
        payload = raw_body.decode("utf-8")
    except UnicodeDecodeError as e:
        raise VerificationError("Webhook body is not valid UTF-8") from e

    try:
        stripe.WebhookSignature.verify_header(payload, signature_header, secret, tolerance)
    except stripe.SignatureVerificationError as e:
        raise VerificationError("Invalid webhook signature") from e

    try:
        envelope = EventEnvelope.model_validate_json(payload)
        event = RawEvent.from_envelope(envelope)
    except ValidationError as e:
        raise VerificationError("Malformed webhook event body") from e

    logger.debug("Verified webhook event %s (%s)", event.id, event.type)
    return event
