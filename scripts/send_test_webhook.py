#!/usr/bin/env python
"""Script to send a signed Stripe-style webhook event to a running server.

This script:
1. Builds a sample event envelope for the requested event type
2. Signs it with STRIPE_WEBHOOK_SECRET the way Stripe does
3. POSTs it to the webhook endpoint and prints the response

Usage:
    python scripts/send_test_webhook.py checkout.session.completed ORD-1001
    python scripts/send_test_webhook.py payment_intent.succeeded ORD-7 --url http://localhost:8080/api/v1/webhooks/stripe

Requirements:
    - STRIPE_WEBHOOK_SECRET environment variable must be set
    - The application must be running
"""

import argparse
import json
import logging
import sys
import uuid
from pathlib import Path

import httpx

# Add the project root to the path
sys.path.insert(0, str(Path(__file__).parent.parent))

from hosted_checkout.core.config import get_settings
from hosted_checkout.services.signature_verifier import sign_payload

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

DEFAULT_URL = "http://localhost:8080/api/v1/webhooks/stripe"


def build_event_object(event_type: str, order_number: str) -> dict:
    """Build the data.object payload for an event type.

    Args:
        event_type: Stripe event type tag.
        order_number: Order number to embed.

    Returns:
        dict: Stripe object payload.
    """
    metadata = {"orderNumber": order_number}
    suffix = uuid.uuid4().hex[:24]

    if event_type.startswith("checkout.session."):
        return {
            "id": f"cs_test_{suffix}",
            "object": "checkout.session",
            "client_reference_id": order_number,
            "payment_status": "paid",
            "metadata": metadata,
        }
    if event_type.startswith("payment_intent."):
        return {
            "id": f"pi_test_{suffix}",
            "object": "payment_intent",
            "status": "succeeded" if event_type.endswith("succeeded") else "requires_payment_method",
            "metadata": metadata,
        }
    return {
        "id": f"ch_test_{suffix}",
        "object": "charge",
        "refunded": True,
        "metadata": metadata,
    }


def build_event(event_type: str, order_number: str) -> bytes:
    """Build a serialized event envelope."""
    event = {
        "id": f"evt_test_{uuid.uuid4().hex[:24]}",
        "object": "event",
        "type": event_type,
        "data": {"object": build_event_object(event_type, order_number)},
    }
    return json.dumps(event).encode("utf-8")


def main() -> int:
    """Send one signed event.

    Returns:
        int: Process exit code.
    """
    parser = argparse.ArgumentParser(description="Send a signed test webhook")
    parser.add_argument("event_type", help="Stripe event type, e.g. checkout.session.completed")
    parser.add_argument("order_number", help="Order number to embed in the event")
    parser.add_argument("--url", default=DEFAULT_URL, help="Webhook endpoint URL")
    args = parser.parse_args()

    settings = get_settings()
    if not settings.stripe_webhook_secret:
        logger.error("STRIPE_WEBHOOK_SECRET is not set")
        return 1

    body = build_event(args.event_type, args.order_number)
    headers = {
        "Content-Type": "application/json",
        "Stripe-Signature": sign_payload(body, settings.stripe_webhook_secret),
    }

    try:
        response = httpx.post(args.url, content=body, headers=headers, timeout=10.0)
    except httpx.HTTPError as e:
        logger.error("Request failed: %s", e)
        return 1

    logger.info("%s -> %s %s", args.event_type, response.status_code, response.text)
    return 0 if response.is_success else 1


if __name__ == "__main__":
    sys.exit(main())
