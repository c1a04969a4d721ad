"""Hosted Stripe Checkout gateway."""

import logging

from hosted_checkout.core.config import Settings
from hosted_checkout.core.exceptions import ConfigurationError
from hosted_checkout.core.stripe import is_test_key
from hosted_checkout.schemas.payments import CreateSessionResult, OrderSnapshot, WebhookResult
from hosted_checkout.services.session_builder import SessionBuilder
from hosted_checkout.services.signature_verifier import DEFAULT_TOLERANCE_SECONDS
from hosted_checkout.services.webhook_pipeline import WebhookPipeline

logger = logging.getLogger(__name__)


class StripeGateway:
    """Creates checkout sessions and normalizes inbound webhooks.

    Build instances with ``from_settings`` so a missing API key is reported
    before any request is served.
    """

    def __init__(
        self,
        api_key: str,
        webhook_secret: str | None = None,
        webhook_tolerance: int = DEFAULT_TOLERANCE_SECONDS,
    ) -> None:
        """Initialize the gateway.

        Args:
            api_key: Stripe secret key.
            webhook_secret: Webhook signing secret.
            webhook_tolerance: Maximum signature age in seconds.

        Raises:
            ConfigurationError: If the API key is blank.
        """
        if not api_key or not api_key.strip():
            raise ConfigurationError(
                "Stripe API key must be configured. Set STRIPE_API_KEY with your secret key."
            )
        self.sessions = SessionBuilder(api_key)
        self.webhooks = WebhookPipeline(webhook_secret, webhook_tolerance)
        self.test_mode = is_test_key(api_key)

    @classmethod
    def from_settings(cls, settings: Settings) -> "StripeGateway":
        """Build a gateway from application settings.

        Args:
            settings: Application settings.

        Returns:
            StripeGateway: A ready gateway.

        Raises:
            ConfigurationError: If the API key is missing or blank.
        """
        gateway = cls(
            api_key=settings.stripe_api_key,
            webhook_secret=settings.stripe_webhook_secret,
            webhook_tolerance=settings.stripe_webhook_tolerance,
        )
        if not gateway.webhooks.is_configured:
            logger.warning("Stripe webhook secret not configured. All webhooks will be reported as unhandled.")
        return gateway

    async def create_session(self, order: OrderSnapshot) -> CreateSessionResult:
        """Create a new hosted checkout session for an order."""
        return await self.sessions.create_session(order)

    def handle_webhook(self, raw_body: bytes, signature_header: str | None) -> WebhookResult:
        """Verify and normalize one webhook request."""
        return self.webhooks.handle(raw_body, signature_header)
