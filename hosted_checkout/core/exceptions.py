"""Payment gateway error taxonomy."""


class PaymentGatewayError(Exception):
    """Base exception for all gateway errors."""


class ConfigurationError(PaymentGatewayError):
    """Gateway configuration is unusable.

    Raised at startup only. The host must refuse to serve requests.
    """


class VerificationError(PaymentGatewayError):
    """Webhook could not be verified or decoded.

    Messages never include the request body or the signature value.
    """


class UnsupportedEventError(PaymentGatewayError):
    """Verified webhook event whose type is outside the supported set."""

    def __init__(self, event_type: str) -> None:
        self.event_type = event_type
        super().__init__(f"Unsupported event type: {event_type}")


class ProviderError(PaymentGatewayError):
    """Stripe API call failed during session creation.

    The underlying SDK exception is kept on ``provider_error`` and as the
    ``__cause__`` of this exception.
    """

    def __init__(self, message: str, provider_error: Exception | None = None) -> None:
        self.provider_error = provider_error
        super().__init__(message)
