"""Value types exchanged between the gateway and the host application."""

from pydantic import AnyHttpUrl, BaseModel, ConfigDict, Field, model_validator

from hosted_checkout.models.payment import EventCategory


class OrderSnapshot(BaseModel):
    """Order to be paid, supplied by the host per checkout attempt."""

    model_config = ConfigDict(frozen=True)

    order_number: str = Field(min_length=1, description="Merchant-unique order number")
    amount_minor: int = Field(gt=0, description="Amount in minor currency units")
    currency: str = Field(min_length=3, max_length=3, description="ISO 4217 currency code")
    customer_email: str = Field(description="Customer email address")
    success_url: AnyHttpUrl = Field(description="Redirect target after payment")
    cancel_url: AnyHttpUrl = Field(description="Redirect target if checkout is cancelled")


class CreateSessionResult(BaseModel):
    """Outcome of a successful checkout session creation."""

    model_config = ConfigDict(frozen=True)

    redirect_url: AnyHttpUrl = Field(description="Stripe-hosted checkout page")
    session_id: str = Field(min_length=1, description="Stripe Checkout Session ID")


class WebhookResult(BaseModel):
    """Normalized outcome of one inbound webhook request.

    Unhandled results carry no order number and no event details, whatever
    the reason they were rejected.
    """

    model_config = ConfigDict(frozen=True)

    handled: bool = Field(description="Whether the event was verified and supported")
    order_number: str | None = Field(default=None, description="Correlated merchant order number")
    event_id: str | None = Field(default=None, description="Stripe event ID")
    event_type: str | None = Field(default=None, description="Stripe event type tag")
    category: EventCategory | None = Field(default=None, description="Supported event category")
    provider_ref: str | None = Field(default=None, description="ID of the Stripe object in the event")

    @model_validator(mode="after")
    def check_unhandled_is_empty(self) -> "WebhookResult":
        """Reject unhandled results that carry event details."""
        if not self.handled and any(
            value is not None
            for value in (self.order_number, self.event_id, self.event_type, self.category, self.provider_ref)
        ):
            raise ValueError("Unhandled webhook results cannot carry event details")
        return self

    @classmethod
    def rejected(cls) -> "WebhookResult":
        """Build the single unhandled result shape."""
        return cls(handled=False)
