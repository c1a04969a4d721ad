"""Stripe webhook event schemas.

A verified event body is decoded once into ``RawEvent``. Its payload is one of
the record types below, selected by the Stripe ``object`` field. Object kinds
outside this union decode to ``None``.
"""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator


class StripeRecord(BaseModel):
    """Fields shared by every decoded Stripe object.

    Null or non-mapping metadata decodes to an empty mapping.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str
    metadata: dict[str, Any] = Field(default_factory=dict)

    @field_validator("metadata", mode="before")
    @classmethod
    def coerce_metadata(cls, value: Any) -> Any:
        """Treat null or non-mapping metadata as empty."""
        return value if isinstance(value, dict) else {}


class PaymentIntentRecord(StripeRecord):
    """Subset of a Stripe PaymentIntent object."""

    object: Literal["payment_intent"]


class CheckoutSessionRecord(StripeRecord):
    """Subset of a Stripe Checkout Session object."""

    object: Literal["checkout.session"]
    client_reference_id: str | None = None

    @field_validator("client_reference_id", mode="before")
    @classmethod
    def coerce_client_reference_id(cls, value: Any) -> Any:
        """Treat non-string client references as absent."""
        return value if isinstance(value, str) else None


class ChargeRecord(StripeRecord):
    """Subset of a Stripe Charge object."""

    object: Literal["charge"]


EventPayload = Annotated[
    PaymentIntentRecord | CheckoutSessionRecord | ChargeRecord,
    Field(discriminator="object"),
]

event_payload_adapter: TypeAdapter[EventPayload] = TypeAdapter(EventPayload)

PAYLOAD_OBJECT_KINDS = frozenset({"payment_intent", "checkout.session", "charge"})


class EventData(BaseModel):
    """The ``data`` member of a Stripe event envelope."""

    model_config = ConfigDict(extra="ignore")

    object: dict[str, Any]


class EventEnvelope(BaseModel):
    """Stripe event as delivered on the wire."""

    model_config = ConfigDict(extra="ignore")

    id: str | None = None
    type: str
    data: EventData


class RawEvent(BaseModel):
    """Verified, decoded event. Lives for one webhook request."""

    model_config = ConfigDict(frozen=True)

    id: str | None = None
    type: str
    payload: EventPayload | None = None

    @classmethod
    def from_envelope(cls, envelope: EventEnvelope) -> "RawEvent":
        """Decode the envelope payload into its record variant.

        Raises:
            pydantic.ValidationError: If a known object kind has no id.
        """
        obj = envelope.data.object
        payload = None
        if obj.get("object") in PAYLOAD_OBJECT_KINDS:
            payload = event_payload_adapter.validate_python(obj)
        return cls(id=envelope.id, type=envelope.type, payload=payload)
