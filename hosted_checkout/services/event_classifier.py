"""Maps verified Stripe event types to supported categories."""

from hosted_checkout.core.exceptions import UnsupportedEventError
from hosted_checkout.models.payment import EventCategory
from hosted_checkout.schemas.events import RawEvent

SUPPORTED_EVENT_TYPES: dict[str, EventCategory] = {category.value: category for category in EventCategory}


def classify_event(event: RawEvent) -> EventCategory:
    """Return the category for an event's type tag.

    Args:
        event: A verified event.

    Returns:
        EventCategory: The matching supported category.

    Raises:
        UnsupportedEventError: If the type tag is not in the allow-list.
    """
    category = SUPPORTED_EVENT_TYPES.get(event.type)
    if category is None:
        raise UnsupportedEventError(event.type)
    return category
