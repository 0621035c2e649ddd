"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Identifier, Integer, String, Text

from ordering.domain import ordering


@ordering.event(part_of="Order")
class OrderPlaced:
    """A customer checked out and an order was recorded."""

    __version__ = 1

    order_id = Identifier(required=True)
    name = String(required=True, sanitize=False)
    phone = String(required=True, sanitize=False)
    lessons = Text(required=True, sanitize=False)  # JSON array of lesson ids, one per unit
    unit_count = Integer(required=True)
    placed_at = DateTime(required=True)
