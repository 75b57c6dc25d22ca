"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Identifier, Integer

from storefront.domain import storefront


@storefront.event(part_of="Order")
class OrderPlaced:
    """A user placed a new order."""

    __version__ = 1

    order_id: Identifier(required=True)
    user_id: Identifier(required=True)
    line_count: Integer(required=True)
    placed_at: DateTime(required=True)


@storefront.event(part_of="Order")
class OrderLinesReplaced:
    """An order's whole line set was swapped for a new one."""

    __version__ = 1

    order_id: Identifier(required=True)
    previous_line_count: Integer(required=True)
    line_count: Integer(required=True)
