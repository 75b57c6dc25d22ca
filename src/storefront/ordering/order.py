"""Order aggregate and its OrderLine entity.

An order belongs to one user and owns its lines outright: a line never
outlives its order and is never shared with another one. Each line records
the quantity and the unit price supplied by the caller when the order was
placed; prices are not re-read from the catalogue.

A product may appear on at most one line of a given order.
"""

from collections.abc import Iterable, Mapping
from datetime import UTC, datetime

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer

from storefront.domain import storefront
from storefront.ordering.events import OrderLinesReplaced, OrderPlaced


@storefront.entity(part_of="Order")
class OrderLine:
    product_id: Identifier(required=True)
    quantity: Integer(required=True, min_value=1)
    price: Float(required=True, min_value=0.0)
    position: Integer(default=0, min_value=0)


def build_order_lines(lines_data: Iterable[Mapping]) -> list[OrderLine]:
    """Turn request line items into ``OrderLine`` entities, in request order.

    Raises ``ValidationError`` for a malformed line or for a product that
    appears more than once.
    """
    if isinstance(lines_data, (str, bytes, Mapping)) or not isinstance(lines_data, Iterable):
        raise ValidationError({"lines": ["Lines must be a list of line items"]})

    lines = []
    seen = set()
    for position, data in enumerate(lines_data):
        if not isinstance(data, Mapping):
            raise ValidationError({"lines": [f"Line {position} must be an object with product_id, quantity and price"]})

        product_id = data.get("product_id")
        if product_id is not None and str(product_id) in seen:
            raise ValidationError({"lines": [f"Product {product_id} appears more than once in the order"]})

        lines.append(
            OrderLine(
                product_id=product_id,
                quantity=data.get("quantity"),
                price=data.get("price"),
                position=position,
            )
        )
        if product_id is not None:
            seen.add(str(product_id))
    return lines


@storefront.aggregate
class Order:
    """A purchase: one user, a timestamp, and the products bought.

    There is no status. An order exists from placement until deletion, and
    the only thing that changes in between is its line set, which is always
    replaced as a whole.
    """

    user_id: Identifier(required=True)
    order_date: DateTime(required=True)
    lines: HasMany(OrderLine)

    @invariant.post
    def each_product_appears_once(self):
        product_ids = [str(line.product_id) for line in self.lines]
        duplicates = sorted({pid for pid in product_ids if product_ids.count(pid) > 1})
        if duplicates:
            raise ValidationError({"lines": [f"Product {pid} appears more than once in the order" for pid in duplicates]})

    @classmethod
    def place(cls, user_id, lines):
        order = cls(user_id=user_id, order_date=datetime.now(UTC))
        with atomic_change(order):
            for line in lines:
                order.add_lines(line)

        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                user_id=str(user_id),
                line_count=len(order.lines),
                placed_at=order.order_date,
            )
        )
        return order

    def ordered_lines(self) -> list[OrderLine]:
        return sorted(self.lines, key=lambda line: line.position or 0)

    def replace_lines(self, lines):
        """Discard every current line and attach ``lines`` instead.

        ``order_date`` and ``user_id`` are left alone.
        """
        previous_line_count = len(self.lines)
        with atomic_change(self):
            self.clear_lines()
            for line in lines:
                self.add_lines(line)

        self.raise_(
            OrderLinesReplaced(
                order_id=str(self.id),
                previous_line_count=previous_line_count,
                line_count=len(self.lines),
            )
        )

    def clear_lines(self):
        for line in list(self.lines):
            self.remove_lines(line)
