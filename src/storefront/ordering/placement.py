"""Order commands and their handler.

Each command runs inside the handler's unit of work, so an order's header
and lines are committed together or not at all.
"""

import json

from protean import handle
from protean.fields import Identifier, Text
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.ordering.order import Order
from storefront.ordering.workflow import order_workflow, storage_errors


@storefront.command(part_of="Order")
class PlaceOrder:
    user_id: Identifier(required=True)
    lines: Text(required=True)  # JSON: list of {product_id, quantity, price}


@storefront.command(part_of="Order")
class ReplaceOrderLines:
    """Swap an order's whole line set for a new one."""

    order_id: Identifier(required=True)
    lines: Text(required=True)  # JSON: list of {product_id, quantity, price}


@storefront.command(part_of="Order")
class DeleteOrder:
    order_id: Identifier(required=True)


def _decode_lines(lines):
    return json.loads(lines) if isinstance(lines, str) else lines


@storefront.command_handler(part_of=Order)
class OrderPlacementHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        return order_workflow().create_order(command.user_id, _decode_lines(command.lines))

    @handle(ReplaceOrderLines)
    def replace_order_lines(self, command):
        return order_workflow().update_order(command.order_id, _decode_lines(command.lines))

    @handle(DeleteOrder)
    def delete_order(self, command):
        return order_workflow().delete_order(command.order_id)


def dispatch(command):
    """Process an order command synchronously.

    The handler's unit of work commits after the handler returns, so failures
    at commit are translated here.
    """
    with storage_errors(command.__class__.__name__):
        return current_domain.process(command, asynchronous=False)
