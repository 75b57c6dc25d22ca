"""Order response shapes and the mapping from persisted records to them."""

from datetime import datetime

from pydantic import BaseModel

from storefront.catalogue.views import ProductView
from storefront.identity.views import UserView


class OrderLineView(BaseModel):
    product_id: str
    quantity: int
    price: float
    product: ProductView | None = None


class OrderView(BaseModel):
    order_id: str
    order_date: datetime
    user_id: str
    lines: list[OrderLineView] = []
    user: UserView | None = None

    @classmethod
    def from_order(cls, order, lines=None, products=None, user=None) -> "OrderView":
        """Map an Order and whatever was eagerly loaded alongside it.

        ``lines`` defaults to the order's own lines in placement order;
        ``products`` maps product id to Product for lines that should carry
        product details.
        """
        products = products or {}
        if lines is None:
            lines = order.ordered_lines()

        return cls(
            order_id=str(order.id),
            order_date=order.order_date,
            user_id=str(order.user_id),
            lines=[
                OrderLineView(
                    product_id=str(line.product_id),
                    quantity=line.quantity,
                    price=line.price,
                    product=(
                        ProductView.from_product(products[str(line.product_id)])
                        if str(line.product_id) in products
                        else None
                    ),
                )
                for line in lines
            ],
            user=UserView.from_user(user) if user is not None else None,
        )

    @classmethod
    def from_loaded(cls, loaded) -> "OrderView":
        return cls.from_order(
            loaded.order,
            lines=loaded.lines or [],
            products=loaded.products,
            user=loaded.user,
        )
