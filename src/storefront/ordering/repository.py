"""Persistence for orders and their lines.

Every method treats an order and its lines as one unit: the header and the
line set are always written, replaced or removed together. The memory
provider has no foreign keys, so references from an order to its user and
from each line to its product are checked here before anything is written.
"""

from dataclasses import dataclass, field

from protean.exceptions import ObjectNotFoundError

from storefront.catalogue.lookup import find_product
from storefront.domain import storefront
from storefront.identity.lookup import find_user
from storefront.ordering.order import Order
from storefront.shared.errors import ConstraintViolation


@dataclass(frozen=True)
class LoadedOrder:
    """An order plus whatever ``find_by_id`` was asked to load with it.

    ``lines`` is ``None`` when lines were not requested; ``products`` is keyed
    by product id and only filled when products were requested.
    """

    order: Order
    lines: list | None = None
    products: dict = field(default_factory=dict)
    user: object | None = None


@storefront.repository(part_of=Order)
class OrderRepository:
    def insert(self, order: Order) -> Order:
        self._verify_references(order)
        self.add(order)
        return order

    def find_by_id(
        self,
        order_id,
        with_lines: bool = True,
        with_product: bool = False,
        with_user: bool = False,
    ) -> LoadedOrder | None:
        """Load an order by id, or ``None`` if there is no such order.

        ``with_product`` only has an effect together with ``with_lines``.
        """
        try:
            order = self.get(str(order_id))
        except ObjectNotFoundError:
            return None

        lines = order.ordered_lines() if with_lines else None

        products = {}
        if lines and with_product:
            for line in lines:
                product = find_product(line.product_id)
                if product is not None:
                    products[str(line.product_id)] = product

        user = find_user(order.user_id) if with_user else None

        return LoadedOrder(order=order, lines=lines, products=products, user=user)

    def replace_lines(self, order: Order, new_lines) -> Order:
        order.replace_lines(new_lines)
        self._verify_references(order)
        self.add(order)
        return order

    def delete(self, order: Order) -> None:
        order.clear_lines()
        self.add(order)
        self._dao.delete(order)

    def _verify_references(self, order: Order) -> None:
        errors = {}
        if find_user(order.user_id) is None:
            errors["user_id"] = [f"User {order.user_id} does not exist"]

        product_ids = [str(line.product_id) for line in order.lines]
        if len(product_ids) != len(set(product_ids)):
            errors["lines"] = ["An order may list each product only once"]

        missing = [str(line.product_id) for line in order.ordered_lines() if find_product(line.product_id) is None]
        if missing:
            errors.setdefault("lines", []).extend(f"Product {product_id} does not exist" for product_id in missing)

        if errors:
            raise ConstraintViolation(errors)
