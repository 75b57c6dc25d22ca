"""Application tests for OrderRepository against the configured provider."""

import pytest
from protean import current_domain
from protean.exceptions import ValidationError

from storefront.ordering.order import Order, OrderLine, build_order_lines
from storefront.shared.errors import ConstraintViolation


@pytest.fixture()
def repository():
    return current_domain.repository_for(Order)


def _line(product_id, quantity=1, price=1.0):
    return {"product_id": product_id, "quantity": quantity, "price": price}


class TestInsert:
    def test_insert_then_find(self, repository, user_id, product_ids):
        order = repository.insert(Order.place(user_id=user_id, lines=build_order_lines([_line(product_ids[0], 2)])))

        loaded = repository.find_by_id(order.id)
        assert [(line.product_id, line.quantity) for line in loaded.lines] == [(product_ids[0], 2)]
        assert loaded.user is None
        assert loaded.products == {}

    def test_one_product_cannot_be_stored_twice(self, repository, user_id, product_ids):
        p1 = product_ids[0]
        with pytest.raises((ValidationError, ConstraintViolation)):
            repository.insert(
                Order.place(
                    user_id=user_id,
                    lines=[
                        OrderLine(product_id=p1, quantity=1, price=1.0),
                        OrderLine(product_id=p1, quantity=2, price=1.0, position=1),
                    ],
                )
            )

        assert repository._dao.query.all().items == []

    def test_unknown_product_is_refused(self, repository, user_id):
        with pytest.raises(ConstraintViolation) as exc:
            repository.insert(Order.place(user_id=user_id, lines=build_order_lines([_line("no-such-product")])))
        assert "lines" in exc.value.messages


class TestFindById:
    def test_flags_control_what_is_loaded(self, repository, user_id, product_ids):
        order = repository.insert(Order.place(user_id=user_id, lines=build_order_lines([_line(product_ids[0])])))

        bare = repository.find_by_id(order.id, with_lines=False)
        assert bare.lines is None

        full = repository.find_by_id(order.id, with_lines=True, with_product=True, with_user=True)
        assert full.user.user_name == "ada"
        assert full.products[product_ids[0]].name == "Watering Can"

    def test_unknown_order_is_none(self, repository):
        assert repository.find_by_id("no-such-order") is None


class TestReplaceLines:
    def test_replace_with_repeated_product_keeps_stored_lines(self, repository, user_id, product_ids):
        p1, p2, _ = product_ids
        order = repository.insert(Order.place(user_id=user_id, lines=build_order_lines([_line(p1, 2)])))

        with pytest.raises((ValidationError, ConstraintViolation)):
            repository.replace_lines(
                repository.find_by_id(order.id).order,
                [
                    OrderLine(product_id=p2, quantity=1, price=1.0),
                    OrderLine(product_id=p2, quantity=1, price=1.0, position=1),
                ],
            )

        stored = repository.find_by_id(order.id)
        assert [(line.product_id, line.quantity) for line in stored.lines] == [(p1, 2)]
