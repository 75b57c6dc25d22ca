"""Shared BDD fixtures and step definitions for the order lifecycle."""

import pytest
from protean import current_domain
from pytest_bdd import given, parsers, then

from storefront.catalogue.creation import CreateProduct
from storefront.catalogue.management import CreateCategory
from storefront.identity.registration import RegisterUser
from storefront.ordering.order import Order
from storefront.ordering.workflow import order_workflow


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def error():
    """Container for captured workflow errors."""
    return {"exc": None}


@pytest.fixture()
def workflow():
    return order_workflow()


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given("a registered shopper", target_fixture="shopper_id")
def registered_shopper():
    return current_domain.process(
        RegisterUser(user_name="ada", email="ada@example.com", password="s3cret-pass"),
        asynchronous=False,
    )


@given(
    parsers.cfparse('the catalogue has products "{first}", "{second}" and "{third}"'),
    target_fixture="catalogue",
)
def catalogue_products(first, second, third):
    category_id = current_domain.process(CreateCategory(name="Garden"), asynchronous=False)
    return {
        name: current_domain.process(
            CreateProduct(name=name, price=1.0, quantity=100, category_id=category_id),
            asynchronous=False,
        )
        for name in (first, second, third)
    }


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.re(r"the order has (?P<count>\d+) lines?"), converters={"count": int})
def order_has_line_count(workflow, placed, count):
    fetched = workflow.get_order(placed.order_id)
    assert len(fetched.lines) == count


@then(parsers.cfparse('the order has a line for {quantity:d} "{name}" at {price:f}'))
def order_has_line(workflow, placed, catalogue, quantity, name, price):
    fetched = workflow.get_order(placed.order_id)
    matching = [line for line in fetched.lines if line.product_id == catalogue[name]]
    assert len(matching) == 1
    assert matching[0].quantity == quantity
    assert matching[0].price == pytest.approx(price)


@then("the order keeps its original date and shopper")
def order_keeps_header(workflow, placed, shopper_id):
    fetched = workflow.get_order(placed.order_id)
    assert fetched.order_id == placed.order_id
    assert fetched.order_date == placed.order_date
    assert fetched.user_id == shopper_id


@then("no order was stored")
def no_order_stored():
    assert current_domain.repository_for(Order)._dao.query.all().items == []
