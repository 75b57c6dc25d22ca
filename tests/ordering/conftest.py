import pytest
from protean import current_domain

from storefront.catalogue.creation import CreateProduct
from storefront.catalogue.management import CreateCategory
from storefront.identity.registration import RegisterUser


@pytest.fixture()
def user_id():
    return current_domain.process(
        RegisterUser(user_name="ada", email="ada@example.com", password="s3cret-pass"),
        asynchronous=False,
    )


@pytest.fixture()
def category_id():
    return current_domain.process(CreateCategory(name="Garden"), asynchronous=False)


@pytest.fixture()
def product_ids(category_id):
    """Three products: a watering can, a trowel and a rake, in that order."""
    return [
        current_domain.process(
            CreateProduct(name=name, price=price, quantity=50, category_id=category_id),
            asynchronous=False,
        )
        for name, price in (("Watering Can", 24.5), ("Trowel", 9.0), ("Rake", 15.0))
    ]
