"""Read-only access to catalogue records for other parts of the storefront.

The ordering workflow only ever asks "does product X exist, and what is it";
it goes through :func:`find_product` rather than the repositories.
"""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from storefront.catalogue.category import Category
from storefront.catalogue.product import Product


def find_product(product_id) -> Product | None:
    if not product_id:
        return None
    try:
        return current_domain.repository_for(Product).get(str(product_id))
    except ObjectNotFoundError:
        return None


def find_category(category_id) -> Category | None:
    if not category_id:
        return None
    try:
        return current_domain.repository_for(Category).get(str(category_id))
    except ObjectNotFoundError:
        return None


def products_in_category(category_id) -> list[Product]:
    repo = current_domain.repository_for(Product)
    return repo._dao.query.filter(category_id=str(category_id)).all().items
