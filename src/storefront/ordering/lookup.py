from protean.utils.globals import current_domain

from storefront.ordering.order import OrderLine


def product_ids_on_order_lines(product_ids) -> set[str]:
    """Return the subset of ``product_ids`` that at least one order line points at."""
    repo = current_domain.repository_for(OrderLine)
    referenced = set()
    for product_id in product_ids:
        if repo._dao.query.filter(product_id=str(product_id)).all().items:
            referenced.add(str(product_id))
    return referenced
