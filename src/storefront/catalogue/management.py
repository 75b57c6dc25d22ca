"""Category management: commands and handler."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from storefront.catalogue.category import Category, slugify
from storefront.catalogue.lookup import products_in_category
from storefront.catalogue.product import Product
from storefront.domain import storefront
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="Category")
class CreateCategory:
    name: String(required=True, max_length=100)
    slug: String(max_length=120)


@storefront.command(part_of="Category")
class DeleteCategory:
    """Remove a category together with every product filed under it."""

    category_id: Identifier(required=True)


@storefront.command_handler(part_of=Category)
class ManageCategoryHandler:
    @handle(CreateCategory)
    def create_category(self, command):
        repo = current_domain.repository_for(Category)
        slug = command.slug or slugify(command.name)

        if repo._dao.query.filter(name=command.name).all().items:
            raise ValidationError({"name": ["A category with this name already exists"]})
        if repo._dao.query.filter(slug=slug).all().items:
            raise ValidationError({"slug": ["A category with this slug already exists"]})

        category = Category.create(name=command.name, slug=slug)
        repo.add(category)
        return str(category.id)

    @handle(DeleteCategory)
    def delete_category(self, command):
        from storefront.ordering.lookup import product_ids_on_order_lines

        repo = current_domain.repository_for(Category)
        category = repo.get(command.category_id)

        products = products_in_category(category.id)
        referenced = product_ids_on_order_lines([str(p.id) for p in products])
        if referenced:
            raise ValidationError(
                {"category_id": [f"Products in this category are referenced by orders: {', '.join(sorted(referenced))}"]}
            )

        product_repo = current_domain.repository_for(Product)
        for product in products:
            product_repo._dao.delete(product)
        repo._dao.delete(category)

        logger.info("category_deleted", category_id=str(category.id), products_removed=len(products))
