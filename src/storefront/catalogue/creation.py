"""Product creation: command and handler."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Float, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from storefront.catalogue.lookup import find_category
from storefront.catalogue.product import Product
from storefront.domain import storefront


@storefront.command(part_of="Product")
class CreateProduct:
    name: String(required=True, max_length=255)
    image: String(max_length=500)
    description: Text()
    price: Float(required=True, min_value=0.0)
    quantity: Integer(required=True, min_value=0)
    sold: Integer(default=0, min_value=0)
    shipping: Float(default=0.0, min_value=0.0)
    category_id: Identifier(required=True)


@storefront.command_handler(part_of=Product)
class CreateProductHandler:
    @handle(CreateProduct)
    def create_product(self, command):
        if find_category(command.category_id) is None:
            raise ValidationError({"category_id": [f"Category {command.category_id} does not exist"]})

        product = Product.create(
            name=command.name,
            image=command.image,
            description=command.description,
            price=command.price,
            quantity=command.quantity,
            sold=command.sold or 0,
            shipping=command.shipping or 0.0,
            category_id=command.category_id,
        )
        current_domain.repository_for(Product).add(product)
        return str(product.id)
