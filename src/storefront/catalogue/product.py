"""Product aggregate: an item for sale, filed under one category."""

from datetime import UTC, datetime

from protean.fields import DateTime, Float, Identifier, Integer, String, Text

from storefront.domain import storefront


@storefront.aggregate
class Product:
    name: String(required=True, max_length=255)
    image: String(max_length=500)
    description: Text()
    price: Float(required=True, min_value=0.0)
    quantity: Integer(default=0, min_value=0)
    sold: Integer(default=0, min_value=0)
    shipping: Float(default=0.0, min_value=0.0)
    category_id: Identifier(required=True)
    created_at: DateTime()

    @classmethod
    def create(
        cls,
        name,
        price,
        category_id,
        quantity=0,
        image=None,
        description=None,
        sold=0,
        shipping=0.0,
    ):
        return cls(
            name=name,
            image=image or "",
            description=description or "",
            price=price,
            quantity=quantity,
            sold=sold,
            shipping=shipping,
            category_id=category_id,
            created_at=datetime.now(UTC),
        )
