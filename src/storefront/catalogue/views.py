"""Outward representations of catalogue records."""

from datetime import datetime

from pydantic import BaseModel


class CategoryView(BaseModel):
    category_id: str
    name: str
    slug: str
    created_at: datetime | None = None

    @classmethod
    def from_category(cls, category) -> "CategoryView":
        return cls(
            category_id=str(category.id),
            name=category.name,
            slug=category.slug,
            created_at=category.created_at,
        )


class ProductView(BaseModel):
    product_id: str
    name: str
    image: str | None = None
    description: str | None = None
    price: float
    quantity: int = 0
    sold: int = 0
    shipping: float = 0.0
    category_id: str
    created_at: datetime | None = None

    @classmethod
    def from_product(cls, product) -> "ProductView":
        return cls(
            product_id=str(product.id),
            name=product.name,
            image=product.image,
            description=product.description,
            price=product.price,
            quantity=product.quantity or 0,
            sold=product.sold or 0,
            shipping=product.shipping or 0.0,
            category_id=str(product.category_id),
            created_at=product.created_at,
        )
