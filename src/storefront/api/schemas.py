"""Pydantic request/response schemas for the storefront API."""

from __future__ import annotations

from pydantic import BaseModel, EmailStr, Field

from storefront.catalogue.views import CategoryView, ProductView

# --- User Request Schemas ---


class CreateUserRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "user_name": "ada",
                    "email": "ada@example.com",
                    "password": "s3cret-pass",
                    "address": "12 Analytical Row, London",
                    "image": "https://cdn.example.com/avatars/ada.png",
                }
            ]
        }
    }

    user_name: str = Field(..., min_length=3, max_length=50)
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=100)
    address: str | None = Field(None, max_length=255)
    image: str | None = None


class UpdateUserRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"user_name": "ada-l", "address": "1 New Street"}]}}

    user_name: str | None = Field(None, min_length=3, max_length=50)
    password: str | None = Field(None, min_length=6, max_length=100)
    address: str | None = Field(None, max_length=255)
    image: str | None = None


# --- Catalogue Request Schemas ---


class CreateCategoryRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"name": "Home & Garden", "slug": "home-garden"}]}}

    name: str = Field(..., min_length=3, max_length=100)
    slug: str | None = Field(None, max_length=120)


class CreateProductRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Watering Can",
                    "image": "https://cdn.example.com/products/can.jpg",
                    "description": "Five litre galvanised steel can.",
                    "price": 24.5,
                    "quantity": 40,
                    "shipping": 4.99,
                    "category_id": "c3d4e5f6-a7b8-9012-cdef-123456789012",
                }
            ]
        }
    }

    name: str = Field(..., max_length=255)
    image: str | None = None
    description: str | None = None
    price: float = Field(..., ge=0)
    quantity: int = Field(..., ge=0)
    sold: int = Field(0, ge=0)
    shipping: float = Field(0.0, ge=0)
    category_id: str


# --- Order Request Schemas ---


class OrderLineRequest(BaseModel):
    product_id: str
    quantity: int = Field(..., ge=1)
    price: float = Field(..., ge=0)


class CreateOrderRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "user_id": "a1b2c3d4-e5f6-7890-abcd-ef1234567890",
                    "lines": [
                        {"product_id": "b2c3d4e5-f6a7-8901-bcde-f12345678901", "quantity": 2, "price": 9.99},
                    ],
                }
            ]
        }
    }

    user_id: str
    lines: list[OrderLineRequest] = []


class UpdateOrderRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [{"lines": [{"product_id": "b2c3d4e5-f6a7-8901-bcde-f12345678901", "quantity": 5, "price": 3.0}]}]
        }
    }

    lines: list[OrderLineRequest] = []


# --- Response Schemas ---


class HealthResponse(BaseModel):
    success: bool = True
    message: str = "Api is running"


class CategoryListResponse(BaseModel):
    categories: list[CategoryView]


class ProductListResponse(BaseModel):
    products: list[ProductView]


class StatusResponse(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"status": "ok"}]}}

    status: str = "ok"
