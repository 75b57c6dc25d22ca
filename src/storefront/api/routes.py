"""FastAPI routes for the storefront: users, catalogue and orders."""

import json

from fastapi import APIRouter, HTTPException
from protean.utils.globals import current_domain

from storefront.api.schemas import (
    CategoryListResponse,
    CreateCategoryRequest,
    CreateOrderRequest,
    CreateProductRequest,
    CreateUserRequest,
    ProductListResponse,
    StatusResponse,
    UpdateOrderRequest,
    UpdateUserRequest,
)
from storefront.catalogue.category import Category
from storefront.catalogue.creation import CreateProduct
from storefront.catalogue.lookup import find_category, find_product
from storefront.catalogue.management import CreateCategory, DeleteCategory
from storefront.catalogue.product import Product
from storefront.catalogue.views import CategoryView, ProductView
from storefront.identity.lookup import find_user
from storefront.identity.registration import RegisterUser, UpdateUser
from storefront.identity.views import UserView
from storefront.ordering.placement import DeleteOrder, PlaceOrder, ReplaceOrderLines, dispatch
from storefront.ordering.views import OrderView
from storefront.ordering.workflow import order_workflow


def _not_found(kind: str, identifier: str) -> HTTPException:
    return HTTPException(status_code=404, detail=f"{kind} {identifier} not found")


# ---------------------------------------------------------------------------
# User Router
# ---------------------------------------------------------------------------
user_router = APIRouter(prefix="/users", tags=["users"])


@user_router.post("", status_code=201, response_model=UserView)
async def register_user(body: CreateUserRequest) -> UserView:
    command = RegisterUser(
        user_name=body.user_name,
        email=str(body.email),
        password=body.password,
        address=body.address,
        image=body.image,
    )
    user_id = current_domain.process(command, asynchronous=False)
    return UserView.from_user(find_user(user_id))


@user_router.get("/{user_id}", response_model=UserView)
async def get_user(user_id: str) -> UserView:
    user = find_user(user_id)
    if user is None:
        raise _not_found("User", user_id)
    return UserView.from_user(user)


@user_router.put("/{user_id}", response_model=UserView)
async def update_user(user_id: str, body: UpdateUserRequest) -> UserView:
    if find_user(user_id) is None:
        raise _not_found("User", user_id)

    command = UpdateUser(
        user_id=user_id,
        user_name=body.user_name,
        password=body.password,
        address=body.address,
        image=body.image,
    )
    current_domain.process(command, asynchronous=False)
    return UserView.from_user(find_user(user_id))


# ---------------------------------------------------------------------------
# Category Router
# ---------------------------------------------------------------------------
category_router = APIRouter(prefix="/categories", tags=["categories"])


@category_router.post("", status_code=201, response_model=CategoryView)
async def create_category(body: CreateCategoryRequest) -> CategoryView:
    command = CreateCategory(name=body.name, slug=body.slug)
    category_id = current_domain.process(command, asynchronous=False)
    return CategoryView.from_category(find_category(category_id))


@category_router.get("", response_model=CategoryListResponse)
async def list_categories() -> CategoryListResponse:
    categories = current_domain.repository_for(Category)._dao.query.order_by("name").all().items
    return CategoryListResponse(categories=[CategoryView.from_category(c) for c in categories])


@category_router.delete("/{category_id}", response_model=StatusResponse)
async def delete_category(category_id: str) -> StatusResponse:
    if find_category(category_id) is None:
        raise _not_found("Category", category_id)

    current_domain.process(DeleteCategory(category_id=category_id), asynchronous=False)
    return StatusResponse()


# ---------------------------------------------------------------------------
# Product Router
# ---------------------------------------------------------------------------
product_router = APIRouter(prefix="/products", tags=["products"])


@product_router.post("", status_code=201, response_model=ProductView)
async def create_product(body: CreateProductRequest) -> ProductView:
    command = CreateProduct(
        name=body.name,
        image=body.image,
        description=body.description,
        price=body.price,
        quantity=body.quantity,
        sold=body.sold,
        shipping=body.shipping,
        category_id=body.category_id,
    )
    product_id = current_domain.process(command, asynchronous=False)
    return ProductView.from_product(find_product(product_id))


@product_router.get("", response_model=ProductListResponse)
async def list_products() -> ProductListResponse:
    products = current_domain.repository_for(Product)._dao.query.order_by("name").all().items
    return ProductListResponse(products=[ProductView.from_product(p) for p in products])


@product_router.get("/{product_id}", response_model=ProductView)
async def get_product(product_id: str) -> ProductView:
    product = find_product(product_id)
    if product is None:
        raise _not_found("Product", product_id)
    return ProductView.from_product(product)


# ---------------------------------------------------------------------------
# Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/orders", tags=["orders"])


def _lines_payload(lines) -> str:
    return json.dumps([line.model_dump() for line in lines])


@order_router.post("", status_code=201, response_model=OrderView)
async def create_order(body: CreateOrderRequest) -> OrderView:
    command = PlaceOrder(user_id=body.user_id, lines=_lines_payload(body.lines))
    return dispatch(command)


@order_router.get("/{order_id}", response_model=OrderView)
async def get_order(order_id: str) -> OrderView:
    order = order_workflow().get_order(order_id)
    if order is None:
        raise _not_found("Order", order_id)
    return order


@order_router.put("/{order_id}", response_model=OrderView)
async def update_order(order_id: str, body: UpdateOrderRequest) -> OrderView:
    command = ReplaceOrderLines(order_id=order_id, lines=_lines_payload(body.lines))
    order = dispatch(command)
    if order is None:
        raise _not_found("Order", order_id)
    return order


@order_router.delete("/{order_id}", response_model=StatusResponse)
async def delete_order(order_id: str) -> StatusResponse:
    deleted = dispatch(DeleteOrder(order_id=order_id))
    if not deleted:
        raise _not_found("Order", order_id)
    return StatusResponse()
