"""REST controller for the product catalog."""

import logging
from decimal import Decimal
from typing import List

from fastapi import APIRouter, Depends, Request, Response, status
from pydantic import BaseModel, field_serializer

from product_catalog.models import Product
from product_catalog.services import ProductService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/product", tags=["product"])


class ProductSchema(BaseModel):
    """Product as exchanged over HTTP."""

    id: int = 0
    name: str
    price: Decimal
    stock: int

    @field_serializer("price")
    def serialize_price(self, price: Decimal) -> float:
        return float(price)

    @classmethod
    def from_product(cls, product: Product) -> "ProductSchema":
        return cls(id=product.id, name=product.name, price=product.price, stock=product.stock)

    def to_product(self) -> Product:
        return Product(id=self.id, name=self.name, price=self.price, stock=self.stock)


def get_product_service(request: Request) -> ProductService:
    """Return the ProductService wired into the application."""
    return request.app.state.product_service


@router.get("", response_model=List[ProductSchema])
def get_products(service: ProductService = Depends(get_product_service)) -> List[ProductSchema]:
    """List all products."""
    return [ProductSchema.from_product(product) for product in service.get_all()]


@router.get(
    "/{product_id}",
    name="get_product",
    response_model=ProductSchema,
    responses={status.HTTP_404_NOT_FOUND: {"description": "Product not found"}},
)
def get_product(product_id: int, service: ProductService = Depends(get_product_service)):
    """Get one product, or 404 with an empty body."""
    product = service.get_by_id(product_id)
    if product is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return ProductSchema.from_product(product)


@router.post("", response_model=ProductSchema, status_code=status.HTTP_201_CREATED)
def create_product(
    payload: ProductSchema,
    request: Request,
    response: Response,
    service: ProductService = Depends(get_product_service),
) -> ProductSchema:
    """
    Create a product.

    The payload id is ignored; the response carries the generated id and a
    Location header pointing at the new resource.
    """
    product = payload.to_product()
    product.id = service.insert(product)

    response.headers["Location"] = str(request.url_for("get_product", product_id=product.id))
    return ProductSchema.from_product(product)


@router.put(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={
        status.HTTP_400_BAD_REQUEST: {"description": "Path id and body id differ"},
        status.HTTP_404_NOT_FOUND: {"description": "Product not found"},
    },
)
def update_product(
    product_id: int,
    payload: ProductSchema,
    service: ProductService = Depends(get_product_service),
) -> Response:
    """Replace a product. The body id must equal the path id."""
    if product_id != payload.id:
        logger.warning(f"Rejected update: path id {product_id} != body id {payload.id}")
        return Response(status_code=status.HTTP_400_BAD_REQUEST)

    if not service.update(payload.to_product()):
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={status.HTTP_404_NOT_FOUND: {"description": "Product not found"}},
)
def delete_product(product_id: int, service: ProductService = Depends(get_product_service)) -> Response:
    """Delete a product."""
    if not service.delete(product_id):
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
