"""HTTP controllers."""

from product_catalog.api.controller.product_controller import (
    ProductSchema,
    get_product_service,
    router as product_router,
)

__all__ = [
    "ProductSchema",
    "get_product_service",
    "product_router",
]
