from __future__ import annotations

from .repositories import ProductRepository
from .services import ProductCatalogService


def build_product_service() -> ProductCatalogService:
    return ProductCatalogService(products=ProductRepository())
