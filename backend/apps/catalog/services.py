from __future__ import annotations

from typing import List, Optional

from apps.api.exceptions import NotFound, storage_errors
from apps.common import get_logger
from .dtos import ProductDTO, ProductDetailDTO
from .mappers import ProductMapper
from .models import STATUS_AVAILABLE
from .protocols import ProductRepositoryProtocol

logger = get_logger(__name__).bind(component="catalog", layer="service")


class ProductCatalogService:
    """Read-only projection over the ``objetos`` table."""

    def __init__(self, products: ProductRepositoryProtocol):
        self.products = products
        self.logger = logger.bind(service="ProductCatalogService")

    def list_products(self, estado: Optional[str] = None) -> List[ProductDTO]:
        estado = estado or STATUS_AVAILABLE
        self.logger.debug("Listing products", estado=estado)
        with storage_errors("products.list"):
            return ProductMapper.many_to_dto(self.products.list_by_status(estado))

    def get_product(self, product_id: int) -> ProductDetailDTO:
        self.logger.debug("Fetching product", product_id=product_id)
        with storage_errors("products.get"):
            product = self.products.get(id=product_id)
        if not product:
            self.logger.info("Product not found", product_id=product_id)
            raise NotFound("Product not found", details={"id": str(product_id)})
        return ProductMapper.to_detail_dto(product)
