from typing import Iterable, List

from .dtos import ProductDTO, ProductDetailDTO
from .models import Product


class ProductMapper:
    @staticmethod
    def to_dto(product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,
            name=product.title,
            price=float(product.price or 0),
            stock=int(product.stock or 0),
            image=product.image or None,
            estado=product.status or None,
        )

    @staticmethod
    def to_detail_dto(product: Product) -> ProductDetailDTO:
        return ProductDetailDTO(
            id=product.id,
            name=product.title,
            price=float(product.price or 0),
            stock=int(product.stock or 0),
            image=product.image or None,
            estado=product.status or None,
            descripcion=product.description or "",
        )

    @staticmethod
    def many_to_dto(products: Iterable[Product]) -> List[ProductDTO]:
        return [ProductMapper.to_dto(p) for p in products]
