from __future__ import annotations

from apps.catalog.repositories import ProductRepository

from .mappers import CartLineMapper
from .repositories import CartItemRepository
from .services import CartService


def build_cart_service() -> CartService:
    return CartService(
        items=CartItemRepository(),
        products=ProductRepository(),
        line_mapper=CartLineMapper(),
    )
