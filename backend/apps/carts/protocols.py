from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Optional, Protocol, TYPE_CHECKING

from .models import CartItem

if TYPE_CHECKING:
    from apps.carts.dtos import CartLineDTO
    from apps.catalog.models import Product


class CartItemRepositoryProtocol(Protocol):
    def summarize(self, cart_id: int) -> Iterable[Mapping[str, Any]]:
        ...

    def lock_for_product(self, cart_id: int, product_id: int) -> List[CartItem]:
        ...

    def create(self, **data) -> CartItem:
        ...

    def set_quantity(self, item: CartItem, quantity: int) -> CartItem:
        ...

    def delete_ids(self, item_ids: Iterable[int]) -> int:
        ...

    def delete_for_product(self, cart_id: int, product_id: int) -> int:
        ...

    def delete_for_cart(self, cart_id: int) -> int:
        ...


class ProductLockProtocol(Protocol):
    def lock(self, **filters) -> Optional["Product"]:
        ...


class CartLineMapperProtocol(Protocol):
    def many_to_dto(self, rows: Iterable[Mapping[str, Any]]) -> List["CartLineDTO"]:
        ...
