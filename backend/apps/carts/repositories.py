from typing import Iterable

from django.db.models import Sum

from apps.common.repository import GenericRepository
from .models import CartItem


class CartItemRepository(GenericRepository[CartItem]):
    def __init__(self):
        super().__init__(CartItem)

    def summarize(self, cart_id: int):
        """One row per product with duplicate rows' quantities summed, ordered by title."""
        return (
            self.model.objects.filter(cart_id=cart_id)
            .values("product_id", "product__title", "product__price", "product__image")
            .annotate(qty=Sum("quantity"))
            .order_by("product__title", "product_id")
        )

    def lock_for_product(self, cart_id: int, product_id: int):
        return list(
            self.model.objects.select_for_update()
            .filter(cart_id=cart_id, product_id=product_id)
            .order_by("id")
        )

    def set_quantity(self, item: CartItem, quantity: int) -> CartItem:
        item.quantity = quantity
        item.save(update_fields=["quantity"])
        return item

    def delete_ids(self, item_ids: Iterable[int]) -> int:
        return self.delete_where(id__in=list(item_ids))

    def delete_for_product(self, cart_id: int, product_id: int) -> int:
        return self.delete_where(cart_id=cart_id, product_id=product_id)

    def delete_for_cart(self, cart_id: int) -> int:
        return self.delete_where(cart_id=cart_id)
