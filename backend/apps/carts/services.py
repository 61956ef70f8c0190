from __future__ import annotations

from typing import Callable, List

from django.db import transaction

from apps.api.exceptions import InvalidArgument, NotFound, storage_errors
from apps.api.validation import MAX_DB_INT, parse_id, parse_int
from apps.common import get_logger
from .dtos import CartLineDTO
from .protocols import (
    CartItemRepositoryProtocol,
    CartLineMapperProtocol,
    ProductLockProtocol,
)

logger = get_logger(__name__).bind(component="carts", layer="service")


class CartService:
    """
    Cart line operations scoped to an explicit cart id.

    Quantity changes go through :meth:`reconcile`, which runs the whole
    read-modify-write in one transaction with the product row locked, so
    concurrent writers for the same product serialize instead of losing
    increments.
    """

    def __init__(
        self,
        items: CartItemRepositoryProtocol,
        products: ProductLockProtocol,
        line_mapper: CartLineMapperProtocol,
    ):
        self.items = items
        self.products = products
        self.line_mapper = line_mapper
        self.logger = logger.bind(service="CartService")

    def list_items(self, cart_id: int) -> List[CartLineDTO]:
        self.logger.debug("Listing cart", cart_id=cart_id)
        with storage_errors("cart.list"):
            rows = list(self.items.summarize(cart_id))
        return self.line_mapper.many_to_dto(rows)

    def add_item(self, cart_id: int, product_id) -> int:
        product_id = parse_id(product_id, "id_objeto")
        quantity = self.reconcile(cart_id, product_id, lambda current: current + 1)
        self.logger.info(
            "Cart item added", cart_id=cart_id, product_id=product_id, quantity=quantity
        )
        return quantity

    def set_quantity(self, cart_id: int, product_id, qty) -> int:
        product_id = parse_id(product_id, "id")
        qty = parse_int(qty, "qty", minimum=0, maximum=MAX_DB_INT)
        if qty == 0:
            self.remove_item(cart_id, product_id)
            return 0
        quantity = self.reconcile(cart_id, product_id, lambda _current: qty)
        self.logger.info(
            "Cart item quantity set",
            cart_id=cart_id,
            product_id=product_id,
            quantity=quantity,
        )
        return quantity

    def remove_item(self, cart_id: int, product_id) -> int:
        product_id = parse_id(product_id, "id")
        with storage_errors("cart.remove"):
            deleted = self.items.delete_for_product(cart_id, product_id)
        self.logger.info(
            "Cart item removed", cart_id=cart_id, product_id=product_id, rows=deleted
        )
        return deleted

    def clear(self, cart_id: int) -> int:
        with storage_errors("cart.clear"):
            deleted = self.items.delete_for_cart(cart_id)
        self.logger.info("Cart cleared", cart_id=cart_id, rows=deleted)
        return deleted

    def reconcile(
        self, cart_id: int, product_id: int, resolve: Callable[[int], int]
    ) -> int:
        """
        Rewrite the ``(cart_id, product_id)`` rows as a single row.

        ``resolve`` receives the summed quantity of the existing rows (0 when
        absent) and returns the target quantity. A target of 0 deletes every
        row; otherwise the oldest row keeps the target and any duplicates are
        deleted. Returns the resulting quantity.
        """
        with storage_errors("cart.reconcile"), transaction.atomic():
            product = self.products.lock(id=product_id)
            if product is None:
                self.logger.info(
                    "Cart mutation rejected: unknown product",
                    cart_id=cart_id,
                    product_id=product_id,
                )
                raise NotFound("Product not found", details={"id": str(product_id)})
            rows = self.items.lock_for_product(cart_id, product_id)
            current = sum(row.quantity for row in rows)
            target = resolve(current)
            if target < 0:
                raise InvalidArgument("Invalid qty", details={"qty": str(target)})
            if target == 0:
                if rows:
                    self.items.delete_for_product(cart_id, product_id)
                return 0
            if not rows:
                self.items.create(cart_id=cart_id, product=product, quantity=target)
                return target
            keeper, duplicates = rows[0], rows[1:]
            if duplicates:
                self.logger.warning(
                    "Consolidating duplicate cart rows",
                    cart_id=cart_id,
                    product_id=product_id,
                    rows=len(rows),
                    total=current,
                )
                self.items.delete_ids(row.id for row in duplicates)
            if keeper.quantity != target:
                self.items.set_quantity(keeper, target)
            return target
