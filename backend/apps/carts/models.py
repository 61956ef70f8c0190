from django.db import models
from apps.catalog.models import Product


class CartItem(models.Model):
    """
    One product line of a cart, stored in ``carrito_items``.

    ``(cart_id, product)`` is meant to be unique but the table carries no
    composite constraint; duplicates left by older writers are merged by
    ``CartService.reconcile``.
    """

    id = models.AutoField(primary_key=True, db_column="id_item")
    cart_id = models.IntegerField(db_column="id_car")
    product = models.ForeignKey(
        Product,
        on_delete=models.CASCADE,
        related_name="cart_items",
        db_column="id_objeto",
    )
    quantity = models.PositiveIntegerField(db_column="cantidad")

    class Meta:
        db_table = "carrito_items"
        indexes = [
            models.Index(fields=["cart_id", "product"], name="carrito_items_car_obj_idx"),
        ]

    def __str__(self):
        return f"Cart {self.cart_id}: {self.quantity} x {self.product_id}"
