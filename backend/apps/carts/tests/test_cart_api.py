from decimal import Decimal

from rest_framework import status
from rest_framework.test import APITestCase

from apps.carts.models import CartItem
from apps.catalog.models import Product


class CartApiTests(APITestCase):
    def setUp(self):
        self.lamp = Product.objects.create(
            id=7, title="Lámpara", price=Decimal("12.50"), stock=5, image="lamp.png"
        )
        self.chair = Product.objects.create(
            id=8, title="Silla", price=Decimal("30.00"), stock=2
        )

    def _rows(self, product_id, cart_id=1):
        return list(
            CartItem.objects.filter(cart_id=cart_id, product_id=product_id)
            .order_by("id")
            .values_list("quantity", flat=True)
        )

    def test_adding_twice_reports_quantity_two(self):
        for _ in range(2):
            res = self.client.post("/api/cart", {"id_objeto": 7}, format="json")
            self.assertEqual(res.status_code, status.HTTP_201_CREATED)
            self.assertEqual(res.data, {"ok": True})
        res = self.client.get("/api/cart")
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(
            res.json(),
            [{"id": 7, "name": "Lámpara", "price": 12.5, "qty": 2, "image": "lamp.png"}],
        )
        self.assertEqual(self._rows(7), [2])

    def test_add_consolidates_duplicate_rows(self):
        CartItem.objects.create(cart_id=1, product=self.lamp, quantity=2)
        CartItem.objects.create(cart_id=1, product=self.lamp, quantity=3)
        res = self.client.post("/api/cart/", {"id_objeto": "7"}, format="json")
        self.assertEqual(res.status_code, status.HTTP_201_CREATED)
        self.assertEqual(self._rows(7), [6])

    def test_list_sums_duplicates_into_one_line(self):
        CartItem.objects.create(cart_id=1, product=self.chair, quantity=1)
        CartItem.objects.create(cart_id=1, product=self.lamp, quantity=2)
        CartItem.objects.create(cart_id=1, product=self.lamp, quantity=4)
        res = self.client.get("/api/cart")
        self.assertEqual([(l["id"], l["qty"]) for l in res.json()], [(7, 6), (8, 1)])

    def test_patch_zero_removes_item(self):
        self.client.post("/api/cart", {"id_objeto": 7}, format="json")
        res = self.client.patch("/api/cart/items/7", {"qty": 0}, format="json")
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        res = self.client.get("/api/cart")
        self.assertNotIn(7, [line["id"] for line in res.json()])

    def test_patch_sets_absolute_quantity(self):
        res = self.client.patch("/api/cart/items/8", {"qty": 4}, format="json")
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(self._rows(8), [4])
        self.client.patch("/api/cart/items/8/", {"qty": 2}, format="json")
        self.assertEqual(self._rows(8), [2])

    def test_invalid_inputs_do_not_touch_storage(self):
        res = self.client.post("/api/cart", {"id_objeto": "abc"}, format="json")
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertFalse(res.json()["ok"])
        res = self.client.patch("/api/cart/items/7", {"qty": -1}, format="json")
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertFalse(CartItem.objects.exists())

    def test_add_unknown_product_returns_404(self):
        res = self.client.post("/api/cart", {"id_objeto": 404}, format="json")
        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)
        self.assertFalse(CartItem.objects.exists())

    def test_remove_missing_item_is_idempotent(self):
        res = self.client.delete("/api/cart/items/7")
        self.assertEqual(res.status_code, status.HTTP_204_NO_CONTENT)
        res = self.client.delete("/api/cart/items/7")
        self.assertEqual(res.status_code, status.HTTP_204_NO_CONTENT)

    def test_clear_empties_only_the_addressed_cart(self):
        CartItem.objects.create(cart_id=1, product=self.lamp, quantity=1)
        CartItem.objects.create(cart_id=2, product=self.chair, quantity=1)
        res = self.client.delete("/api/cart")
        self.assertEqual(res.status_code, status.HTTP_204_NO_CONTENT)
        self.assertEqual(self.client.get("/api/cart").json(), [])
        res = self.client.get("/api/cart", HTTP_X_CART_ID="2")
        self.assertEqual([line["id"] for line in res.json()], [8])

    def test_invalid_cart_header_is_rejected_by_middleware(self):
        res = self.client.get("/api/cart", HTTP_X_CART_ID="0")
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(res.json()["error"]["code"], "INVALID_ARGUMENT")

    def test_quantity_beyond_column_range_is_rejected(self):
        res = self.client.patch("/api/cart/items/7", {"qty": 10**20}, format="json")
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(res.json()["error"]["code"], "INVALID_ARGUMENT")
        self.assertFalse(CartItem.objects.exists())

    def test_product_id_beyond_column_range_is_rejected(self):
        huge = "9" * 25
        res = self.client.delete(f"/api/cart/items/{huge}")
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(res.json()["message"], "Invalid id")
        res = self.client.patch(f"/api/cart/items/{huge}", {"qty": 1}, format="json")
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        res = self.client.post("/api/cart", {"id_objeto": 10**20}, format="json")
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertFalse(CartItem.objects.exists())

    def test_form_encoded_body_is_unsupported_media_type(self):
        res = self.client.post("/api/cart", {"id_objeto": 7})
        self.assertEqual(res.status_code, status.HTTP_415_UNSUPPORTED_MEDIA_TYPE)
        self.assertEqual(res.json()["error"]["code"], "UNSUPPORTED_MEDIA_TYPE")
        self.assertFalse(CartItem.objects.exists())
