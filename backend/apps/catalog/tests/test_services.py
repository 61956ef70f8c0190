import unittest
from decimal import Decimal

from django.db import OperationalError

from apps.api.exceptions import NotFound, StorageError
from apps.catalog.services import ProductCatalogService


class StubProduct:
    def __init__(self, product_id, title, status="disponible"):
        self.id = product_id
        self.title = title
        self.price = Decimal("10.00")
        self.description = ""
        self.stock = 1
        self.image = None
        self.status = status


class FakeProductRepository:
    def __init__(self, products):
        self._products = {p.id: p for p in products}

    def get(self, **filters):
        return self._products.get(filters.get("id"))

    def list_by_status(self, status):
        return sorted(
            (p for p in self._products.values() if p.status == status),
            key=lambda p: p.id,
        )


class BrokenProductRepository:
    def get(self, **filters):
        raise OperationalError("connection refused")

    def list_by_status(self, status):
        raise OperationalError("connection refused")


class ProductCatalogServiceTests(unittest.TestCase):
    def setUp(self):
        self.service = ProductCatalogService(
            products=FakeProductRepository(
                [
                    StubProduct(2, "Silla"),
                    StubProduct(1, "Mesa"),
                    StubProduct(3, "Sofá", status="vendido"),
                ]
            )
        )

    def test_list_defaults_to_available_products(self):
        products = self.service.list_products()
        self.assertEqual([p.id for p in products], [1, 2])

    def test_list_filters_by_estado(self):
        products = self.service.list_products("vendido")
        self.assertEqual([p.name for p in products], ["Sofá"])

    def test_get_product_returns_detail(self):
        dto = self.service.get_product(2)
        self.assertEqual(dto.name, "Silla")
        self.assertEqual(dto.descripcion, "")

    def test_get_missing_product_raises_not_found(self):
        with self.assertRaises(NotFound) as ctx:
            self.service.get_product(99)
        self.assertEqual(ctx.exception.details, {"id": "99"})

    def test_storage_failures_surface_as_storage_error(self):
        service = ProductCatalogService(products=BrokenProductRepository())
        with self.assertRaises(StorageError) as ctx:
            service.list_products()
        self.assertEqual(ctx.exception.message, "connection refused")
        self.assertEqual(ctx.exception.status_code, 500)
