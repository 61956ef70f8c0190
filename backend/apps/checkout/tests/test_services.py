import unittest

from django.db import ProgrammingError

from apps.api.exceptions import CheckoutRejected, InvalidArgument, StorageError
from apps.checkout.services import CheckoutService


class FakeGateway:
    def __init__(self, reply=None, error=None):
        self.reply = reply if reply is not None else {}
        self.error = error
        self.calls = []

    def run(self, cart_id):
        self.calls.append(cart_id)
        if self.error:
            raise self.error
        return self.reply


class CheckoutServiceTests(unittest.TestCase):
    def test_successful_checkout_returns_total(self):
        gateway = FakeGateway({"ok": True, "message": "Compra OK", "total": "42.50"})
        result = CheckoutService(gateway).checkout(3)
        self.assertTrue(result.ok)
        self.assertEqual(result.message, "Compra OK")
        self.assertEqual(result.total, 42.5)
        self.assertEqual(gateway.calls, [3])

    def test_reply_without_ok_counts_as_success(self):
        result = CheckoutService(FakeGateway({})).checkout(1)
        self.assertTrue(result.ok)
        self.assertEqual(result.message, "Compra realizada")
        self.assertIsNone(result.total)

    def test_rejected_checkout_raises_with_procedure_message(self):
        gateway = FakeGateway({"ok": False, "message": "Stock insuficiente", "total": 10})
        with self.assertRaises(CheckoutRejected) as ctx:
            CheckoutService(gateway).checkout(1)
        self.assertEqual(ctx.exception.message, "Stock insuficiente")
        self.assertEqual(ctx.exception.status_code, 400)

    def test_rejection_without_message_gets_default(self):
        with self.assertRaises(CheckoutRejected) as ctx:
            CheckoutService(FakeGateway({"ok": False})).checkout(1)
        self.assertEqual(ctx.exception.message, "No se pudo completar la compra")

    def test_database_failure_raises_storage_error(self):
        gateway = FakeGateway(error=ProgrammingError("function checkout_carrito does not exist"))
        with self.assertRaises(StorageError) as ctx:
            CheckoutService(gateway).checkout(1)
        self.assertIn("does not exist", ctx.exception.message)

    def test_invalid_cart_id_is_rejected_before_calling_procedure(self):
        gateway = FakeGateway({"ok": True})
        with self.assertRaises(InvalidArgument):
            CheckoutService(gateway).checkout("abc")
        with self.assertRaises(InvalidArgument):
            CheckoutService(gateway).checkout(0)
        self.assertEqual(gateway.calls, [])

    def test_non_numeric_total_is_dropped(self):
        result = CheckoutService(FakeGateway({"ok": True, "total": "n/a"})).checkout(1)
        self.assertIsNone(result.total)

    def test_text_false_ok_counts_as_rejection(self):
        for flag in ("false", "f", "FALSE"):
            gateway = FakeGateway({"ok": flag, "message": "Sin stock"})
            with self.assertRaises(CheckoutRejected) as ctx:
                CheckoutService(gateway).checkout(1)
            self.assertEqual(ctx.exception.message, "Sin stock")

    def test_text_true_ok_counts_as_success(self):
        result = CheckoutService(FakeGateway({"ok": "t"})).checkout(1)
        self.assertTrue(result.ok)

    def test_oversized_cart_id_is_rejected(self):
        gateway = FakeGateway({"ok": True})
        with self.assertRaises(InvalidArgument):
            CheckoutService(gateway).checkout(10**20)
        self.assertEqual(gateway.calls, [])
