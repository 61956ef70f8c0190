import unittest
from unittest.mock import MagicMock, patch

from apps.checkout.repositories import StoredProcedureCheckoutGateway, decode_reply


class DecodeReplyTests(unittest.TestCase):
    def test_dict_passes_through(self):
        self.assertEqual(decode_reply({"ok": True}), {"ok": True})

    def test_json_text_is_parsed(self):
        self.assertEqual(
            decode_reply('{"ok": false, "message": "Sin stock"}'),
            {"ok": False, "message": "Sin stock"},
        )

    def test_plain_text_becomes_message(self):
        self.assertEqual(decode_reply("Compra realizada"), {"message": "Compra realizada"})

    def test_null_is_empty(self):
        self.assertEqual(decode_reply(None), {})


class StoredProcedureGatewayTests(unittest.TestCase):
    def _connection(self, row):
        cursor = MagicMock()
        cursor.fetchone.return_value = row
        connection = MagicMock()
        connection.ops.quote_name.side_effect = lambda name: f'"{name}"'
        connection.cursor.return_value.__enter__.return_value = cursor
        return connection, cursor

    def test_run_calls_configured_procedure_with_cart_argument(self):
        connection, cursor = self._connection(({"ok": True, "total": 12},))
        with patch(
            "apps.checkout.repositories.connections", {"default": connection}
        ):
            reply = StoredProcedureCheckoutGateway(procedure="checkout_then_seed").run(4)
        cursor.execute.assert_called_once_with(
            'SELECT "checkout_then_seed"(p_id_car => %s)', [4]
        )
        self.assertEqual(reply, {"ok": True, "total": 12})

    def test_default_procedure_comes_from_settings(self):
        gateway = StoredProcedureCheckoutGateway()
        self.assertEqual(gateway.procedure, "checkout_carrito")

    def test_missing_row_yields_empty_reply(self):
        connection, _ = self._connection(None)
        with patch(
            "apps.checkout.repositories.connections", {"default": connection}
        ):
            self.assertEqual(StoredProcedureCheckoutGateway().run(1), {})
