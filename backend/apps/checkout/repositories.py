import json
from typing import Any, Dict, Optional

from django.conf import settings
from django.db import connections

from apps.common import get_logger

logger = get_logger(__name__).bind(component="checkout", layer="repository")

CART_ARGUMENT = "p_id_car"


class StoredProcedureCheckoutGateway:
    """
    Calls the database function that finalizes a cart.

    The function receives the cart id as ``p_id_car`` and answers with a JSON
    object ``{"ok": bool, "message": str, "total": number}``; stock and cart
    row handling happen entirely inside it.
    """

    def __init__(self, procedure: Optional[str] = None, using: str = "default"):
        self.procedure = procedure or settings.CHECKOUT_PROCEDURE
        self.using = using

    def _statement(self, connection) -> str:
        name = connection.ops.quote_name(self.procedure)
        return f"SELECT {name}({CART_ARGUMENT} => %s)"

    def run(self, cart_id: int) -> Dict[str, Any]:
        connection = connections[self.using]
        sql = self._statement(connection)
        logger.debug("Calling checkout procedure", procedure=self.procedure, cart_id=cart_id)
        with connection.cursor() as cursor:
            cursor.execute(sql, [cart_id])
            row = cursor.fetchone()
        return decode_reply(row[0] if row else None)


def decode_reply(value: Any) -> Dict[str, Any]:
    """Normalize the procedure's return value (json, jsonb, text or NULL) to a dict."""
    if value is None:
        return {}
    if isinstance(value, (bytes, bytearray)):
        value = value.decode("utf-8")
    if isinstance(value, str):
        try:
            value = json.loads(value)
        except ValueError:
            return {"message": value}
    if isinstance(value, dict):
        return value
    return {"message": str(value)}
