from __future__ import annotations

from typing import Any, Optional

from apps.api.exceptions import CheckoutRejected, storage_errors
from apps.api.validation import parse_id
from apps.common import get_logger
from .dtos import CheckoutResultDTO
from .protocols import CheckoutGatewayProtocol

logger = get_logger(__name__).bind(component="checkout", layer="service")

DEFAULT_SUCCESS_MESSAGE = "Compra realizada"
DEFAULT_REJECTION_MESSAGE = "No se pudo completar la compra"

# Text spellings of false as sent back by json and text procedure results.
_FALSE_STRINGS = frozenset({"", "false", "f", "0", "no", "n"})


class CheckoutService:
    def __init__(self, gateway: CheckoutGatewayProtocol):
        self.gateway = gateway
        self.logger = logger.bind(service="CheckoutService")

    def checkout(self, cart_id) -> CheckoutResultDTO:
        """
        Hand the cart to the checkout procedure and interpret its reply.

        A reply without ``ok`` counts as success. ``ok: false`` raises
        ``CheckoutRejected`` with the procedure's message.
        """
        cart_id = parse_id(cart_id, "cartId")
        self.logger.info("Checkout requested", cart_id=cart_id)
        with storage_errors("checkout"):
            reply = self.gateway.run(cart_id)
        ok = _reply_ok(reply)
        message = str(reply.get("message") or "").strip()
        if not ok:
            message = message or DEFAULT_REJECTION_MESSAGE
            self.logger.info("Checkout rejected", cart_id=cart_id, reason=message)
            raise CheckoutRejected(message, details={"cartId": cart_id})
        total = self._parse_total(reply.get("total"), cart_id)
        self.logger.info("Checkout completed", cart_id=cart_id, total=total)
        return CheckoutResultDTO(
            ok=True, message=message or DEFAULT_SUCCESS_MESSAGE, total=total
        )

    def _parse_total(self, raw: Any, cart_id: int) -> Optional[float]:
        if raw is None:
            return None
        try:
            return float(raw)
        except (TypeError, ValueError):
            self.logger.warning("Ignoring non-numeric checkout total", cart_id=cart_id, total=raw)
            return None


def _reply_ok(reply) -> bool:
    """A reply without ``ok`` is a success; ``"false"``/``"f"`` text counts as false."""
    if "ok" not in reply:
        return True
    value = reply["ok"]
    if isinstance(value, str):
        return value.strip().lower() not in _FALSE_STRINGS
    return bool(value)
