from __future__ import annotations

from .repositories import StoredProcedureCheckoutGateway
from .services import CheckoutService


def build_checkout_service() -> CheckoutService:
    return CheckoutService(gateway=StoredProcedureCheckoutGateway())
