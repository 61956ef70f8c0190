from __future__ import annotations

from typing import Any, Mapping, Protocol


class CheckoutGatewayProtocol(Protocol):
    def run(self, cart_id: int) -> Mapping[str, Any]:
        ...
