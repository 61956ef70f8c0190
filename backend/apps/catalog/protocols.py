from __future__ import annotations

from typing import Iterable, Optional, Protocol

from .models import Product


class ProductRepositoryProtocol(Protocol):
    def get(self, **filters) -> Optional[Product]:
        ...

    def list_by_status(self, status: str) -> Iterable[Product]:
        ...
