from dataclasses import dataclass
from typing import Optional


@dataclass
class CartLineDTO:
    """One product of a cart as returned by ``GET /api/cart``."""

    id: int
    name: str
    price: float
    qty: int
    image: Optional[str]
