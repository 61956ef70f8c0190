from dataclasses import dataclass
from typing import Optional


@dataclass
class CheckoutResultDTO:
    ok: bool
    message: str
    total: Optional[float] = None
