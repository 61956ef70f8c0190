from dataclasses import dataclass
from typing import Optional


@dataclass
class ProductDTO:
    id: int
    name: str
    price: float
    stock: int
    image: Optional[str]
    estado: Optional[str]


@dataclass
class ProductDetailDTO(ProductDTO):
    descripcion: str = ""
