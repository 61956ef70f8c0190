from typing import Any, Iterable, List, Mapping

from .dtos import CartLineDTO


class CartLineMapper:
    """Maps aggregated ``carrito_items`` rows (one per product) to DTOs."""

    def to_dto(self, row: Mapping[str, Any]) -> CartLineDTO:
        product_id = row["product_id"]
        return CartLineDTO(
            id=product_id,
            name=row.get("product__title") or f"Producto {product_id}",
            price=float(row.get("product__price") or 0),
            qty=int(row.get("qty") or 0),
            image=row.get("product__image") or None,
        )

    def many_to_dto(self, rows: Iterable[Mapping[str, Any]]) -> List[CartLineDTO]:
        return [self.to_dto(r) for r in rows]
