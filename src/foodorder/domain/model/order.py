"""Order payload sent to the order service.

The payload is built once per "finish order" action from the current
screen state and discarded when the request resolves.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from foodorder.domain.model.extras import Extra
from foodorder.domain.model.menu_item import MenuItem
from foodorder.domain.model.value_objects import Money


@dataclass(frozen=True)
class OrderPayload:
    """Snapshot of what the user ordered.

    ``price`` is the base price times the food quantity and does NOT
    include the extras. The order service receives the extras with their
    quantities separately and is expected to price them itself.
    """

    product_id: int
    name: str
    description: str
    price: Money
    category: int
    thumbnail_url: str
    extras: tuple[Extra, ...]

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def create(
        menu_item: MenuItem,
        extras: tuple[Extra, ...],
        food_quantity: int,
    ) -> OrderPayload:
        return OrderPayload(
            product_id=menu_item.id,
            name=menu_item.name,
            description=menu_item.description,
            price=menu_item.price * food_quantity,
            category=menu_item.category,
            thumbnail_url=menu_item.image_url,
            extras=tuple(extras),
        )

    # --- Serialization --------------------------------------------------------

    def to_json(self) -> dict[str, Any]:
        return {
            "product_id": self.product_id,
            "name": self.name,
            "description": self.description,
            "price": float(self.price),
            "category": self.category,
            "thumbnail_url": self.thumbnail_url,
            "extras": [
                {
                    "id": extra.id,
                    "name": extra.name,
                    "value": float(extra.value),
                    "quantity": extra.quantity,
                }
                for extra in self.extras
            ],
        }
