"""Abstract source of menu items.

Defined in the domain layer so the domain never depends on
infrastructure. The HTTP implementation lives in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class FoodRepository(ABC):

    @abstractmethod
    async def get_by_id(self, food_id: int) -> dict[str, Any] | None:
        """Return the raw menu record for *food_id*, or None if the body is empty.

        Raises EntityNotFoundError, GatewayError or ValidationError when the
        record cannot be fetched or decoded.
        """
