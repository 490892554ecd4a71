"""httpx-backed implementation of FoodRepository."""

from __future__ import annotations

from typing import Any

import httpx

from foodorder.domain.exceptions import EntityNotFoundError, GatewayError, ValidationError
from foodorder.domain.repository.food_repository import FoodRepository


class HttpFoodRepository(FoodRepository):

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def get_by_id(self, food_id: int) -> dict[str, Any] | None:
        try:
            response = await self._client.get(f"/foods/{food_id}")
        except httpx.HTTPError as exc:
            raise GatewayError(f"Menu service unreachable: {exc}") from exc

        if response.status_code == httpx.codes.NOT_FOUND:
            raise EntityNotFoundError(f"Food #{food_id} not found")
        if not response.is_success:
            raise GatewayError(
                f"Menu service answered {response.status_code} for food #{food_id}"
            )
        if not response.content.strip():
            return None

        try:
            data = response.json()
        except ValueError as exc:
            raise ValidationError(f"Menu service sent invalid JSON for food #{food_id}") from exc
        return data or None
