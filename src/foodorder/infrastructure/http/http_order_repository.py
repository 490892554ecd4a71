"""httpx-backed implementation of OrderRepository.

Any 2xx answer counts as accepted; everything else, including transport
errors, is a GatewayError.
"""

from __future__ import annotations

import httpx

from foodorder.domain.exceptions import GatewayError
from foodorder.domain.model.order import OrderPayload
from foodorder.domain.repository.order_repository import OrderRepository


class HttpOrderRepository(OrderRepository):

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def create(self, payload: OrderPayload) -> None:
        try:
            response = await self._client.post("/orders", json=payload.to_json())
        except httpx.HTTPError as exc:
            raise GatewayError(f"Order service unreachable: {exc}") from exc

        if not response.is_success:
            raise GatewayError(f"Order service answered {response.status_code}")
