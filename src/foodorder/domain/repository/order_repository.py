"""Abstract destination for placed orders."""

from __future__ import annotations

from abc import ABC, abstractmethod

from foodorder.domain.model.order import OrderPayload


class OrderRepository(ABC):

    @abstractmethod
    async def create(self, payload: OrderPayload) -> None:
        """Submit *payload* once. Raises GatewayError on any failure."""
