"""In-memory fakes for testing.

These implement the same abstract interfaces as the HTTP repositories
and the console ports but keep everything in memory. No network, no
terminal output.
"""

from __future__ import annotations

import asyncio
from typing import Any

from foodorder.application.ports import Navigator, Notifier
from foodorder.domain.exceptions import DomainException, EntityNotFoundError
from foodorder.domain.model.order import OrderPayload
from foodorder.domain.repository.food_repository import FoodRepository
from foodorder.domain.repository.order_repository import OrderRepository


def food_record(**overrides: Any) -> dict[str, Any]:
    """A menu record shaped like the menu service answer."""
    record: dict[str, Any] = {
        "id": 1,
        "name": "Ao molho",
        "description": "Macarrão ao molho branco, fughi e cheiro verde das montanhas.",
        "price": "10.00",
        "category": 1,
        "image_url": "https://example.com/ao_molho.png",
        "extras": [
            {"id": 1, "name": "Bacon", "value": "2.00"},
        ],
    }
    record.update(overrides)
    return record


class FakeFoodRepository(FoodRepository):

    def __init__(
        self,
        records: dict[int, dict[str, Any] | None] | None = None,
        error: DomainException | None = None,
    ) -> None:
        self._records = dict(records or {})
        self._error = error
        self.requested: list[int] = []
        self.release = asyncio.Event()
        self.release.set()

    async def get_by_id(self, food_id: int) -> dict[str, Any] | None:
        self.requested.append(food_id)
        await self.release.wait()
        if self._error is not None:
            raise self._error
        if food_id not in self._records:
            raise EntityNotFoundError(f"Food #{food_id} not found")
        return self._records[food_id]


class FakeOrderRepository(OrderRepository):

    def __init__(self, error: DomainException | None = None) -> None:
        self._error = error
        self.attempts: list[OrderPayload] = []
        self.created: list[OrderPayload] = []
        self.release = asyncio.Event()
        self.release.set()

    async def create(self, payload: OrderPayload) -> None:
        self.attempts.append(payload)
        await self.release.wait()
        if self._error is not None:
            raise self._error
        self.created.append(payload)


class RecordingNavigator(Navigator):

    def __init__(self) -> None:
        self.routes: list[str] = []

    def navigate(self, route: str) -> None:
        self.routes.append(route)


class RecordingNotifier(Notifier):

    def __init__(self) -> None:
        self.alerts: list[tuple[str, str]] = []

    def alert(self, title: str, message: str) -> None:
        self.alerts.append((title, message))
