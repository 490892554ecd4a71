"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import httpx

from foodorder.application.load_food import LoadFoodHandler
from foodorder.application.ports import Navigator, Notifier
from foodorder.application.session import FoodDetailsSession
from foodorder.application.submit_order import SubmitOrderHandler
from foodorder.infrastructure.config import Settings
from foodorder.infrastructure.http.http_food_repository import HttpFoodRepository
from foodorder.infrastructure.http.http_order_repository import HttpOrderRepository


def http_client(settings: Settings) -> httpx.AsyncClient:
    return httpx.AsyncClient(base_url=settings.api_url, timeout=settings.timeout)


def food_details_session(
    food_id: int,
    client: httpx.AsyncClient,
    navigator: Navigator,
    notifier: Notifier,
) -> FoodDetailsSession:
    return FoodDetailsSession(
        food_id=food_id,
        load_handler=LoadFoodHandler(HttpFoodRepository(client)),
        submit_handler=SubmitOrderHandler(HttpOrderRepository(client)),
        navigator=navigator,
        notifier=notifier,
    )
