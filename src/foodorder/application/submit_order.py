"""Application service: Submit Order use case.

Builds the order payload from the current screen state and hands it to
the order service exactly once. No retry, no idempotency key; a failure
is reported back and the caller decides what to show.
"""

from __future__ import annotations

import logging

from foodorder.application.dto import SubmissionResult
from foodorder.domain.exceptions import DomainException
from foodorder.domain.model.extras import Extra
from foodorder.domain.model.menu_item import MenuItem
from foodorder.domain.model.order import OrderPayload
from foodorder.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class SubmitOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    async def handle(
        self,
        menu_item: MenuItem | None,
        extras: tuple[Extra, ...],
        food_quantity: int,
    ) -> SubmissionResult:
        if menu_item is None:
            return SubmissionResult.failed("Food is not loaded yet")

        payload = OrderPayload.create(menu_item, extras, food_quantity)

        try:
            await self._order_repo.create(payload)
        except DomainException as exc:
            logger.warning("Order for food #%s failed: %s", menu_item.id, exc)
            return SubmissionResult.failed(str(exc), payload)

        logger.info("Order placed for food #%s (x%d)", menu_item.id, food_quantity)
        return SubmissionResult.succeeded(payload)
