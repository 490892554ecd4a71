"""Food details session — the state container behind one screen.

The session owns every piece of working state (menu item, extras ledger,
food quantity, favorite flag) for as long as the screen is open. Each
mutating operation runs to completion and then recomputes the total.

Only ``load`` and ``finish_order`` suspend. Once ``close`` has been called,
whatever they resolve to is dropped without touching the session state.
"""

from __future__ import annotations

import logging

from foodorder.application.dto import (
    ExtraDTO,
    FoodDetailsDTO,
    LoadResult,
    LoadState,
    SubmissionResult,
)
from foodorder.application.load_food import LoadFoodHandler
from foodorder.application.ports import (
    ORDER_FAILED_MESSAGE,
    ORDER_FAILED_TITLE,
    ORDERS_ROUTE,
    Navigator,
    Notifier,
)
from foodorder.application.submit_order import SubmitOrderHandler
from foodorder.domain.model.extras import Extra, ExtrasLedger
from foodorder.domain.model.favorite import FavoriteToggle
from foodorder.domain.model.food_quantity import FoodQuantity
from foodorder.domain.model.menu_item import MenuItem
from foodorder.domain.service.price_calculator import (
    CurrencyFormatter,
    calculate_total,
    format_currency,
)

logger = logging.getLogger(__name__)


class FoodDetailsSession:

    def __init__(
        self,
        food_id: int,
        load_handler: LoadFoodHandler,
        submit_handler: SubmitOrderHandler,
        navigator: Navigator,
        notifier: Notifier,
        formatter: CurrencyFormatter = format_currency,
    ) -> None:
        self._food_id = food_id
        self._load_handler = load_handler
        self._submit_handler = submit_handler
        self._navigator = navigator
        self._notifier = notifier
        self._formatter = formatter

        self._state = LoadState.LOADING
        self._failure_reason: str | None = None
        self._menu_item: MenuItem | None = None
        self._extras = ExtrasLedger()
        self._food_quantity = FoodQuantity()
        self._favorite = FavoriteToggle()
        self._closed = False
        self._recompute()

    # --- Asynchronous operations ----------------------------------------------

    async def load(self) -> LoadResult:
        """Fetch the food and replace the menu item and extras wholesale.

        A failed load keeps whatever was shown before and moves the
        session to FAILED.
        """
        result = await self._load_handler.handle(self._food_id)
        if self._closed:
            logger.debug("Session for food #%s closed, discarding load result", self._food_id)
            return result

        if result.state is LoadState.LOADED:
            self._menu_item = result.menu_item
            self._extras = ExtrasLedger(result.extras.extras)
            self._failure_reason = None
        else:
            self._failure_reason = result.reason
        self._state = result.state
        self._recompute()
        return result

    async def finish_order(self) -> SubmissionResult:
        """Place the order once; navigate on success, alert on failure."""
        result = await self._submit_handler.handle(
            self._menu_item, self._extras.extras, self._food_quantity.value
        )
        if self._closed:
            logger.debug("Session for food #%s closed, discarding order result", self._food_id)
            return result

        if result.ok:
            self._navigator.navigate(ORDERS_ROUTE)
        else:
            self._notifier.alert(ORDER_FAILED_TITLE, ORDER_FAILED_MESSAGE)
        return result

    def close(self) -> None:
        self._closed = True

    # --- Synchronous mutations ------------------------------------------------

    def increment_extra(self, extra_id: int) -> None:
        self._extras.increment(extra_id)
        self._recompute()

    def decrement_extra(self, extra_id: int) -> None:
        self._extras.decrement(extra_id)
        self._recompute()

    def increment_food(self) -> None:
        self._food_quantity.increment()
        self._recompute()

    def decrement_food(self) -> None:
        self._food_quantity.decrement()
        self._recompute()

    def toggle_favorite(self) -> None:
        self._favorite.toggle()

    # --- Read access ----------------------------------------------------------

    @property
    def state(self) -> LoadState:
        return self._state

    @property
    def failure_reason(self) -> str | None:
        return self._failure_reason

    @property
    def menu_item(self) -> MenuItem | None:
        return self._menu_item

    @property
    def extras(self) -> tuple[Extra, ...]:
        return self._extras.extras

    @property
    def food_quantity(self) -> int:
        return self._food_quantity.value

    @property
    def is_favorite(self) -> bool:
        return self._favorite.is_favorite

    @property
    def favorite_icon(self) -> str:
        return self._favorite.icon_name

    @property
    def total(self) -> str:
        return self._total

    @property
    def is_closed(self) -> bool:
        return self._closed

    def snapshot(self) -> FoodDetailsDTO:
        item = self._menu_item
        return FoodDetailsDTO(
            state=self._state.value,
            food_id=item.id if item else None,
            name=item.name if item else "",
            description=item.description if item else "",
            formatted_price=item.formatted_price if item else "",
            image_url=item.image_url if item else "",
            extras=[
                ExtraDTO(
                    id=extra.id,
                    name=extra.name,
                    value=self._formatter(extra.value),
                    quantity=extra.quantity,
                )
                for extra in self._extras
            ],
            food_quantity=self._food_quantity.value,
            total=self._total,
            favorite_icon=self._favorite.icon_name,
            failure_reason=self._failure_reason,
        )

    # --- Internal helpers -----------------------------------------------------

    def _recompute(self) -> None:
        base_price = self._menu_item.price if self._menu_item else None
        self._total = self._formatter(
            calculate_total(base_price, self._extras, self._food_quantity.value)
        )
