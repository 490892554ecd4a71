"""Data Transfer Objects — plain containers that cross layer boundaries.

Results of the asynchronous use cases are tagged values rather than
exceptions, so the presentation layer never has to catch anything.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from foodorder.domain.model.extras import ExtrasLedger
from foodorder.domain.model.menu_item import MenuItem
from foodorder.domain.model.order import OrderPayload


class LoadState(Enum):
    LOADING = "LOADING"
    LOADED = "LOADED"
    FAILED = "FAILED"


@dataclass(frozen=True)
class LoadResult:
    """Outcome of loading a food: Loaded(menu_item, extras) or Failed(reason)."""

    state: LoadState
    menu_item: MenuItem | None = None
    extras: ExtrasLedger = field(default_factory=ExtrasLedger)
    reason: str | None = None

    @staticmethod
    def loaded(menu_item: MenuItem, extras: ExtrasLedger) -> LoadResult:
        return LoadResult(LoadState.LOADED, menu_item=menu_item, extras=extras)

    @staticmethod
    def failed(reason: str) -> LoadResult:
        return LoadResult(LoadState.FAILED, reason=reason)


@dataclass(frozen=True)
class SubmissionResult:

    ok: bool
    payload: OrderPayload | None = None
    reason: str | None = None

    @staticmethod
    def succeeded(payload: OrderPayload) -> SubmissionResult:
        return SubmissionResult(ok=True, payload=payload)

    @staticmethod
    def failed(reason: str, payload: OrderPayload | None = None) -> SubmissionResult:
        return SubmissionResult(ok=False, payload=payload, reason=reason)


@dataclass(frozen=True)
class ExtraDTO:
    """Output: one extra row as displayed to the user."""

    id: int
    name: str
    value: str  # formatted, e.g. "$2.00"
    quantity: int


@dataclass(frozen=True)
class FoodDetailsDTO:
    """Output: everything the food details screen renders."""

    state: str
    food_id: int | None
    name: str
    description: str
    formatted_price: str
    image_url: str
    extras: list[ExtraDTO]
    food_quantity: int
    total: str
    favorite_icon: str
    failure_reason: str | None = None
