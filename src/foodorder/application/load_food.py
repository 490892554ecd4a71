"""Application service: Load Food use case.

Fetches one menu record and normalizes it into the domain shapes the
screen works with. The menu service may serialize numbers as strings,
so every numeric field is coerced on the way in.

Loading never raises: every failure comes back as ``LoadResult.failed``.
"""

from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation
from typing import Any

from foodorder.application.dto import LoadResult
from foodorder.domain.exceptions import DomainException, ValidationError
from foodorder.domain.model.extras import ExtrasLedger
from foodorder.domain.model.menu_item import ExtraDefinition, MenuItem
from foodorder.domain.model.value_objects import Money
from foodorder.domain.repository.food_repository import FoodRepository
from foodorder.domain.service.price_calculator import CurrencyFormatter, format_currency

logger = logging.getLogger(__name__)


class LoadFoodHandler:

    def __init__(
        self,
        food_repo: FoodRepository,
        formatter: CurrencyFormatter = format_currency,
    ) -> None:
        self._food_repo = food_repo
        self._formatter = formatter

    async def handle(self, food_id: int) -> LoadResult:
        try:
            raw = await self._food_repo.get_by_id(food_id)
        except DomainException as exc:
            logger.warning("Loading food #%s failed: %s", food_id, exc)
            return LoadResult.failed(str(exc))

        if not raw:
            logger.warning("Menu service returned no data for food #%s", food_id)
            return LoadResult.failed(f"No data for food #{food_id}")

        try:
            menu_item = self._normalize(raw)
        except ValidationError as exc:
            logger.warning("Food #%s has a malformed record: %s", food_id, exc)
            return LoadResult.failed(str(exc))

        logger.debug(
            "Loaded food #%s (%s) with %d extras",
            menu_item.id, menu_item.name, len(menu_item.extras),
        )
        return LoadResult.loaded(
            menu_item, ExtrasLedger.from_definitions(menu_item.extras)
        )

    # --- Mapping --------------------------------------------------------------

    def _normalize(self, raw: dict[str, Any]) -> MenuItem:
        if not isinstance(raw, dict):
            raise ValidationError(f"Menu record must be an object, got {type(raw).__name__}")
        try:
            price = Money.of(raw["price"])
            return MenuItem(
                id=_to_int(raw["id"], "id"),
                name=str(raw.get("name") or ""),
                description=str(raw.get("description") or ""),
                price=price,
                category=_to_int(raw["category"], "category"),
                image_url=str(raw.get("image_url") or ""),
                formatted_price=self._formatter(price),
                extras=_normalize_extras(raw.get("extras") or []),
            )
        except KeyError as exc:
            raise ValidationError(f"Menu record is missing field {exc.args[0]!r}") from exc


def _normalize_extras(raw_extras: Any) -> tuple[ExtraDefinition, ...]:
    """Build extra definitions, keeping the first entry for a repeated id.

    Any ``quantity`` in the source is ignored.
    """
    if not isinstance(raw_extras, list):
        raise ValidationError("Menu record field 'extras' must be a list")

    definitions: dict[int, ExtraDefinition] = {}
    for raw in raw_extras:
        if not isinstance(raw, dict):
            raise ValidationError("Each extra must be an object")
        try:
            definition = ExtraDefinition(
                id=_to_int(raw["id"], "extra id"),
                name=str(raw.get("name") or ""),
                value=Money.of(raw["value"]),
            )
        except KeyError as exc:
            raise ValidationError(f"Extra is missing field {exc.args[0]!r}") from exc

        if definition.id in definitions:
            logger.warning("Duplicate extra id %s in menu record, keeping the first", definition.id)
            continue
        definitions[definition.id] = definition
    return tuple(definitions.values())


def _to_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool) or value is None:
        raise ValidationError(f"Invalid {field_name}: {value!r}")
    try:
        number = Decimal(str(value).strip())
    except InvalidOperation as exc:
        raise ValidationError(f"Invalid {field_name}: {value!r}") from exc
    if not number.is_finite() or number != number.to_integral_value():
        raise ValidationError(f"Invalid {field_name}: {value!r}")
    return int(number)
