"""How many units of the base item the user wants."""

from __future__ import annotations

from dataclasses import dataclass

from foodorder.domain.exceptions import ValidationError

MIN_FOOD_QUANTITY = 1


@dataclass
class FoodQuantity:
    """Base item quantity; never drops below one, no upper bound."""

    value: int = MIN_FOOD_QUANTITY

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Food quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value < MIN_FOOD_QUANTITY:
            raise ValidationError(
                f"Food quantity must be at least {MIN_FOOD_QUANTITY}, got {self.value}"
            )

    def increment(self) -> None:
        self.value += 1

    def decrement(self) -> None:
        if self.value > MIN_FOOD_QUANTITY:
            self.value -= 1
