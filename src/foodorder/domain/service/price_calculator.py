"""Domain service: order total.

Pure functions only. The session calls ``calculate_total`` after every
mutation instead of caching the result.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from foodorder.domain.model.extras import Extra
from foodorder.domain.model.value_objects import Money

CurrencyFormatter = Callable[[Money], str]


def format_currency(amount: Money) -> str:
    """Default formatter, e.g. ``$1,234.50``."""
    return str(amount)


def calculate_total(
    base_price: Money | None,
    extras: Iterable[Extra],
    food_quantity: int,
) -> Money:
    """(base price + sum of extra value * quantity) * food quantity.

    A missing base price (menu item not loaded yet) counts as zero.
    """
    total = base_price if base_price is not None else Money.zero()
    for extra in extras:
        total = total + extra.subtotal
    return total * food_quantity
