"""Menu item as served by the menu service.

A MenuItem is immutable for the whole screen session. A fresh load
replaces it wholesale; nothing edits it in place.
"""

from __future__ import annotations

from dataclasses import dataclass

from foodorder.domain.model.value_objects import Money


@dataclass(frozen=True)
class ExtraDefinition:
    """An optional add-on exactly as the menu lists it."""

    id: int
    name: str
    value: Money


@dataclass(frozen=True)
class MenuItem:

    id: int
    name: str
    description: str
    price: Money
    category: int
    image_url: str
    formatted_price: str
    extras: tuple[ExtraDefinition, ...] = ()
