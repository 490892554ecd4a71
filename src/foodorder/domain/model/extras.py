"""Extras ledger: the user's chosen quantity for every add-on.

The ledger is keyed by extra id. Its id set and the id -> (name, value)
mapping are fixed when it is built from the menu; only quantities change.
Every mutation swaps in a fresh mapping, so anything holding the previous
``extras`` tuple keeps seeing the old quantities.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, replace

from foodorder.domain.exceptions import ValidationError
from foodorder.domain.model.menu_item import ExtraDefinition
from foodorder.domain.model.value_objects import Money

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Extra:
    """Working copy of an ExtraDefinition carrying the chosen quantity."""

    id: int
    name: str
    value: Money
    quantity: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise ValidationError(
                f"Extra quantity must be an integer, got {type(self.quantity).__name__}"
            )
        if self.quantity < 0:
            raise ValidationError(f"Extra quantity cannot be negative, got {self.quantity}")

    @property
    def subtotal(self) -> Money:
        return self.value * self.quantity


class ExtrasLedger:

    def __init__(self, extras: Iterable[Extra] = ()) -> None:
        entries: dict[int, Extra] = {}
        for extra in extras:
            if extra.id in entries:
                logger.debug("Ignoring duplicate extra id %s", extra.id)
                continue
            entries[extra.id] = extra
        self._entries = entries

    @classmethod
    def from_definitions(cls, definitions: Iterable[ExtraDefinition]) -> ExtrasLedger:
        """Start every extra at zero, whatever the menu payload said."""
        return cls(
            Extra(id=d.id, name=d.name, value=d.value, quantity=0)
            for d in definitions
        )

    # --- Mutations ------------------------------------------------------------

    def increment(self, extra_id: int) -> None:
        extra = self._entries.get(extra_id)
        if extra is None:
            logger.debug("increment: unknown extra id %s", extra_id)
            return
        self._replace(replace(extra, quantity=extra.quantity + 1))

    def decrement(self, extra_id: int) -> None:
        extra = self._entries.get(extra_id)
        if extra is None:
            logger.debug("decrement: unknown extra id %s", extra_id)
            return
        if extra.quantity <= 0:
            return
        self._replace(replace(extra, quantity=extra.quantity - 1))

    # --- Queries --------------------------------------------------------------

    def get(self, extra_id: int) -> Extra | None:
        return self._entries.get(extra_id)

    def quantity_of(self, extra_id: int) -> int:
        extra = self._entries.get(extra_id)
        return extra.quantity if extra is not None else 0

    @property
    def extras(self) -> tuple[Extra, ...]:
        """Extras in the order the menu listed them."""
        return tuple(self._entries.values())

    def __contains__(self, extra_id: object) -> bool:
        return extra_id in self._entries

    def __iter__(self) -> Iterator[Extra]:
        return iter(self.extras)

    def __len__(self) -> int:
        return len(self._entries)

    # --- Internal helpers -----------------------------------------------------

    def _replace(self, updated: Extra) -> None:
        # Re-assigning an existing key keeps its position in the dict.
        entries = dict(self._entries)
        entries[updated.id] = updated
        self._entries = entries
