"""Outbound ports of the food details screen.

Navigation and user alerts belong to whatever front end hosts the
session; the session only talks to these interfaces.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

ORDERS_ROUTE = "Orders"

ORDER_FAILED_TITLE = "Could not place your order."
ORDER_FAILED_MESSAGE = "Please check the details and try again."


class Navigator(ABC):

    @abstractmethod
    def navigate(self, route: str) -> None:
        """Move the user to *route*."""


class Notifier(ABC):

    @abstractmethod
    def alert(self, title: str, message: str) -> None:
        """Show a non-fatal error to the user."""
