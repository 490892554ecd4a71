"""Favorite flag shown in the screen header. Has no effect on pricing."""

from __future__ import annotations

from dataclasses import dataclass

FAVORITE_ICON = "favorite"
NOT_FAVORITE_ICON = "favorite-border"


@dataclass
class FavoriteToggle:

    is_favorite: bool = False

    def toggle(self) -> None:
        self.is_favorite = not self.is_favorite

    @property
    def icon_name(self) -> str:
        return FAVORITE_ICON if self.is_favorite else NOT_FAVORITE_ICON
