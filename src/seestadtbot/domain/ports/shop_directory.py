"""Shop directory port."""

from typing import Protocol

from seestadtbot.domain.models.shop_entry import ShopEntry


class ShopDirectory(Protocol):
    """Port for looking up shops and venues."""

    async def get_entry(self, entry_id: str) -> ShopEntry | None:
        """Look up an entry by its exact id."""
        ...

    async def search(self, query: str) -> ShopEntry | None:
        """Search the directory and return the single usable hit, if any."""
        ...
