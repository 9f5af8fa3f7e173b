"""StadtKatalog directory adapter."""

from seestadtbot.adapters.stadtkatalog_api.stadtkatalog_shop_directory import (
    StadtKatalogShopDirectory,
)

__all__ = ["StadtKatalogShopDirectory"]
