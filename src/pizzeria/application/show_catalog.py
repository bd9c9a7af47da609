"""Application service: Show Catalog use case (query)."""

from __future__ import annotations

from pizzeria.application.dto import OptionDTO
from pizzeria.domain.model.catalog import EXTRAS, SIZES, TYPES, Catalog


class ShowCatalogHandler:

    def __init__(
        self,
        sizes: Catalog = SIZES,
        types: Catalog = TYPES,
        extras: Catalog = EXTRAS,
    ) -> None:
        self._catalogs = {"sizes": sizes, "types": types, "extras": extras}

    def handle(self) -> dict[str, list[OptionDTO]]:
        return {
            label: [OptionDTO(name=o.name, price=str(o.price)) for o in catalog]
            for label, catalog in self._catalogs.items()
        }
