"""Application service: Build Pizza use case."""

from __future__ import annotations

import logging

from pizzeria.application.dto import PizzaDTO
from pizzeria.domain.model.catalog import EXTRAS, SIZES, TYPES
from pizzeria.domain.model.pizza import Pizza

logger = logging.getLogger(__name__)


class BuildPizzaHandler:

    def handle(self, size: str, type_: str, extras: list[str] | None = None) -> PizzaDTO:
        """Resolve option names and build a pizza from them.

        Names are matched case-insensitively. Extras are added in the
        order given, so a repeated name fails as a duplicate ingredient.
        """
        pizza = Pizza.create(SIZES.get(size), TYPES.get(type_))
        for name in extras or []:
            pizza.add_extra_ingredient(EXTRAS.get(name))

        logger.info("Built %r for %s", pizza, pizza.price)
        return self._to_dto(pizza)

    @staticmethod
    def _to_dto(pizza: Pizza) -> PizzaDTO:
        return PizzaDTO(
            size=pizza.size.name,
            type=pizza.type.name,
            extras=[extra.name for extra in pizza.extra_ingredients],
            price=str(pizza.price),
            info=pizza.info,
        )
