"""Pizza aggregate, the configurable product.

A Pizza owns its size, its type and an ordered list of extra
ingredients. All invariants are enforced here.
"""

from __future__ import annotations

import logging

from pizzeria.domain.exceptions import ValidationError
from pizzeria.domain.model.catalog import EXTRAS, SIZES, TYPES
from pizzeria.domain.model.value_objects import Money, Option

logger = logging.getLogger(__name__)

NUMBER_OF_ARGUMENTS = 2


class Pizza:
    """Aggregate root for a single configured pizza.

    Invariants:
    - ``size`` is always in SIZES and ``type`` always in TYPES
    - every extra ingredient is in EXTRAS and appears at most once

    Options are stored as the catalog's own entries, so a value-equal
    copy never changes how prices render.

    ``size`` and ``type`` are fixed at construction; only the extras
    change afterwards. Not safe for concurrent mutation from several
    threads.
    """

    def __init__(self, size: Option, type_: Option) -> None:
        if size not in SIZES:
            raise ValidationError("Invalid size of pizza")
        if type_ not in TYPES:
            raise ValidationError("Invalid type of pizza")
        self._size = SIZES.canonical(size)
        self._type = TYPES.canonical(type_)
        self._extras: list[Option] = []

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def create(*args: Option) -> Pizza:
        """Create a new pizza from exactly a size and a type.

        The argument count is checked before anything else so that a
        call with a missing or surplus argument reports that first.
        """
        if len(args) != NUMBER_OF_ARGUMENTS:
            raise ValidationError(
                f"Invalid number of parameters passed to pizza, "
                f"given {len(args)} instead of {NUMBER_OF_ARGUMENTS}"
            )
        size, type_ = args
        return Pizza(size, type_)

    # --- Extras ---------------------------------------------------------------

    def add_extra_ingredient(self, extra: Option) -> None:
        """Append *extra* unless it is unknown or already on the pizza."""
        if extra not in EXTRAS:
            logger.debug("Rejected unknown ingredient %r", extra)
            raise ValidationError(f"Invalid ingredient: {extra}")
        if extra in self._extras:
            logger.debug("Rejected duplicate ingredient %s", extra)
            raise ValidationError(f"Duplicate ingredient: {extra} is already added")
        self._extras.append(EXTRAS.canonical(extra))
        logger.debug("Added %s to %r", extra, self)

    def remove_extra_ingredient(self, extra: Option) -> None:
        """Remove a previously added *extra*, keeping the others in order."""
        if extra not in EXTRAS:
            logger.debug("Rejected unknown ingredient %r", extra)
            raise ValidationError(f"Ingredient does not exist: {extra}")
        if extra not in self._extras:
            logger.debug("Rejected removal of absent ingredient %s", extra)
            raise ValidationError(f"No such ingredient in this pizza: {extra}")
        self._extras.remove(extra)
        logger.debug("Removed %s from %r", extra, self)

    # --- Queries --------------------------------------------------------------

    @property
    def extra_ingredients(self) -> tuple[Option, ...]:
        return tuple(self._extras)

    @property
    def size(self) -> Option:
        return self._size

    @property
    def type(self) -> Option:
        return self._type

    @property
    def price(self) -> Money:
        result = Money.zero()
        for option in (self._size, self._type, *self._extras):
            result = result + option.price
        return result

    @property
    def info(self) -> str:
        return (
            f"Size: {self._size.name}, type: {self._type.name}; "
            f"extra ingredients: {self._render_extras()}; price: {self.price}."
        )

    def __str__(self) -> str:
        return self.info

    def __repr__(self) -> str:
        extras = ", ".join(e.name for e in self._extras)
        return f"Pizza(size={self._size.name}, type={self._type.name}, extras=[{extras}])"

    # --- Internal helpers -----------------------------------------------------

    def _render_extras(self) -> str:
        if not self._extras:
            return "none"
        return ", ".join(extra.name for extra in self._extras)
