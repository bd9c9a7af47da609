"""Catalogs of allowed sizes, types and extra ingredients.

The three catalogs are process-wide constants. They are built once at
import time and shared by every Pizza; nothing mutates them afterwards.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from pizzeria.domain.exceptions import EntityNotFoundError, ValidationError
from pizzeria.domain.model.value_objects import (
    DEFAULT_CURRENCY,
    Money,
    Option,
    OptionKind,
)


class Catalog:
    """A closed, ordered set of Options of a single kind.

    Membership is a hash lookup on the (frozen) Option value.
    """

    def __init__(self, kind: OptionKind, options: Iterable[Option]) -> None:
        self._kind = kind
        self._options: tuple[Option, ...] = tuple(options)
        self._by_name: dict[str, Option] = {}

        for option in self._options:
            if not isinstance(option, Option):
                raise ValidationError(
                    f"Catalog entries must be Options, got {type(option).__name__}"
                )
            if option.kind != kind:
                raise ValidationError(
                    f"Option {option.name} is a {option.kind.value}, "
                    f"not a {kind.value}"
                )
            key = option.name.upper()
            if key in self._by_name:
                raise ValidationError(
                    f"Duplicate {kind.value} option name: {option.name}"
                )
            self._by_name[key] = option

        self._members: dict[Option, Option] = {o: o for o in self._options}

    @property
    def kind(self) -> OptionKind:
        return self._kind

    def get(self, name: str) -> Option:
        """Return the option called *name* (case-insensitive)."""
        option = self._by_name.get(name.strip().upper())
        if option is None:
            allowed = ", ".join(o.name for o in self._options)
            raise EntityNotFoundError(
                f"Unknown {self._kind.value.lower()} '{name}' (choose from {allowed})"
            )
        return option

    def canonical(self, option: Option) -> Option:
        """Return the catalog's own entry equal to *option*."""
        try:
            return self._members[option]
        except (KeyError, TypeError):
            raise ValidationError(
                f"{option!r} is not in the {self._kind.value} catalog"
            ) from None

    def __contains__(self, item: object) -> bool:
        try:
            return item in self._members
        except TypeError:  # unhashable
            return False

    def __iter__(self) -> Iterator[Option]:
        return iter(self._options)

    def __len__(self) -> int:
        return len(self._options)

    def __repr__(self) -> str:
        names = ", ".join(o.name for o in self._options)
        return f"Catalog({self._kind.value}: {names})"


# ---------------------------------------------------------------------------
# Reference data
# ---------------------------------------------------------------------------
CURRENCY = DEFAULT_CURRENCY

SIZE_S = Option(OptionKind.SIZE, "SMALL", Money.of(50))
SIZE_M = Option(OptionKind.SIZE, "MEDIUM", Money.of(75))
SIZE_L = Option(OptionKind.SIZE, "LARGE", Money.of(100))

TYPE_VEGGIE = Option(OptionKind.TYPE, "VEGGIE", Money.of(50))
TYPE_MARGHERITA = Option(OptionKind.TYPE, "MARGHERITA", Money.of(60))
TYPE_PEPPERONI = Option(OptionKind.TYPE, "PEPPERONI", Money.of(70))

EXTRA_TOMATOES = Option(OptionKind.EXTRA, "TOMATOES", Money.of(5))
EXTRA_CHEESE = Option(OptionKind.EXTRA, "CHEESE", Money.of(7))
EXTRA_MEAT = Option(OptionKind.EXTRA, "MEAT", Money.of(9))

SIZES = Catalog(OptionKind.SIZE, [SIZE_S, SIZE_M, SIZE_L])
TYPES = Catalog(OptionKind.TYPE, [TYPE_VEGGIE, TYPE_MARGHERITA, TYPE_PEPPERONI])
EXTRAS = Catalog(OptionKind.EXTRA, [EXTRA_TOMATOES, EXTRA_CHEESE, EXTRA_MEAT])
