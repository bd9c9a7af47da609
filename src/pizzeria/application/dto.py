"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class OptionDTO:
    """Output: one catalog entry as displayed to the user."""

    name: str
    price: str  # formatted, e.g. "50UAH"


@dataclass(frozen=True)
class PizzaDTO:
    """Output: a configured pizza as displayed to the user."""

    size: str
    type: str
    extras: list[str]
    price: str
    info: str
