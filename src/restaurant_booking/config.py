"""Explicit chain configuration and the builder that turns it into a Chain."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Tuple

from .chain import Chain
from .errors import InvalidConfigurationError
from .restaurant import Restaurant


@dataclass
class RestaurantConfig:
    """One restaurant: its name and the capacity of each table in numbering order."""

    name: str
    capacities: List[int] = field(default_factory=list)


@dataclass
class ChainConfig:
    """Chain definition passed to :func:`build_chain`."""

    name: str
    restaurants: List[RestaurantConfig] = field(default_factory=list)
    max_restaurants: Optional[int] = None

    @classmethod
    def from_pairs(
        cls,
        name: str,
        pairs: Iterable[Tuple[str, Sequence[int]]],
        max_restaurants: Optional[int] = None,
    ) -> "ChainConfig":
        """Shorthand: ``ChainConfig.from_pairs("X", [("A", [2, 4]), ...])``."""
        return cls(
            name=name,
            restaurants=[RestaurantConfig(n, list(c)) for n, c in pairs],
            max_restaurants=max_restaurants,
        )


def build_chain(config: ChainConfig) -> Chain:
    """Build a chain, failing fast on any structurally invalid entry."""
    if not config.restaurants:
        raise InvalidConfigurationError(f"Chain {config.name!r} has no restaurants")
    chain = Chain(config.name, max_restaurants=config.max_restaurants)
    for rc in config.restaurants:
        chain.add_restaurant(Restaurant(rc.name, rc.capacities))
    return chain
