"""Restaurant chain: lookup, delegated reservations and overflow search."""
from __future__ import annotations

import logging
import threading
from typing import Dict, List, Optional, Union

from .errors import (
    ChainFullError,
    DuplicateRestaurantNameError,
    InvalidConfigurationError,
    NoAvailableTableError,
    RestaurantNotFoundError,
)
from .models import Reservation, TableRef, validate_party_size
from .restaurant import Restaurant

logger = logging.getLogger(__name__)


class Chain:
    """Named, insertion ordered collection of restaurants.

    The registry lock only guards membership changes. Reservations lock the
    restaurant they touch, so bookings at different restaurants never wait
    on each other.
    """

    def __init__(self, name: str, max_restaurants: Optional[int] = None) -> None:
        if not isinstance(name, str) or not name.strip():
            raise InvalidConfigurationError(f"Chain name must be a non-empty string, got {name!r}")
        if max_restaurants is not None and max_restaurants < 1:
            raise InvalidConfigurationError(f"max_restaurants must be at least 1, got {max_restaurants!r}")
        self.name = name
        self.max_restaurants = max_restaurants
        self._restaurants: Dict[str, Restaurant] = {}
        self._registry_lock = threading.Lock()

    def __repr__(self) -> str:
        return f"Chain(name={self.name!r}, restaurants={self.restaurant_names()})"

    def __len__(self) -> int:
        return len(self._restaurants)

    def __contains__(self, name: object) -> bool:
        return name in self._restaurants

    def _members(self) -> List[Restaurant]:
        with self._registry_lock:
            return list(self._restaurants.values())

    def add_restaurant(self, restaurant: Restaurant) -> None:
        with self._registry_lock:
            if restaurant.name in self._restaurants:
                raise DuplicateRestaurantNameError(restaurant.name)
            if self.max_restaurants is not None and len(self._restaurants) >= self.max_restaurants:
                raise ChainFullError(self.name, self.max_restaurants)
            self._restaurants[restaurant.name] = restaurant
        logger.debug("%s: added %r", self.name, restaurant)

    def get_restaurant(self, name: str) -> Restaurant:
        try:
            return self._restaurants[name]
        except KeyError:
            raise RestaurantNotFoundError(name, self.name) from None

    def restaurant_names(self) -> List[str]:
        return [r.name for r in self._members()]

    def reserve_restaurant(self, party_size: int, restaurant_name: str, holder_name: str) -> Reservation:
        return self.get_restaurant(restaurant_name).reserve_table(party_size, holder_name)

    def search_restaurant(self, party_size: int, exclude_name: Optional[str] = None) -> Optional[Restaurant]:
        """First restaurant, in insertion order, that currently has room.

        ``exclude_name`` is never returned. The answer is advisory: a later
        reservation against it may still lose the table to another caller.
        """
        validate_party_size(party_size)
        for restaurant in self._members():
            if restaurant.name == exclude_name:
                continue
            if restaurant.has_available_tables(party_size):
                logger.debug("%s: %s can seat %d", self.name, restaurant.name, party_size)
                return restaurant
        logger.info("%s: no alternative to %r for %d diners", self.name, exclude_name, party_size)
        return None

    def reserve_with_fallback(self, party_size: int, restaurant_name: str, holder_name: str) -> Reservation:
        """Reserve at ``restaurant_name`` or, if it is full, at the first sibling with room.

        Siblings are tried in insertion order. One that fills up between the
        availability check and the reservation is skipped like any full
        restaurant.
        """
        reservation = self.get_restaurant(restaurant_name).try_reserve(party_size, holder_name)
        if reservation is not None:
            return reservation
        for restaurant in self._members():
            if restaurant.name == restaurant_name or not restaurant.has_available_tables(party_size):
                continue
            reservation = restaurant.try_reserve(party_size, holder_name)
            if reservation is None:
                logger.info("%s: lost the last table at %s, trying next", self.name, restaurant.name)
                continue
            logger.warning(
                "%s: %s was full, seated %s at %s instead",
                self.name, restaurant_name, holder_name, restaurant.name,
            )
            return reservation
        raise NoAvailableTableError(None, party_size)

    def release(self, target: Union[Reservation, TableRef], strict: bool = True) -> Optional[Reservation]:
        """Free the table behind a reservation or a table reference."""
        restaurant = self.get_restaurant(target.restaurant_name)
        if isinstance(target, TableRef):
            return restaurant.release(target.table_id, strict=strict)
        return restaurant.release(target, strict=strict)

    def reservations(self) -> List[Reservation]:
        out: List[Reservation] = []
        for restaurant in self._members():
            out.extend(restaurant.reservations())
        return out
