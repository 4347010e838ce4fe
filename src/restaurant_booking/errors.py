"""Exception hierarchy for restaurant_booking."""
from __future__ import annotations


class BookingError(Exception):
    """Base exception."""


class InvalidConfigurationError(BookingError, ValueError):
    """Chain or restaurant definition is structurally invalid."""


class InvalidPartySizeError(BookingError, ValueError):
    """Party size is not a positive integer."""

    def __init__(self, party_size: object) -> None:
        self.party_size = party_size
        super().__init__(f"Party size must be a positive integer, got {party_size!r}")


class InvalidHolderNameError(BookingError, ValueError):
    """Reservation holder name is empty."""

    def __init__(self, holder_name: object) -> None:
        self.holder_name = holder_name
        super().__init__(f"Reservation needs a holder name, got {holder_name!r}")


class RestaurantNotFoundError(BookingError, LookupError):
    """No restaurant with that name in the chain."""

    def __init__(self, name: str, chain_name: str | None = None) -> None:
        self.name = name
        self.chain_name = chain_name
        where = f" in chain {chain_name!r}" if chain_name else ""
        super().__init__(f"Unknown restaurant {name!r}{where}")


class TableNotFoundError(BookingError, LookupError):
    """No table with that id in the restaurant."""

    def __init__(self, restaurant_name: str, table_id: object) -> None:
        self.restaurant_name = restaurant_name
        self.table_id = table_id
        super().__init__(f"Restaurant {restaurant_name!r} has no table {table_id!r}")


class DuplicateRestaurantNameError(BookingError):
    """A restaurant with that name is already part of the chain."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Restaurant {name!r} is already part of the chain")


class ChainFullError(BookingError):
    """The chain already holds its maximum number of restaurants."""

    def __init__(self, chain_name: str, max_restaurants: int) -> None:
        self.chain_name = chain_name
        self.max_restaurants = max_restaurants
        super().__init__(f"Chain {chain_name!r} is limited to {max_restaurants} restaurants")


class NoAvailableTableError(BookingError):
    """No free table can seat the party."""

    def __init__(self, restaurant_name: str | None, party_size: int) -> None:
        self.restaurant_name = restaurant_name
        self.party_size = party_size
        where = f"at {restaurant_name!r}" if restaurant_name else "anywhere in the chain"
        super().__init__(f"No free table for {party_size} diners {where}")


class AlreadyOccupiedError(BookingError):
    """Table is already reserved."""

    def __init__(self, restaurant_name: str | None, table_id: int) -> None:
        self.restaurant_name = restaurant_name
        self.table_id = table_id
        super().__init__(f"Table {table_id} at {restaurant_name!r} is already reserved")


class NotOccupiedError(BookingError):
    """Table is free, or the reservation given is no longer the live one."""

    def __init__(self, restaurant_name: str | None, table_id: int) -> None:
        self.restaurant_name = restaurant_name
        self.table_id = table_id
        where = f" at {restaurant_name!r}" if restaurant_name else ""
        super().__init__(f"Table {table_id}{where} has no such live reservation")
