"""Data models for restaurant_booking."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from itertools import count
from numbers import Integral
from typing import List, Optional
import math

from .errors import (
    AlreadyOccupiedError,
    InvalidConfigurationError,
    InvalidHolderNameError,
    InvalidPartySizeError,
    NotOccupiedError,
)

_reservation_ids = count(1)


def parse_pipe_list(value: object) -> List[str]:
    """Split a pipe separated string into a list.

    Empty values such as ``""`` or ``None`` return an empty list.
    ``pandas`` often provides ``float('nan')`` for missing values which is
    also treated as empty.
    """
    if value is None:
        return []
    if isinstance(value, float) and math.isnan(value):
        return []
    text = str(value).strip()
    if not text or text.lower() == "nan":
        return []
    return [part.strip() for part in text.split("|") if part.strip()]


def parse_capacities(value: object) -> List[int]:
    """Parse a pipe separated capacity column such as ``"2|2|4|4|6"``."""
    capacities = []
    for part in parse_pipe_list(value):
        try:
            capacities.append(int(part))
        except ValueError:
            raise InvalidConfigurationError(f"Table capacity is not an integer: {part!r}") from None
    return capacities


def is_count(value: object) -> bool:
    """True for integers of any flavour (numpy included), but not bool."""
    return isinstance(value, Integral) and not isinstance(value, bool)


def validate_party_size(party_size: object) -> int:
    if not is_count(party_size) or party_size <= 0:
        raise InvalidPartySizeError(party_size)
    return int(party_size)


def validate_holder_name(holder_name: object) -> str:
    if not isinstance(holder_name, str) or not holder_name.strip():
        raise InvalidHolderNameError(holder_name)
    return holder_name.strip()


@dataclass(frozen=True)
class Reservation:
    """Committed outcome of a successful table allocation."""

    holder_name: str
    party_size: int
    table_id: int
    restaurant_name: str
    reservation_id: int = field(default_factory=lambda: next(_reservation_ids))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc), compare=False)


@dataclass(frozen=True)
class TableRef:
    """Address of a table inside a chain."""

    restaurant_name: str
    table_id: int


@dataclass(frozen=True)
class TableSnapshot:
    """Point-in-time view of one table, safe to hand to other threads."""

    table_id: int
    capacity: int
    occupied: bool
    holder_name: Optional[str] = None
    party_size: Optional[int] = None

    def as_dict(self) -> dict:
        return {
            "table": self.table_id,
            "capacity": self.capacity,
            "occupied": self.occupied,
            "holder": self.holder_name or "",
            "party_size": self.party_size or 0,
        }


@dataclass
class Table:
    """A single seating unit.

    A table is occupied exactly when it holds a live reservation, so the
    occupancy flag can never drift from the reservation bookkeeping.
    Tables are not thread safe on their own; the owning restaurant
    serialises access.
    """

    id: int
    capacity: int
    reservation: Optional[Reservation] = None

    def __post_init__(self) -> None:
        if not is_count(self.capacity) or self.capacity < 1:
            raise InvalidConfigurationError(
                f"Table {self.id} must seat at least one diner, got capacity {self.capacity!r}"
            )
        self.capacity = int(self.capacity)

    @property
    def occupied(self) -> bool:
        return self.reservation is not None

    def fits(self, party_size: int) -> bool:
        return not self.occupied and self.capacity >= party_size

    def occupy(self, holder_name: str, party_size: int, restaurant_name: str) -> Reservation:
        """Mark the table reserved and return the new reservation."""
        if self.occupied:
            raise AlreadyOccupiedError(restaurant_name, self.id)
        self.reservation = Reservation(
            holder_name=holder_name,
            party_size=party_size,
            table_id=self.id,
            restaurant_name=restaurant_name,
        )
        return self.reservation

    def release(self, strict: bool = False) -> Optional[Reservation]:
        """Free the table and return the reservation that held it.

        Releasing a free table is a no-op returning ``None`` unless
        ``strict`` is set, in which case :class:`NotOccupiedError` is raised.
        """
        if self.reservation is None:
            if strict:
                raise NotOccupiedError(None, self.id)
            return None
        released, self.reservation = self.reservation, None
        return released

    def snapshot(self) -> TableSnapshot:
        r = self.reservation
        return TableSnapshot(
            table_id=self.id,
            capacity=self.capacity,
            occupied=r is not None,
            holder_name=r.holder_name if r else None,
            party_size=r.party_size if r else None,
        )
