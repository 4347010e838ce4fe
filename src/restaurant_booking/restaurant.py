"""
Single restaurant table allocation.

Tables keep the order they were declared in (that order is the table
numbering). Allocation is best fit: among the free tables that can seat the
party, the one with the smallest capacity wins and ties go to the lowest
table id. The availability listing uses the same order so the first table
listed is the one a reservation would take.
"""
from __future__ import annotations

import logging
import threading
from typing import Iterable, List, Optional, Union

from .errors import InvalidConfigurationError, NoAvailableTableError, NotOccupiedError, TableNotFoundError
from .models import (
    Reservation,
    Table,
    TableSnapshot,
    validate_holder_name,
    validate_party_size,
)

logger = logging.getLogger(__name__)


# ----------------------------- allocation helpers -----------------------------
def preference_key(table: Table) -> tuple[int, int]:
    """Sort key for allocation preference: smallest capacity, then lowest id."""
    return (table.capacity, table.id)


def best_fit(tables: Iterable[Table], party_size: int) -> Optional[Table]:
    """Return the preferred free table for ``party_size`` or ``None``."""
    best: Optional[Table] = None
    for table in tables:
        if not table.fits(party_size):
            continue
        if best is None or preference_key(table) < preference_key(best):
            best = table
    return best


# ----------------------------- model -----------------------------
class Restaurant:
    """A named restaurant owning an ordered collection of tables.

    Every method is safe to call from several threads. ``reserve_table`` and
    ``release`` find and mutate the table inside one critical section; the
    read methods copy a consistent snapshot and are advisory only.
    """

    def __init__(self, name: str, capacities: Iterable[int]) -> None:
        if not isinstance(name, str) or not name.strip():
            raise InvalidConfigurationError(f"Restaurant name must be a non-empty string, got {name!r}")
        self.name = name
        # Tables are numbered from 1 in declaration order.
        self._tables: List[Table] = [Table(id=i, capacity=c) for i, c in enumerate(capacities, start=1)]
        if not self._tables:
            raise InvalidConfigurationError(f"Restaurant {name!r} needs at least one table")
        self._by_id = {t.id: t for t in self._tables}
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        return f"Restaurant(name={self.name!r}, capacities={self.capacities})"

    @property
    def capacities(self) -> List[int]:
        return [t.capacity for t in self._tables]

    def __len__(self) -> int:
        return len(self._tables)

    # ----------------------------- reads -----------------------------
    def has_available_tables(self, party_size: int) -> bool:
        """Advisory check whether any free table can seat ``party_size``."""
        validate_party_size(party_size)
        with self._lock:
            return any(t.fits(party_size) for t in self._tables)

    def available_tables_info(self, party_size: int) -> List[TableSnapshot]:
        """Every free table able to seat the party, in allocation preference order."""
        validate_party_size(party_size)
        with self._lock:
            fitting = [t for t in self._tables if t.fits(party_size)]
            fitting.sort(key=preference_key)
            return [t.snapshot() for t in fitting]

    def describe(self) -> List[TableSnapshot]:
        """Current state of every table in declaration order."""
        with self._lock:
            return [t.snapshot() for t in self._tables]

    def reservations(self) -> List[Reservation]:
        with self._lock:
            return [t.reservation for t in self._tables if t.reservation is not None]

    # ----------------------------- mutations -----------------------------
    def try_reserve(self, party_size: int, holder_name: str) -> Optional[Reservation]:
        """Seat the party at the best fitting free table, or return ``None`` if nothing fits.

        The scan and the occupy step run under one lock, so two callers can
        never be handed the same table.
        """
        party_size = validate_party_size(party_size)
        holder_name = validate_holder_name(holder_name)
        with self._lock:
            table = best_fit(self._tables, party_size)
            if table is None:
                logger.info("%s: no free table for %d diners", self.name, party_size)
                return None
            reservation = table.occupy(holder_name, party_size, self.name)
        logger.info(
            "%s: reserved table %d (capacity %d) for %s, party of %d",
            self.name, table.id, table.capacity, holder_name, party_size,
        )
        return reservation

    def reserve_table(self, party_size: int, holder_name: str) -> Reservation:
        """Seat the party at the best fitting free table.

        Raises :class:`InvalidPartySizeError` for non positive sizes and
        :class:`NoAvailableTableError` when nothing fits, in which case no
        table is touched.
        """
        reservation = self.try_reserve(party_size, holder_name)
        if reservation is None:
            raise NoAvailableTableError(self.name, party_size)
        return reservation

    def release(self, target: Union[int, Reservation], strict: bool = True) -> Optional[Reservation]:
        """Free a table given its id or the reservation holding it.

        With ``strict`` (the default) releasing a free table, or passing a
        reservation that is no longer the table's live one, raises
        :class:`NotOccupiedError`. Without it those cases return ``None``.
        """
        if isinstance(target, Reservation):
            if target.restaurant_name != self.name:
                raise TableNotFoundError(self.name, target.table_id)
            table_id = target.table_id
        else:
            table_id = target
        table = self._by_id.get(table_id)
        if table is None:
            raise TableNotFoundError(self.name, table_id)

        with self._lock:
            live = table.reservation
            stale = isinstance(target, Reservation) and live is not None and live.reservation_id != target.reservation_id
            if live is None or stale:
                if strict:
                    raise NotOccupiedError(self.name, table_id)
                return None
            released = table.release()
        logger.info("%s: released table %d held by %s", self.name, table_id, released.holder_name)
        return released
