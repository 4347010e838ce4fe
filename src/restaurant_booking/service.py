"""Facade used by front ends to query and book tables across a chain."""
from __future__ import annotations

from typing import List, Optional, Sequence, Union

import pandas as pd

from .chain import Chain
from .config import ChainConfig, build_chain
from .models import Reservation, TableRef, TableSnapshot


SNAPSHOT_COLUMNS = ["table", "capacity", "occupied", "holder", "party_size"]


def snapshots_to_frame(snapshots: Sequence[TableSnapshot]) -> pd.DataFrame:
    return pd.DataFrame([s.as_dict() for s in snapshots], columns=SNAPSHOT_COLUMNS)


def format_tables(snapshots: Sequence[TableSnapshot]) -> str:
    """Render table snapshots as a plain text table."""
    if not snapshots:
        return "(no tables)"
    df = snapshots_to_frame(snapshots)
    df["occupied"] = df["occupied"].map({True: "reserved", False: "free"})
    df["party_size"] = df["party_size"].map(lambda n: str(n) if n else "")
    return df.rename(columns={"occupied": "state"}).to_string(index=False)


class BookingService:
    """Everything a presentation layer needs, and nothing it should not touch.

    Errors surface as :class:`~restaurant_booking.errors.BookingError`
    subclasses; a missing alternative is ``None``.
    """

    def __init__(self, chain: Chain) -> None:
        self.chain = chain

    @classmethod
    def from_config(cls, config: ChainConfig) -> "BookingService":
        return cls(build_chain(config))

    def list_restaurant_names(self) -> List[str]:
        return self.chain.restaurant_names()

    def describe_restaurant(self, name: str) -> List[TableSnapshot]:
        return self.chain.get_restaurant(name).describe()

    def check_availability(self, name: str, party_size: int) -> bool:
        return self.chain.get_restaurant(name).has_available_tables(party_size)

    def available_tables_info(self, name: str, party_size: int) -> List[TableSnapshot]:
        return self.chain.get_restaurant(name).available_tables_info(party_size)

    def reserve(self, name: str, party_size: int, holder_name: str) -> Reservation:
        return self.chain.reserve_restaurant(party_size, name, holder_name)

    def reserve_with_fallback(self, name: str, party_size: int, holder_name: str) -> Reservation:
        """Reserve at ``name`` or at the first other restaurant with room."""
        return self.chain.reserve_with_fallback(party_size, name, holder_name)

    def find_alternative(self, exclude_name: str, party_size: int) -> Optional[str]:
        restaurant = self.chain.search_restaurant(party_size, exclude_name)
        return restaurant.name if restaurant is not None else None

    def release(self, target: Union[Reservation, TableRef]) -> Reservation:
        return self.chain.release(target, strict=True)

    def reservations(self) -> List[Reservation]:
        return self.chain.reservations()
