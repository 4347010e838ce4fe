"""CSV loading utilities."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import IO, Any, List, Optional

import pandas as pd

from .config import ChainConfig, RestaurantConfig
from .errors import InvalidConfigurationError
from .models import parse_capacities

DEFAULT_CHAIN_NAME = "Gourmet Dining"
DEFAULT_TABLE_CAPACITY = 4


@dataclass
class BookingRequest:
    """One row of a requests file."""

    holder_name: str
    restaurant: str
    party_size: int


def _require_columns(df: pd.DataFrame, required: List[str], label: str) -> None:
    missing = [col for col in required if col not in df.columns]
    if missing:
        raise InvalidConfigurationError(f"{label}: missing columns: {', '.join(missing)}")


def _read_csv(path: Path | str | IO[Any], label: str, **kwargs: Any) -> pd.DataFrame:
    try:
        return pd.read_csv(path, **kwargs)
    except (pd.errors.EmptyDataError, pd.errors.ParserError) as exc:
        raise InvalidConfigurationError(f"{label}: {exc}") from exc


def _is_blank(value: object) -> bool:
    return value is None or (isinstance(value, float) and pd.isna(value)) or not str(value).strip()


def load_chain_config(
    path: Path | str | IO[Any],
    chain_name: str = DEFAULT_CHAIN_NAME,
    max_restaurants: Optional[int] = None,
) -> ChainConfig:
    """Load restaurant definitions from ``restaurants.csv``.

    Each row names a restaurant and either lists its table capacities in a
    pipe separated ``capacities`` column (``2|2|4|4|6``) or gives a table
    count in ``tables`` together with a ``default_capacity`` for all of them.
    Row order is the chain's insertion order.
    """
    df = _read_csv(path, "restaurants file", dtype=str)
    _require_columns(df, ["restaurant"], "restaurants file")
    if "capacities" not in df.columns and "tables" not in df.columns:
        raise InvalidConfigurationError("restaurants file: needs a 'capacities' or 'tables' column")

    restaurants: List[RestaurantConfig] = []
    for idx, row in df.iterrows():
        name = row["restaurant"]
        if _is_blank(name):
            raise InvalidConfigurationError(f"restaurants file row {idx + 2}: empty restaurant name")
        name = str(name).strip()
        capacities = parse_capacities(row.get("capacities", ""))
        if not capacities and not _is_blank(row.get("tables")):
            # Fallback: N identical tables
            default = row.get("default_capacity")
            try:
                count = int(row["tables"])
                size = DEFAULT_TABLE_CAPACITY if _is_blank(default) else int(default)
            except ValueError:
                raise InvalidConfigurationError(
                    f"restaurants file row {idx + 2}: 'tables' and 'default_capacity' must be integers"
                ) from None
            capacities = [size] * count
        if not capacities:
            raise InvalidConfigurationError(f"restaurants file row {idx + 2}: {name!r} has no tables")
        restaurants.append(RestaurantConfig(name=name, capacities=capacities))

    return ChainConfig(name=chain_name, restaurants=restaurants, max_restaurants=max_restaurants)


def load_requests(path: Path | str | IO[Any]) -> List[BookingRequest]:
    """Load booking requests: ``holder_name,restaurant,party_size`` per row.

    Values are passed through as read so the engine reports bad party sizes
    itself; only a non numeric size is rejected here.
    """
    df = _read_csv(path, "requests file", dtype=str, keep_default_na=False)
    _require_columns(df, ["holder_name", "restaurant", "party_size"], "requests file")
    requests: List[BookingRequest] = []
    for idx, row in df.iterrows():
        try:
            party_size = int(str(row["party_size"]).strip())
        except ValueError:
            raise InvalidConfigurationError(
                f"requests file row {idx + 2}: party_size {row['party_size']!r} is not a number"
            ) from None
        requests.append(
            BookingRequest(
                holder_name=str(row["holder_name"]).strip(),
                restaurant=str(row["restaurant"]).strip(),
                party_size=party_size,
            )
        )
    return requests
