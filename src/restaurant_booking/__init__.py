"""restaurant_booking package."""
from .models import Table, Reservation, TableRef, TableSnapshot
from .errors import (
    BookingError,
    InvalidConfigurationError,
    InvalidPartySizeError,
    InvalidHolderNameError,
    RestaurantNotFoundError,
    TableNotFoundError,
    DuplicateRestaurantNameError,
    ChainFullError,
    NoAvailableTableError,
    AlreadyOccupiedError,
    NotOccupiedError,
)
from .restaurant import Restaurant
from .chain import Chain
from .config import ChainConfig, RestaurantConfig, build_chain
from .csv_loader import load_chain_config, load_requests
from .service import BookingService, format_tables

__all__ = [
    "Table",
    "Reservation",
    "TableRef",
    "TableSnapshot",
    "BookingError",
    "InvalidConfigurationError",
    "InvalidPartySizeError",
    "InvalidHolderNameError",
    "RestaurantNotFoundError",
    "TableNotFoundError",
    "DuplicateRestaurantNameError",
    "ChainFullError",
    "NoAvailableTableError",
    "AlreadyOccupiedError",
    "NotOccupiedError",
    "Restaurant",
    "Chain",
    "ChainConfig",
    "RestaurantConfig",
    "build_chain",
    "load_chain_config",
    "load_requests",
    "BookingService",
    "format_tables",
]
