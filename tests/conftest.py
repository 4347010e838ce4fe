import pathlib

import pytest

from restaurant_booking import BookingService, ChainConfig, build_chain

DATA_DIR = pathlib.Path(__file__).parent / "data"


@pytest.fixture
def data_dir():
    return DATA_DIR


@pytest.fixture
def gourmet_config():
    """Italian Bistro (5 tables), Sushi Palace (3 tables), Steak House (4 tables)."""
    return ChainConfig.from_pairs(
        "Gourmet Dining",
        [
            ("Italian Bistro", [2, 2, 4, 4, 6]),
            ("Sushi Palace", [2, 4, 4]),
            ("Steak House", [2, 4, 6, 8]),
        ],
    )


@pytest.fixture
def chain(gourmet_config):
    return build_chain(gourmet_config)


@pytest.fixture
def service(chain):
    return BookingService(chain)
