import pytest

from restaurant_booking.errors import (
    AlreadyOccupiedError,
    InvalidConfigurationError,
    InvalidPartySizeError,
    NotOccupiedError,
)
from restaurant_booking.models import Table, parse_capacities, parse_pipe_list, validate_party_size


def test_parse_pipe_list_handles_missing_values():
    assert parse_pipe_list(None) == []
    assert parse_pipe_list(float("nan")) == []
    assert parse_pipe_list(" 2 | 4 ||6 ") == ["2", "4", "6"]


def test_parse_capacities_rejects_non_integers():
    assert parse_capacities("2|2|4") == [2, 2, 4]
    with pytest.raises(InvalidConfigurationError):
        parse_capacities("2|four")


@pytest.mark.parametrize("capacity", [0, -3, "4", True])
def test_table_rejects_bad_capacity(capacity):
    with pytest.raises(InvalidConfigurationError):
        Table(id=1, capacity=capacity)


def test_fits_requires_free_table_with_enough_seats():
    table = Table(id=1, capacity=4)
    assert table.fits(4)
    assert table.fits(1)
    assert not table.fits(5)
    table.occupy("Ana", 2, "Sushi Palace")
    assert not table.fits(1)


def test_occupy_creates_reservation_bound_to_table():
    table = Table(id=7, capacity=4)
    reservation = table.occupy("Ana", 3, "Sushi Palace")
    assert table.occupied
    assert table.reservation is reservation
    assert reservation.table_id == 7
    assert reservation.restaurant_name == "Sushi Palace"
    assert reservation.holder_name == "Ana"
    assert reservation.party_size == 3

    with pytest.raises(AlreadyOccupiedError):
        table.occupy("Ben", 2, "Sushi Palace")
    assert table.reservation is reservation


def test_release_is_idempotent_unless_strict():
    table = Table(id=1, capacity=2)
    reservation = table.occupy("Ana", 2, "Sushi Palace")
    assert table.release() is reservation
    assert not table.occupied
    assert table.release() is None
    with pytest.raises(NotOccupiedError):
        table.release(strict=True)


def test_reservation_ids_are_unique():
    a = Table(id=1, capacity=2).occupy("Ana", 2, "X")
    b = Table(id=1, capacity=2).occupy("Ana", 2, "X")
    assert a.reservation_id != b.reservation_id
    assert a != b


def test_snapshot_reflects_state():
    table = Table(id=3, capacity=6)
    assert table.snapshot().occupied is False
    table.occupy("Ana", 5, "X")
    snap = table.snapshot()
    assert (snap.table_id, snap.capacity, snap.occupied, snap.holder_name, snap.party_size) == (3, 6, True, "Ana", 5)


def test_numpy_integers_are_accepted():
    np = pytest.importorskip("numpy")
    table = Table(id=1, capacity=np.int64(4))
    assert type(table.capacity) is int
    reservation = table.occupy("Ana", validate_party_size(np.int64(3)), "X")
    assert type(reservation.party_size) is int
    with pytest.raises(InvalidPartySizeError):
        validate_party_size(np.int64(0))
