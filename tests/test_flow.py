import csv
import io

import pytest

from restaurant_booking import cli, csv_loader
from restaurant_booking.config import build_chain
from restaurant_booking.errors import InvalidConfigurationError


def test_load_chain_config(data_dir):
    config = csv_loader.load_chain_config(data_dir / "restaurants.csv")
    assert config.name == "Gourmet Dining"
    assert [r.name for r in config.restaurants] == ["Italian Bistro", "Sushi Palace", "Steak House"]
    assert config.restaurants[0].capacities == [2, 2, 4, 4, 6]


def test_load_chain_config_from_table_counts(data_dir):
    config = csv_loader.load_chain_config(data_dir / "restaurants_counts.csv", chain_name="Other")
    chain = build_chain(config)
    assert chain.name == "Other"
    assert chain.get_restaurant("Italian Bistro").capacities == [4] * 5
    assert chain.get_restaurant("Sushi Palace").capacities == [csv_loader.DEFAULT_TABLE_CAPACITY] * 3
    assert chain.get_restaurant("Steak House").capacities == [6] * 4


@pytest.mark.parametrize("content", [
    "name,capacities\nA,2|4\n",
    "restaurant\nA\n",
    "restaurant,capacities\nA,\n",
    "restaurant,capacities\nA,2|zero\n",
    "restaurant,capacities\n,2|4\n",
])
def test_load_chain_config_rejects_bad_files(content):
    with pytest.raises(InvalidConfigurationError):
        csv_loader.load_chain_config(io.StringIO(content))


def test_zero_capacity_fails_at_build_time():
    config = csv_loader.load_chain_config(io.StringIO("restaurant,capacities\nA,2|0\n"))
    with pytest.raises(InvalidConfigurationError):
        build_chain(config)


def test_load_requests(data_dir):
    requests = csv_loader.load_requests(data_dir / "requests.csv")
    assert len(requests) == 8
    assert requests[0] == csv_loader.BookingRequest("Ana", "Sushi Palace", 3)
    with pytest.raises(InvalidConfigurationError):
        csv_loader.load_requests(io.StringIO("holder_name,restaurant,party_size\nAna,X,three\n"))


def test_full_flow(data_dir, tmp_path, capsys):
    out_res = tmp_path / "out" / "reservations.csv"
    out_rep = tmp_path / "out" / "report.csv"
    code = cli.main([
        "--restaurants", str(data_dir / "restaurants.csv"),
        "--requests", str(data_dir / "requests.csv"),
        "--out-reservations", str(out_res),
        "--out-report", str(out_rep),
    ])
    assert code == cli.EXIT_OK
    lines = capsys.readouterr().out.splitlines()
    assert lines[:8] == [
        "Ana,Sushi Palace,3 -> Sushi Palace table 2",
        "Ben,Sushi Palace,4 -> Sushi Palace table 3",
        "Carla,Sushi Palace,2 -> Sushi Palace table 1",
        "Dario,Sushi Palace,3 -> Italian Bistro table 3 (alternative)",
        "Elena,Italian Bistro,6 -> Italian Bistro table 5",
        "Fabio,Italian Bistro,7 -> Steak House table 4 (alternative)",
        "Gus,Steak House,8 -> FULL",
        "Hana,Steak House,9 -> FULL",
    ]
    assert "[REPORT] Sushi Palace reserved=3/3 diners=9/10" in lines

    with out_res.open() as f:
        rows = list(csv.DictReader(f))
    assert [(r["holder"], r["restaurant"], r["table"]) for r in rows] == [
        ("Dario", "Italian Bistro", "3"),
        ("Elena", "Italian Bistro", "5"),
        ("Carla", "Sushi Palace", "1"),
        ("Ana", "Sushi Palace", "2"),
        ("Ben", "Sushi Palace", "3"),
        ("Fabio", "Steak House", "4"),
    ]

    with out_rep.open() as f:
        report = {r["restaurant"]: r for r in csv.DictReader(f)}
    assert report["Italian Bistro"]["reserved"] == "2"
    assert report["Steak House"]["diners"] == "7"


def test_no_alternatives(data_dir, capsys):
    code = cli.main([
        "--restaurants", str(data_dir / "restaurants.csv"),
        "--requests", str(data_dir / "requests.csv"),
        "--no-alternatives",
    ])
    assert code == cli.EXIT_OK
    out = capsys.readouterr().out
    assert "Dario,Sushi Palace,3 -> FULL" in out
    assert "(alternative)" not in out


def test_bad_request_is_reported_not_fatal(tmp_path, data_dir, capsys):
    requests = tmp_path / "requests.csv"
    requests.write_text("holder_name,restaurant,party_size\nAna,Taco Shack,2\nBen,Sushi Palace,0\n")
    code = cli.main(["--restaurants", str(data_dir / "restaurants.csv"), "--requests", str(requests)])
    assert code == cli.EXIT_OK
    out = capsys.readouterr().out
    assert "Ana,Taco Shack,2 -> ERROR" in out
    assert "Ben,Sushi Palace,0 -> ERROR" in out


def test_config_errors_exit_with_code(tmp_path, capsys):
    bad = tmp_path / "restaurants.csv"
    bad.write_text("restaurant,capacities\nA,2\nA,4\n")
    assert cli.main(["--restaurants", str(bad)]) == cli.EXIT_CONFIG
    assert "already part of the chain" in capsys.readouterr().err

    ok = tmp_path / "ok.csv"
    ok.write_text("restaurant,capacities\nA,2\nB,4\n")
    assert cli.main(["--restaurants", str(ok), "--max-restaurants", "1"]) == cli.EXIT_CONFIG


def test_missing_input_file_exits_with_code(tmp_path, data_dir, capsys):
    assert cli.main(["--restaurants", str(tmp_path / "nope.csv")]) == cli.EXIT_CONFIG
    assert cli.main([
        "--restaurants", str(data_dir / "restaurants.csv"),
        "--requests", str(tmp_path / "nope.csv"),
    ]) == cli.EXIT_CONFIG
    assert "error:" in capsys.readouterr().err


def test_empty_input_file_exits_with_code(tmp_path, data_dir, capsys):
    empty = tmp_path / "empty.csv"
    empty.write_text("")
    assert cli.main(["--restaurants", str(empty)]) == cli.EXIT_CONFIG
    assert cli.main([
        "--restaurants", str(data_dir / "restaurants.csv"),
        "--requests", str(empty),
    ]) == cli.EXIT_CONFIG
    assert "requests file" in capsys.readouterr().err


def test_malformed_input_file_exits_with_code(tmp_path, capsys):
    bad = tmp_path / "restaurants.csv"
    bad.write_text("restaurant,capacities\nA,2|4\nB,2,4,6\n")
    assert cli.main(["--restaurants", str(bad)]) == cli.EXIT_CONFIG
    assert "restaurants file" in capsys.readouterr().err


@pytest.mark.parametrize("content", ["", "restaurant,capacities\nA,2\nB,2,4,6\n"])
def test_loaders_wrap_unreadable_csv(content):
    with pytest.raises(InvalidConfigurationError):
        csv_loader.load_chain_config(io.StringIO(content))
    with pytest.raises(InvalidConfigurationError):
        csv_loader.load_requests(io.StringIO(content.replace("restaurant,capacities", "holder_name,restaurant,party_size")))
