from hangar import ArmoredVehicle, Hangar
from hangar.reporting import OCCUPANCY_COLUMNS, build_occupancy_table, build_summary


def test_occupancy_table(make_vehicles, car):
    hangar = Hangar(640, 480)
    for vehicle in make_vehicles(4):
        hangar.add(vehicle)
    hangar.add(car)

    df = build_occupancy_table(hangar)
    assert list(df.columns) == OCCUPANCY_COLUMNS
    assert len(df) == 5
    assert df.loc[4, "type"] == "ArmoredCar"
    assert (df.loc[4, "row"], df.loc[4, "column"]) == (1, 1)
    assert (df.loc[4, "x"], df.loc[4, "y"]) == (220, 101)
    assert df["max_speed"].tolist()[:4] == [40, 41, 42, 43]


def test_occupancy_table_empty():
    df = build_occupancy_table(Hangar(640, 480))
    assert df.empty
    assert list(df.columns) == OCCUPANCY_COLUMNS


def test_summary():
    hangar = Hangar(640, 480)
    hangar.add(ArmoredVehicle(50, 10.0, "green"))

    assert build_summary(hangar) == {
        "max_count": 18,
        "occupied": 1,
        "free": 17,
        "occupancy_pct": 5.6,
    }
    assert build_summary(Hangar(0, 0))["occupancy_pct"] == 0.0
