import pandas as pd
import pytest

from zoneplanner.core.entities.point import Point2D
from zoneplanner.core.entities.zone import Zone
from zoneplanner.infrastructure.io.csv_io import CsvOrderReader, zones_to_frame
from zoneplanner.infrastructure.io.solomon_reader import SolomonReader

SOLOMON = """C101

VEHICLE
NUMBER     CAPACITY
  25         200

CUSTOMER
CUST NO.  XCOORD.   YCOORD.    DEMAND   READY TIME  DUE DATE   SERVICE   TIME

    0      40         50          0          0       1236          0
    1      45         68         10        912        967         90
    2      45         70         30        825        870         90
    3      42         66         10         65        146         90
"""


def test_solomon_reader(tmp_path):
    path = tmp_path / "c101.txt"
    path.write_text(SOLOMON)
    reader = SolomonReader(str(path))

    orders, num_vehicles = reader.read()

    assert num_vehicles == 25
    assert reader.vehicle_capacity == 200.0
    assert reader.depot == Point2D(40.0, 50.0)
    assert orders == [Point2D(45.0, 68.0), Point2D(45.0, 70.0), Point2D(42.0, 66.0)]


def test_solomon_reader_without_vehicle_section(tmp_path):
    path = tmp_path / "broken.txt"
    path.write_text("C101\nCUSTOMER\n 0 1 2\n")

    with pytest.raises(ValueError, match="Vehicle information not found"):
        SolomonReader(str(path)).read()


def test_csv_reader_drops_rows_without_coordinates(tmp_path):
    path = tmp_path / "orders.csv"
    path.write_text("id,lon,lat\n1,1.5,2.5\n2,,3\n3,abc,4\n4,-7,8\n")

    orders = CsvOrderReader(str(path), x_column="lon", y_column="lat").read()

    assert orders == [Point2D(1.5, 2.5), Point2D(-7.0, 8.0)]


def test_csv_reader_missing_columns(tmp_path):
    path = tmp_path / "orders.csv"
    path.write_text("a,b\n1,2\n")

    with pytest.raises(ValueError, match="Missing coordinate columns"):
        CsvOrderReader(str(path)).read()


def test_zones_to_frame():
    polygon = [Point2D(0.0, 0.0), Point2D(1.0, 0.0), Point2D(0.0, 1.0), Point2D(0.0, 0.0)]
    zone = Zone(id=0, name="Zone 2", route_index=1, polygon=polygon, order_count=3)

    frame = zones_to_frame([zone])

    assert list(frame.columns) == ["zone_id", "name", "route_index", "vertex", "x", "y"]
    assert len(frame) == 4
    assert frame["vertex"].tolist() == [0, 1, 2, 3]
    assert frame.iloc[2]["y"] == 1.0
    assert (frame["name"] == "Zone 2").all()


def test_zones_to_frame_empty():
    frame = zones_to_frame([])

    assert isinstance(frame, pd.DataFrame)
    assert frame.empty
