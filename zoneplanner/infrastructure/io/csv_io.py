# zoneplanner/infrastructure/io/csv_io.py
from typing import List
import pandas as pd
from zoneplanner.core.entities.point import Point2D


class CsvOrderReader:
    """
    Reads order locations from a CSV file with one row per order.
    """

    def __init__(self, file_path: str, x_column: str = "x", y_column: str = "y"):
        """
        Initialize the CSV order reader.

        Args:
            file_path: Path to the CSV file.
            x_column: Name of the column holding the x coordinate (e.g. longitude).
            y_column: Name of the column holding the y coordinate (e.g. latitude).
        """
        self.file_path = file_path
        self.x_column = x_column
        self.y_column = y_column

    def read(self) -> List[Point2D]:
        """
        Read order locations, dropping rows without usable coordinates.

        Returns:
            Order locations in file order.
        """
        df = pd.read_csv(self.file_path)

        missing = [c for c in (self.x_column, self.y_column) if c not in df.columns]
        if missing:
            raise ValueError(f"Missing coordinate columns in {self.file_path}: {missing}")

        coords = df[[self.x_column, self.y_column]].apply(pd.to_numeric, errors="coerce")
        coords = coords.dropna()

        return [
            Point2D(x=float(row[self.x_column]), y=float(row[self.y_column]))
            for _, row in coords.iterrows()
        ]


def zones_to_frame(zones) -> pd.DataFrame:
    """
    Flatten zone polygons into one row per vertex.

    Columns: zone_id, name, route_index, vertex, x, y.
    """
    rows = []
    for zone in zones:
        for vertex, point in enumerate(zone.polygon):
            rows.append(
                {
                    "zone_id": zone.id,
                    "name": zone.name,
                    "route_index": zone.route_index,
                    "vertex": vertex,
                    "x": point.x,
                    "y": point.y,
                }
            )
    return pd.DataFrame(rows, columns=["zone_id", "name", "route_index", "vertex", "x", "y"])
