# zoneplanner/core/entities/point.py
from dataclasses import dataclass
import numpy as np


@dataclass(frozen=True)
class Point2D:
    """
    Immutable planar coordinate (an order location or a hull vertex).
    """

    x: float
    y: float

    def distance_to(self, other: "Point2D") -> float:
        """Calculate Euclidean distance to another point."""
        return float(np.sqrt((self.x - other.x) ** 2 + (self.y - other.y) ** 2))

    def coordinates(self) -> np.ndarray:
        """Return coordinates as a NumPy array."""
        return np.array([self.x, self.y])

    def precedes(self, other: "Point2D") -> bool:
        """Lexicographic (x, y) ordering used by the hull sort."""
        return self.x < other.x or (self.x == other.x and self.y < other.y)


# Hull construction only needs bare coordinates.
HullPoint = Point2D


def orient(a: Point2D, b: Point2D, c: Point2D) -> float:
    """
    Twice the signed area of triangle (a, b, c).

    Positive when c lies left of the directed line a->b, negative when it lies
    to the right, zero when the three points are collinear.
    """
    return a.x * (b.y - c.y) + b.x * (c.y - a.y) + c.x * (a.y - b.y)
