# zoneplanner/services/zoning/convex_hull.py
from typing import List, Sequence
import numpy as np
from zoneplanner.core.entities.point import HullPoint, orient
from zoneplanner.core.entities.zone import Polygon
from zoneplanner.core.exceptions import PreconditionViolation
from zoneplanner.services.zoning.hull_ring import HullRing


class ConvexHullBuilder:
    """
    Builds a slightly inflated convex polygon around a cluster of points.

    The points are split by the line joining the lexicographically smallest and
    largest points into a lower and an upper chain. Each chain is kept as a
    circular doubly-linked ring and made convex by a Graham-scan pass, then the
    two are joined and pushed outward from their centroid.

    The vertex order is clockwise for non-degenerate input; no winding
    normalization is performed.

    Based on:
    Andrew, A.M. (1979), "Another efficient algorithm for convex hulls in two dimensions",
    Information Processing Letters, 9(5), pp. 216-219.
    """

    def __init__(self, inflation: float = 0.01, centroid_includes_closing_vertex: bool = True):
        """
        Initialize the hull builder.

        Args:
            inflation: Fraction of each vertex's distance to the centroid by which
                       it is pushed outward.
            centroid_includes_closing_vertex: Whether the repeated closing vertex
                       takes part in the centroid average used for inflation.
        """
        self.inflation = inflation
        self.centroid_includes_closing_vertex = centroid_includes_closing_vertex

    def build(self, points: Sequence[HullPoint]) -> Polygon:
        """
        Build the closed, inflated hull polygon of the points.

        Args:
            points: At least three points.

        Returns:
            Polygon vertices with the first vertex repeated as the last one.
        """
        return self.inflate(self.hull(points))

    def hull(self, points: Sequence[HullPoint]) -> Polygon:
        """
        Build the closed hull polygon without inflation.

        Args:
            points: At least three points.

        Returns:
            Polygon vertices with the first vertex repeated as the last one.
        """
        if len(points) < 3:
            raise PreconditionViolation(
                f"A zone polygon needs at least 3 points, got {len(points)}"
            )

        ordered = list(points)
        quicksort(ordered, 0, len(ordered) - 1)

        left, right = ordered[0], ordered[-1]

        ring = HullRing()
        lower = ring.new_node(left)
        upper = ring.new_node(left)
        upper_tail = upper

        for point in ordered:
            side = orient(left, right, point)
            if side > 0:
                upper_tail = ring.insert_after(upper_tail, point)
            elif side < 0:
                lower = ring.insert_before(lower, point)

        # Lower ring runs right -> ... -> left, upper ring runs left -> ... -> right
        lower = ring.insert_before(lower, right)
        ring.insert_after(upper_tail, right)

        self._make_convex(ring, lower)
        self._make_convex(ring, upper)

        # Both rings hold their own copy of the anchors; keep one of each
        lower_last = ring.prev[lower]
        if lower_last != lower and ring.points[lower_last] == ring.points[upper]:
            ring.remove(lower_last)

        upper_last = ring.prev[upper]
        if upper_last != upper and ring.points[upper_last] == ring.points[lower]:
            ring.remove(upper_last)

        polygon = ring.ring_points(lower) + ring.ring_points(upper)
        polygon.append(polygon[0])
        return polygon

    def inflate(self, polygon: Polygon) -> Polygon:
        """
        Push every vertex of a closed polygon away from the polygon centroid.

        Args:
            polygon: Closed polygon (first vertex repeated last).

        Returns:
            A new closed polygon.
        """
        coords = np.array([[p.x, p.y] for p in polygon], dtype=float)
        averaged = coords if self.centroid_includes_closing_vertex else coords[:-1]
        centroid = averaged.mean(axis=0)

        inflated = coords + (coords - centroid) * self.inflation
        return [HullPoint(float(x), float(y)) for x, y in inflated]

    @staticmethod
    def _make_convex(ring: HullRing, start: int) -> None:
        """
        Splice non-convex nodes out of the ring that begins at ``start``.

        A triple (a, b, c) is kept when ``orient(a, b, c) < 0``; otherwise ``b``
        is removed and the scan backs up one node. ``start`` and its predecessor
        are the chain anchors and are never removed.
        """
        end = ring.prev[start]
        node = start
        finished = False

        while ring.next[node] != start or not finished:
            middle = ring.next[node]
            if middle == end:
                finished = True

            third = ring.next[middle]
            if middle in (start, end) or orient(
                ring.points[node], ring.points[middle], ring.points[third]
            ) < 0:
                node = middle
            else:
                ring.remove(middle)
                node = ring.prev[node]


def quicksort(points: List[HullPoint], start: int, end: int) -> None:
    """
    Sort ``points[start:end + 1]`` in place by (x, y).

    Hoare partitioning around the middle position; the order among equal points
    is unspecified.
    """
    while start < end:
        i, j = start, end
        pivot = points[(i + j) // 2]

        while i <= j:
            while points[i].precedes(pivot):
                i += 1
            while pivot.precedes(points[j]):
                j -= 1
            if i <= j:
                points[i], points[j] = points[j], points[i]
                i += 1
                j -= 1

        # Recurse into the smaller part to bound the stack depth
        if j - start < end - i:
            quicksort(points, start, j)
            start = i
        else:
            quicksort(points, i, end)
            end = j
