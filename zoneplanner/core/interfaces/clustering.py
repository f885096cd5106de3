# zoneplanner/core/interfaces/clustering.py
from typing import Protocol, Sequence
from zoneplanner.core.entities.point import HullPoint
from zoneplanner.core.entities.cluster import WeightedPoint, ClusteringResult
from zoneplanner.core.entities.zone import Polygon


class RandomSource(Protocol):
    """
    Source of randomness for centroid seeding.

    ``random.Random`` satisfies this protocol; tests substitute scripted sources.
    """

    def randrange(self, stop: int) -> int:
        """Return a uniformly chosen integer in [0, stop)."""
        ...

    def random(self) -> float:
        """Return a uniformly chosen float in [0, 1)."""
        ...


class ClusteringAlgorithm(Protocol):
    """
    Protocol defining the order clustering behavior.

    Inspired by:
    Arthur, D. & Vassilvitskii, S. (2007), "k-means++: The Advantages of Careful Seeding",
    SODA '07, pp. 1027-1035 (seeding); Lloyd, S. (1982), "Least squares quantization in PCM" (refinement).
    """

    def cluster(self, points: Sequence[WeightedPoint], k: int) -> ClusteringResult:
        """
        Partition points into k groups.

        Args:
            points: Points to cluster. Their ``cluster_id`` is updated in place.
            k: Number of clusters (routes).

        Returns:
            A ClusteringResult with the final centroids and the number of
            refinement passes executed.
        """
        ...


class HullAlgorithm(Protocol):
    """
    Protocol for building a zone polygon around a cluster of points.

    Inspired by:
    Andrew, A.M. (1979), "Another efficient algorithm for convex hulls in two dimensions",
    Information Processing Letters, 9(5), pp. 216-219.
    """

    def build(self, points: Sequence[HullPoint]) -> Polygon:
        """
        Build a closed convex polygon enclosing the points.

        Args:
            points: At least three points.

        Returns:
            The polygon vertices with the first vertex repeated at the end.
        """
        ...

