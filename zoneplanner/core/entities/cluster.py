# zoneplanner/core/entities/cluster.py
from dataclasses import dataclass, field
from typing import List, Sequence
import numpy as np
from .point import Point2D


@dataclass
class WeightedPoint:
    """
    An order location together with its currently assigned cluster.

    Only the clusterer mutates ``cluster_id``; every point starts in cluster 0.
    """

    location: Point2D
    cluster_id: int = 0


@dataclass
class Centroid:
    """
    Current representative point of a cluster and its population.

    A centroid with ``member_count == 0`` keeps the last location it had.
    """

    location: Point2D
    cluster_id: int
    member_count: int = 0


@dataclass
class ClusteringResult:
    """
    Output of one clustering run.
    """

    points: List[WeightedPoint]
    centroids: List[Centroid] = field(default_factory=list)
    iterations: int = 0

    @property
    def labels(self) -> np.ndarray:
        """Cluster label of every input point, in input order."""
        return np.array([p.cluster_id for p in self.points], dtype=int)

    @property
    def n_clusters(self) -> int:
        return len(self.centroids)

    def members(self, cluster_id: int) -> List[Point2D]:
        """Locations assigned to ``cluster_id``, in input order."""
        return [p.location for p in self.points if p.cluster_id == cluster_id]

    def inertia(self) -> float:
        """Sum of squared distances from every point to its cluster centroid."""
        total = 0.0
        for point in self.points:
            centroid = self.centroids[point.cluster_id].location
            total += point.location.distance_to(centroid) ** 2
        return total


def as_weighted(locations: Sequence[Point2D]) -> List[WeightedPoint]:
    """Wrap plain locations as fresh WeightedPoints in cluster 0."""
    return [WeightedPoint(location=loc) for loc in locations]
