# zoneplanner/services/clustering/seeded_kmeans.py
import random
from typing import List, Optional, Sequence
import numpy as np
from zoneplanner.core.entities.point import Point2D
from zoneplanner.core.entities.cluster import WeightedPoint, Centroid, ClusteringResult
from zoneplanner.core.exceptions import PreconditionViolation
from zoneplanner.core.interfaces.clustering import RandomSource


class SeededKMeansClusterer:
    """
    Partitions order locations into k groups: distance-weighted seeding followed
    by Lloyd refinement.

    Seeding is roulette-wheel selection proportional to the raw (not squared)
    distance to the nearest centroid chosen so far.

    Based on:
    Arthur, D. & Vassilvitskii, S. (2007), "k-means++: The Advantages of Careful Seeding",
    SODA '07, pp. 1027-1035.
    """

    def __init__(
        self,
        max_iterations: int = 100,
        rng: Optional[RandomSource] = None,
        seed: Optional[int] = None,
    ):
        """
        Initialize the clusterer.

        Args:
            max_iterations: Upper bound on refinement passes.
            rng: Random source used for seeding. If None, a ``random.Random``
                 seeded with ``seed`` is created.
            seed: Seed for the default random source (ignored when ``rng`` is given).
        """
        self.max_iterations = max_iterations
        self.rng = rng if rng is not None else random.Random(seed)

    def cluster(self, points: Sequence[WeightedPoint], k: int) -> ClusteringResult:
        """
        Cluster points into k groups, updating their ``cluster_id`` in place.

        Args:
            points: Points to cluster (len(points) >= k).
            k: Number of clusters (k >= 1).

        Returns:
            A ClusteringResult with the final centroids and the number of
            refinement passes executed.
        """
        if k < 1:
            raise PreconditionViolation(f"Cluster count must be positive, got {k}")
        if len(points) < k:
            raise PreconditionViolation(
                f"Cannot build {k} clusters from {len(points)} points"
            )

        coordinates = _coordinates(points)
        centroids = self.seed_centroids(coordinates, k)
        iterations = self.refine(points, centroids)

        return ClusteringResult(
            points=list(points), centroids=centroids, iterations=iterations
        )

    def seed_centroids(self, coordinates: np.ndarray, k: int) -> List[Centroid]:
        """
        Choose the initial centroid locations.

        Args:
            coordinates: An array of shape (n_points, 2).
            k: Number of centroids.

        Returns:
            k centroids positioned on input points.
        """
        n_points = len(coordinates)
        index = self.rng.randrange(n_points)
        seeds = [coordinates[index]]

        for j in range(1, k):
            # Distance from each point to its nearest already chosen seed
            nearest = np.full(n_points, np.inf)
            for seed_coords in seeds:
                dist = np.sqrt(((coordinates - seed_coords) ** 2).sum(axis=1))
                nearest = np.minimum(nearest, dist)

            remaining = self.rng.random() * float(nearest.sum())

            # Falls through to the last point when nothing triggers (e.g. all distances are zero)
            chosen = n_points - 1
            for i in range(n_points):
                if remaining < nearest[i]:
                    chosen = i
                    break
                remaining -= nearest[i]

            seeds.append(coordinates[chosen])

        return [
            Centroid(location=Point2D(float(c[0]), float(c[1])), cluster_id=j)
            for j, c in enumerate(seeds)
        ]

    def refine(self, points: Sequence[WeightedPoint], centroids: List[Centroid]) -> int:
        """
        Alternate assignment and centroid update until no point changes cluster.

        Args:
            points: Points whose ``cluster_id`` is updated in place.
            centroids: Centroids updated in place.

        Returns:
            The number of passes executed.
        """
        k = len(centroids)
        coordinates = _coordinates(points)
        iterations = 0

        while iterations < self.max_iterations:
            iterations += 1
            changed = False

            sum_x = np.zeros(k)
            sum_y = np.zeros(k)
            counts = np.zeros(k, dtype=int)
            centroid_coords = np.array(
                [[c.location.x, c.location.y] for c in centroids], dtype=float
            )

            for point, coords in zip(points, coordinates):
                distances = np.sqrt(((centroid_coords - coords) ** 2).sum(axis=1))
                min_distance = distances.min()

                # First cluster whose distance equals the minimum exactly
                nearest = int(np.flatnonzero(distances == min_distance)[0])
                if nearest != point.cluster_id:
                    point.cluster_id = nearest
                    changed = True

                sum_x[point.cluster_id] += coords[0]
                sum_y[point.cluster_id] += coords[1]
                counts[point.cluster_id] += 1

            for j, centroid in enumerate(centroids):
                centroid.member_count = int(counts[j])
                # Empty clusters keep their previous location
                if counts[j] > 0:
                    centroid.location = Point2D(
                        float(sum_x[j] / counts[j]), float(sum_y[j] / counts[j])
                    )

            if not changed:
                break

        return iterations


def _coordinates(points: Sequence[WeightedPoint]) -> np.ndarray:
    return np.array([p.location.coordinates() for p in points], dtype=float)
