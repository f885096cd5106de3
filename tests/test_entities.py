import pytest

from zoneplanner.core.entities.point import Point2D, orient
from zoneplanner.core.entities.cluster import ClusteringResult, Centroid, WeightedPoint, as_weighted
from zoneplanner.core.entities.zone import Zone


def test_orient_sign():
    a, b = Point2D(0.0, 0.0), Point2D(10.0, 0.0)

    assert orient(a, b, Point2D(5.0, 3.0)) == 30.0
    assert orient(a, b, Point2D(5.0, -3.0)) == -30.0
    assert orient(a, b, Point2D(20.0, 0.0)) == 0.0


def test_point_ordering_and_distance():
    assert Point2D(0.0, 5.0).precedes(Point2D(1.0, 0.0))
    assert Point2D(1.0, 0.0).precedes(Point2D(1.0, 2.0))
    assert not Point2D(1.0, 2.0).precedes(Point2D(1.0, 2.0))
    assert Point2D(0.0, 0.0).distance_to(Point2D(3.0, 4.0)) == 5.0


def test_as_weighted_starts_in_cluster_zero():
    points = as_weighted([Point2D(1.0, 1.0), Point2D(2.0, 2.0)])

    assert [p.cluster_id for p in points] == [0, 0]


def test_clustering_result_views():
    points = [
        WeightedPoint(Point2D(0.0, 0.0), 0),
        WeightedPoint(Point2D(2.0, 0.0), 0),
        WeightedPoint(Point2D(10.0, 0.0), 1),
    ]
    centroids = [
        Centroid(Point2D(1.0, 0.0), cluster_id=0, member_count=2),
        Centroid(Point2D(10.0, 0.0), cluster_id=1, member_count=1),
    ]
    result = ClusteringResult(points=points, centroids=centroids, iterations=2)

    assert result.labels.tolist() == [0, 0, 1]
    assert result.n_clusters == 2
    assert result.members(0) == [Point2D(0.0, 0.0), Point2D(2.0, 0.0)]
    assert result.inertia() == pytest.approx(2.0)


def test_zone_area_and_vertices():
    polygon = [Point2D(0.0, 0.0), Point2D(0.0, 2.0), Point2D(3.0, 2.0), Point2D(3.0, 0.0), Point2D(0.0, 0.0)]
    zone = Zone(id=0, name="Zone 1", route_index=0, polygon=polygon, order_count=4)

    assert zone.area() == pytest.approx(6.0)
    assert zone.vertices == polygon[:-1]
    assert zone.hard is False
