# zoneplanner/services/zoning/zone_service.py
from typing import Dict, List, Sequence
from zoneplanner.core.entities.point import Point2D
from zoneplanner.core.entities.cluster import ClusteringResult, as_weighted
from zoneplanner.core.entities.zone import Zone, ZoningResult, ZoningStatus
from zoneplanner.core.interfaces.clustering import ClusteringAlgorithm, HullAlgorithm

NO_ORDERS_MESSAGE = "No orders found."
NO_ROUTES_MESSAGE = "No routes found."
INSUFFICIENT_ORDERS_MESSAGE = "Insufficient number of orders."
FINISHED_MESSAGE = "Finished clustering orders."


class ZoneService:
    """
    High-level service turning one day's orders into soft zones, one per route.
    Orchestrates the clustering and per-cluster hull construction.
    """

    def __init__(
        self,
        clustering_algorithm: ClusteringAlgorithm,
        hull_algorithm: HullAlgorithm,
        min_orders_per_zone: int = 3,
        name_format: str = "Zone {}",
    ):
        """
        Initialize the zone service.

        Args:
            clustering_algorithm: An implementation of the ClusteringAlgorithm protocol.
            hull_algorithm: An implementation of the HullAlgorithm protocol.
            min_orders_per_zone: Clusters with fewer orders get no zone.
            name_format: Format string for zone names, filled with the 1-based route number.
        """
        self.clustering_algorithm = clustering_algorithm
        self.hull_algorithm = hull_algorithm
        self.min_orders_per_zone = max(3, min_orders_per_zone)
        self.name_format = name_format

    def cluster_orders_into_zones(
        self, orders: Sequence[Point2D], route_count: int
    ) -> ZoningResult:
        """
        Cluster order locations into ``route_count`` groups and build a zone for each.

        Args:
            orders: Order locations for one planning day.
            route_count: Number of routes for that day.

        Returns:
            A ZoningResult. When the inputs cannot be clustered the status says
            why and no zones are produced.
        """
        precondition = self.check_preconditions(len(orders), route_count)
        if precondition is not None:
            return precondition

        clustering = self.clustering_algorithm.cluster(as_weighted(orders), route_count)
        zones = self.build_zones(clustering, route_count)

        return ZoningResult(
            status=ZoningStatus.OK,
            message=FINISHED_MESSAGE,
            zones=zones,
            clustering=clustering,
        )

    @staticmethod
    def check_preconditions(order_count: int, route_count: int):
        """
        Return a failed ZoningResult if clustering cannot run, else None.
        """
        if order_count > route_count and route_count > 0:
            return None

        if order_count == 0:
            return ZoningResult(ZoningStatus.NO_ORDERS, NO_ORDERS_MESSAGE)
        if route_count <= 0:
            return ZoningResult(ZoningStatus.NO_ROUTES, NO_ROUTES_MESSAGE)
        return ZoningResult(ZoningStatus.INSUFFICIENT_ORDERS, INSUFFICIENT_ORDERS_MESSAGE)

    def build_zones(self, clustering: ClusteringResult, route_count: int) -> List[Zone]:
        """
        Build one zone for every cluster with enough orders.

        Args:
            clustering: Result of clustering the day's orders.
            route_count: Number of routes (clusters).

        Returns:
            Zones ordered by route index.
        """
        groups: Dict[int, List[Point2D]] = {j: [] for j in range(route_count)}
        for point in clustering.points:
            groups[point.cluster_id].append(point.location)

        zones = []
        for route_index, members in groups.items():
            if len(members) < self.min_orders_per_zone:
                continue

            polygon = self.hull_algorithm.build(members)
            zones.append(
                Zone(
                    id=len(zones),
                    name=self.name_format.format(route_index + 1),
                    route_index=route_index,
                    polygon=polygon,
                    order_count=len(members),
                )
            )

        return zones
