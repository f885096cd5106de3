# zoneplanner/core/entities/zone.py
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional
import time
from .point import HullPoint
from .cluster import ClusteringResult

# Closed ring: the first vertex is repeated as the last one.
Polygon = List[HullPoint]


class ZoningStatus(Enum):
    OK = "ok"
    NO_ORDERS = "no_orders"
    NO_ROUTES = "no_routes"
    INSUFFICIENT_ORDERS = "insufficient_orders"


@dataclass
class Zone:
    """
    A soft zone synthesised for one route from its cluster of orders.
    """

    id: int
    name: str
    route_index: int
    polygon: Polygon
    order_count: int
    hard: bool = False
    created_at: float = field(default_factory=time.time)

    @property
    def vertices(self) -> Polygon:
        """Polygon vertices without the closing repeat."""
        return self.polygon[:-1]

    def area(self) -> float:
        """Unsigned shoelace area of the polygon."""
        total = 0.0
        for a, b in zip(self.polygon, self.polygon[1:]):
            total += a.x * b.y - b.x * a.y
        return abs(total) / 2.0


@dataclass
class ZoningResult:
    """
    Outcome of clustering one day's orders into zones.
    """

    status: ZoningStatus
    message: str
    zones: List[Zone] = field(default_factory=list)
    clustering: Optional[ClusteringResult] = None

    @property
    def succeeded(self) -> bool:
        return self.status is ZoningStatus.OK
