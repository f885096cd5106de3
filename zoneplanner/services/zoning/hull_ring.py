# zoneplanner/services/zoning/hull_ring.py
from typing import Iterator, List
from zoneplanner.core.entities.point import HullPoint


class HullRing:
    """
    Arena of circular doubly-linked nodes used while building one hull.

    Nodes are integer handles into parallel ``points``/``next``/``prev`` lists.
    A fresh node links to itself, forming a ring of one. Splicing a node out
    only rewires its neighbours; its slot stays allocated until the arena is
    dropped.
    """

    def __init__(self):
        self.points: List[HullPoint] = []
        self.next: List[int] = []
        self.prev: List[int] = []

    def new_node(self, point: HullPoint) -> int:
        """Allocate a single-node ring and return its handle."""
        handle = len(self.points)
        self.points.append(point)
        self.next.append(handle)
        self.prev.append(handle)
        return handle

    def insert_after(self, node: int, point: HullPoint) -> int:
        """Insert a new node directly after ``node`` and return it."""
        handle = self.new_node(point)
        successor = self.next[node]
        self.prev[handle] = node
        self.next[handle] = successor
        self.prev[successor] = handle
        self.next[node] = handle
        return handle

    def insert_before(self, node: int, point: HullPoint) -> int:
        """Insert a new node directly before ``node`` and return it."""
        return self.insert_after(self.prev[node], point)

    def remove(self, node: int) -> None:
        """Splice ``node`` out of its ring."""
        predecessor, successor = self.prev[node], self.next[node]
        self.next[predecessor] = successor
        self.prev[successor] = predecessor
        self.next[node] = node
        self.prev[node] = node

    def walk(self, head: int) -> Iterator[int]:
        """Yield node handles once around the ring, starting at ``head``."""
        node = head
        while True:
            yield node
            node = self.next[node]
            if node == head:
                return

    def length(self, head: int) -> int:
        return sum(1 for _ in self.walk(head))

    def ring_points(self, head: int) -> List[HullPoint]:
        return [self.points[node] for node in self.walk(head)]
