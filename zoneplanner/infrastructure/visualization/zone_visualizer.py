# zoneplanner/infrastructure/visualization/zone_visualizer.py
import matplotlib.pyplot as plt
from typing import List, Optional
from zoneplanner.core.entities.point import Point2D
from zoneplanner.core.entities.cluster import ClusteringResult
from zoneplanner.core.entities.zone import Zone


class ZoneVisualizer:
    """
    Visualization tools for displaying order clusters and their zones.
    """

    @staticmethod
    def plot_zones(
        clustering: ClusteringResult,
        zones: List[Zone],
        depot: Optional[Point2D] = None,
        title: str = "Order Zones",
    ) -> plt.Figure:
        """
        Plot orders coloured by cluster, cluster centroids and zone outlines.
        """
        fig, ax = plt.subplots(figsize=(10, 8))
        n_clusters = max(clustering.n_clusters, 1)
        cmap = plt.get_cmap("tab20", n_clusters)

        for centroid in clustering.centroids:
            members = clustering.members(centroid.cluster_id)
            color = cmap(centroid.cluster_id % n_clusters)
            if members:
                ax.scatter(
                    [p.x for p in members],
                    [p.y for p in members],
                    color=color,
                    alpha=0.7,
                    label=f"Cluster {centroid.cluster_id + 1} ({len(members)})",
                )
            ax.scatter(
                centroid.location.x,
                centroid.location.y,
                marker="x",
                color=color,
                s=100,
            )

        for zone in zones:
            color = cmap(zone.route_index % n_clusters)
            ax.fill(
                [p.x for p in zone.polygon],
                [p.y for p in zone.polygon],
                facecolor=color,
                edgecolor=color,
                alpha=0.2,
                linewidth=2,
            )
            label_at = zone.vertices[0]
            ax.annotate(zone.name, (label_at.x, label_at.y), fontsize=8)

        if depot is not None:
            ax.scatter(depot.x, depot.y, c="red", marker="s", s=100, label="Depot")

        ax.set_xlabel("X Coordinate")
        ax.set_ylabel("Y Coordinate")
        ax.set_title(title)
        handles, labels = ax.get_legend_handles_labels()
        by_label = dict(zip(labels, handles))
        if by_label:
            ax.legend(by_label.values(), by_label.keys(), loc="best", ncol=2 if len(by_label) > 5 else 1)
        ax.grid(True, alpha=0.3)
        return fig
