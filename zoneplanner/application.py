# zoneplanner/application.py
from typing import Dict, List, Optional
import os
import time
import matplotlib.pyplot as plt
import pandas as pd
from pathlib import Path

from zoneplanner.core.entities.point import Point2D
from zoneplanner.core.entities.zone import Zone, ZoningResult

from zoneplanner.services.clustering.seeded_kmeans import SeededKMeansClusterer
from zoneplanner.services.zoning.convex_hull import ConvexHullBuilder
from zoneplanner.services.zoning.zone_service import ZoneService
from zoneplanner.services.benchmarking.comparison_service import ClusteringComparisonService

from zoneplanner.infrastructure.io.solomon_reader import SolomonReader
from zoneplanner.infrastructure.io.csv_io import CsvOrderReader, zones_to_frame
from zoneplanner.infrastructure.visualization.zone_visualizer import ZoneVisualizer

from zoneplanner.config.env import get_config


class ZonePlannerApplication:
    """
    Main application class for clustering a day's orders into route zones.

    This class orchestrates the complete process:
    1. Load order locations
    2. Cluster them into one group per route
    3. Build a soft zone around every sufficiently large group
    4. Optionally benchmark the clustering and visualize the zones
    """

    def __init__(self, route_count: int, seed: Optional[int] = None):
        """
        Initialize the application.

        Args:
            route_count: Number of routes (zones) to plan for.
            seed: Optional seed for centroid seeding. If None, the configured seed is used.
        """
        self.config = get_config()
        self.route_count = route_count
        if seed is not None:
            self.config["CLUSTERING"]["random_seed"] = seed

        # Create output directory if it doesn't exist
        output_path = Path(self.config["IO"]["output_path"])
        output_path.mkdir(parents=True, exist_ok=True)

        self.dataset_path = None
        self.orders: List[Point2D] = []
        self.depot: Optional[Point2D] = None
        self.zones: List[Zone] = []

        self.zoning_result: Optional[ZoningResult] = None
        self.comparison: Optional[pd.DataFrame] = None

    def build_zone_service(self) -> ZoneService:
        """Wire the clusterer and hull builder from configuration."""
        clustering_config = self.config["CLUSTERING"]
        zones_config = self.config["ZONES"]

        clusterer = SeededKMeansClusterer(
            max_iterations=clustering_config["max_iterations"],
            seed=clustering_config["random_seed"],
        )
        hull_builder = ConvexHullBuilder(
            inflation=zones_config["inflation"],
            centroid_includes_closing_vertex=zones_config["centroid_includes_closing_vertex"],
        )
        return ZoneService(
            clustering_algorithm=clusterer,
            hull_algorithm=hull_builder,
            min_orders_per_zone=zones_config["min_orders_per_zone"],
            name_format=zones_config["name_format"],
        )

    def load_dataset(self, dataset_name: str, csv: bool = False) -> None:
        """
        Load order locations from the configured dataset directory.

        Args:
            dataset_name: Name of the dataset file (e.g., 'c101.txt').
            csv: Read a CSV file with x/y columns instead of a Solomon file.
        """
        dataset_path = os.path.join(self.config["IO"]["dataset_path"], dataset_name)
        self.dataset_path = dataset_path

        print(f"Loading dataset: {dataset_path}")
        if csv:
            self.orders = CsvOrderReader(dataset_path).read()
            self.depot = None
        else:
            reader = SolomonReader(dataset_path)
            self.orders, _ = reader.read()
            self.depot = reader.depot

        print(f"Number of orders: {len(self.orders)}")
        print(f"Number of routes: {self.route_count}")

    def run_zoning(self) -> ZoningResult:
        """
        Cluster the loaded orders and replace the current zones with new ones.

        Returns:
            The zoning result.
        """
        print("Clustering orders.")
        start_time = time.time()

        result = self.build_zone_service().cluster_orders_into_zones(
            self.orders, self.route_count
        )
        self.zoning_result = result

        if not result.succeeded:
            print(f"[ERROR] {result.message}")
            return result

        # Previous zones are discarded, not merged
        self.zones = list(result.zones)

        end_time = time.time()
        print(f"Clustering converged after {result.clustering.iterations} iterations")
        print(f"Created {len(self.zones)} zones for {self.route_count} routes in {end_time - start_time:.2f} seconds")
        skipped = self.route_count - len(self.zones)
        if skipped:
            print(f"[WARNING] {skipped} routes received too few orders for a zone")
        print(result.message)

        return result

    def run_comparison(self) -> pd.DataFrame:
        """
        Benchmark the clusterer against scikit-learn KMeans on the loaded orders.

        Returns:
            Per-run comparison DataFrame.
        """
        if ZoneService.check_preconditions(len(self.orders), self.route_count) is not None:
            raise ValueError("Orders and routes must be loaded before comparison")

        print("Comparing clustering methods...")
        service = ClusteringComparisonService(
            max_iterations=self.config["CLUSTERING"]["max_iterations"]
        )
        self.comparison = service.compare(
            self.orders, self.route_count, self.config["BENCHMARK"]["seeds"]
        )
        print(service.generate_report(self.comparison))
        return self.comparison

    def visualize_results(self, save_path: Optional[str] = None) -> None:
        """
        Visualize clusters and zones.

        Args:
            save_path: Optional path to save visualizations. If None, figures are displayed.
        """
        if not self.zoning_result or not self.zoning_result.succeeded:
            return

        if save_path:
            os.makedirs(save_path, exist_ok=True)

        print("Visualizing zones...")
        fig = ZoneVisualizer.plot_zones(
            clustering=self.zoning_result.clustering,
            zones=self.zones,
            depot=self.depot,
            title=f"Order Zones ({self.route_count} routes)",
        )
        if save_path:
            fig.savefig(
                os.path.join(save_path, "zones.png"),
                dpi=300,
                bbox_inches="tight",
            )
            plt.close(fig)
        else:
            plt.show()

    def save_results(self, output_dir: str) -> Dict[str, str]:
        """
        Write zone vertices, and the comparison report if one was run.

        Returns:
            Mapping of artifact name to written path.
        """
        os.makedirs(output_dir, exist_ok=True)
        written = {}

        zones_path = os.path.join(output_dir, "zones.csv")
        zones_to_frame(self.zones).to_csv(zones_path, index=False)
        written["zones"] = zones_path

        if self.comparison is not None:
            report = ClusteringComparisonService().generate_report(self.comparison)
            report_path = os.path.join(output_dir, "report.md")
            with open(report_path, "w") as f:
                f.write(report)
            written["report"] = report_path

        for name, path in written.items():
            print(f"Saved {name} to {path}")
        return written

    def run_full_workflow(
        self,
        dataset_name: str,
        csv: bool = False,
        compare: bool = False,
        save_visualizations: bool = True,
    ) -> ZoningResult:
        """
        Run the complete workflow: dataset loading, zoning, optional benchmark and output.

        Args:
            dataset_name: Name of the dataset file (e.g., 'c101.txt').
            csv: Whether the dataset is a CSV order list.
            compare: Whether to benchmark against scikit-learn KMeans.
            save_visualizations: Whether to save visualizations to output directory.

        Returns:
            The zoning result.
        """
        timestamp = time.strftime("%Y%m%d_%H%M%S")
        dataset_base = os.path.splitext(dataset_name)[0]
        output_dir = os.path.join(
            self.config["IO"]["output_path"], f"{dataset_base}_{timestamp}"
        )

        self.load_dataset(dataset_name, csv=csv)
        result = self.run_zoning()
        if not result.succeeded:
            return result

        if compare:
            self.run_comparison()

        self.save_results(output_dir)
        if save_visualizations:
            self.visualize_results(save_path=output_dir)

        return result
