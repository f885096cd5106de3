"""
Environment-specific configuration that overrides default settings.
Values can be loaded from environment variables or a .env file.
"""

import copy
import os
from typing import Dict, Any
from dotenv import load_dotenv
from .default import CLUSTERING, ZONES, BENCHMARK, IO

# Load environment variables from .env file if it exists
load_dotenv()


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


def get_config() -> Dict[str, Any]:
    """
    Get configuration with environment overrides.

    Returns:
        Dictionary with merged configuration.
    """
    # Start with a copy of the default config
    config = copy.deepcopy(
        {
            "CLUSTERING": CLUSTERING,
            "ZONES": ZONES,
            "BENCHMARK": BENCHMARK,
            "IO": IO,
        }
    )

    # Override with environment variables
    # CLUSTERING
    if "ZONEPLANNER_MAX_ITERATIONS" in os.environ:
        config["CLUSTERING"]["max_iterations"] = int(
            os.environ["ZONEPLANNER_MAX_ITERATIONS"]
        )

    if "ZONEPLANNER_RANDOM_SEED" in os.environ:
        config["CLUSTERING"]["random_seed"] = int(os.environ["ZONEPLANNER_RANDOM_SEED"])

    # ZONES
    if "ZONEPLANNER_INFLATION" in os.environ:
        config["ZONES"]["inflation"] = float(os.environ["ZONEPLANNER_INFLATION"])

    if "ZONEPLANNER_MIN_ORDERS_PER_ZONE" in os.environ:
        config["ZONES"]["min_orders_per_zone"] = int(
            os.environ["ZONEPLANNER_MIN_ORDERS_PER_ZONE"]
        )

    if "ZONEPLANNER_CENTROID_INCLUDES_CLOSING_VERTEX" in os.environ:
        config["ZONES"]["centroid_includes_closing_vertex"] = _parse_bool(
            os.environ["ZONEPLANNER_CENTROID_INCLUDES_CLOSING_VERTEX"]
        )

    # BENCHMARK
    if "ZONEPLANNER_BENCHMARK_SEEDS" in os.environ:
        config["BENCHMARK"]["seeds"] = [
            int(s) for s in os.environ["ZONEPLANNER_BENCHMARK_SEEDS"].split(",") if s.strip()
        ]

    # I/O
    if "ZONEPLANNER_DATASET_PATH" in os.environ:
        config["IO"]["dataset_path"] = os.environ["ZONEPLANNER_DATASET_PATH"]

    if "ZONEPLANNER_OUTPUT_PATH" in os.environ:
        config["IO"]["output_path"] = os.environ["ZONEPLANNER_OUTPUT_PATH"]

    return config
