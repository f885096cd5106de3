"""
Default configuration values for the zoneplanner system.
"""

# Clustering parameters
CLUSTERING = {
    "max_iterations": 100,
    "random_seed": None,  # None draws a fresh seed on every run
}

# Zone synthesis parameters
ZONES = {
    "inflation": 0.01,  # fraction of the distance to the zone centroid
    "min_orders_per_zone": 3,
    "centroid_includes_closing_vertex": True,
    "name_format": "Zone {}",
}

# Benchmark parameters
BENCHMARK = {
    "seeds": [0, 1, 2, 3, 4],
}

# I/O parameters
IO = {
    "dataset_path": "zoneplanner/dataset/",
    "output_path": "zoneplanner/output/",
}
