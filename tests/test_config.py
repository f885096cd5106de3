from zoneplanner.config import default
from zoneplanner.config.env import get_config


def test_defaults(isolated_config):
    config = get_config()

    assert config["CLUSTERING"]["max_iterations"] == 100
    assert config["CLUSTERING"]["random_seed"] is None
    assert config["ZONES"]["inflation"] == 0.01
    assert config["ZONES"]["min_orders_per_zone"] == 3
    assert config["ZONES"]["centroid_includes_closing_vertex"] is True


def test_environment_overrides(isolated_config, monkeypatch):
    dataset_dir, output_dir = isolated_config
    monkeypatch.setenv("ZONEPLANNER_MAX_ITERATIONS", "25")
    monkeypatch.setenv("ZONEPLANNER_RANDOM_SEED", "7")
    monkeypatch.setenv("ZONEPLANNER_INFLATION", "0.05")
    monkeypatch.setenv("ZONEPLANNER_MIN_ORDERS_PER_ZONE", "4")
    monkeypatch.setenv("ZONEPLANNER_CENTROID_INCLUDES_CLOSING_VERTEX", "false")
    monkeypatch.setenv("ZONEPLANNER_BENCHMARK_SEEDS", "3, 4")

    config = get_config()

    assert config["CLUSTERING"]["max_iterations"] == 25
    assert config["CLUSTERING"]["random_seed"] == 7
    assert config["ZONES"]["inflation"] == 0.05
    assert config["ZONES"]["min_orders_per_zone"] == 4
    assert config["ZONES"]["centroid_includes_closing_vertex"] is False
    assert config["BENCHMARK"]["seeds"] == [3, 4]
    assert config["IO"]["dataset_path"] == str(dataset_dir)
    assert config["IO"]["output_path"] == str(output_dir)


def test_overrides_do_not_leak_into_defaults(isolated_config, monkeypatch):
    monkeypatch.setenv("ZONEPLANNER_MAX_ITERATIONS", "5")

    config = get_config()
    config["ZONES"]["inflation"] = 1.0

    assert default.CLUSTERING["max_iterations"] == 100
    assert default.ZONES["inflation"] == 0.01
