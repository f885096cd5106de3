import os
from typing import List

import matplotlib

matplotlib.use("Agg")

import pytest

from zoneplanner.core.entities.point import Point2D


class ScriptedRandom:
    """Random source replaying fixed draws and recording how often it was used."""

    def __init__(self, indices: List[int], fractions: List[float]):
        self.indices = list(indices)
        self.fractions = list(fractions)
        self.randrange_calls = []
        self.random_calls = 0

    def randrange(self, stop: int) -> int:
        self.randrange_calls.append(stop)
        return self.indices.pop(0)

    def random(self) -> float:
        self.random_calls += 1
        return self.fractions.pop(0)


@pytest.fixture()
def scripted_random():
    return ScriptedRandom


@pytest.fixture()
def two_groups():
    group_a = [
        Point2D(0.0, 0.0),
        Point2D(1.0, 0.0),
        Point2D(0.0, 1.0),
        Point2D(1.0, 1.0),
        Point2D(0.5, 0.5),
    ]
    group_b = [
        Point2D(100.0, 100.0),
        Point2D(101.0, 100.0),
        Point2D(100.0, 101.0),
        Point2D(101.0, 101.0),
        Point2D(100.5, 100.5),
    ]
    return group_a, group_b


@pytest.fixture()
def isolated_config(monkeypatch, tmp_path):
    """Point dataset/output directories at a temporary folder."""
    for key in list(os.environ):
        if key.startswith("ZONEPLANNER_"):
            monkeypatch.delenv(key)

    dataset_dir = tmp_path / "dataset"
    output_dir = tmp_path / "output"
    dataset_dir.mkdir()
    monkeypatch.setenv("ZONEPLANNER_DATASET_PATH", str(dataset_dir))
    monkeypatch.setenv("ZONEPLANNER_OUTPUT_PATH", str(output_dir))
    return dataset_dir, output_dir
