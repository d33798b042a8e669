"""
unique_values keeps first-occurrence order.
"""
from __future__ import annotations

import numpy as np

from chartdata import Dataset


def test_unique_values(dataset):
    assert dataset.unique_values("d") == [4, 0]


def test_unique_values_preserves_first_occurrence_order():
    ds = Dataset([{"c": "b"}, {"c": "a"}, {"c": "b"}, {"c": "c"}, {"c": "a"}])
    assert ds.unique_values("c") == ["b", "a", "c"]


def test_unique_values_by_position(dataset_nocols):
    assert dataset_nocols.unique_values(3) == [4, 0]


def test_unique_values_of_unhashable_values():
    ds = Dataset([([1, 2],), ([1, 2],), ([3],)])
    assert ds.unique_values(0) == [[1, 2], [3]]


def test_unique_values_of_empty_dataset():
    assert Dataset([]).unique_values("a") == []


def test_unique_values_includes_missing_once():
    ds = Dataset([{"a": 1}, {"b": 2}, {"b": 3}])
    assert ds.unique_values("a") == [1, None]


def test_unique_values_of_array_values():
    ds = Dataset([{"a": np.array([1, 2])}, {"a": np.array([1, 2])}, {"a": np.array([3])}])
    values = ds.unique_values("a")
    assert len(values) == 2
    assert np.array_equal(values[0], [1, 2])
    assert np.array_equal(values[1], [3])


def test_unique_values_of_array_rows_by_position():
    ds = Dataset([(np.array([0.5]),), (np.array([0.5]),)])
    assert len(ds.unique_values(0)) == 1
