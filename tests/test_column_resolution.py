"""
column_names / column_index / column_name across row shapes.
"""
from __future__ import annotations

import pytest

from chartdata import Dataset


# ---------------------------------------------------------------------------
# column_names
# ---------------------------------------------------------------------------

def test_names_for_maps(dataset_maps):
    assert sorted(dataset_maps.column_names()) == ["x", "y", "z"]


def test_names_for_headers(dataset):
    assert dataset.column_names() == ["aa", "bb", "cccc", "d"]


def test_names_for_tuples_without_headers(dataset_nocols):
    assert dataset_nocols.column_names() == [0, 1, 2, 3]


def test_names_for_lists_without_headers():
    ds = Dataset([[1, 2, 3, 4], [4, 5, 6, 4], [-3, -2, -1, 0]])
    assert ds.column_names() == [0, 1, 2, 3]


def test_names_for_empty_dataset_with_headers():
    assert Dataset([], ["a", "b"]).column_names() == ["a", "b"]


# ---------------------------------------------------------------------------
# column_index
# ---------------------------------------------------------------------------

def test_index_returns_map_key(dataset_maps):
    assert dataset_maps.column_index("x") == "x"


def test_index_none_for_unknown_map_key(dataset_maps):
    assert dataset_maps.column_index("not_a_key") is None


def test_index_none_for_unhashable_map_key(dataset_maps):
    assert dataset_maps.column_index(["x"]) is None


def test_index_none_without_headers(dataset_nocols):
    assert dataset_nocols.column_index("bb") is None
    assert dataset_nocols.column_index(1) is None


def test_index_of_header(dataset):
    assert dataset.column_index("bb") == 1


def test_index_none_for_unknown_header(dataset):
    assert dataset.column_index("bbb") is None


def test_index_first_duplicate_header_wins():
    ds = Dataset([(1, 2, 3)], ["a", "b", "a"])
    assert ds.column_index("a") == 0


def test_index_none_on_empty_dataset():
    assert Dataset([]).column_index("a") is None


# ---------------------------------------------------------------------------
# column_name
# ---------------------------------------------------------------------------

def test_name_echoes_map_key(dataset_maps):
    assert dataset_maps.column_name("x") == "x"


def test_name_looks_up_header(dataset):
    assert dataset.column_name(0) == "aa"


@pytest.mark.parametrize("index", [10, 4, -1])
def test_name_echoes_out_of_range_index(dataset, index):
    assert dataset.column_name(index) == index


def test_name_echoes_index_without_headers(dataset_nocols):
    assert dataset_nocols.column_name(0) == 0


@pytest.mark.parametrize("name", ["aa", "bb", "cccc", "d"])
def test_index_then_name_round_trips(dataset, name):
    assert dataset.column_name(dataset.column_index(name)) == name


@pytest.mark.parametrize("name", ["x", "y", "z"])
def test_map_key_round_trips(dataset_maps, name):
    assert dataset_maps.column_name(dataset_maps.column_index(name)) == name
