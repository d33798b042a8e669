import pytest

from chartdata import Dataset


@pytest.fixture()
def dataset_maps():
    return Dataset([{"y": 1, "x": 2, "z": 5}, {"x": 3, "y": 4, "z": 6}])


@pytest.fixture()
def dataset_nocols():
    return Dataset([(1, 2, 3, 4), (4, 5, 6, 4), (-3, -2, -1, 0)])


@pytest.fixture()
def dataset(dataset_nocols):
    return Dataset(dataset_nocols.data, ["aa", "bb", "cccc", "d"])
