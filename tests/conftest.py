# -*- coding: utf-8 -*-
"""Shared fixtures for the LayerInfo test suite."""

import pytest

from layerinfo import ArcCollection, DataTable, Dataset, Layer, create_sample_data


@pytest.fixture
def sample_dataset():
    """Fixture providing the parcels/wells sample dataset."""
    return create_sample_data()


@pytest.fixture
def square_arcs():
    """Fixture with a counter-clockwise 4x3 rectangle (arc 0) and a clockwise 1x1 hole (arc 1)."""
    return ArcCollection(
        [
            [(0, 0), (4, 0), (4, 3), (0, 3), (0, 0)],
            [(1, 1), (1, 2), (2, 2), (2, 1), (1, 1)],
        ]
    )


@pytest.fixture
def cities_layer():
    """Fixture with a point layer of three cities, one of them without geometry."""
    return Layer(
        name="cities",
        geometry_type="point",
        shapes=[[[0, 0]], [[2, 3]], None],
        data=DataTable(
            [
                {"pop": 1000, "name": "A"},
                {"pop": 25, "name": "B"},
                {"pop": 7, "name": "C"},
            ]
        ),
    )


@pytest.fixture
def cities_dataset(cities_layer):
    """Fixture wrapping the cities layer in a dataset without crs."""
    return Dataset(layers=[cities_layer])
