# -*- coding: utf-8 -*-
"""Tests for arc storage and path geometry queries."""

import numpy as np
import pytest

from layerinfo import ArcCollection
from layerinfo.core.paths import (
    get_path_coords,
    get_planar_path_area,
    get_point_shape_bounds,
    get_shape_bounds,
    iter_shape_paths,
    merge_bounds,
)


def test_arc_collection_layout(square_arcs):
    """Vertex counts and offsets are stored per arc."""
    assert square_arcs.size() == 2
    assert square_arcs.get_point_count() == 10
    assert list(square_arcs.nn) == [5, 5]
    assert list(square_arcs.ii) == [0, 5]
    assert not square_arcs.has_z()


def test_reversed_arc_coords(square_arcs):
    """A bitwise-inverted id returns the arc vertices in reverse order."""
    forward = square_arcs.get_arc_coords(0)
    backward = square_arcs.get_arc_coords(~0)
    assert np.array_equal(forward[::-1], backward)
    assert backward[1].tolist() == [0.0, 3.0]


def test_arc_id_out_of_range(square_arcs):
    """Arc ids beyond the collection raise IndexError."""
    with pytest.raises(IndexError):
        square_arcs.get_arc_coords(2)
    with pytest.raises(IndexError):
        square_arcs.get_arc_coords(~5)


def test_invalid_arc_coordinates():
    """Coordinates must be 2D or 3D and consistent across arcs."""
    with pytest.raises(ValueError):
        ArcCollection([[1, 2, 3]])
    with pytest.raises(ValueError):
        ArcCollection([[(0, 0), (1, 1)], [(0, 0, 1), (1, 1, 1)]])


def test_arc_bounds_with_z():
    """3D arcs report z extents after the x/y minimums and maximums."""
    arcs = ArcCollection([[(0, 0, 5), (2, 3, 1)]])
    assert arcs.has_z()
    assert arcs.get_arc_bounds(0) == [0.0, 0.0, 1.0, 2.0, 3.0, 5.0]


def test_empty_arcs():
    """Arcs without vertices have no bounds and no endpoints."""
    arcs = ArcCollection([[], [(0, 0), (1, 1)]])
    assert arcs.get_arc_bounds(0) is None
    assert arcs.get_endpoints().shape == (2, 2)
    assert ArcCollection([]).get_endpoints().shape == (0, 2)


def test_path_coords_drop_shared_vertices(sample_dataset):
    """Joining two arcs keeps their shared vertex once."""
    coords = get_path_coords([2, ~1], sample_dataset.arcs)
    assert coords.tolist() == [[4, 0], [6, 0], [6, 4], [4, 4], [4, 0]]


def test_signed_area(square_arcs):
    """Counter-clockwise paths have positive area, clockwise paths negative area."""
    assert get_planar_path_area([0], square_arcs) == pytest.approx(12.0)
    assert get_planar_path_area([1], square_arcs) == pytest.approx(-1.0)
    assert get_planar_path_area([~0], square_arcs) == pytest.approx(-12.0)


def test_degenerate_path_area():
    """Collinear and very short paths have zero area."""
    arcs = ArcCollection([[(0, 0), (1, 1), (2, 2), (0, 0)], [(0, 0), (1, 0)]])
    assert get_planar_path_area([0], arcs) == 0.0
    assert get_planar_path_area([1], arcs) == 0.0
    assert get_planar_path_area([], arcs) == 0.0


def test_shape_bounds(sample_dataset):
    """Shape bounds cover every arc of every part."""
    assert get_shape_bounds([[0, 1], [3]], sample_dataset.arcs) == [0.0, 0.0, 4.0, 4.0]
    assert get_shape_bounds([[2, ~1]], sample_dataset.arcs) == [4.0, 0.0, 6.0, 4.0]


def test_point_shape_bounds():
    """Point shape bounds cover all points; malformed points raise ValueError."""
    assert get_point_shape_bounds([[5, 2], [5.5, 2.5]]) == [5.0, 2.0, 5.5, 2.5]
    with pytest.raises(ValueError):
        get_point_shape_bounds([1, 2])


def test_merge_bounds():
    """None is the identity of bounds union."""
    assert merge_bounds(None, None) is None
    assert merge_bounds(None, [0, 0, 1, 1]) == [0, 0, 1, 1]
    assert merge_bounds([0, 0, 1, 1], [-1, 0.5, 0.5, 3]) == [-1, 0, 1, 3]
    with pytest.raises(ValueError):
        merge_bounds([0, 0, 1, 1], [0, 0, 0, 1, 1, 1])


def test_iter_shape_paths_skips_null_shapes():
    """Null shapes contribute no paths."""
    paths = list(iter_shape_paths([[[0], [1]], None, [], [[2, ~3]]]))
    assert paths == [[0], [1], [2, ~3]]
