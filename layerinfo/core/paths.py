# -*- coding: utf-8 -*-
"""Read-only geometry queries over shapes that reference an ArcCollection.

A path shape (polyline or polygon) is a list of parts and each part is a list of arc ids. A point shape is a list
of [x, y] coordinates. Bounds are flat lists in the order [xmin, ymin, xmax, ymax] (with zmin/zmax after the y
component when the arcs carry z values).
"""

import numpy as np


def iter_shape_paths(shapes):
    """Yield every path (list of arc ids) of every non-null shape.

    Parameters:
    -----------
    shapes : list
        Path shapes of a layer, null entries are skipped

    Returns:
    --------
    paths : generator
        Lists of arc ids
    """
    for shape in shapes:
        if shape is None or len(shape) == 0:
            continue
        for path in shape:
            yield path


def get_path_coords(ids, arcs):
    """Resolve a path into its vertex sequence.

    Consecutive arcs share an endpoint, so the first vertex of every arc after the first one is dropped.

    Parameters:
    -----------
    ids : list of int
        Arc ids making up the path
    arcs : ArcCollection
        Shared arc storage

    Returns:
    --------
    coords : numpy.ndarray
        Array with shape (n, 2) or (n, 3)
    """
    parts = []
    for i, arc_id in enumerate(ids):
        coords = arcs.get_arc_coords(arc_id)
        if i > 0 and len(coords) > 0:
            coords = coords[1:]
        parts.append(coords)

    if not parts:
        return np.empty((0, 2))
    return np.vstack(parts)


def get_planar_path_area(ids, arcs):
    """Signed planar area of a path (shoelace formula); counter-clockwise paths are positive."""
    coords = get_path_coords(ids, arcs)
    if len(coords) < 3:
        return 0.0

    x = coords[:, 0] - coords[0, 0]
    y = coords[:, 1] - coords[0, 1]
    return float(0.5 * (np.dot(x, np.roll(y, -1)) - np.dot(y, np.roll(x, -1))))


def merge_bounds(a, b):
    """Return the union of two bounds lists; None counts as empty."""
    if a is None:
        return None if b is None else list(b)
    if b is None:
        return list(a)
    if len(a) != len(b):
        raise ValueError("Cannot merge bounds with different dimensions")

    half = len(a) // 2
    return [min(a[i], b[i]) for i in range(half)] + [max(a[i], b[i]) for i in range(half, len(a))]


def get_shape_bounds(shape, arcs):
    """Get the bounding box of a path shape.

    Parameters:
    -----------
    shape : list
        List of parts, each a list of arc ids
    arcs : ArcCollection
        Shared arc storage

    Returns:
    --------
    bounds : list or None
        Union of the bounds of every referenced arc
    """
    bounds = None
    for path in shape:
        for arc_id in path:
            bounds = merge_bounds(bounds, arcs.get_arc_bounds(arc_id))
    return bounds


def get_point_shape_bounds(shape):
    """Get the bounding box of a point shape (a list of [x, y] or [x, y, z] coordinates)."""
    points = np.asarray(shape, dtype=float)
    if points.ndim != 2 or points.shape[1] not in (2, 3):
        raise ValueError(f"Invalid point shape with array shape {points.shape}")
    if len(points) == 0:
        return None
    return [float(v) for v in points.min(axis=0)] + [float(v) for v in points.max(axis=0)]
