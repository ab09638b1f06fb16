# -*- coding: utf-8 -*-
"""Topology statistics: ring/hole tallies, node counts and interior vertex counts.

These are diagnostics kept alongside the layer report; they are not part of the default report text.
"""

import logging
from collections import namedtuple

import numpy as np

from ..core.paths import get_planar_path_area, iter_shape_paths

logger = logging.getLogger(__name__)

RingCount = namedtuple("RingCount", ["rings", "holes"])


def count_rings(shapes, arcs):
    """Count outer rings and holes in the paths of a polygon layer.

    Paths with positive signed area (counter-clockwise) are rings and paths with negative area are holes.
    Zero-area paths are counted as neither.

    Parameters:
    -----------
    shapes : list
        Path shapes of a layer
    arcs : ArcCollection
        Shared arc storage

    Returns:
    --------
    counts : RingCount
        Named tuple (rings, holes)
    """
    rings = 0
    holes = 0
    for ids in iter_shape_paths(shapes):
        try:
            area = get_planar_path_area(ids, arcs)
        except (IndexError, ValueError, TypeError) as e:
            logger.warning("Skipping path %s: %s", ids, e)
            continue

        if area > 0:
            rings += 1
        elif area < 0:
            holes += 1

    return RingCount(rings, holes)


def count_interior_vertices(arcs):
    """Count vertices that are not arc endpoints."""
    count = 0
    for _, n in arcs.iter_arc_lengths():
        if n > 2:
            count += n - 2
    return count


def count_nodes(arcs):
    """Count distinct arc endpoint locations."""
    endpoints = arcs.get_endpoints()
    if len(endpoints) == 0:
        return 0
    return len(np.unique(endpoints, axis=0))


def get_simplification_info(arcs):
    """Summarize the vertices available for simplification.

    Parameters:
    -----------
    arcs : ArcCollection or None
        Shared arc storage

    Returns:
    --------
    info : dict
        Dictionary with node_count and interior_vertex_count
    """
    if arcs is None:
        return {"node_count": 0, "interior_vertex_count": 0}

    return {
        "node_count": count_nodes(arcs),
        "interior_vertex_count": count_interior_vertices(arcs),
    }
