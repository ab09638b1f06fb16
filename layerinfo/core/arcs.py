# -*- coding: utf-8 -*-
"""Shared arc storage for path geometries.

Polyline and polygon layers do not store coordinates directly. Each path is a list of arc ids pointing into an
ArcCollection owned by the dataset, so that a boundary shared by two polygons is stored once. An id ``i >= 0``
refers to arc ``i`` in its stored direction and ``~i`` (i.e. ``-i - 1``) refers to the same arc reversed.
"""

import numpy as np


class ArcCollection:
    """Vertex chains stored as flat numpy arrays.

    Vertices of all arcs are concatenated into ``xx``, ``yy`` (and ``zz`` when the source coordinates are 3D);
    ``nn`` holds the vertex count of each arc and ``ii`` the offset of its first vertex.
    """

    def __init__(self, coords):
        """Build the collection from a sequence of arcs.

        Parameters:
        -----------
        coords : sequence
            One sequence of (x, y) or (x, y, z) tuples per arc
        """
        arrays = []
        for arc in coords:
            arr = np.asarray(arc, dtype=float)
            if arr.size == 0:
                arr = arr.reshape(0, 2)
            if arr.ndim != 2 or arr.shape[1] not in (2, 3):
                raise ValueError(f"Arc coordinates must be (x, y) or (x, y, z) tuples, got shape {arr.shape}")
            arrays.append(arr)

        dims = {arr.shape[1] for arr in arrays if len(arr)}
        if len(dims) > 1:
            raise ValueError("All arcs must have the same number of coordinate dimensions")
        dim = dims.pop() if dims else 2

        self.nn = np.array([len(arr) for arr in arrays], dtype=int)
        self.ii = np.concatenate(([0], np.cumsum(self.nn)[:-1])).astype(int) if len(arrays) else np.array([], dtype=int)

        stacked = [arr if len(arr) else np.empty((0, dim)) for arr in arrays]
        vertices = np.vstack(stacked) if stacked else np.empty((0, dim))
        self.xx = vertices[:, 0]
        self.yy = vertices[:, 1]
        self.zz = vertices[:, 2] if dim == 3 else None

    def size(self):
        """Number of arcs."""
        return len(self.nn)

    def get_point_count(self):
        """Total number of stored vertices."""
        return int(self.nn.sum())

    def has_z(self):
        return self.zz is not None

    def get_arc_coords(self, arc_id):
        """Get the vertices of an arc in traversal order.

        Parameters:
        -----------
        arc_id : int
            Arc id, negative (bitwise-inverted) ids are traversed in reverse

        Returns:
        --------
        coords : numpy.ndarray
            Array with shape (n, 2) or (n, 3)
        """
        reverse = arc_id < 0
        absolute = ~arc_id if reverse else arc_id
        if absolute >= self.size():
            raise IndexError(f"Arc id {arc_id} out of range for {self.size()} arcs")

        start = self.ii[absolute]
        end = start + self.nn[absolute]
        columns = [self.xx[start:end], self.yy[start:end]]
        if self.zz is not None:
            columns.append(self.zz[start:end])
        coords = np.column_stack(columns)

        return coords[::-1] if reverse else coords

    def get_arc_bounds(self, arc_id):
        """Get the bounding box of an arc.

        Returns:
        --------
        bounds : list or None
            [xmin, ymin, xmax, ymax], or [xmin, ymin, zmin, xmax, ymax, zmax] for 3D arcs;
            None for an arc without vertices
        """
        coords = self.get_arc_coords(arc_id)
        if len(coords) == 0:
            return None
        return [float(v) for v in coords.min(axis=0)] + [float(v) for v in coords.max(axis=0)]

    def iter_arc_lengths(self):
        """Yield (arc_id, vertex_count) for every arc."""
        for arc_id, n in enumerate(self.nn):
            yield arc_id, int(n)

    def get_endpoints(self):
        """Get the first and last vertex of every non-empty arc as an (m, 2) array."""
        mask = self.nn > 0
        first = self.ii[mask]
        last = first + self.nn[mask] - 1
        starts = np.column_stack((self.xx[first], self.yy[first]))
        ends = np.column_stack((self.xx[last], self.yy[last]))
        return np.vstack((starts, ends))

    def __str__(self):
        """String representation of the arc collection."""
        return f"ArcCollection (arcs: {self.size()}, vertices: {self.get_point_count()}, z: {self.has_z()})"
