# -*- coding: utf-8 -*-
"""Adapts vector data read by geopandas into layers and datasets.

Points become point shapes; each line and each polygon ring becomes its own arc, with polygon exteriors oriented
counter-clockwise and holes clockwise so that ring classification by signed area holds.
"""

import os

import geopandas as gpd
import pandas as pd
from shapely.geometry.polygon import orient

from ..core.arcs import ArcCollection
from ..core.layer import Dataset, Layer
from ..core.table import DataTable

_GEOMETRY_FAMILIES = {
    "Point": "point",
    "MultiPoint": "point",
    "LineString": "line",
    "LinearRing": "line",
    "MultiLineString": "line",
    "Polygon": "polygon",
    "MultiPolygon": "polygon",
}


def _geometry_family(geom):
    if geom is None or geom.is_empty:
        return None
    family = _GEOMETRY_FAMILIES.get(geom.geom_type)
    if family is None:
        raise ValueError(f"Unsupported geometry type: {geom.geom_type}")
    return family


def _parts(geom):
    parts = list(geom.geoms) if hasattr(geom, "geoms") else [geom]
    return [part for part in parts if not part.is_empty]


def _add_arc(arcs, coords):
    arcs.append([tuple(c) for c in coords])
    return len(arcs) - 1


def _convert_shape(geom, geometry_type, arcs):
    if geometry_type == "point":
        return [list(part.coords[0]) for part in _parts(geom)]

    if geometry_type == "line":
        return [[_add_arc(arcs, line.coords)] for line in _parts(geom)]

    paths = []
    for polygon in _parts(geom):
        polygon = orient(polygon, sign=1.0)
        for ring in [polygon.exterior, *polygon.interiors]:
            paths.append([_add_arc(arcs, ring.coords)])
    return paths


def dataset_from_geodataframe(gdf, name=None):
    """Convert a GeoDataFrame into a dataset with a single layer.

    Parameters:
    -----------
    gdf : geopandas.GeoDataFrame
        Features to convert; all non-empty geometries must belong to the same family (point, line or polygon)
    name : str, optional
        Name of the layer

    Returns:
    --------
    dataset : Dataset
        Dataset holding the layer, the arcs of its lines or rings and the GeoDataFrame's crs
    """
    geometries = list(gdf.geometry)
    families = {_geometry_family(geom) for geom in geometries} - {None}
    if len(families) > 1:
        raise ValueError(f"Mixed geometry types are not supported: {sorted(families)}")
    geometry_type = families.pop() if families else None

    arc_coords = []
    shapes = None
    if geometry_type is not None:
        shapes = []
        for geom in geometries:
            if _geometry_family(geom) is None:
                shapes.append(None)
            else:
                shapes.append(_convert_shape(geom, geometry_type, arc_coords))

    attributes = pd.DataFrame(gdf.drop(columns=gdf.geometry.name))
    layer = Layer(name=name, geometry_type=geometry_type, shapes=shapes, data=DataTable.from_dataframe(attributes))
    arcs = ArcCollection(arc_coords) if geometry_type in ("line", "polygon") else None

    return Dataset(layers=[layer], arcs=arcs, crs=gdf.crs)


def read_vector(vector_path, name=None):
    """Read a vector file into a dataset.

    Parameters:
    -----------
    vector_path : str
        Path to the vector file (any format supported by geopandas)
    name : str, optional
        Name of the layer; defaults to the file name without extension

    Returns:
    --------
    dataset : Dataset
        Dataset with a single layer
    """
    if name is None:
        name = os.path.splitext(os.path.basename(vector_path))[0]
    return dataset_from_geodataframe(gpd.read_file(vector_path), name=name)
