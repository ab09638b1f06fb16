# -*- coding: utf-8 -*-
"""Per-layer summary statistics: feature counts, null counts, bounds and projection."""

import logging

from ..core.paths import get_point_shape_bounds, get_shape_bounds, merge_bounds
from ..core.projection import describe_projection
from .nulls import count_null_records, count_null_shapes, is_null_shape

logger = logging.getLogger(__name__)


class LayerStatistics:
    """Summary of one layer, computed fresh for every report."""

    def __init__(self, geometry_type, feature_count, null_shape_count=0, null_data_count=0, bbox=None, proj4=None):
        """Initialize the statistics record.

        Parameters:
        -----------
        geometry_type : str or None
            Geometry type of the layer
        feature_count : int
            Number of features
        null_shape_count : int
            Number of features without geometry
        null_data_count : int
            Number of features without an attribute record
        bbox : list, optional
            Bounds of all non-null shapes; only set when at least one feature has geometry
        proj4 : str, optional
            Projection description; only set together with bbox
        """
        self.geometry_type = geometry_type
        self.feature_count = feature_count
        self.null_shape_count = null_shape_count
        self.null_data_count = null_data_count
        self.bbox = bbox
        self.proj4 = proj4

    def to_dict(self):
        """Convert to a dictionary, leaving out bbox and proj4 when they are absent."""
        data = {
            "geometry_type": self.geometry_type,
            "feature_count": self.feature_count,
            "null_shape_count": self.null_shape_count,
            "null_data_count": self.null_data_count,
        }
        if self.bbox is not None:
            data["bbox"] = list(self.bbox)
            data["proj4"] = self.proj4
        return data

    def __repr__(self):
        return f"LayerStatistics({self.to_dict()!r})"


def get_feature_count(layer):
    """Get the number of features in a layer.

    The shapes list takes precedence; a layer without geometry is counted from its attribute table.
    """
    if layer.shapes is not None:
        return len(layer.shapes)
    if layer.data is not None:
        return layer.data.size()
    return 0


def get_layer_bounds(layer, arcs):
    """Get the bounding box of all non-null shapes in a layer.

    Shapes whose bounds cannot be computed are skipped.

    Parameters:
    -----------
    layer : Layer
        Layer to measure
    arcs : ArcCollection or None
        Arc storage referenced by line and polygon shapes

    Returns:
    --------
    bbox : list or None
        [xmin, ymin, xmax, ymax] (with z extents for 3D data), or None if no shape has bounds
    """
    if layer.shapes is None:
        return None

    bounds = None
    for i, shape in enumerate(layer.shapes):
        if is_null_shape(shape):
            continue
        try:
            if layer.geometry_type == "point":
                shape_bounds = get_point_shape_bounds(shape)
            elif arcs is None:
                raise ValueError("dataset has no arcs")
            else:
                shape_bounds = get_shape_bounds(shape, arcs)
            bounds = merge_bounds(bounds, shape_bounds)
        except (IndexError, ValueError, TypeError) as e:
            logger.warning("Unable to compute bounds of feature %d in layer '%s': %s", i, layer.name, e)

    return bounds


def compute_statistics(layer, dataset=None):
    """Compute the summary statistics of a layer.

    Parameters:
    -----------
    layer : Layer
        Layer to summarize
    dataset : Dataset, optional
        Dataset supplying the arcs and coordinate reference system of the layer

    Returns:
    --------
    stats : LayerStatistics
        Statistics record
    """
    n = get_feature_count(layer)
    null_data_count = count_null_records(layer.data.get_records()) if layer.data is not None else n
    stats = LayerStatistics(layer.geometry_type, n, null_shape_count=0, null_data_count=null_data_count)

    if layer.shapes is not None:
        stats.null_shape_count = count_null_shapes(layer.shapes)
        if n > stats.null_shape_count:
            arcs = dataset.arcs if dataset is not None else None
            stats.bbox = get_layer_bounds(layer, arcs)
            if stats.bbox is not None:
                stats.proj4 = describe_projection(dataset)

    logger.debug("Computed statistics for layer '%s': %s", layer.name, stats.to_dict())
    return stats
