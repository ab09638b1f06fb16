# -*- coding: utf-8 -*-
# layerinfo/__init__.py

"""
LayerInfo: summary statistics and text reports for geographic data layers
=========================================================================

LayerInfo inspects in-memory layers (geometry plus attribute table) and
describes them in a compact, aligned text report.

Key features:
- Feature, null shape and null record counts
- Layer bounds resolved through shared arc topology
- Proj.4 description of the coordinate reference system
- Ring/hole classification and vertex statistics
- Attribute table preview with decimal-aligned numbers
"""

__version__ = "0.1.0"

from .core.arcs import ArcCollection
from .core.layer import Dataset, Layer
from .core.projection import describe_projection
from .core.table import DataTable, apply_field_order

from .io.vector import dataset_from_geodataframe, read_vector

from .logging_config import setup_logging

from .report.format import ValueKind, classify_value, count_integral_chars, format_value
from .report.info import format_info, get_dataset_info, get_layer_info, print_info
from .report.table import format_attribute_table, get_table_info

from .stats.layer import LayerStatistics, compute_statistics, get_feature_count, get_layer_bounds
from .stats.nulls import count_null_records, count_null_shapes, is_null_record, is_null_shape
from .stats.rings import RingCount, count_interior_vertices, count_nodes, count_rings, get_simplification_info

from .utils.helpers import create_sample_data
