# -*- coding: utf-8 -*-
"""Composes the multi-layer summary report.

Each layer gets a block with its name, record count, geometry section and attribute section. Blocks are numbered
from 1 in input order and separated by a blank line; layers passed as targets are marked with an asterisk.
"""

import logging

from ..config import DEFAULT_FIELD_ORDER, NONE_LABEL, TARGET_MARKER, UNNAMED_LABEL
from ..stats.layer import compute_statistics
from .format import format_number
from .table import get_table_info

logger = logging.getLogger(__name__)


def get_geometry_info(stats):
    """Format the geometry section of a layer report.

    Parameters:
    -----------
    stats : LayerStatistics
        Statistics of the layer

    Returns:
    --------
    text : str
        "Geometry: [none]" for a layer without geometry, otherwise a "Geometry" line followed by indented
        type, null shape, bounds and projection lines
    """
    if not stats.geometry_type:
        return f"Geometry: {NONE_LABEL}"

    lines = ["Geometry", f"Type: {stats.geometry_type}"]
    if stats.null_shape_count > 0:
        lines.append(f"Null shapes: {stats.null_shape_count:,d}")
    if stats.bbox is not None:
        lines.append("Bounds: " + " ".join(format_number(v) for v in stats.bbox))
        lines.append(f"Proj.4: {stats.proj4}")

    return "\n  ".join(lines)


def get_layer_info(layer, dataset=None, record_index=None, field_order=DEFAULT_FIELD_ORDER):
    """Format the report block of a single layer (without the "Layer <n>" header).

    Parameters:
    -----------
    layer : Layer
        Layer to describe
    dataset : Dataset, optional
        Dataset holding the arcs and coordinate reference system of the layer
    record_index : int, optional
        Record shown in the attribute section; the first record if None
    field_order : str or None
        Order of the attribute fields

    Returns:
    --------
    text : str
        Layer block
    """
    stats = compute_statistics(layer, dataset)
    lines = [
        f"Layer name: {layer.name or UNNAMED_LABEL}",
        f"Records: {stats.feature_count:,d}",
        get_geometry_info(stats),
        get_table_info(layer.data, record_index, field_order),
    ]
    return "\n".join(lines)


def _is_target(layer, target_layers):
    if not target_layers:
        return False
    return any(layer is target for target in target_layers)


def format_info(layers, target_layers=None):
    """Format the summary report of several layers.

    Parameters:
    -----------
    layers : list
        Layers, or (layer, dataset) tuples for layers that reference arcs or have a coordinate reference system
    target_layers : list of Layer, optional
        Layers to mark in the report. Membership is by identity, so two layers with the same name are distinct.

    Returns:
    --------
    report : str
        Report text
    """
    layers = list(layers)
    logger.debug("Formatting info for %d layers", len(layers))

    blocks = []
    for i, item in enumerate(layers):
        layer, dataset = item if isinstance(item, tuple) else (item, None)
        header = f"Layer {i + 1}" + (TARGET_MARKER if _is_target(layer, target_layers) else "")
        blocks.append(header + "\n" + get_layer_info(layer, dataset))

    return "\n\n".join(blocks)


def get_dataset_info(dataset, target_layers=None):
    """Format the summary report of every layer in a dataset."""
    return format_info([(layer, dataset) for layer in dataset.layers], target_layers)


def print_info(layers, target_layers=None):
    """Print the summary report of several layers and return its text."""
    report = format_info(layers, target_layers)
    print(report)
    return report
