# -*- coding: utf-8 -*-
"""Defines the Layer and Dataset classes used to organize geographic data.

A layer is a named set of features sharing one geometry type. Its geometry lives in ``shapes`` (one entry per
feature, None for a feature without geometry) and its attributes in an optional DataTable whose records are
index-aligned with the shapes.
A dataset groups layers that share the same arc topology and coordinate reference system; layers are looked up by
id or name, the same way they are registered.
"""

import uuid

from ..config import UNNAMED_LABEL

GEOMETRY_TYPES = ("point", "line", "polygon")


class Layer:
    """A Layer holds the geometry and attribute data of a set of features.

    Layers are read by the statistics and report modules, never modified by them.
    """

    def __init__(self, name=None, geometry_type=None, shapes=None, data=None):
        """Initialize a Layer.

        Parameters:
        -----------
        name : str, optional
            Name of the layer
        geometry_type : str, optional
            Type of geometry: "point", "line", "polygon", or None for a layer without geometry
        shapes : list, optional
            One geometry entry per feature
        data : DataTable, optional
            Attribute records, one per feature
        """
        if geometry_type is not None and geometry_type not in GEOMETRY_TYPES:
            raise ValueError(f"Unsupported geometry type: {geometry_type}")

        self.id = str(uuid.uuid4())
        self.name = name
        self.geometry_type = geometry_type
        self.shapes = shapes
        self.data = data

    def copy(self):
        """Create a copy of this layer.

        Returns:
        --------
        layer_copy : Layer
            Copy of this layer; shapes and records are copied shallowly
        """
        new_layer = Layer(name=self.name, geometry_type=self.geometry_type)

        if self.shapes is not None:
            new_layer.shapes = list(self.shapes)

        if self.data is not None:
            new_layer.data = type(self.data)(self.data.get_records())

        return new_layer

    def __str__(self):
        """String representation of the layer."""
        num_shapes = len(self.shapes) if self.shapes is not None else 0
        num_records = self.data.size() if self.data is not None else 0
        name = self.name if self.name else UNNAMED_LABEL

        return f"Layer '{name}' (geometry: {self.geometry_type}, shapes: {num_shapes}, records: {num_records})"


class Dataset:
    """A collection of layers sharing arc topology and a coordinate reference system."""

    def __init__(self, layers=None, arcs=None, crs=None):
        """Initialize the dataset.

        Parameters:
        -----------
        layers : list of Layer, optional
            Layers to add
        arcs : ArcCollection, optional
            Arc storage referenced by line and polygon shapes
        crs : any, optional
            Coordinate reference system, in any form accepted by pyproj.CRS.from_user_input
        """
        self.layers = []
        self.arcs = arcs
        self.crs = crs

        for layer in layers or []:
            self.add_layer(layer)

    def add_layer(self, layer):
        """Add a layer to the dataset.

        Parameters:
        -----------
        layer : Layer
            Layer to add

        Returns:
        --------
        layer : Layer
            The added layer
        """
        self.layers.append(layer)
        return layer

    def get_layer(self, layer_id_or_name):
        """Get a layer by ID or name.

        Parameters:
        -----------
        layer_id_or_name : str
            Layer ID or name

        Returns:
        --------
        layer : Layer
            The requested layer
        """
        for layer in self.layers:
            if layer.id == layer_id_or_name:
                return layer

        for layer in self.layers:
            if layer.name == layer_id_or_name:
                return layer

        raise ValueError(f"Layer '{layer_id_or_name}' not found")

    def get_layer_names(self):
        """Get a list of all layer names (None for unnamed layers)."""
        return [layer.name for layer in self.layers]

    def remove_layer(self, layer_id_or_name):
        """Remove a layer from the dataset.

        Parameters:
        -----------
        layer_id_or_name : str
            Layer ID or name
        """
        layer = self.get_layer(layer_id_or_name)
        self.layers = [lyr for lyr in self.layers if lyr is not layer]
