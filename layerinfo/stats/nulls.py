# -*- coding: utf-8 -*-
"""Null geometry and null record detection."""


def is_null_shape(shape):
    """Return True if a geometry entry is missing or has no parts."""
    return shape is None or len(shape) == 0


def is_null_record(record):
    """Return True if an attribute record is missing.

    A record whose fields are all empty is not a null record.
    """
    return record is None


# TODO: consider polygons with zero area or other invalid geometries as null
def count_null_shapes(shapes):
    """Count the null entries in a list of shapes.

    Parameters:
    -----------
    shapes : list
        Geometry entries of a layer

    Returns:
    --------
    count : int
        Number of null shapes
    """
    return sum(1 for shape in shapes if is_null_shape(shape))


def count_null_records(records):
    """Count the null entries in a list of attribute records.

    Parameters:
    -----------
    records : list
        Records of an attribute table

    Returns:
    --------
    count : int
        Number of null records
    """
    return sum(1 for rec in records if is_null_record(rec))
