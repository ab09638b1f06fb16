# -*- coding: utf-8 -*-
"""Describes the coordinate reference system of a dataset as a Proj.4 string."""

import warnings

from pyproj import CRS

from ..config import UNKNOWN_PROJECTION


def describe_projection(dataset):
    """Get a Proj.4 description of a dataset's coordinate reference system.

    Parameters:
    -----------
    dataset : Dataset or None
        Dataset whose ``crs`` is described

    Returns:
    --------
    proj4 : str
        Proj.4 string, or "[unknown]" when the dataset has no coordinate reference system
    """
    if dataset is None or dataset.crs is None:
        return UNKNOWN_PROJECTION

    crs = CRS.from_user_input(dataset.crs)

    # pyproj warns that Proj.4 strings lose information
    with warnings.catch_warnings():
        warnings.simplefilter("ignore")
        proj4 = crs.to_proj4()

    return proj4 if proj4 else UNKNOWN_PROJECTION
