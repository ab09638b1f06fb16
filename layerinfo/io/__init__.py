# -*- coding: utf-8 -*-
"""The io package adapts vector data read by geopandas into datasets.

It converts geometries into shapes and shared arcs and keeps the coordinate reference system.
"""
