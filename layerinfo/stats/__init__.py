# -*- coding: utf-8 -*-
"""The stats package computes per-layer statistics: null counts, bounds, ring tallies and vertex counts."""
