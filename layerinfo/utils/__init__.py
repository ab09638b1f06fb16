# -*- coding: utf-8 -*-
"""Utility helpers, such as sample data for examples and tests."""
