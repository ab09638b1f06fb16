# -*- coding: utf-8 -*-
"""The core package holds the data structures read by the statistics and report modules.

It defines layers and datasets, attribute tables, shared arc storage with its path queries, and projection lookup.
"""
