# -*- coding: utf-8 -*-
"""The report package turns layer statistics and attribute records into aligned text."""
