# -*- coding: utf-8 -*-
"""Report layout constants shared by the statistics and report modules.

Exports:
    MIN_FIELD_COLUMN_CHARS (int): Minimum width of the field-name column (room for the "Field" header).
    FIELD_COLUMN_PADDING (int): Spaces added after the longest field name.
    TABLE_INDENT (str): Prefix for every line of an attribute table block.
    NONE_LABEL (str): Placeholder for a missing geometry or attribute section.
    UNNAMED_LABEL (str): Placeholder for a layer without a name.
    UNKNOWN_PROJECTION (str): Placeholder when a dataset has no coordinate reference system.
    TARGET_MARKER (str): Suffix appended to the header of a target layer.
    DEFAULT_FIELD_ORDER (str): Field ordering used when rendering attribute tables.
"""

MIN_FIELD_COLUMN_CHARS = 5
FIELD_COLUMN_PADDING = 2
TABLE_INDENT = "  "

NONE_LABEL = "[none]"
UNNAMED_LABEL = "[unnamed]"
UNKNOWN_PROJECTION = "[unknown]"
TARGET_MARKER = " *"

DEFAULT_FIELD_ORDER = "ascending"
