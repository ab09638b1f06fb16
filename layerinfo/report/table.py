# -*- coding: utf-8 -*-
"""Renders a preview of one attribute record as an aligned two-column table."""

from ..config import (
    DEFAULT_FIELD_ORDER,
    FIELD_COLUMN_PADDING,
    MIN_FIELD_COLUMN_CHARS,
    NONE_LABEL,
    TABLE_INDENT,
)
from ..core.table import apply_field_order
from .format import count_integral_chars, format_table_item


def format_attribute_table(table, record_index=None, field_order=DEFAULT_FIELD_ORDER):
    """Format the fields and values of one record.

    Parameters:
    -----------
    table : DataTable
        Attribute table with at least one record
    record_index : int, optional
        Record to show. If None, the first record is shown and the value column is labelled "First value"
        instead of "Value".
    field_order : str or None
        Order of the field rows, see apply_field_order

    Returns:
    --------
    text : str
        Table text, every line indented by two spaces
    """
    label = "First value" if record_index is None else "Value"
    record = table.get_record_at(0 if record_index is None else record_index)

    fields = apply_field_order(table.get_fields(), field_order)
    col1_chars = max([MIN_FIELD_COLUMN_CHARS] + [len(name) for name in fields]) + FIELD_COLUMN_PADDING

    values = [record.get(name) if record is not None else None for name in fields]
    integral_chars = max([0] + [count_integral_chars(val) for val in values])

    lines = [TABLE_INDENT + "Field".ljust(col1_chars) + label]
    for name, val in zip(fields, values):
        lines.append(TABLE_INDENT + format_table_item(name, val, col1_chars, integral_chars))

    return "\n".join(lines)


def get_table_info(table, record_index=None, field_order=DEFAULT_FIELD_ORDER):
    """Format the attribute section of a layer report.

    Returns "Attribute data: [none]" when the table is missing, has no records or has no fields.
    """
    if table is None or table.size() == 0 or len(table.get_fields()) == 0:
        return f"Attribute data: {NONE_LABEL}"
    return "Attribute data\n" + format_attribute_table(table, record_index, field_order)
