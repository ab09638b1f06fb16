# -*- coding: utf-8 -*-
"""Attribute tables for layers.

A DataTable is an ordered list of records, one per feature. A record is a dict mapping field names to values, or
None for a feature without attribute data (a null record). Field order is a property of the table and can be
re-ordered for display with :func:`apply_field_order`.
"""

import pandas as pd


class DataTable:
    """Ordered collection of attribute records."""

    def __init__(self, records=None):
        """Initialize a DataTable.

        Parameters:
        -----------
        records : list, optional
            List of dicts (or None for null records)
        """
        self.records = list(records) if records is not None else []

    @classmethod
    def from_dataframe(cls, df):
        """Create a table from a pandas DataFrame, one record per row.

        Parameters:
        -----------
        df : pandas.DataFrame
            Data to convert; the index is discarded

        Returns:
        --------
        table : DataTable
            New table
        """
        return cls(df.to_dict(orient="records"))

    def to_dataframe(self):
        """Convert the table to a pandas DataFrame; null records become rows of missing values."""
        fields = self.get_fields()
        rows = [rec if rec is not None else {} for rec in self.records]
        return pd.DataFrame(rows, columns=fields)

    def size(self):
        """Number of records."""
        return len(self.records)

    def get_fields(self):
        """Get field names in first-seen order across all non-null records.

        Returns:
        --------
        fields : list of str
            Field names
        """
        fields = {}
        for rec in self.records:
            if rec is None:
                continue
            for name in rec:
                fields.setdefault(name, None)
        return list(fields)

    def get_record_at(self, i):
        if i < 0 or i >= len(self.records):
            raise IndexError(f"Record index {i} out of range for {len(self.records)} records")
        return self.records[i]

    def get_records(self):
        return list(self.records)

    def __len__(self):
        return len(self.records)

    def __str__(self):
        """String representation of the table."""
        return f"DataTable (records: {self.size()}, fields: {len(self.get_fields())})"


def _field_sort_key(name):
    return (name.lower(), name)


def apply_field_order(fields, order):
    """Return field names in display order.

    Parameters:
    -----------
    fields : list of str
        Field names in table order
    order : str or None
        "ascending" or "descending" (case-insensitive alphabetical, ties broken by case-sensitive comparison),
        or None to keep table order

    Returns:
    --------
    fields : list of str
        Re-ordered copy of the field names
    """
    if order is None:
        return list(fields)
    if order == "ascending":
        return sorted(fields, key=_field_sort_key)
    if order == "descending":
        return sorted(fields, key=_field_sort_key, reverse=True)

    raise ValueError(f"Unsupported field order: {order}")
