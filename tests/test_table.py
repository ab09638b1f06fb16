# -*- coding: utf-8 -*-
"""Tests for attribute tables and field ordering."""

import pandas as pd
import pytest

from layerinfo import DataTable, apply_field_order


def test_fields_in_first_seen_order():
    """Fields are collected across records, skipping null records."""
    table = DataTable([{"b": 1, "a": 2}, None, {"c": 3, "a": 1}])
    assert table.get_fields() == ["b", "a", "c"]
    assert table.size() == 3
    assert len(table) == 3


def test_record_access():
    """Records are returned by index; out-of-range indexes raise IndexError."""
    table = DataTable([{"a": 1}, None])
    assert table.get_record_at(0) == {"a": 1}
    assert table.get_record_at(1) is None
    with pytest.raises(IndexError):
        table.get_record_at(2)
    with pytest.raises(IndexError):
        table.get_record_at(-1)


def test_get_records_returns_copy():
    """Changing the returned list does not change the table."""
    table = DataTable([{"a": 1}])
    records = table.get_records()
    records.append(None)
    assert table.size() == 1


def test_dataframe_round_trip():
    """Null records become rows of missing values."""
    df = pd.DataFrame({"name": ["x", "y"], "value": [1.5, 2.0]})
    table = DataTable.from_dataframe(df)
    assert table.get_records() == [{"name": "x", "value": 1.5}, {"name": "y", "value": 2.0}]

    table.records.append(None)
    out = table.to_dataframe()
    assert list(out.columns) == ["name", "value"]
    assert len(out) == 3
    assert out.iloc[2].isna().all()


def test_ascending_field_order():
    """Ascending order ignores case and breaks ties by exact name."""
    assert apply_field_order(["b", "A", "a", "C"], "ascending") == ["A", "a", "b", "C"]


def test_descending_field_order():
    assert apply_field_order(["b", "A", "a", "C"], "descending") == ["C", "b", "a", "A"]


def test_table_field_order():
    """None keeps the table order."""
    fields = ["pop", "name"]
    ordered = apply_field_order(fields, None)
    assert ordered == ["pop", "name"]
    assert ordered is not fields


def test_unknown_field_order():
    with pytest.raises(ValueError):
        apply_field_order(["a"], "random")
