"""
Unit tests for proscore/selection.py.

Covers:
- parse_item_spec: every argument shape maps to the right variant.
- resolve_columns: names, 1-based positions, caller order, error cases.
- select_items: narrowed copy keeps rows, index, and requested order.
"""

from __future__ import annotations

import numpy as np
import pandas as pd
import pytest

from proscore.errors import ParameterError, SelectionError
from proscore.selection import (
    AllFlag,
    ByName,
    ByPosition,
    Unspecified,
    parse_item_spec,
    resolve_columns,
    select_items,
)


# ---------------------------------------------------------------------------
# Class: parse_item_spec
# ---------------------------------------------------------------------------

class TestParseItemSpec:

    def test_none_is_unspecified(self):
        assert parse_item_spec(None) == Unspecified()

    def test_list_of_names(self):
        assert parse_item_spec(["q1", "q2"]) == ByName(("q1", "q2"))

    def test_single_name(self):
        assert parse_item_spec("q3") == ByName(("q3",))

    def test_list_of_positions(self):
        assert parse_item_spec([2, 3, 4]) == ByPosition((2, 3, 4))

    def test_range_of_positions(self):
        assert parse_item_spec(range(2, 5)) == ByPosition((2, 3, 4))

    def test_numpy_integers_are_positions(self):
        assert parse_item_spec(np.array([1, 2])) == ByPosition((1, 2))

    def test_pandas_index_of_names(self):
        assert parse_item_spec(pd.Index(["a", "b"])) == ByName(("a", "b"))

    def test_single_position(self):
        assert parse_item_spec(2) == ByPosition((2,))

    def test_bool_allowed_for_reverse_items(self):
        assert parse_item_spec(True, allow_flag=True) == AllFlag(True)
        assert parse_item_spec(False, allow_flag=True) == AllFlag(False)

    def test_bool_rejected_for_items(self):
        with pytest.raises(ParameterError):
            parse_item_spec(True)

    def test_mixed_names_and_positions_rejected(self):
        with pytest.raises(ParameterError):
            parse_item_spec(["q1", 2])

    def test_bools_in_list_are_not_positions(self):
        with pytest.raises(ParameterError):
            parse_item_spec([True, False])

    def test_empty_selection_rejected(self):
        with pytest.raises(SelectionError):
            parse_item_spec([])

    def test_spec_passes_through(self):
        spec = ByName(("q1",))
        assert parse_item_spec(spec) is spec


# ---------------------------------------------------------------------------
# Class: resolve_columns
# ---------------------------------------------------------------------------

class TestResolveColumns:

    def test_unspecified_is_all_columns(self, mixed_df):
        assert resolve_columns(mixed_df, Unspecified()) == list(mixed_df.columns)

    def test_names_keep_caller_order(self, mixed_df):
        assert resolve_columns(mixed_df, ByName(("q3", "q1"))) == ["q3", "q1"]

    def test_positions_are_one_based(self, mixed_df):
        # ID is column 1, q1..q4 are columns 2..5
        assert resolve_columns(mixed_df, ByPosition((2, 3, 4, 5))) == ["q1", "q2", "q3", "q4"]

    def test_positions_keep_caller_order(self, mixed_df):
        assert resolve_columns(mixed_df, ByPosition((5, 2))) == ["q4", "q1"]

    def test_all_flag(self, mixed_df):
        assert resolve_columns(mixed_df, AllFlag(True)) == list(mixed_df.columns)
        assert resolve_columns(mixed_df, AllFlag(False)) == []

    def test_unknown_names_listed(self, mixed_df):
        with pytest.raises(SelectionError, match="q9"):
            resolve_columns(mixed_df, ByName(("q1", "q9")))

    def test_position_zero_out_of_bounds(self, mixed_df):
        with pytest.raises(SelectionError, match="out of bounds"):
            resolve_columns(mixed_df, ByPosition((0, 1)))

    def test_position_past_last_column(self, mixed_df):
        with pytest.raises(SelectionError, match="out of bounds"):
            resolve_columns(mixed_df, ByPosition((mixed_df.shape[1] + 1,)))

    def test_duplicate_selection_rejected(self, mixed_df):
        with pytest.raises(SelectionError, match="more than once"):
            resolve_columns(mixed_df, ByName(("q1", "q1")))


# ---------------------------------------------------------------------------
# Class: select_items
# ---------------------------------------------------------------------------

class TestSelectItems:

    def test_returns_only_requested_columns(self, mixed_df):
        out = select_items(mixed_df, ["q2", "q1"])
        assert list(out.columns) == ["q2", "q1"]

    def test_rows_and_index_preserved(self, mixed_df):
        out = select_items(mixed_df, [2, 3])
        assert out.index.equals(mixed_df.index)
        assert len(out) == len(mixed_df)

    def test_none_returns_full_table(self, items_df):
        out = select_items(items_df)
        pd.testing.assert_frame_equal(out, items_df)

    def test_returns_copy(self, items_df):
        out = select_items(items_df, ["q1"])
        out.iloc[0, 0] = 99
        assert items_df.iloc[0, 0] == 1
