"""Tests for rows.py — ordered and keyed ingestion."""

import pytest

from gridtable import DEFAULT, create_table
from gridtable._utils import display_length
from gridtable.columns import ColumnSet
from gridtable.exceptions import (
    RowLengthMismatchError,
    UnknownColumnError,
    UnsupportedRowInputError,
)
from gridtable.rows import ByMapping, BySequence, build_row, to_row_input


def _texts(row):
    return {k: c.text for k, c in row.items()}


class TestToRowInput:
    def test_list_and_tuple_are_sequences(self):
        assert isinstance(to_row_input(["a"]), BySequence)
        assert isinstance(to_row_input(("a",)), BySequence)

    def test_dict_is_mapping(self):
        assert isinstance(to_row_input({"a": "1"}), ByMapping)

    def test_variants_pass_through(self):
        ri = BySequence(["a"])
        assert to_row_input(ri) is ri

    @pytest.mark.parametrize("value", ["abc", b"abc", 42, None, {"a"}])
    def test_other_shapes_rejected(self, value):
        with pytest.raises(UnsupportedRowInputError):
            to_row_input(value)


class TestBySequence:
    def test_positional_mapping(self):
        cs = ColumnSet(["id", "name"])
        row = build_row(cs, BySequence(["1", "Alice"]), display_length)
        assert _texts(row) == {"id": "1", "name": "Alice"}
        assert row["name"].length == 5

    def test_length_mismatch(self):
        cs = ColumnSet(["id", "name"])
        with pytest.raises(RowLengthMismatchError) as exc_info:
            build_row(cs, ["1"], display_length)
        assert (exc_info.value.got, exc_info.value.want) == (1, 2)

    def test_default_sentinel(self):
        cs = ColumnSet(["id", "name"])
        cs.get("name").default = "N/A"
        row = build_row(cs, ["1", DEFAULT], display_length)
        assert row["name"].text == "N/A"

    def test_non_string_value_rejected(self):
        cs = ColumnSet(["id"])
        with pytest.raises(UnsupportedRowInputError):
            build_row(cs, [1], display_length)


class TestByMapping:
    def test_missing_keys_take_default(self):
        cs = ColumnSet(["id", "name", "city"])
        cs.get("name").default = "N/A"
        row = build_row(cs, ByMapping({"id": "3"}), display_length)
        assert _texts(row) == {"id": "3", "name": "N/A", "city": ""}

    def test_unknown_key(self):
        cs = ColumnSet(["id"])
        with pytest.raises(UnknownColumnError) as exc_info:
            build_row(cs, {"id": "1", "age": "9"}, display_length)
        assert exc_info.value.name == "age"

    def test_sentinel_value(self):
        cs = ColumnSet(["id"])
        cs.get("id").default = "0"
        assert build_row(cs, {"id": DEFAULT}, display_length)["id"].text == "0"

    def test_input_mapping_not_mutated(self):
        cs = ColumnSet(["id", "name"])
        given = {"id": DEFAULT}
        build_row(cs, given, display_length)
        assert given == {"id": DEFAULT}


class TestTableIngestion:
    def test_bad_length_keeps_row_count(self, people):
        with pytest.raises(RowLengthMismatchError):
            people.add_row(["3"])
        assert people.length() == 2

    def test_unknown_key_keeps_row_count(self, people):
        with pytest.raises(UnknownColumnError):
            people.add_row({"id": "3", "age": "40"})
        assert people.length() == 2

    def test_set_default_then_partial_mapping(self, people):
        people.set_default("name", "N/A")
        people.add_row({"id": "3"})
        assert people.get_values()[-1] == {"id": "3", "name": "N/A"}

    def test_add_rows_returns_failures_without_rollback(self):
        tb = create_table("id", "name")
        rows = [["1", "a"], ["2"], {"id": "3"}, {"bogus": "x"}, 7]
        failures = tb.add_rows(rows)
        assert failures == [["2"], {"bogus": "x"}, 7]
        assert tb.get_values() == [{"id": "1", "name": "a"}, {"id": "3", "name": ""}]

    def test_add_rows_logs_rejections(self, monkeypatch, capsys):
        from gridtable import config

        monkeypatch.setattr(config, "LOG_ENABLED", True)
        tb = create_table("id")
        tb.add_rows([["1", "2"]])
        err = capsys.readouterr().err
        assert "[GRIDTABLE]" in err
        assert "row_rejected" in err
