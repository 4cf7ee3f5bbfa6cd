"""Unit tests for cell splitting, table materialization, and the block models."""

# pylint: disable=missing-class-docstring,missing-function-docstring

import logging

import pytest
from pydantic import ValidationError

from report_segmenter.segmentation.schema import TableBlock, TextBlock
from report_segmenter.segmentation.tables import materialize_table, parse_row

# ===========================================================================
# parse_row tests
# ===========================================================================


class TestParseRow:

    def test_padded_cells(self):
        assert parse_row("| Revenue | 2023 |") == ["Revenue", "2023"]

    def test_compact_cells(self):
        assert parse_row("|a|b|") == ["a", "b"]

    def test_surrounding_whitespace(self):
        assert parse_row("   |  x  |  y  |  \n") == ["x", "y"]

    def test_empty_middle_cell(self):
        assert parse_row("| a || c |") == ["a", "", "c"]

    def test_empty_pipe_pair(self):
        assert parse_row("||") == [""]

    def test_only_one_pipe_removed_each_side(self):
        assert parse_row("|| a ||") == ["", "a", ""]

    def test_internal_whitespace_preserved(self):
        assert parse_row("| Data  Center | 47.5 |") == ["Data  Center", "47.5"]

    def test_escaped_pipe_splits_cell(self):
        """'\\|' is not an escape: the cell is split at the pipe."""
        assert parse_row("| a \\| b | c |") == ["a \\", "b", "c"]

    def test_unanchored_line(self):
        assert parse_row("a | b") == ["a", "b"]


# ===========================================================================
# materialize_table tests
# ===========================================================================


class TestMaterializeTable:

    def test_header_separator_and_rows(self):
        table = materialize_table(["|Col1|Col2|", "|---|---|", "|a|b|", "|c|d|"])
        assert table.headers == ("Col1", "Col2")
        assert table.rows == (("a", "b"), ("c", "d"))

    def test_separator_never_in_rows(self):
        table = materialize_table(["| H |", "| :---: |", "| v |"])
        assert table.rows == (("v",),)

    def test_header_only(self):
        table = materialize_table(["|H1|H2|", "|---|---|"])
        assert table.headers == ("H1", "H2")
        assert table.rows == ()

    def test_ragged_rows_kept(self):
        """Row widths are not reconciled against the header."""
        table = materialize_table(["|a|b|c|", "|---|---|---|", "|1|", "|1|2|3|4|"])
        assert table.rows == (("1",), ("1", "2", "3", "4"))

    def test_raw_lines_with_newlines(self):
        table = materialize_table(["| a | b |\n", "|---|---|\n", "| 1 | 2 |\n"])
        assert table.headers == ("a", "b")
        assert table.rows == (("1", "2"),)

    def test_single_line_degrades_to_empty_table(self):
        table = materialize_table(["|X|Y|"])
        assert table == TableBlock(headers=(), rows=())
        assert table.is_empty is True

    def test_no_lines_degrades_to_empty_table(self):
        assert materialize_table([]).is_empty is True

    def test_degrade_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="report_segmenter.segmentation.tables"):
            materialize_table(["|X|Y|"])
        assert "Degenerate table buffer" in caplog.text


# ===========================================================================
# Block model tests
# ===========================================================================


class TestBlockModels:

    def test_kinds(self):
        assert TextBlock(content="x").kind == "text"
        assert TableBlock().kind == "table"

    def test_lists_coerced_to_tuples(self):
        table = TableBlock(headers=["a"], rows=[["1"], ["2"]])
        assert table.headers == ("a",)
        assert table.rows == (("1",), ("2",))

    def test_text_block_is_frozen(self):
        block = TextBlock(content="x")
        with pytest.raises(ValidationError):
            block.content = "y"

    def test_table_block_is_frozen(self):
        table = TableBlock(headers=["a"])
        with pytest.raises(ValidationError):
            table.headers = ("b",)

    def test_blocks_are_hashable(self):
        """Frozen blocks with tuple cells can be used as dict keys / set members."""
        assert len({TableBlock(headers=["a"]), TableBlock(headers=["a"])}) == 1

    def test_non_string_cell_rejected(self):
        with pytest.raises(ValidationError):
            TableBlock(headers=[["nested"]])

    def test_non_empty_table(self):
        assert TableBlock(headers=["a"]).is_empty is False
