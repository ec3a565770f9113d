"""Unit tests for grid addressing."""

import pytest
from candoku.core.grid import (
    Cell, Digit, DIGITS, as_cell, cell, row, column, box, peers,
    all_cells, all_rows, all_columns, all_boxes, all_groups,
)


class TestCell:
    """Tests for cell construction and lookup."""

    def test_cell_getters(self):
        """Every coordinate pair maps to a cell with those coordinates."""
        for r in range(9):
            for c in range(9):
                x = cell(r, c)
                assert x.row == r
                assert x.column == c

    def test_cell_is_canonical(self):
        """Lookups return the same table entry; direct construction compares equal."""
        assert cell(3, 4) is cell(3, 4)
        assert Cell(3, 4) == cell(3, 4)
        assert hash(Cell(3, 4)) == hash(cell(3, 4))
        assert Cell.of(3, 4) is cell(3, 4)

    @pytest.mark.parametrize("r, c", [(-1, 0), (9, 0), (0, -1), (0, 9)])
    def test_bad_coordinates(self, r, c):
        """Out-of-range coordinates raise IndexError on every path."""
        with pytest.raises(IndexError):
            cell(r, c)
        with pytest.raises(IndexError):
            Cell(r, c)

    def test_unpacking_and_str(self):
        r, c = cell(2, 7)
        assert (r, c) == (2, 7)
        assert str(cell(2, 7)) == "(2, 7)"


class TestDigit:
    """Tests for digit conversions."""

    def test_conversions(self):
        seven = Digit.SEVEN
        assert int(seven) == 7
        assert Digit.from_int(7) is seven
        assert seven.to_char() == "7"
        assert Digit.from_char("7") is seven

    def test_digits_ascending(self):
        assert [int(d) for d in DIGITS] == list(range(1, 10))

    @pytest.mark.parametrize("value", [0, 10, -1])
    def test_from_int_out_of_range(self, value):
        with pytest.raises(ValueError):
            Digit.from_int(value)

    @pytest.mark.parametrize("char", ["0", "a", "", "12", " "])
    def test_from_char_out_of_range(self, char):
        with pytest.raises(ValueError):
            Digit.from_char(char)


class TestGroups:
    """Tests for rows, columns and boxes."""

    def test_row_iteration(self):
        for i in range(9):
            assert list(row(i)) == [cell(i, j) for j in range(9)]

    def test_column_iteration(self):
        for j in range(9):
            assert list(column(j)) == [cell(i, j) for i in range(9)]

    def test_box_iteration(self):
        """A box iterates row-major from its top-left corner."""
        b = box(4, 5)
        assert b.corner == cell(3, 3)
        assert list(b) == [
            cell(3, 3), cell(3, 4), cell(3, 5),
            cell(4, 3), cell(4, 4), cell(4, 5),
            cell(5, 3), cell(5, 4), cell(5, 5),
        ]

    def test_box_from_cell(self):
        assert box(cell(8, 8)) is box(6, 7)
        assert box(cell(8, 8)).corner == cell(6, 6)

    @pytest.mark.parametrize("index", [-1, 9])
    def test_bad_group_index(self, index):
        with pytest.raises(IndexError):
            row(index)
        with pytest.raises(IndexError):
            column(index)

    def test_bad_box_coordinates(self):
        with pytest.raises(IndexError):
            box(9, 0)

    def test_membership(self):
        assert cell(0, 5) in row(0)
        assert cell(0, 5) not in row(1)
        assert len(column(3)) == 9

    def test_reprs(self):
        assert repr(row(3)) == "row(3)"
        assert repr(column(0)) == "column(0)"
        assert repr(box(4, 4)) == "box(4, corner=(3, 3))"

    def test_box_index(self):
        """Boxes are numbered row-major, matching their position in all_boxes()."""
        for i, b in enumerate(all_boxes()):
            assert b.index == i
        assert box(8, 0).index == 6

    def test_bare_index_is_rejected(self):
        """A single int is not a cell; it needs a column to go with it."""
        with pytest.raises(TypeError):
            box(3)
        with pytest.raises(TypeError):
            as_cell(3)
        with pytest.raises(TypeError):
            peers(3)
        assert as_cell((3, 4)) is cell(3, 4)
        assert as_cell(3, 4) is cell(3, 4)


class TestEnumerations:
    """Tests for the fixed enumeration order."""

    def test_all_cells_row_major(self):
        cells = all_cells()
        assert len(cells) == 81
        assert cells[0] == cell(0, 0)
        assert cells[9] == cell(1, 0)
        assert list(cells) == sorted(cells)

    def test_group_counts(self):
        assert len(all_rows()) == 9
        assert len(all_columns()) == 9
        assert len(all_boxes()) == 9
        assert len(all_groups()) == 27

    def test_boxes_partition_grid(self):
        """The nine boxes cover every cell exactly once."""
        seen = [c for b in all_boxes() for c in b]
        assert len(seen) == 81
        assert set(seen) == set(all_cells())

    def test_box_order(self):
        corners = [b.corner for b in all_boxes()]
        assert corners == [cell(r, c) for r in (0, 3, 6) for c in (0, 3, 6)]

    def test_enumeration_is_stable(self):
        assert all_cells() is all_cells()
        assert list(all_rows()) == list(all_rows())


class TestPeers:
    """Tests for peer lookup."""

    def test_peer_count(self):
        for c in all_cells():
            p = peers(c)
            assert len(p) == 20
            assert c not in p

    def test_peers_share_a_group(self):
        c = cell(4, 4)
        for p in peers(c):
            assert p.row == 4 or p.column == 4 or box(p) is box(c)

    def test_peers_in_cell_order(self):
        p = peers(0, 0)
        assert list(p) == sorted(p)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
