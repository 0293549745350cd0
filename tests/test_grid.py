import unittest

from xword.core.constants import Bounds, CellType
from xword.core.exceptions import (InvalidPuzzleFormatError, NonUtf8Error,
                                   NotSymmetricError, TooManyBlackSquaresError)
from xword.core.models import BLACK, EMPTY, Cell
from xword.engine.grid import Grid


def L(letter: str) -> Cell:
    return Cell.of_letter(letter)


class CellTests(unittest.TestCase):
    def test_tokens(self) -> None:
        self.assertEqual(Cell.from_token("▩"), BLACK)
        self.assertEqual(Cell.from_token("▢"), EMPTY)
        self.assertEqual(Cell.from_token("q"), Cell(CellType.LETTER, "q"))
        self.assertEqual(L("Q").to_token(), "Q")

    def test_rejects_unknown_tokens(self) -> None:
        for token in ("?", "AB", "1", "#"):
            with self.subTest(token=token):
                with self.assertRaises(InvalidPuzzleFormatError):
                    Cell.from_token(token)

    def test_cells_are_hashable_values(self) -> None:
        self.assertEqual(len({L("A"), L("A"), BLACK, Cell(CellType.BLACK)}), 2)

    def test_as_char_uses_placeholder_for_empty(self) -> None:
        self.assertEqual(Cell.as_string([L("S"), EMPTY, L("T")]), "S_T")
        with self.assertRaises(ValueError):
            BLACK.as_char()

    def test_of_letter_validates(self) -> None:
        with self.assertRaises(ValueError):
            Cell.of_letter("ab")
        with self.assertRaises(ValueError):
            Cell.of_letter("3")


class GridParseTests(unittest.TestCase):
    def test_new_grid_is_empty_square(self) -> None:
        grid = Grid.new(3)
        self.assertEqual(grid.size, 3)
        self.assertTrue(all(cell == EMPTY for cell in grid.cells()))

    def test_round_trip(self) -> None:
        grid = Grid([
            [BLACK, L("a"), EMPTY],
            [L("Z"), EMPTY, L("é")],
            [EMPTY, L("b"), BLACK],
        ])
        text = grid.to_text()
        self.assertEqual(text.splitlines()[0], "▩ a ▢")
        self.assertTrue(text.endswith("\n"))
        self.assertEqual(Grid.from_text(text), grid)

    def test_blank_lines_are_skipped(self) -> None:
        grid = Grid.from_bytes("▩ ▢\r\n\n▢ ▩\n\n\n".encode("utf-8"))
        self.assertEqual(grid.rows, [[BLACK, EMPTY], [EMPTY, BLACK]])

    def test_cells_split_on_any_ascii_whitespace(self) -> None:
        grid = Grid.from_text("A\t B  C\n")
        self.assertEqual(grid.row(0), [L("A"), L("B"), L("C")])

    def test_invalid_token(self) -> None:
        with self.assertRaises(InvalidPuzzleFormatError):
            Grid.from_text("A B\nC ?\n")

    def test_non_utf8(self) -> None:
        with self.assertRaises(NonUtf8Error) as ctx:
            Grid.from_bytes(b"A B\n\xff\xfe\n")
        self.assertIsInstance(ctx.exception.cause, UnicodeDecodeError)


class GridGeometryTests(unittest.TestCase):
    def test_transpose(self) -> None:
        grid = Grid([[L("A"), L("B")], [L("C"), L("D")]])
        self.assertEqual(grid.transpose(), Grid([[L("A"), L("C")], [L("B"), L("D")]]))
        self.assertEqual(grid.transpose().transpose(), grid)

    def test_transpose_empty_grid_is_an_error(self) -> None:
        with self.assertRaises(ValueError):
            Grid([]).transpose()

    def test_out_of_bounds_access(self) -> None:
        grid = Grid.new(3)
        for x, y in ((3, 0), (0, 3), (-1, 0), (0, -1)):
            with self.subTest(x=x, y=y):
                with self.assertRaises(IndexError):
                    grid.get(x, y)
                with self.assertRaises(IndexError):
                    grid.set(x, y, BLACK)

    def test_bounds(self) -> None:
        grid = Grid.from_text("▢ ▢ ▢\n▢ ▢ ▢\n")
        self.assertEqual(grid.bounds, Bounds(rows=2, cols=3))
        self.assertTrue(grid.bounds.contains(1, 2))
        self.assertFalse(grid.bounds.contains(2, 1))
        self.assertFalse(grid.bounds.contains(0, -1))
        self.assertEqual(Grid([]).bounds, Bounds(0, 0))

    def test_set_and_get_use_column_row_order(self) -> None:
        grid = Grid.new(3)
        grid.set(2, 0, BLACK)
        self.assertEqual(grid.row(0), [EMPTY, EMPTY, BLACK])
        self.assertEqual(grid.column(2), [BLACK, EMPTY, EMPTY])

    def test_is_square(self) -> None:
        Grid.new(4).is_square()
        with self.assertRaises(NotSymmetricError):
            Grid([[EMPTY, EMPTY, EMPTY], [EMPTY, EMPTY, EMPTY]]).is_square()
        with self.assertRaises(NotSymmetricError):
            Grid([[EMPTY, EMPTY], [EMPTY]]).is_square()

    def test_is_symmetric(self) -> None:
        grid = Grid.new(5)
        grid.set(0, 0, BLACK)
        with self.assertRaises(NotSymmetricError):
            grid.is_symmetric()
        grid.set(4, 4, BLACK)
        grid.is_symmetric()

    def test_symmetry_ignores_letters(self) -> None:
        grid = Grid([[L("A"), BLACK, EMPTY], [EMPTY, L("B"), EMPTY], [L("C"), BLACK, L("D")]])
        grid.is_symmetric()

    def test_symmetry_survives_rotation(self) -> None:
        grid = Grid.new(6)
        for x, y in ((0, 0), (5, 5), (3, 1), (2, 4)):
            grid.set(x, y, BLACK)
        grid.is_symmetric()
        rotated = grid.rotate_180()
        rotated.is_symmetric()
        self.assertEqual(rotated.rotate_180(), grid)

    def test_black_square_ratio_boundary(self) -> None:
        grid = Grid.new(5)
        for x, y in ((0, 0), (4, 4), (0, 4), (4, 0)):
            grid.set(x, y, BLACK)
        # 4 of 25 is exactly 16 percent.
        grid.acceptable_black_square_count()
        grid.set(2, 2, BLACK)
        with self.assertRaises(TooManyBlackSquaresError) as ctx:
            grid.acceptable_black_square_count()
        self.assertEqual(ctx.exception.limit, 16)

    def test_black_square_ratio_truncates(self) -> None:
        grid = Grid.new(7)
        for x in range(7):
            grid.set(x, 0, BLACK)
        grid.set(0, 6, BLACK)
        # 8 of 49 is 16.3 percent, truncated to 16.
        grid.acceptable_black_square_count()
        grid.set(1, 6, BLACK)
        with self.assertRaises(TooManyBlackSquaresError):
            grid.acceptable_black_square_count()

    def test_ok_dist_to_black_or_edge(self) -> None:
        self.assertTrue(Grid.ok_dist_to_black_or_edge([]))
        self.assertTrue(Grid.ok_dist_to_black_or_edge([EMPTY] * 5))
        self.assertTrue(Grid.ok_dist_to_black_or_edge([BLACK, EMPTY, EMPTY]))
        self.assertFalse(Grid.ok_dist_to_black_or_edge([EMPTY, BLACK, EMPTY, EMPTY]))
        self.assertFalse(Grid.ok_dist_to_black_or_edge([EMPTY, L("A"), BLACK, EMPTY]))
        self.assertTrue(Grid.ok_dist_to_black_or_edge([EMPTY, EMPTY, EMPTY, BLACK]))
        self.assertTrue(Grid.ok_dist_to_black_or_edge([L("A")] * 4 + [BLACK]))


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
