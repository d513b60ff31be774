import pytest

from ntictactoe.board import EMPTY, Board


@pytest.mark.parametrize("n", [1, 2, 3, 4, 7])
def test_fresh_board_not_full_and_no_winner(n: int):
    b = Board(n)
    assert b.is_full() is False
    for mark in ("X", "O", "@", "ab"):
        assert b.check_winner(mark) is False
    assert b.occupied_count() == 0
    assert len(b.empty_cells()) == n * n


def test_size_must_be_positive():
    with pytest.raises(ValueError):
        Board(0)


@pytest.mark.parametrize("row", [0, 1, 2])
def test_full_row_wins_and_single_change_breaks_it(row: int):
    b = Board(3)
    for c in range(3):
        assert b.place(row, c, "X")
    assert b.check_winner("X")

    for broken_col in range(3):
        b2 = Board(3)
        for c in range(3):
            b2.place(row, c, "O" if c == broken_col else "X")
        assert b2.check_winner("X") is False


@pytest.mark.parametrize("col", [0, 1, 2, 3])
def test_full_column_wins(col: int):
    b = Board(4)
    for r in range(4):
        b.place(r, col, "O")
    assert b.check_winner("O")
    assert b.check_winner("X") is False


@pytest.mark.parametrize("n", [1, 3, 5])
def test_main_and_anti_diagonal(n: int):
    main = Board(n)
    for i in range(n):
        main.place(i, i, "X")
    assert main.check_winner("X")

    anti = Board(n)
    for i in range(n):
        anti.place(i, n - 1 - i, "X")
    assert anti.check_winner("X")


def test_partial_diagonal_is_not_a_win():
    b = Board(3)
    b.place(0, 0, "X")
    b.place(1, 1, "X")
    b.place(2, 2, "O")
    assert b.check_winner("X") is False


def test_is_valid_move_bounds_and_occupancy():
    b = Board(3)
    for rc in [(-1, 0), (0, -1), (3, 0), (0, 3), (10, 10)]:
        assert b.is_valid_move(*rc) is False
    assert b.is_valid_move(1, 1)
    b.place(1, 1, "X")
    assert b.is_valid_move(1, 1) is False
    assert b.is_valid_move(0, 0)


def test_place_rejects_without_corrupting():
    b = Board(3)
    assert b.place(0, 0, "X")
    assert b.place(0, 0, "O") is False
    assert b.cell(0, 0) == "X"
    assert b.place(3, 0, "O") is False
    assert b.place(0, 1, EMPTY) is False
    assert b.occupied_count() == 1


def test_full_board_without_uniform_line_is_draw():
    layout = [
        ["X", "O", "X"],
        ["X", "O", "O"],
        ["O", "X", "X"],
    ]
    b = Board(3)
    for r, row in enumerate(layout):
        for c, mark in enumerate(row):
            assert b.place(r, c, mark)
    assert b.is_full()
    assert b.check_winner("X") is False
    assert b.check_winner("O") is False


def test_blank_mark_never_wins():
    assert Board(2).check_winner(EMPTY) is False
    assert Board(2).check_winner("") is False


def test_render_format():
    b = Board(2)
    b.place(0, 0, "X")
    b.place(1, 1, "O")
    assert b.render() == "| X |   |\n|   | O |"
    assert str(b) == b.render()
    # render has no side effects
    assert b.occupied_count() == 2
